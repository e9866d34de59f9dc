"""
Backend records

Typed views over the rows stored in the four remote tables, plus the auth
session handed out by the hosted service.
"""
from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

PROFILES_TABLE = 'profiles'
SKILLS_TABLE = 'skills'
JOURNEY_TABLE = 'journey'
PROJECTS_TABLE = 'projects'


@dataclass
class SocialLinks:
    github: str = ''
    linkedin: str = ''
    twitter: str = ''

    @classmethod
    def from_row(cls, value: Optional[Dict[str, Any]]) -> 'SocialLinks':
        value = value or {}
        return cls(
            github=value.get('github') or '',
            linkedin=value.get('linkedin') or '',
            twitter=value.get('twitter') or '',
        )

    def to_row(self) -> Dict[str, str]:
        return {key: url for key, url in asdict(self).items() if url}


@dataclass
class Profile:
    """
    Singleton profile row. An empty id means the row has not been created yet.
    """

    id: str = ''
    name: str = ''
    tagline: str = ''
    description: str = ''
    profile_image: str = ''
    resume_url: str = ''
    social_links: SocialLinks = field(default_factory=SocialLinks)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'Profile':
        return cls(
            id=row.get('id') or '',
            name=row.get('name') or '',
            tagline=row.get('tagline') or '',
            description=row.get('description') or '',
            profile_image=row.get('profile_image') or '',
            resume_url=row.get('resume_url') or '',
            social_links=SocialLinks.from_row(row.get('social_links')),
        )

    def to_row(self) -> Dict[str, Any]:
        """Payload for insert/update; the id is never written."""
        return {
            'name': self.name,
            'tagline': self.tagline,
            'description': self.description,
            'profile_image': self.profile_image,
            'resume_url': self.resume_url,
            'social_links': self.social_links.to_row(),
        }


@dataclass
class Skill:
    id: Any
    name: str
    level: int
    profile_id: Any = ''

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'Skill':
        return cls(
            id=row.get('id'),
            name=row.get('name') or '',
            level=int(row.get('level') or 0),
            profile_id=row.get('profile_id') or '',
        )


@dataclass
class JourneyEntry:
    id: Any
    description: str
    order: int
    profile_id: Any = ''

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'JourneyEntry':
        return cls(
            id=row.get('id'),
            description=row.get('description') or '',
            order=int(row.get('order') or 0),
            profile_id=row.get('profile_id') or '',
        )


@dataclass
class Project:
    """
    Project row. ``images`` falls back to the cover image when the stored list
    is missing or empty.
    """

    id: Any
    title: str
    description: str
    image: str
    category: str
    long_description: str = ''
    images: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)
    live_url: str = ''
    repo_url: str = ''
    created_at: str = ''

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> 'Project':
        image = row.get('image') or ''
        return cls(
            id=row.get('id'),
            title=row.get('title') or '',
            description=row.get('description') or '',
            image=image,
            category=row.get('category') or '',
            long_description=row.get('long_description') or '',
            images=list(row.get('images') or [image]),
            technologies=list(row.get('technologies') or []),
            live_url=row.get('live_url') or '',
            repo_url=row.get('repo_url') or '',
            created_at=row.get('created_at') or '',
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'long_description': self.long_description,
            'image': self.image,
            'images': list(self.images),
            'technologies': list(self.technologies),
            'category': self.category,
            'live_url': self.live_url,
            'repo_url': self.repo_url,
        }


@dataclass
class AuthSession:
    """
    Session issued by the hosted auth service.

    ``expires_at`` is a unix timestamp; zero means the service did not say.
    """

    access_token: str
    refresh_token: str = ''
    expires_at: float = 0
    user: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'AuthSession':
        expires_at = payload.get('expires_at')
        if not expires_at and payload.get('expires_in'):
            expires_at = time.time() + float(payload['expires_in'])
        return cls(
            access_token=payload.get('access_token') or '',
            refresh_token=payload.get('refresh_token') or '',
            expires_at=float(expires_at or 0),
            user=payload.get('user') or {},
        )

    @property
    def email(self) -> str:
        return self.user.get('email', '')

    def is_expired(self, now: Optional[float] = None) -> bool:
        if not self.expires_at:
            return False
        return (now if now is not None else time.time()) >= self.expires_at

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuthSession':
        return cls(**data)
