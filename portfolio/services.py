"""
Portfolio Service Layer

Reads everything the public page shows in one pass and derives the
presentation state (category filter, image carousel, fallback content).
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from backend.client import DataService, DataServiceError, RecordNotFound
from backend.records import (
    JOURNEY_TABLE,
    PROFILES_TABLE,
    PROJECTS_TABLE,
    SKILLS_TABLE,
    JourneyEntry,
    Profile,
    Project,
    Skill,
)

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'All'

DEFAULT_NAME = 'Jane Doe'
DEFAULT_TAGLINE = 'Full Stack Developer & UI/UX Designer'
DEFAULT_PROFILE_IMAGE = 'https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=400&q=80'
DEFAULT_RESUME_URL = '/resume.pdf'
DEFAULT_DESCRIPTION = (
    "I'm a passionate developer with a keen eye for design and a commitment to "
    "creating intuitive, user-friendly applications. With several years of "
    "experience in web development, I've honed my skills across various "
    "technologies and frameworks."
)
DEFAULT_SOCIAL_LINKS = {
    'github': 'https://github.com',
    'linkedin': 'https://linkedin.com',
    'twitter': 'https://twitter.com',
}
DEFAULT_JOURNEY = [
    'Started my journey as a self-taught developer in 2018',
    'Graduated with a Computer Science degree in 2020',
    'Worked as a frontend developer at Tech Solutions Inc. for 2 years',
    'Led a team of developers at Innovation Labs from 2022-2023',
    'Currently working as a freelance full-stack developer',
]
DEFAULT_SKILLS = [
    {'name': 'React', 'level': 90},
    {'name': 'TypeScript', 'level': 85},
    {'name': 'Node.js', 'level': 80},
    {'name': 'UI/UX Design', 'level': 75},
    {'name': 'Next.js', 'level': 85},
    {'name': 'Tailwind CSS', 'level': 90},
]


@dataclass
class PortfolioSnapshot:
    """
    Read-only view of the portfolio content.

    When any read fails the collections keep their initial values and
    ``error`` carries the message.
    """

    profile: Optional[Profile] = None
    skills: List[Skill] = field(default_factory=list)
    journey: List[JourneyEntry] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None


class PortfolioService:
    """Service for the public portfolio page."""

    @staticmethod
    def load_snapshot(service: DataService) -> PortfolioSnapshot:
        """
        Run the four reads and aggregate them.

        A missing profile row is not an error. Any other failure aborts the
        whole aggregation; no partial results are returned.
        """
        snapshot = PortfolioSnapshot()
        try:
            try:
                profile_row = service.select_single(PROFILES_TABLE)
            except RecordNotFound:
                profile_row = None
            skill_rows = service.select(SKILLS_TABLE, order='id')
            journey_rows = service.select(JOURNEY_TABLE, order='order')
            project_rows = service.select(PROJECTS_TABLE, order='created_at', ascending=False)
        except DataServiceError as exc:
            logger.error("Error fetching portfolio data: %s", exc)
            snapshot.error = exc.message
        else:
            snapshot.profile = Profile.from_row(profile_row) if profile_row else None
            snapshot.skills = [Skill.from_row(row) for row in skill_rows]
            snapshot.journey = [JourneyEntry.from_row(row) for row in journey_rows]
            snapshot.projects = [Project.from_row(row) for row in project_rows]
        finally:
            snapshot.loading = False
        return snapshot

    @staticmethod
    def category_options(projects: List[Project]) -> List[str]:
        """'All' followed by each distinct category in first-seen order."""
        categories = [ALL_CATEGORIES]
        for project in projects:
            if project.category not in categories:
                categories.append(project.category)
        return categories

    @staticmethod
    def filter_projects(projects: List[Project], category: str) -> List[Project]:
        if not category or category == ALL_CATEGORIES:
            return list(projects)
        return [project for project in projects if project.category == category]

    @staticmethod
    def wrap_image_index(index: int, count: int) -> int:
        """Carousel position; wraps in both directions."""
        if count <= 0:
            return 0
        return index % count

    @staticmethod
    def find_project(projects: List[Project], project_id: Any) -> Optional[Project]:
        for project in projects:
            if str(project.id) == str(project_id):
                return project
        return None

    @staticmethod
    def build_sections(snapshot: PortfolioSnapshot) -> Dict[str, Any]:
        """
        Hero and about content with fallbacks for anything not stored yet.
        """
        profile = snapshot.profile
        social_links = DEFAULT_SOCIAL_LINKS
        if profile is not None:
            social_links = {
                'github': profile.social_links.github,
                'linkedin': profile.social_links.linkedin,
                'twitter': profile.social_links.twitter,
            }

        if snapshot.skills:
            skills = [{'name': skill.name, 'level': skill.level} for skill in snapshot.skills]
        else:
            skills = DEFAULT_SKILLS

        return {
            'name': (profile and profile.name) or DEFAULT_NAME,
            'tagline': (profile and profile.tagline) or DEFAULT_TAGLINE,
            'profile_image': (profile and profile.profile_image) or DEFAULT_PROFILE_IMAGE,
            'description': (profile and profile.description) or DEFAULT_DESCRIPTION,
            'resume_url': (profile and profile.resume_url) or DEFAULT_RESUME_URL,
            'social_links': social_links,
            'journey': [entry.description for entry in snapshot.journey] or DEFAULT_JOURNEY,
            'skills': skills,
        }
