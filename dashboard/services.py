"""
Dashboard Service Layer

Editors behind the admin panel. Each editor keeps local copies of the records
it manages, forwards create/update/delete calls to the data service and then
reconciles the local copies with the outcome. Editor state lives in the Django
session between requests; nothing is re-read from the service unless the admin
asks for it.
"""
import logging
import time
from dataclasses import asdict, dataclass, replace
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
    SocialLinks,
)

from .reconcilers import append_rows, prepend_rows, remove_by_id, replace_by_id

logger = logging.getLogger(__name__)

SUCCESS_BANNER_SECONDS = 3

DEFAULT_PROFILE = Profile(
    id='',
    name='Jane Doe',
    tagline='Full Stack Developer & UI/UX Designer',
    description=(
        "I'm a passionate developer with a keen eye for design and a commitment "
        "to creating intuitive, user-friendly applications."
    ),
    profile_image='https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=400&q=80',
    resume_url='/resume.pdf',
    social_links=SocialLinks(
        github='https://github.com',
        linkedin='https://linkedin.com',
        twitter='https://twitter.com',
    ),
)


def parse_comma_list(value: str) -> List[str]:
    """
    Split comma-separated input into a trimmed, ordered list.

    Empty input yields ``['']``; entries are not validated.
    """
    return [part.strip() for part in (value or '').split(',')]


def join_comma_list(values: Optional[List[str]]) -> str:
    """Text a list is shown as in a comma-separated input."""
    return ', '.join(str(value) for value in values or [])


def clamp_level(value: Any, default: int = 50) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        return default
    return min(max(level, 0), 100)


@dataclass
class Banners:
    """
    Success and error messages shown above an editor.

    A success message disappears on its own after SUCCESS_BANNER_SECONDS; an
    error stays until dismissed or replaced by another one.
    """

    error: Optional[str] = None
    success: Optional[str] = None
    success_at: Optional[float] = None

    def fail(self, message: str) -> None:
        self.error = message

    def succeed(self, message: str, now: Optional[float] = None) -> None:
        self.success = message
        self.success_at = now if now is not None else time.time()

    def visible_success(self, now: Optional[float] = None) -> Optional[str]:
        if not self.success or self.success_at is None:
            return None
        now = now if now is not None else time.time()
        if now - self.success_at >= SUCCESS_BANNER_SECONDS:
            return None
        return self.success

    def prune(self, now: Optional[float] = None) -> None:
        if self.visible_success(now) is None:
            self.success = None
            self.success_at = None

    def dismiss_error(self) -> None:
        self.error = None

    def dismiss_success(self) -> None:
        self.success = None
        self.success_at = None


class ProfileEditor:
    """
    Editor for the profile singleton, its skills and its journey entries.
    """

    STATE_KEY = 'dashboard.profile_editor'

    def __init__(
        self,
        service: DataService,
        *,
        access_token: Optional[str] = None,
        profile: Optional[Profile] = None,
        skills: Optional[List[Skill]] = None,
        journey: Optional[List[JourneyEntry]] = None,
        banners: Optional[Banners] = None,
    ):
        self.service = service
        self.access_token = access_token
        self.profile = profile
        self.skills = skills or []
        self.journey = journey or []
        self.banners = banners or Banners()

    @classmethod
    def from_session(cls, store, service: DataService, access_token: Optional[str] = None) -> 'ProfileEditor':
        """Restore the editor from the session, loading it on first use."""
        state = store.get(cls.STATE_KEY)
        if state is None:
            editor = cls(service, access_token=access_token)
            editor.load()
            return editor

        return cls(
            service,
            access_token=access_token,
            profile=Profile.from_row(state['profile']) if state.get('profile') else None,
            skills=[Skill.from_row(row) for row in state.get('skills', [])],
            journey=[JourneyEntry.from_row(row) for row in state.get('journey', [])],
            banners=Banners(**state.get('banners', {})),
        )

    def save_to(self, store) -> None:
        store[self.STATE_KEY] = {
            'profile': asdict(self.profile) if self.profile else None,
            'skills': [asdict(skill) for skill in self.skills],
            'journey': [asdict(entry) for entry in self.journey],
            'banners': asdict(self.banners),
        }

    def load(self) -> bool:
        try:
            try:
                row = self.service.select_single(PROFILES_TABLE, access_token=self.access_token)
            except RecordNotFound:
                row = None
            skill_rows = self.service.select(SKILLS_TABLE, order='id', access_token=self.access_token)
            journey_rows = self.service.select(JOURNEY_TABLE, order='order', access_token=self.access_token)
        except DataServiceError as exc:
            logger.error("Error fetching profile data: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.profile = Profile.from_row(row) if row else replace(DEFAULT_PROFILE)
        self.skills = [Skill.from_row(r) for r in skill_rows]
        self.journey = [JourneyEntry.from_row(r) for r in journey_rows]
        return True

    def save_profile(self, values: Dict[str, Any]) -> bool:
        """
        Apply form values to the local profile and persist it.

        Inserts when the profile has no id yet, otherwise updates by id.
        """
        if self.profile is None:
            return False

        self.profile = Profile(
            id=self.profile.id,
            name=values.get('name', ''),
            tagline=values.get('tagline', ''),
            description=values.get('description', ''),
            profile_image=values.get('profile_image', ''),
            resume_url=values.get('resume_url', ''),
            social_links=SocialLinks(
                github=values.get('github', ''),
                linkedin=values.get('linkedin', ''),
                twitter=values.get('twitter', ''),
            ),
        )
        self.banners.dismiss_error()
        self.banners.dismiss_success()

        try:
            if not self.profile.id:
                rows = self.service.insert(
                    PROFILES_TABLE, [self.profile.to_row()], access_token=self.access_token
                )
                if not rows:
                    raise DataServiceError("The data service did not return the saved profile.")
                self.profile = replace(self.profile, id=rows[0]['id'])
            else:
                self.service.update(
                    PROFILES_TABLE,
                    self.profile.to_row(),
                    match={'id': self.profile.id},
                    access_token=self.access_token,
                )
        except DataServiceError as exc:
            logger.error("Error saving profile: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.banners.succeed("Profile saved successfully!")
        return True

    def add_skill(self, name: str, level: Any = 50) -> bool:
        name = (name or '').strip()
        if not (self.profile and self.profile.id) or not name:
            self.banners.fail("Please save your profile first and provide a skill name")
            return False

        try:
            rows = self.service.insert(
                SKILLS_TABLE,
                [{'name': name, 'level': clamp_level(level), 'profile_id': self.profile.id}],
                access_token=self.access_token,
            )
        except DataServiceError as exc:
            logger.error("Error adding skill: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.skills = append_rows(self.skills, [Skill.from_row(row) for row in rows])
        return True

    def delete_skill(self, skill_id: Any) -> bool:
        try:
            self.service.delete(SKILLS_TABLE, match={'id': skill_id}, access_token=self.access_token)
        except DataServiceError as exc:
            logger.error("Error deleting skill: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.skills = remove_by_id(self.skills, skill_id)
        return True

    def add_journey_entry(self, description: str) -> bool:
        description = (description or '').strip()
        if not (self.profile and self.profile.id) or not description:
            self.banners.fail("Please save your profile first and provide a journey description")
            return False

        try:
            rows = self.service.insert(
                JOURNEY_TABLE,
                [{
                    'description': description,
                    'profile_id': self.profile.id,
                    'order': len(self.journey) + 1,
                }],
                access_token=self.access_token,
            )
        except DataServiceError as exc:
            logger.error("Error adding journey item: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.journey = append_rows(self.journey, [JourneyEntry.from_row(row) for row in rows])
        return True

    def delete_journey_entry(self, entry_id: Any) -> bool:
        try:
            self.service.delete(JOURNEY_TABLE, match={'id': entry_id}, access_token=self.access_token)
        except DataServiceError as exc:
            logger.error("Error deleting journey item: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.journey = remove_by_id(self.journey, entry_id)
        return True


class ProjectEditor:
    """
    Editor for the project list.

    Holds at most one project in edit mode and a draft for the add form.
    ``technologies`` and ``images`` are parsed from comma-separated text each
    time the field changes, not on submit.
    """

    STATE_KEY = 'dashboard.project_editor'
    REQUIRED_FIELDS = ['title', 'description', 'image', 'category']
    LIST_FIELDS = ['technologies', 'images']
    TEXT_FIELDS = [
        'title',
        'description',
        'long_description',
        'image',
        'category',
        'live_url',
        'repo_url',
    ]

    def __init__(
        self,
        service: DataService,
        *,
        access_token: Optional[str] = None,
        projects: Optional[List[Project]] = None,
        editing: Optional[Project] = None,
        adding: bool = False,
        new_project: Optional[Dict[str, Any]] = None,
        banners: Optional[Banners] = None,
    ):
        self.service = service
        self.access_token = access_token
        self.projects = projects or []
        self.editing = editing
        self.adding = adding
        self.new_project = new_project or self.empty_draft()
        self.banners = banners or Banners()

    @staticmethod
    def empty_draft() -> Dict[str, Any]:
        return {
            'title': '',
            'description': '',
            'long_description': '',
            'image': '',
            'images': [],
            'technologies': [],
            'category': '',
            'live_url': '',
            'repo_url': '',
        }

    @classmethod
    def from_session(cls, store, service: DataService, access_token: Optional[str] = None) -> 'ProjectEditor':
        state = store.get(cls.STATE_KEY)
        if state is None:
            editor = cls(service, access_token=access_token)
            editor.fetch_all()
            return editor

        return cls(
            service,
            access_token=access_token,
            projects=[Project.from_row(row) for row in state.get('projects', [])],
            editing=Project.from_row(state['editing']) if state.get('editing') else None,
            adding=state.get('adding', False),
            new_project=state.get('new_project'),
            banners=Banners(**state.get('banners', {})),
        )

    def save_to(self, store) -> None:
        store[self.STATE_KEY] = {
            'projects': [asdict(project) for project in self.projects],
            'editing': asdict(self.editing) if self.editing else None,
            'adding': self.adding,
            'new_project': self.new_project,
            'banners': asdict(self.banners),
        }

    def find(self, project_id: Any) -> Optional[Project]:
        for project in self.projects:
            if str(project.id) == str(project_id):
                return project
        return None

    def fetch_all(self) -> bool:
        try:
            rows = self.service.select(
                PROJECTS_TABLE, order='created_at', ascending=False, access_token=self.access_token
            )
        except DataServiceError as exc:
            logger.error("Error fetching projects: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.projects = [Project.from_row(row) for row in rows]
        return True

    def toggle_adding(self) -> None:
        self.adding = not self.adding

    def set_draft_field(self, field: str, value: Any, target: str = 'new') -> Dict[str, Any]:
        """
        Update one field of the add-form draft or of the project being edited.

        Returns the updated draft as a dict.

        Raises:
            ValueError: If the field is unknown or nothing is being edited.
        """
        if field in self.LIST_FIELDS:
            value = parse_comma_list(value)
        elif field in self.TEXT_FIELDS:
            value = value or ''
        else:
            raise ValueError(f"Unknown project field: {field}")

        if target == 'editing':
            if self.editing is None:
                raise ValueError("No project is being edited")
            self.editing = replace(self.editing, **{field: value})
            return asdict(self.editing)

        self.new_project = {**self.new_project, field: value}
        return dict(self.new_project)

    def add_project(self) -> bool:
        draft = self.new_project
        if any(not draft.get(field) for field in self.REQUIRED_FIELDS):
            self.banners.fail("Please fill in all required fields")
            return False

        payload = {
            'title': draft['title'],
            'description': draft['description'],
            'long_description': draft.get('long_description', ''),
            'image': draft['image'],
            'images': draft.get('images') if any(draft.get('images') or []) else [draft['image']],
            'technologies': draft.get('technologies') or [],
            'category': draft['category'],
            'live_url': draft.get('live_url', ''),
            'repo_url': draft.get('repo_url', ''),
        }
        try:
            rows = self.service.insert(PROJECTS_TABLE, [payload], access_token=self.access_token)
        except DataServiceError as exc:
            logger.error("Error adding project: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.projects = prepend_rows(self.projects, [Project.from_row(row) for row in rows])
        self.adding = False
        self.new_project = self.empty_draft()
        return True

    def start_editing(self, project_id: Any) -> bool:
        project = self.find(project_id)
        if project is None:
            self.banners.fail("Project not found")
            return False
        self.editing = replace(project, images=list(project.images), technologies=list(project.technologies))
        return True

    def cancel_editing(self) -> None:
        self.editing = None

    def update_project(self) -> bool:
        if self.editing is None:
            return False

        edited = self.editing
        try:
            self.service.update(
                PROJECTS_TABLE,
                edited.to_row(),
                match={'id': edited.id},
                access_token=self.access_token,
            )
        except DataServiceError as exc:
            logger.error("Error updating project: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.projects = replace_by_id(self.projects, edited)
        self.editing = None
        return True

    def delete_project(self, project_id: Any, confirmed: bool = False) -> bool:
        """Delete a project; does nothing until the admin has confirmed."""
        if not confirmed:
            return False

        try:
            self.service.delete(PROJECTS_TABLE, match={'id': project_id}, access_token=self.access_token)
        except DataServiceError as exc:
            logger.error("Error deleting project: %s", exc)
            self.banners.fail(exc.message)
            return False

        self.projects = remove_by_id(self.projects, project_id)
        if self.editing is not None and str(self.editing.id) == str(project_id):
            self.editing = None
        return True
