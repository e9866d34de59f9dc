from django.test import SimpleTestCase

from backend.client import DataServiceError
from backend.records import Project
from backend.tests.fakes import FakeDataService
from portfolio.services import (
    DEFAULT_JOURNEY,
    DEFAULT_NAME,
    DEFAULT_SKILLS,
    PortfolioService,
    PortfolioSnapshot,
)


def _project(project_id, category):
    return Project(
        id=project_id,
        title=f'Project {project_id}',
        description='Description',
        image=f'https://example.com/{project_id}.png',
        category=category,
    )


class PortfolioServiceTests(SimpleTestCase):
    """Unit tests for the public page helpers."""

    def setUp(self) -> None:
        self.projects = [
            _project(1, 'Web Development'),
            _project(2, 'Mobile Development'),
            _project(3, 'UI/UX Design'),
            _project(4, 'Mobile Development'),
        ]

    def test_load_snapshot_reads_everything(self) -> None:
        service = FakeDataService({
            'profiles': [{'id': 'p1', 'name': 'Ada Lovelace'}],
            'skills': [{'id': 1, 'name': 'Go', 'level': 70}],
            'journey': [
                {'id': 2, 'description': 'Second', 'order': 2},
                {'id': 1, 'description': 'First', 'order': 1},
            ],
            'projects': [
                {'id': 'a', 'title': 'Old', 'created_at': '2023-01-01'},
                {'id': 'b', 'title': 'New', 'created_at': '2024-01-01'},
            ],
        })

        snapshot = PortfolioService.load_snapshot(service)

        self.assertFalse(snapshot.loading)
        self.assertIsNone(snapshot.error)
        self.assertEqual(snapshot.profile.name, 'Ada Lovelace')
        self.assertEqual([entry.description for entry in snapshot.journey], ['First', 'Second'])
        self.assertEqual([project.title for project in snapshot.projects], ['New', 'Old'])

    def test_missing_profile_is_not_an_error(self) -> None:
        snapshot = PortfolioService.load_snapshot(FakeDataService({'projects': []}))

        self.assertIsNone(snapshot.error)
        self.assertIsNone(snapshot.profile)

    def test_failed_read_keeps_nothing(self) -> None:
        service = FakeDataService({
            'profiles': [{'id': 'p1', 'name': 'Ada'}],
            'skills': [{'id': 1, 'name': 'Go', 'level': 70}],
        })
        service.errors['select'] = DataServiceError("relation \"projects\" does not exist")

        with self.assertLogs('portfolio.services', level='ERROR'):
            snapshot = PortfolioService.load_snapshot(service)

        self.assertEqual(snapshot.error, "relation \"projects\" does not exist")
        self.assertIsNone(snapshot.profile)
        self.assertEqual(snapshot.skills, [])
        self.assertFalse(snapshot.loading)

    def test_category_filter_keeps_order(self) -> None:
        result = PortfolioService.filter_projects(self.projects, 'Mobile Development')
        self.assertEqual([project.id for project in result], [2, 4])

    def test_all_category_returns_everything(self) -> None:
        self.assertEqual(PortfolioService.filter_projects(self.projects, 'All'), self.projects)

    def test_category_options_first_seen_order(self) -> None:
        self.assertEqual(
            PortfolioService.category_options(self.projects),
            ['All', 'Web Development', 'Mobile Development', 'UI/UX Design'],
        )

    def test_carousel_wraps_both_ways(self) -> None:
        self.assertEqual(PortfolioService.wrap_image_index(3, 3), 0)
        self.assertEqual(PortfolioService.wrap_image_index(-1, 3), 2)
        self.assertEqual(PortfolioService.wrap_image_index(5, 0), 0)

    def test_sections_fall_back_to_defaults(self) -> None:
        sections = PortfolioService.build_sections(PortfolioSnapshot(loading=False))

        self.assertEqual(sections['name'], DEFAULT_NAME)
        self.assertEqual(sections['journey'], DEFAULT_JOURNEY)
        self.assertEqual(sections['skills'], DEFAULT_SKILLS)
