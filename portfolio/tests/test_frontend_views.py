from unittest import mock

from django.contrib.messages.middleware import MessageMiddleware
from django.contrib.sessions.middleware import SessionMiddleware
from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import reverse

from backend.client import DataServiceError
from backend.tests.fakes import FakeDataService
from portfolio.frontend_views import contact, home
from portfolio.views import PortfolioSnapshotView

TABLES = {
    'profiles': [{'id': 'p1', 'name': 'Ada Lovelace', 'tagline': 'Engineer'}],
    'skills': [{'id': 1, 'name': 'Go', 'level': 70}],
    'journey': [],
    'projects': [
        {
            'id': 'web',
            'title': 'Shop',
            'description': 'Online shop',
            'image': 'https://example.com/shop.png',
            'images': ['https://example.com/1.png', 'https://example.com/2.png'],
            'category': 'Web Development',
            'created_at': '2024-02-01',
        },
        {
            'id': 'mobile',
            'title': 'Tracker',
            'description': 'Habit tracker',
            'image': 'https://example.com/tracker.png',
            'category': 'Mobile Development',
            'created_at': '2024-01-01',
        },
    ],
}


@override_settings(
    SESSION_ENGINE='django.contrib.sessions.backends.cache',
    CACHES={
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        }
    },
)
class PortfolioFrontendViewsTests(SimpleTestCase):
    """Unit tests for the public page with the data service faked out."""

    def setUp(self) -> None:
        self.factory = RequestFactory()
        self.service = FakeDataService(TABLES)
        patcher = mock.patch('backend.client._data_service', self.service)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _attach(self, request):
        SessionMiddleware(lambda r: None).process_request(request)
        request.session.save()
        MessageMiddleware(lambda r: None).process_request(request)
        return request

    def test_home_renders_profile_and_projects(self) -> None:
        response = home(self._attach(self.factory.get(reverse('home'))))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Ada Lovelace')
        self.assertContains(response, 'Shop')
        self.assertContains(response, 'Tracker')

    def test_home_category_filter(self) -> None:
        request = self._attach(self.factory.get(reverse('home'), {'category': 'Mobile Development'}))

        response = home(request)

        self.assertContains(response, 'Habit tracker')
        self.assertNotContains(response, 'Online shop')

    def test_carousel_wraps_to_first_image(self) -> None:
        request = self._attach(self.factory.get(reverse('home'), {'project': 'web', 'image': '2'}))

        response = home(request)

        self.assertContains(response, 'https://example.com/1.png')
        self.assertContains(response, 'Shop screenshot 1')

    def test_home_survives_failed_reads(self) -> None:
        self.service.errors['select'] = DataServiceError("timeout")

        with self.assertLogs('portfolio.services', level='ERROR'):
            response = home(self._attach(self.factory.get(reverse('home'))))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Could not load projects right now.')
        self.assertContains(response, 'Jane Doe')

    def test_contact_rejects_short_message(self) -> None:
        request = self._attach(self.factory.post(reverse('contact'), {
            'name': 'Grace',
            'email': 'grace@example.com',
            'subject': 'Project inquiry',
            'message': 'Hi there',
        }))

        response = contact(request)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Message must be at least 10 characters")
        self.assertContains(response, 'value="Grace"')
        self.assertEqual(list(request._messages), [])

    def test_contact_valid_submission_confirms(self) -> None:
        request = self._attach(self.factory.post(reverse('contact'), {
            'name': 'Grace',
            'email': 'grace@example.com',
            'subject': 'Project inquiry',
            'message': 'I would like to talk about a project.',
        }))

        with self.assertLogs('portfolio.frontend_views', level='INFO'):
            response = contact(request)

        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('home') + '#contact')
        messages = [str(message) for message in request._messages]
        self.assertEqual(messages, ['Message sent successfully!'])


class PortfolioSnapshotViewTests(SimpleTestCase):
    def setUp(self) -> None:
        self.factory = RequestFactory()
        self.service = FakeDataService(TABLES)
        patcher = mock.patch('backend.client._data_service', self.service)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_snapshot_payload(self) -> None:
        response = PortfolioSnapshotView.as_view()(self.factory.get(reverse('portfolio-snapshot')))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['profile']['name'], 'Ada Lovelace')
        self.assertEqual([project['id'] for project in response.data['projects']], ['web', 'mobile'])
        self.assertIsNone(response.data['error'])

    def test_failed_read_returns_bad_gateway(self) -> None:
        self.service.errors['select'] = DataServiceError("timeout")

        with self.assertLogs('portfolio.services', level='ERROR'):
            response = PortfolioSnapshotView.as_view()(self.factory.get(reverse('portfolio-snapshot')))

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.data['error'], 'timeout')
        self.assertIsNone(response.data['profile'])
