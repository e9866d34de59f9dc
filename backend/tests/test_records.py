from unittest import mock

from django.test import SimpleTestCase

from backend.records import AuthSession, Profile, Project, SocialLinks


class RecordTests(SimpleTestCase):
    def test_project_images_fall_back_to_cover(self) -> None:
        project = Project.from_row({'id': 1, 'title': 'App', 'image': 'cover.png', 'images': []})
        self.assertEqual(project.images, ['cover.png'])

    def test_project_keeps_stored_images(self) -> None:
        project = Project.from_row({'id': 1, 'image': 'cover.png', 'images': ['a.png', 'b.png']})
        self.assertEqual(project.images, ['a.png', 'b.png'])
        self.assertEqual(project.technologies, [])

    def test_profile_row_omits_id_and_empty_links(self) -> None:
        profile = Profile(id='p1', name='Ada', social_links=SocialLinks(github='https://github.com/ada'))
        row = profile.to_row()
        self.assertNotIn('id', row)
        self.assertEqual(row['social_links'], {'github': 'https://github.com/ada'})

    def test_profile_from_row_tolerates_nulls(self) -> None:
        profile = Profile.from_row({'id': 'p1', 'name': None, 'social_links': None})
        self.assertEqual(profile.name, '')
        self.assertEqual(profile.social_links, SocialLinks())


class AuthSessionTests(SimpleTestCase):
    @mock.patch('backend.records.time.time', return_value=1000.0)
    def test_expires_in_is_converted(self, _mock_time) -> None:
        session = AuthSession.from_payload({'access_token': 'jwt', 'expires_in': 3600})
        self.assertEqual(session.expires_at, 4600.0)
        self.assertFalse(session.is_expired())
        self.assertTrue(session.is_expired(now=4600.0))

    def test_missing_expiry_never_expires(self) -> None:
        session = AuthSession(access_token='jwt')
        self.assertFalse(session.is_expired(now=10 ** 12))

    def test_dict_round_trip_keeps_email(self) -> None:
        session = AuthSession(access_token='jwt', user={'email': 'admin@example.com'})
        self.assertEqual(AuthSession.from_dict(session.to_dict()).email, 'admin@example.com')
