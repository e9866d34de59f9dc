from django.test import SimpleTestCase

from portfolio.forms import ContactForm


class ContactFormTests(SimpleTestCase):
    def _data(self, **overrides):
        data = {
            'name': 'Grace',
            'email': 'grace@example.com',
            'subject': 'Project inquiry',
            'message': 'I would like to talk about a project.',
        }
        data.update(overrides)
        return data

    def test_valid_submission(self) -> None:
        self.assertTrue(ContactForm(self._data()).is_valid())

    def test_short_message_rejected(self) -> None:
        form = ContactForm(self._data(message='Too short'))

        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors['message'], ["Message must be at least 10 characters"])

    def test_field_messages(self) -> None:
        form = ContactForm(self._data(name='G', email='not-an-email', subject='Hi'))

        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors['name'], ["Name must be at least 2 characters"])
        self.assertEqual(form.errors['email'], ["Please enter a valid email address"])
        self.assertEqual(form.errors['subject'], ["Subject must be at least 5 characters"])
