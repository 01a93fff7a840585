#!/usr/bin/env python3
"""
Tests for NotificationService and the message builder.

Usage:
    python -m pytest tests/unit/notification/test_notification_service.py -v
"""

import unittest
from unittest.mock import Mock

import pytest

from database.repository import StoreRepository
from notification import (
    NotificationService, NotificationMessageBuilder, JOB_MATCH_TYPE, PREFERENCE_REMINDER_TYPE
)
from notification.message_builder import (
    PREFERENCE_REMINDER_ACTION_URL, PREFERENCE_REMINDER_MESSAGE, PREFERENCE_REMINDER_EMAIL_SUBJECT
)
from tests import make_session_factory


class TestMessageBuilder(unittest.TestCase):

    def test_job_match_content(self):
        content = NotificationMessageBuilder.build_job_match(
            's1', 'job-1', 'Data Analyst', 'Acme', ['skills', 'work type']
        )

        self.assertEqual(content.type, JOB_MATCH_TYPE)
        self.assertEqual(content.related_id, 'job-1')
        self.assertIsNone(content.action_url)
        self.assertEqual(
            content.message,
            'Data Analyst at Acme matches your job interests based on your skills, work type preferences. '
            'Click to view!'
        )

    def test_job_match_placeholders(self):
        content = NotificationMessageBuilder.build_job_match('s1', 'job-1', '', None, ['industry'])
        self.assertTrue(content.message.startswith('Unknown Position at Unknown Company'))

    def test_preference_reminder_content(self):
        content = NotificationMessageBuilder.build_preference_reminder('s1')
        self.assertEqual(content.type, PREFERENCE_REMINDER_TYPE)
        self.assertEqual(content.message, PREFERENCE_REMINDER_MESSAGE)
        self.assertEqual(content.action_url, PREFERENCE_REMINDER_ACTION_URL)

    def test_reminder_email_escapes_name(self):
        email = NotificationMessageBuilder.build_reminder_email('<b>Thandi</b>', 'https://careermatch.example/')

        self.assertEqual(email.subject, PREFERENCE_REMINDER_EMAIL_SUBJECT)
        self.assertIn('https://careermatch.example/dashboard/job-interests', email.text)
        self.assertIn('&lt;b&gt;Thandi&lt;/b&gt;', email.html)
        self.assertNotIn('<b>Thandi</b>', email.html)

    def test_reminder_email_without_name(self):
        email = NotificationMessageBuilder.build_reminder_email(None, 'http://localhost:5173')
        self.assertTrue(email.text.startswith('Hi there,'))


@pytest.mark.db
class TestPreferenceReminderStorage(unittest.TestCase):

    def setUp(self):
        session = make_session_factory()()
        self.addCleanup(session.close)
        self.repo = StoreRepository(session)
        self.service = NotificationService(email_channel=Mock())

    def test_reminder_created_once_while_unread(self):
        first = self.service.create_preference_reminder(self.repo.notifications, 's1')
        second = self.service.create_preference_reminder(self.repo.notifications, 's1')

        self.assertIsNotNone(first)
        self.assertIsNone(second)
        self.assertEqual(self.repo.notifications.count_for_user('s1'), 1)

    def test_reminder_created_again_after_read(self):
        first = self.service.create_preference_reminder(self.repo.notifications, 's1')
        self.repo.notifications.mark_read(first)

        self.assertIsNotNone(self.service.create_preference_reminder(self.repo.notifications, 's1'))
        self.assertEqual(self.repo.notifications.count_for_user('s1'), 2)

    def test_other_unread_types_do_not_suppress(self):
        self.service.create_notification(
            self.repo.notifications,
            NotificationMessageBuilder.build_job_match('s1', 'job-1', 'Role', 'Acme', ['skills'])
        )
        self.assertIsNotNone(self.service.create_preference_reminder(self.repo.notifications, 's1'))


class TestReminderEmail(unittest.TestCase):

    def setUp(self):
        self.channel = Mock()
        self.channel.send.return_value = True
        self.service = NotificationService(base_url='https://careermatch.example', email_channel=self.channel)

    def test_sends_text_and_html(self):
        self.assertTrue(self.service.send_reminder_email('student@example.com', 'Thandi'))

        recipient, subject, text, metadata = self.channel.send.call_args[0]
        self.assertEqual(recipient, 'student@example.com')
        self.assertEqual(subject, PREFERENCE_REMINDER_EMAIL_SUBJECT)
        self.assertIn('Hi Thandi', text)
        self.assertIn('https://careermatch.example/dashboard/job-interests', metadata['html'])

    def test_disabled_email_is_skipped(self):
        service = NotificationService(email_enabled=False, email_channel=self.channel)
        self.assertFalse(service.send_reminder_email('student@example.com'))
        self.channel.send.assert_not_called()

    def test_channel_exception_is_contained(self):
        self.channel.send.side_effect = RuntimeError('smtp down')
        self.assertFalse(self.service.send_reminder_email('student@example.com'))

    def test_channel_failure_is_reported(self):
        self.channel.send.return_value = False
        self.assertFalse(self.service.send_reminder_email('student@example.com'))

    def test_default_channel_is_email(self):
        self.assertEqual(NotificationService().email_channel.channel_type, 'email')


if __name__ == '__main__':
    unittest.main()
