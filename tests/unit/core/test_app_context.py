import unittest
from datetime import timedelta
from unittest.mock import Mock

from core.app_context import AppContext
from core.config_loader import AppConfig
from main import selected_schedulers


def build(**sections):
    config = AppConfig(database={'url': 'sqlite://'}, **sections)
    return AppContext.build(config, store_factory=Mock())


class TestAppContext(unittest.TestCase):

    def test_intervals_from_config(self):
        ctx = build(
            job_matcher={'interval_minutes': 5, 'max_workers': 2},
            preference_reminder={'interval_hours': 6, 'min_account_age_hours': 48, 'send_email': False}
        )

        self.assertEqual(ctx.job_matcher.interval_seconds, 300)
        self.assertEqual(ctx.job_matcher.max_workers, 2)
        self.assertEqual(ctx.preference_reminder.interval_seconds, 6 * 3600)
        self.assertEqual(ctx.preference_reminder.cooldown, timedelta(hours=6))
        self.assertEqual(ctx.preference_reminder.min_account_age, timedelta(hours=48))
        self.assertFalse(ctx.preference_reminder.send_email)

    def test_shared_collaborators(self):
        ctx = build(matching={'match_threshold': 75})

        self.assertIs(ctx.job_matcher.matcher, ctx.matcher)
        self.assertEqual(ctx.matcher.match_threshold, 75)
        self.assertIs(ctx.preference_reminder.notification_service, ctx.notification_service)
        self.assertEqual(set(ctx.schedulers), {'job-matcher', 'preference-reminder'})

    def test_start_respects_enabled_flags(self):
        ctx = build(preference_reminder={'enabled': False})
        self.addCleanup(ctx.stop_schedulers, True)

        ctx.start_schedulers()

        self.assertTrue(ctx.job_matcher.is_running)
        self.assertFalse(ctx.preference_reminder.is_running)

        ctx.stop_schedulers(wait=True)
        self.assertFalse(ctx.job_matcher.is_running)


class TestSelectedSchedulers(unittest.TestCase):

    def test_modes(self):
        ctx = build(job_matcher={'enabled': False})

        self.assertEqual(selected_schedulers(ctx, 'all'), [ctx.preference_reminder])
        self.assertEqual(selected_schedulers(ctx, 'job-matcher'), [ctx.job_matcher])
        self.assertEqual(selected_schedulers(ctx, 'reminder'), [ctx.preference_reminder])


if __name__ == '__main__':
    unittest.main()
