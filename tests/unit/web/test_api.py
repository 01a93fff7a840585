#!/usr/bin/env python3
"""
API tests for the CareerMatch web application.

The app is built with create_app() around an AppContext backed by an
in-memory SQLite store; get_db is overridden to hand out sessions on the
same database.
"""

import unittest
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from core.app_context import AppContext
from core.config_loader import AppConfig
from database.repository import StoreRepository
from database.uow import make_store_factory
from tests import make_session_factory
from web.backend.app import create_app
from web.backend.dependencies import get_db

TRANSCRIPT = {
    'overallPercentage': 75,
    'subjects': [{'name': 'Mathematics', 'mark': 80}, {'name': 'English', 'mark': 60}]
}


@pytest.mark.db
class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.session_factory = make_session_factory()
        config = AppConfig(database={'url': 'sqlite://'})
        self.context = AppContext.build(config, store_factory=make_store_factory(self.session_factory))
        self.app = create_app(context=self.context)

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def seed(self):
        session = self.session_factory()
        self.addCleanup(session.close)
        return StoreRepository(session)


class TestHealth(ApiTestCase):

    def test_health(self):
        response = self.client.get('/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'healthy')


class TestEligibilityEndpoints(ApiTestCase):

    def test_check_eligible(self):
        response = self.client.post('/api/eligibility/check', json={
            'transcript': TRANSCRIPT,
            'requirements': {
                'requiredSubjects': [{'subjectName': 'Mathematics', 'minimumMark': 70}],
                'minimumOverallPercentage': 70
            }
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['success'])
        self.assertTrue(data['is_eligible'])
        self.assertEqual(data['match_percentage'], 100)
        self.assertEqual(data['reasons'][-1], '✓ You qualify for this course!')

    def test_check_insufficient_mark(self):
        response = self.client.post('/api/eligibility/check', json={
            'transcript': TRANSCRIPT,
            'requirements': {'requiredSubjects': [{'subjectName': 'English', 'minimumMark': 65}]}
        })

        data = response.json()
        self.assertFalse(data['is_eligible'])
        self.assertEqual(data['insufficient_marks'], [
            {'subject': 'English', 'student_mark': 60.0, 'required_mark': 65.0}
        ])

    def test_check_malformed_transcript_is_ineligible_not_error(self):
        response = self.client.post('/api/eligibility/check', json={
            'transcript': {'subjects': 'Mathematics'},
            'requirements': {'requiredSubjects': ['Mathematics']}
        })

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()['is_eligible'])
        self.assertEqual(response.json()['match_percentage'], 0)

    def test_check_infinite_subject_count_is_ineligible_not_error(self):
        response = self.client.post('/api/eligibility/check', json={
            'transcript': TRANSCRIPT,
            'requirements': {'requiredSubjects': ['Mathematics'], 'minimumRequiredSubjectsNeeded': 'inf'}
        })

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()['is_eligible'])

    def test_check_without_requirements_is_general(self):
        response = self.client.post('/api/eligibility/check', json={'transcript': TRANSCRIPT})
        self.assertTrue(response.json()['is_eligible'])

    def test_course_check_with_stored_transcript(self):
        repo = self.seed()
        repo.transcripts.save_transcript('s1', 75, TRANSCRIPT['subjects'])
        repo.course_requirements.save_requirement('bsc-cs', {
            'required_subjects': [{'subject_name': 'Maths', 'minimum_mark': 70}],
            'minimum_overall_percentage': 70
        })
        repo.commit()

        response = self.client.post('/api/courses/bsc-cs/check-eligibility', json={'student_id': 's1'})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['is_eligible'])

    def test_course_check_with_posted_transcript(self):
        repo = self.seed()
        repo.course_requirements.save_requirement('bcom', {'minimum_overall_percentage': 80,
                                                           'required_subjects': ['Accounting']})
        repo.commit()

        response = self.client.post('/api/courses/bcom/check-eligibility', json={'transcript': TRANSCRIPT})

        data = response.json()
        self.assertFalse(data['is_eligible'])
        self.assertIn('Missing required subject: Accounting', data['reasons'])

    def test_course_without_requirements_is_open(self):
        response = self.client.post('/api/courses/unknown/check-eligibility', json={'transcript': TRANSCRIPT})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['is_eligible'])
        self.assertEqual(response.json()['reasons'], ['No specific eligibility criteria set for this course'])

    def test_course_check_requires_transcript(self):
        response = self.client.post('/api/courses/bsc-cs/check-eligibility', json={})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['type'], 'InvalidRequestException')

    def test_course_check_unknown_student(self):
        response = self.client.post('/api/courses/bsc-cs/check-eligibility', json={'student_id': 'nobody'})

        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()['success'])


class TestMatchingEndpoint(ApiTestCase):

    def test_score(self):
        response = self.client.post('/api/matching/score', json={
            'job': {'industries': ['healthcare'], 'skills': ['python'], 'workType': ['office'],
                    'location': 'Cape Town'},
            'preferences': {'industries': ['retail'], 'skills': ['tensorflow'], 'workType': ['on-site'],
                            'location': 'Johannesburg'}
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'success': True, 'is_match': True, 'score': 50, 'reasons': ['skills', 'work type']
        })

    def test_score_requires_job(self):
        response = self.client.post('/api/matching/score', json={'preferences': {}})
        self.assertEqual(response.status_code, 422)


class TestNotificationEndpoints(ApiTestCase):

    def setUp(self):
        super().setUp()
        repo = self.seed()
        self.ids = []
        for minute, (user_id, type) in enumerate([
            ('s1', 'job_match'), ('s1', 'job_preference_reminder'), ('s2', 'job_match')
        ]):
            notification = repo.notifications.create_notification(user_id, type, 'Title', 'Message')
            notification.created_at = datetime(2026, 3, 2, 9, minute, tzinfo=timezone.utc)
            self.ids.append(notification.id)
        repo.commit()

    def test_list(self):
        response = self.client.get('/api/users/s1/notifications')

        data = response.json()
        self.assertEqual(data['count'], 2)
        self.assertEqual(data['total'], 2)
        self.assertEqual(data['unread_count'], 2)
        self.assertEqual([n['id'] for n in data['notifications']], [self.ids[1], self.ids[0]])
        self.assertEqual(data['notifications'][0]['created_at'], '2026-03-02T09:01:00+00:00')

    def test_list_paging(self):
        response = self.client.get('/api/users/s1/notifications', params={'limit': 1, 'offset': 1})
        data = response.json()
        self.assertEqual([n['id'] for n in data['notifications']], [self.ids[0]])
        self.assertEqual(data['total'], 2)

    def test_mark_read(self):
        response = self.client.put(f'/api/users/s1/notifications/{self.ids[0]}/read')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get('/api/users/s1/notifications/unread-count').json()['unread_count'], 1)

    def test_mark_read_other_users_notification(self):
        response = self.client.put(f'/api/users/s1/notifications/{self.ids[2]}/read')

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()['type'], 'NotificationForbiddenException')

    def test_mark_read_missing(self):
        response = self.client.put('/api/users/s1/notifications/does-not-exist/read')
        self.assertEqual(response.status_code, 404)

    def test_mark_all_read(self):
        response = self.client.put('/api/users/s1/notifications/read-all')

        self.assertEqual(response.json()['updated'], 2)
        self.assertEqual(self.client.get('/api/users/s1/notifications/unread-count').json()['unread_count'], 0)
        self.assertEqual(self.client.get('/api/users/s2/notifications/unread-count').json()['unread_count'], 1)

    def test_delete(self):
        response = self.client.delete(f'/api/users/s1/notifications/{self.ids[0]}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get('/api/users/s1/notifications').json()['total'], 1)

    def test_delete_other_users_notification(self):
        response = self.client.delete(f'/api/users/s2/notifications/{self.ids[0]}')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.client.get('/api/users/s1/notifications').json()['total'], 2)


class TestSchedulerEndpoints(ApiTestCase):

    def tearDown(self):
        self.context.stop_schedulers(wait=True)

    def test_list(self):
        response = self.client.get('/api/schedulers')

        schedulers = {s['name']: s for s in response.json()['schedulers']}
        self.assertEqual(set(schedulers), {'job-matcher', 'preference-reminder'})
        self.assertEqual(schedulers['job-matcher']['interval_seconds'], 600)
        self.assertEqual(schedulers['preference-reminder']['interval_seconds'], 10800)
        self.assertFalse(schedulers['job-matcher']['is_running'])
        self.assertIn('last_check', schedulers['job-matcher']['extra'])

    def test_run_reminder(self):
        repo = self.seed()
        repo.users.create_user('student', 'Thandi', created_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
                               user_id='s1')
        repo.commit()

        response = self.client.post('/api/schedulers/preference-reminder/run')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['result']['due_student_ids'], ['s1'])
        self.assertEqual(data['result']['reminders_created'], 1)
        self.assertEqual(data['scheduler']['run_count'], 1)

    def test_run_job_matcher(self):
        response = self.client.post('/api/schedulers/job-matcher/run')

        data = response.json()
        self.assertEqual(data['result']['jobs_scanned'], 0)
        self.assertIsInstance(data['result']['since'], str)

    def test_run_unknown(self):
        response = self.client.post('/api/schedulers/cleanup/run')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['type'], 'SchedulerNotFoundException')

    def test_set_interval(self):
        response = self.client.put('/api/schedulers/job-matcher/interval', json={'interval_seconds': 120})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['scheduler']['interval_seconds'], 120)
        self.assertEqual(self.context.job_matcher.interval_seconds, 120)

    def test_set_interval_rejects_zero(self):
        response = self.client.put('/api/schedulers/job-matcher/interval', json={'interval_seconds': 0})
        self.assertEqual(response.status_code, 422)


if __name__ == '__main__':
    unittest.main()
