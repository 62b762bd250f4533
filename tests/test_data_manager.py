# tests/test_data_manager.py
import unittest
from unittest.mock import patch
import datetime
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from data_manager import DataManager, create_provider
from error_messages import DatabaseError, ErrorMessages, NetworkError
from navigation_state import ViewState
from providers.base_provider import BaseJobProvider
from providers.rest_provider import RestJobProvider

# --- Provider stand-in that keeps jobs in a dict ---

class MockJobProvider(BaseJobProvider):
    name = "MockJobProvider"

    def __init__(self, jobs=None):
        self.jobs = {str(job['id']): dict(job) for job in (jobs or [])}
        self.get_calls = 0
        self.fail_next = False

    def get_jobs(self):
        self.get_calls += 1
        if self.fail_next:
            self.fail_next = False
            raise NetworkError("connection refused", error_code='NETWORK_001')
        return [dict(job) for job in self.jobs.values()]

    def update_job(self, job_id, changes):
        job = self.jobs.get(str(job_id))
        if job is None:
            return None
        job.update(changes)
        return dict(job)


SAMPLE_JOBS = [
    {'id': 'a', 'title': 'Brake check', 'startTime': '2024-03-20T09:00:00Z', 'durationHours': 2},
    {'id': 'b', 'title': 'Tyre swap', 'startTime': '2024-03-21T13:00:00Z', 'durationHours': 1,
     'statusTag': 'qa'},
]


class TestDataManager(unittest.TestCase):

    def setUp(self):
        self.settings = {'user_timezone': 'UTC'}
        self.provider = MockJobProvider(SAMPLE_JOBS)
        self.data_manager = DataManager(self.settings, provider=self.provider)
        self.updates = []
        self.errors = []
        self.rejections = []
        self.data_manager.data_updated.connect(lambda: self.updates.append(True))
        self.data_manager.error_occurred.connect(lambda *args: self.errors.append(args))
        self.data_manager.jobs_rejected.connect(self.rejections.append)

    def test_load_jobs(self):
        self.assertTrue(self.data_manager.load_jobs())
        self.assertEqual(sorted(job.id for job in self.data_manager.get_jobs()), ['a', 'b'])
        self.assertEqual(len(self.updates), 1)
        self.assertEqual(self.rejections, [])

    def test_render_plan_never_fetches(self):
        self.data_manager.load_jobs()
        for granularity in ('day', 'week', 'month', 'year'):
            plan = self.data_manager.get_render_plan(ViewState(datetime.date(2024, 3, 20), granularity),
                                                     today=datetime.date(2024, 3, 20))
            self.assertEqual(plan.granularity, granularity)
        self.assertEqual(self.provider.get_calls, 1)

    def test_week_plan_contains_loaded_jobs(self):
        self.data_manager.load_jobs()
        plan = self.data_manager.get_render_plan(ViewState(datetime.date(2024, 3, 20), 'week'))
        self.assertEqual(sorted(p.job.id for p in plan.all_jobs()), ['a', 'b'])

    def test_invalid_jobs_are_reported(self):
        self.provider.jobs['broken'] = {'id': 'broken', 'startTime': '2024-03-20T09:00:00Z', 'durationHours': -3}
        with self.assertLogs('job_schema', level='WARNING'):
            self.data_manager.load_jobs()
        self.assertEqual(len(self.data_manager.get_jobs()), 2)
        self.assertEqual(self.rejections, [1])
        self.assertEqual(self.data_manager.rejected[0][0]['id'], 'broken')

    def test_provider_failure_keeps_snapshot(self):
        self.data_manager.load_jobs()
        self.provider.fail_next = True
        self.assertFalse(self.data_manager.load_jobs())
        self.assertEqual(len(self.data_manager.get_jobs()), 2)
        self.assertEqual(len(self.errors), 1)
        title, message, suggestions = self.errors[0]
        self.assertEqual(title, ErrorMessages.NETWORK_ERROR['title'])
        self.assertIn("connection refused", message)
        # the error carries none of its own, so the defaults for its type are shown
        self.assertEqual(suggestions, ErrorMessages.NETWORK_ERROR['suggestions'])

    def test_error_suggestions_reach_the_signal(self):
        error = DatabaseError("disk I/O error", error_code='DB_001', suggestions=['Free some disk space'])
        with patch.object(self.provider, 'get_jobs', side_effect=error):
            self.assertFalse(self.data_manager.load_jobs())
        title, _, suggestions = self.errors[0]
        self.assertEqual(title, ErrorMessages.DATABASE_ERROR['title'])
        self.assertEqual(suggestions, ['Free some disk space'])

    def test_replace_jobs(self):
        self.data_manager.replace_jobs([SAMPLE_JOBS[0]])
        self.assertEqual([job.id for job in self.data_manager.get_jobs()], ['a'])
        self.assertEqual(self.provider.get_calls, 0)

    def test_update_job_reloads(self):
        self.data_manager.load_jobs()
        updated = self.data_manager.update_job('a', {'statusTag': 'done'})
        self.assertEqual(updated.status, 'done')
        self.assertEqual(self.data_manager.get_job('a').status, 'done')
        self.assertEqual(self.provider.get_calls, 2)

    def test_backend_status_column_wins(self):
        self.data_manager.load_jobs()
        updated = self.data_manager.update_job('b', {'status': 'done'})
        self.assertEqual(updated.status, 'done')

    def test_rescheduled_job_moves_in_rebuilt_plan(self):
        self.data_manager.load_jobs()
        view_state = ViewState(datetime.date(2024, 3, 20), 'week')
        before = self.data_manager.get_render_plan(view_state).jobs_by_day()
        self.assertEqual([p.job.id for p in before[datetime.date(2024, 3, 20)]], ['a'])

        updated = self.data_manager.update_job('a', {'start_time': '2024-03-22T15:00:00+00:00', 'duration': 3})
        self.assertEqual(updated.start_time.hour, 15)

        after = self.data_manager.get_render_plan(view_state).jobs_by_day()
        self.assertEqual(after[datetime.date(2024, 3, 20)], [])
        moved = after[datetime.date(2024, 3, 22)]
        self.assertEqual([p.job.id for p in moved], ['a'])
        self.assertEqual((moved[0].top_offset, moved[0].height), (15, 3))

    def test_update_missing_job(self):
        self.data_manager.load_jobs()
        self.assertIsNone(self.data_manager.update_job('zzz', {'statusTag': 'done'}))
        self.assertEqual(len(self.errors), 1)
        self.assertEqual(self.errors[0][0], ErrorMessages.JOB_UPDATE_FAILED['title'])
        self.assertEqual(self.provider.get_calls, 1)


class TestCreateProvider(unittest.TestCase):

    def test_rest_provider_when_configured(self):
        provider = create_provider({'job_source': 'rest', 'api_url': 'https://example.supabase.co', 'api_key': 'k'})
        self.assertIsInstance(provider, RestJobProvider)
        self.assertEqual(provider.api_url, 'https://example.supabase.co')

    @patch('data_manager.LocalJobProvider')
    def test_local_provider_by_default(self, mock_local):
        settings = {}
        provider = create_provider(settings)
        mock_local.assert_called_once_with(settings)
        self.assertIs(provider, mock_local.return_value)

    @patch('data_manager.LocalJobProvider')
    def test_rest_without_url_falls_back_to_local(self, mock_local):
        with self.assertLogs('data_manager', level='WARNING'):
            provider = create_provider({'job_source': 'rest'})
        self.assertIs(provider, mock_local.return_value)


if __name__ == '__main__':
    unittest.main()
