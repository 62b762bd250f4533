# tests/test_layout_calculator.py
import unittest
import datetime
import os
import sys
from zoneinfo import ZoneInfo

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from job_schema import parse_job
from views.layout_calculator import (calculate_day_geometry, cap_jobs, day_fragments,
                                     hour_of_day, job_touches_day)

UTC = ZoneInfo("UTC")

def make_job(job_id, start, hours, tz=UTC):
    return parse_job({'id': job_id, 'title': job_id, 'startTime': start, 'durationHours': hours}, tz)


class TestDayGeometry(unittest.TestCase):

    def test_job_inside_one_day(self):
        job = make_job('a', '2024-03-20T09:00:00Z', 2)
        geometry = calculate_day_geometry(job, datetime.date(2024, 3, 20), UTC)
        self.assertEqual(geometry.top_offset, 9)
        self.assertEqual(geometry.height, 2)
        self.assertFalse(geometry.is_truncated_start)
        self.assertFalse(geometry.is_truncated_end)

    def test_fractional_start(self):
        job = make_job('a', '2024-03-20T09:30:00Z', 1.5)
        geometry = calculate_day_geometry(job, datetime.date(2024, 3, 20), UTC)
        self.assertAlmostEqual(geometry.top_offset, 9.5)
        self.assertAlmostEqual(geometry.height, 1.5)

    def test_overnight_job_is_split(self):
        job = make_job('a', '2024-03-18T23:00:00Z', 3)
        first = calculate_day_geometry(job, datetime.date(2024, 3, 18), UTC)
        second = calculate_day_geometry(job, datetime.date(2024, 3, 19), UTC)
        self.assertEqual((first.top_offset, first.height), (23, 1))
        self.assertTrue(first.is_truncated_end)
        self.assertEqual((second.top_offset, second.height), (0, 2))
        self.assertTrue(second.is_truncated_start)
        self.assertFalse(second.is_truncated_end)

    def test_middle_day_of_long_job_fills_column(self):
        job = make_job('a', '2024-03-18T10:00:00Z', 50)
        middle = calculate_day_geometry(job, datetime.date(2024, 3, 19), UTC)
        self.assertEqual((middle.top_offset, middle.height), (0, 24))

    def test_job_ending_at_midnight_is_not_truncated(self):
        job = make_job('a', '2024-03-20T22:00:00Z', 2)
        geometry = calculate_day_geometry(job, datetime.date(2024, 3, 20), UTC)
        self.assertEqual((geometry.top_offset, geometry.height), (22, 2))
        self.assertFalse(geometry.is_truncated_end)
        self.assertFalse(job_touches_day(job, datetime.date(2024, 3, 21), UTC))

    def test_block_never_extends_past_end_of_day(self):
        for start, hours in [('2024-03-20T23:59:00Z', 5), ('2024-03-20T00:00:00Z', 30), ('2024-03-20T12:00:00Z', 12)]:
            job = make_job('a', start, hours)
            for day, geometry in day_fragments(job, UTC):
                self.assertGreaterEqual(geometry.top_offset, 0)
                self.assertLessEqual(geometry.top_offset + geometry.height, 24 + 1e-9)

    def test_hour_of_day(self):
        self.assertEqual(hour_of_day(datetime.datetime(2024, 3, 20, 9, 30)), 9.5)
        self.assertEqual(hour_of_day(datetime.datetime(2024, 3, 20, 0, 0)), 0)


class TestDayFragments(unittest.TestCase):

    def test_fragment_heights_add_up_to_duration(self):
        cases = [
            ('2024-03-20T09:00:00Z', 2),
            ('2024-03-18T23:00:00Z', 3),
            ('2024-03-18T10:00:00Z', 50),
            ('2024-03-18T00:00:00Z', 72),
            ('2024-02-28T20:15:00Z', 30.25),
        ]
        for start, hours in cases:
            job = make_job('a', start, hours)
            total = sum(geometry.height for _, geometry in day_fragments(job, UTC))
            self.assertAlmostEqual(total, hours, places=6, msg=f"{start} + {hours}h")

    def test_fragment_days_are_consecutive(self):
        job = make_job('a', '2024-02-28T10:00:00Z', 50)
        days = [day for day, _ in day_fragments(job, UTC)]
        self.assertEqual(days, [datetime.date(2024, 2, 28), datetime.date(2024, 2, 29), datetime.date(2024, 3, 1)])


NEW_YORK = ZoneInfo("America/New_York")


class TestDaylightSavingGeometry(unittest.TestCase):
    """2024-03-10 has no 02:00 in New York; 2024-11-03 has 01:00 twice."""

    def assertEndsAtEndTime(self, job, geometry):
        end = job.end_time.astimezone(NEW_YORK)
        self.assertAlmostEqual(geometry.top_offset + geometry.height, hour_of_day(end))

    def test_job_across_spring_forward_ends_at_its_end_time(self):
        # 01:00 EST + 3h elapsed = 05:00 EDT
        job = make_job('a', '2024-03-10T06:00:00Z', 3, NEW_YORK)
        geometry = calculate_day_geometry(job, datetime.date(2024, 3, 10), NEW_YORK)
        self.assertEqual((geometry.top_offset, geometry.height), (1, 4))
        self.assertEndsAtEndTime(job, geometry)

    def test_overnight_job_into_spring_forward(self):
        # 22:00 EST on the 9th + 6h elapsed = 05:00 EDT on the 10th
        job = make_job('a', '2024-03-10T03:00:00Z', 6, NEW_YORK)
        fragments = day_fragments(job, NEW_YORK)
        self.assertEqual([(day, g.top_offset, g.height) for day, g in fragments],
                         [(datetime.date(2024, 3, 9), 22, 2), (datetime.date(2024, 3, 10), 0, 5)])
        self.assertEndsAtEndTime(job, fragments[-1][1])
        # fragments follow the wall clock, so the skipped hour is part of the span
        self.assertEqual(sum(g.height for _, g in fragments), job.duration_hours + 1)

    def test_job_across_fall_back_ends_at_its_end_time(self):
        # 00:00 EDT + 3h elapsed = 02:00 EST
        job = make_job('a', '2024-11-03T04:00:00Z', 3, NEW_YORK)
        geometry = calculate_day_geometry(job, datetime.date(2024, 11, 3), NEW_YORK)
        self.assertEqual((geometry.top_offset, geometry.height), (0, 2))
        self.assertEndsAtEndTime(job, geometry)

    def test_last_hour_of_fall_back_day_stays_visible(self):
        job = make_job('a', '2024-11-04T04:00:00Z', 1, NEW_YORK)
        geometry = calculate_day_geometry(job, datetime.date(2024, 11, 3), NEW_YORK)
        self.assertEqual((geometry.top_offset, geometry.height), (23, 1))
        self.assertFalse(geometry.is_truncated_end)

    def test_blocks_stay_inside_column_on_dst_days(self):
        for start in ['2024-03-09T20:00:00Z', '2024-11-02T20:00:00Z']:
            job = make_job('a', start, 30, NEW_YORK)
            for day, geometry in day_fragments(job, NEW_YORK):
                self.assertGreaterEqual(geometry.top_offset, 0)
                self.assertLessEqual(geometry.top_offset + geometry.height, 24)


class TestCapJobs(unittest.TestCase):

    def test_cap_keeps_list_order(self):
        shown, hidden = cap_jobs(['a', 'b', 'c', 'd', 'e'], 3)
        self.assertEqual(shown, ['a', 'b', 'c'])
        self.assertEqual(hidden, 2)

    def test_under_cap_hides_nothing(self):
        self.assertEqual(cap_jobs(['a'], 3), (['a'], 0))

    def test_zero_cap_hides_everything(self):
        self.assertEqual(cap_jobs(['a', 'b'], 0), ([], 2))

    def test_no_cap(self):
        self.assertEqual(cap_jobs(['a', 'b'], None), (['a', 'b'], 0))


if __name__ == '__main__':
    unittest.main()
