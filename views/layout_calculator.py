import datetime
from collections import namedtuple

from .time_buckets import HOURS_PER_DAY, day_bounds

DayGeometry = namedtuple('DayGeometry', ['top_offset', 'height', 'is_truncated_start', 'is_truncated_end'])


def hour_of_day(dt):
    """Fractional wall-clock hour, e.g. 09:30 -> 9.5."""
    return dt.hour + dt.minute / 60 + dt.second / 3600 + dt.microsecond / 3_600_000_000

def column_position(dt, day):
    """Wall-clock position of ``dt`` in the column for ``day``, clamped to 0..24."""
    if dt.date() < day:
        return 0.0
    if dt.date() > day:
        return float(HOURS_PER_DAY)
    return hour_of_day(dt)

def calculate_day_geometry(job, day, tz):
    """
    Vertical extent of ``job`` inside the column for ``day``, in hours.

    Both edges are wall-clock positions, so a block lines up with the hour
    labels and with the start/end times printed on it, also on DST days. A job
    that began on an earlier day is drawn from the top of the column; a job
    that runs past midnight is drawn to the bottom.
    """
    day_start, day_end = day_bounds(day, tz)
    start = job.start_time.astimezone(tz)
    end = job.end_time.astimezone(tz)

    starts_before = start < day_start
    ends_after = end > day_end

    top = column_position(start, day)
    bottom = column_position(end, day)
    height = max(0.0, min(bottom, float(HOURS_PER_DAY)) - top)
    return DayGeometry(top, height, starts_before, ends_after)

def job_touches_day(job, day, tz):
    day_start, day_end = day_bounds(day, tz)
    return job.start_time < day_end and job.end_time > day_start

def day_fragments(job, tz):
    """(day, DayGeometry) for every day the job is visible in."""
    fragments = []
    current = job.start_time.astimezone(tz).date()
    while job_touches_day(job, current, tz):
        fragments.append((current, calculate_day_geometry(job, current, tz)))
        current += datetime.timedelta(days=1)
    return fragments

def cap_jobs(jobs, cap):
    """First ``cap`` jobs in list order plus how many were left out."""
    if cap is None or cap < 0:
        return list(jobs), 0
    shown = list(jobs[:cap])
    return shown, len(jobs) - len(shown)
