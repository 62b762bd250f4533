# views/time_buckets.py
"""
Time buckets for the calendar views.

Day/week views bucket by (day, hour) and follow a job through every hour it
spans. Month and year views only look at the day/month a job starts in.
"""
import calendar
import datetime

from config import DEFAULT_WEEK_START

HOURS_PER_DAY = 24


def day_bounds(day, tz):
    """Midnight of ``day`` and midnight of the following day, in ``tz``."""
    start = datetime.datetime(day.year, day.month, day.day, tzinfo=tz)
    return start, start + datetime.timedelta(days=1)

def hour_bucket_bounds(day, hour, tz):
    start = datetime.datetime(day.year, day.month, day.day, hour, tzinfo=tz)
    return start, start + datetime.timedelta(hours=1)

def _local(dt, tz):
    return dt if dt.tzinfo is tz else dt.astimezone(tz)

def job_in_hour_bucket(job, day, hour, tz):
    """True when the job starts in this hour of ``day`` or is still running at its start."""
    bucket_start, _ = hour_bucket_bounds(day, hour, tz)
    start = _local(job.start_time, tz)

    starts_in_this_hour = start.date() == day and start.hour == hour
    if starts_in_this_hour:
        return True
    return start < bucket_start and _local(job.end_time, tz) > bucket_start

def jobs_in_hour_bucket(jobs, day, hour, tz):
    return [job for job in jobs if job_in_hour_bucket(job, day, hour, tz)]

def jobs_on_day(jobs, day, tz=None):
    """Jobs whose start falls on ``day``; multi-day jobs stay on their start day."""
    result = []
    for job in jobs:
        start = job.start_time if tz is None else _local(job.start_time, tz)
        if start.date() == day:
            result.append(job)
    return result

def jobs_in_month(jobs, year, month, tz=None):
    result = []
    for job in jobs:
        start = job.start_time if tz is None else _local(job.start_time, tz)
        if start.year == year and start.month == month:
            result.append(job)
    return result

# ---------------------------
# Visible date ranges
# ---------------------------

def start_of_week(date_obj, week_start=DEFAULT_WEEK_START):
    """First day of the week containing ``date_obj``.

    ``week_start`` uses ``date.weekday()`` numbering: 6 = Sunday, 0 = Monday.
    """
    offset = (date_obj.weekday() - week_start) % 7
    return date_obj - datetime.timedelta(days=offset)

def week_days(date_obj, week_start=DEFAULT_WEEK_START):
    first = start_of_week(date_obj, week_start)
    return [first + datetime.timedelta(days=i) for i in range(7)]

def last_day_of_month(year, month):
    return datetime.date(year, month, calendar.monthrange(year, month)[1])

def month_grid_range(year, month, week_start=DEFAULT_WEEK_START):
    """Grid start/end covering whole weeks around the month."""
    first_day = datetime.date(year, month, 1)
    last_day = last_day_of_month(year, month)
    grid_start = start_of_week(first_day, week_start)
    grid_end = start_of_week(last_day, week_start) + datetime.timedelta(days=6)
    return grid_start, grid_end

def month_grid_days(year, month, week_start=DEFAULT_WEEK_START):
    grid_start, grid_end = month_grid_range(year, month, week_start)
    num_days = (grid_end - grid_start).days + 1
    return [grid_start + datetime.timedelta(days=i) for i in range(num_days)]
