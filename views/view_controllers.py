# views/view_controllers.py
"""
Day / Week / Month / Year controllers.

Each controller walks the buckets of its visible range in chronological order
and returns a ``RenderPlan``. They are pure: the same jobs, anchor, granularity
and options always give the same plan.
"""
import datetime
import logging
from dataclasses import dataclass
from typing import Optional

from config import (DEFAULT_MONTH_CELL_JOB_CAP, DEFAULT_YEAR_CELL_JOB_CAP,
                    DEFAULT_WEEK_START, DEFAULT_TIMEZONE)
from constants.text_constants import CalendarText, hour_label, long_date_label
from navigation_state import Granularity, ViewState, visible_range
from settings_manager import get_int_setting
from timezone_helper import get_user_timezone, resolve_timezone

from .layout_calculator import calculate_day_geometry, cap_jobs, job_touches_day
from .render_plan import Bucket, PositionedJob, RenderPlan
from .time_buckets import (HOURS_PER_DAY, jobs_in_hour_bucket, jobs_in_month,
                           jobs_on_day, last_day_of_month)

logger = logging.getLogger(__name__)

_ONE_MICROSECOND = datetime.timedelta(microseconds=1)


@dataclass(frozen=True)
class LayoutOptions:
    tz: datetime.tzinfo = resolve_timezone(DEFAULT_TIMEZONE)
    week_start: int = DEFAULT_WEEK_START
    month_cap: int = DEFAULT_MONTH_CELL_JOB_CAP
    year_cap: int = DEFAULT_YEAR_CELL_JOB_CAP
    today: Optional[datetime.date] = None

    @classmethod
    def from_settings(cls, settings, today=None):
        tz = get_user_timezone(settings)
        if today is None:
            today = datetime.datetime.now(tz).date()
        return cls(
            tz=tz,
            week_start=get_int_setting(settings, "week_start", DEFAULT_WEEK_START, 0, 6),
            month_cap=get_int_setting(settings, "month_cell_job_cap", DEFAULT_MONTH_CELL_JOB_CAP, 0),
            year_cap=get_int_setting(settings, "year_cell_job_cap", DEFAULT_YEAR_CELL_JOB_CAP, 0),
            today=today,
        )


def _last_date(dt):
    """Calendar date of the last instant covered by an interval ending at ``dt``."""
    return (dt - _ONE_MICROSECOND).date()


class BaseViewController:
    granularity = None

    def __init__(self, options=None):
        self.options = options or LayoutOptions()

    def visible_range(self, anchor_date):
        return visible_range(anchor_date, self.granularity, self.options.week_start)

    def build(self, jobs, anchor_date):
        range_start, range_end = self.visible_range(anchor_date)
        plan = RenderPlan(
            granularity=self.granularity,
            anchor_date=anchor_date,
            range_start=range_start,
            range_end=range_end,
            title=long_date_label(anchor_date),
        )
        plan.buckets = self._build_buckets(list(jobs), anchor_date, range_start, range_end)
        return plan

    def _build_buckets(self, jobs, anchor_date, range_start, range_end):
        raise NotImplementedError("This method must be implemented by subclasses.")


class TimeGridController(BaseViewController):
    """Hour buckets per day column, shared by the day and week views."""

    def _day_buckets(self, jobs, day):
        tz = self.options.tz
        is_today = day == self.options.today
        candidates = [job for job in jobs if job_touches_day(job, day, tz)]
        placed = set()

        buckets = []
        for hour in range(HOURS_PER_DAY):
            bucket = Bucket(key=(day, hour), label=hour_label(hour), day=day, hour=hour, is_today=is_today)
            for job in jobs_in_hour_bucket(candidates, day, hour, tz):
                # Once per day: a job lands in the first hour bucket it overlaps
                if id(job) in placed:
                    continue
                placed.add(id(job))
                geometry = calculate_day_geometry(job, day, tz)
                bucket.jobs.append(PositionedJob(
                    job=job,
                    bucket_key=bucket.key,
                    top_offset=geometry.top_offset,
                    height=geometry.height,
                    is_truncated_start=geometry.is_truncated_start,
                    is_truncated_end=geometry.is_truncated_end,
                ))
            buckets.append(bucket)
        return buckets

    def _build_buckets(self, jobs, anchor_date, range_start, range_end):
        buckets = []
        day = range_start
        while day <= range_end:
            buckets.extend(self._day_buckets(jobs, day))
            day += datetime.timedelta(days=1)
        return buckets


class DayViewController(TimeGridController):
    granularity = Granularity.DAY


class WeekViewController(TimeGridController):
    granularity = Granularity.WEEK


class MonthViewController(BaseViewController):
    granularity = Granularity.MONTH

    def _build_buckets(self, jobs, anchor_date, range_start, range_end):
        tz = self.options.tz
        buckets = []
        day = range_start
        while day <= range_end:
            day_jobs = jobs_on_day(jobs, day, tz)
            shown, hidden = cap_jobs(day_jobs, self.options.month_cap)
            bucket = Bucket(
                key=(day,),
                label=str(day.day),
                day=day,
                hidden_count=hidden,
                in_current_period=(day.year, day.month) == (anchor_date.year, anchor_date.month),
                is_today=day == self.options.today,
            )
            for job in shown:
                bucket.jobs.append(PositionedJob(
                    job=job,
                    bucket_key=bucket.key,
                    is_truncated_end=_last_date(job.end_time.astimezone(tz)) > day,
                ))
            buckets.append(bucket)
            day += datetime.timedelta(days=1)
        return buckets


class YearViewController(BaseViewController):
    granularity = Granularity.YEAR

    def _build_buckets(self, jobs, anchor_date, range_start, range_end):
        tz = self.options.tz
        year = anchor_date.year
        today = self.options.today
        buckets = []
        for month in range(1, 13):
            month_jobs = jobs_in_month(jobs, year, month, tz)
            shown, hidden = cap_jobs(month_jobs, self.options.year_cap)
            month_last_day = last_day_of_month(year, month)
            bucket = Bucket(
                key=(year, month),
                label=CalendarText.MONTHS_SHORT[month - 1],
                month=month,
                hidden_count=hidden,
                is_today=today is not None and (today.year, today.month) == (year, month),
            )
            for job in shown:
                bucket.jobs.append(PositionedJob(
                    job=job,
                    bucket_key=bucket.key,
                    is_truncated_end=_last_date(job.end_time.astimezone(tz)) > month_last_day,
                ))
            buckets.append(bucket)
        return buckets


CONTROLLERS = {
    Granularity.DAY: DayViewController,
    Granularity.WEEK: WeekViewController,
    Granularity.MONTH: MonthViewController,
    Granularity.YEAR: YearViewController,
}

def get_controller(granularity, options=None):
    Granularity.validate(granularity)
    return CONTROLLERS[granularity](options)

def build_render_plan(jobs, anchor_date, granularity, options=None):
    """Lay out ``jobs`` for the view anchored at ``anchor_date``."""
    plan = get_controller(granularity, options).build(jobs, anchor_date)
    logger.debug("Built %s plan for %s: %d buckets, %d placed jobs",
                 granularity, anchor_date, len(plan.buckets), len(plan.all_jobs()))
    return plan

def build_plan_for_state(jobs, view_state: ViewState, options=None):
    return build_render_plan(jobs, view_state.anchor_date, view_state.granularity, options)
