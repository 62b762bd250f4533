# views/render_plan.py
"""Positioned jobs handed from the view controllers to the widgets."""
from collections import OrderedDict
from dataclasses import dataclass, field
import datetime
from typing import Any, List, Optional, Tuple

from job_schema import Job


@dataclass(frozen=True)
class PositionedJob:
    job: Job
    bucket_key: Tuple[Any, ...]
    top_offset: Optional[float] = None   # hours from midnight, day/week only
    height: Optional[float] = None       # hours, day/week only
    is_truncated_start: bool = False
    is_truncated_end: bool = False


@dataclass
class Bucket:
    key: Tuple[Any, ...]
    label: str
    day: Optional[datetime.date] = None
    hour: Optional[int] = None
    month: Optional[int] = None
    jobs: List[PositionedJob] = field(default_factory=list)
    hidden_count: int = 0
    in_current_period: bool = True
    is_today: bool = False


@dataclass
class RenderPlan:
    granularity: str
    anchor_date: datetime.date
    range_start: datetime.date
    range_end: datetime.date
    title: str
    buckets: List[Bucket] = field(default_factory=list)

    def all_jobs(self):
        return [positioned for bucket in self.buckets for positioned in bucket.jobs]

    def days(self):
        seen = OrderedDict()
        for bucket in self.buckets:
            if bucket.day is not None:
                seen.setdefault(bucket.day, None)
        return list(seen)

    def jobs_by_day(self):
        """Day column -> positioned jobs, chronological (day/week views)."""
        columns = OrderedDict((day, []) for day in self.days())
        for bucket in self.buckets:
            if bucket.day is not None:
                columns[bucket.day].extend(bucket.jobs)
        return columns
