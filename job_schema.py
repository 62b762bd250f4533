# job_schema.py
"""
Maintenance job record and the validation done once when jobs enter the app.

Everything downstream (bucketing, geometry, views) only ever sees ``Job``
instances with a timezone-aware start and a positive, finite duration.
"""
import datetime
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from dateutil import parser as dateutil_parser

from error_messages import JobValidationError

logger = logging.getLogger(__name__)

STATUS_NOT_STARTED = 'not-started'
STATUS_IN_PROGRESS = 'in-progress'
STATUS_QA = 'qa'
STATUS_DONE = 'done'
STATUS_TAGS = (STATUS_NOT_STARTED, STATUS_IN_PROGRESS, STATUS_QA, STATUS_DONE)

UNTITLED = "(untitled)"


@dataclass(frozen=True)
class Job:
    id: str
    title: str
    start_time: datetime.datetime
    duration_hours: float
    status: str = STATUS_NOT_STARTED

    # display only
    description: str = ""
    vehicle_model: str = ""
    vehicle_registration: str = ""
    assignee_name: str = ""
    crew_name: str = ""
    client_name: str = ""

    @property
    def end_time(self):
        # Elapsed time is added in UTC so DST transitions do not shift the end.
        tz = self.start_time.tzinfo
        start_utc = self.start_time.astimezone(datetime.timezone.utc)
        return (start_utc + datetime.timedelta(hours=self.duration_hours)).astimezone(tz)

    @property
    def subtitle(self):
        if self.assignee_name:
            assignee = self.assignee_name
        elif self.crew_name:
            assignee = f"Crew: {self.crew_name}"
        else:
            assignee = "Unassigned"
        if self.vehicle_model:
            return f"{self.vehicle_model} - {assignee}"
        return assignee


@dataclass
class IngestionResult:
    jobs: List[Job] = field(default_factory=list)
    rejected: List[Tuple[Dict[str, Any], JobValidationError]] = field(default_factory=list)


def _first(raw, *keys):
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None

def _nested_text(raw, path_options):
    for path in path_options:
        value = raw
        for key in path:
            if not isinstance(value, dict):
                value = None
                break
            value = value.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""

def parse_start_time(value, tz, job_id=None):
    """ISO-8601 string (or datetime) -> aware datetime in ``tz``."""
    if isinstance(value, datetime.datetime):
        dt = value
    elif isinstance(value, str) and value.strip():
        try:
            dt = dateutil_parser.isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise JobValidationError(
                f"Job {job_id}: unparseable start time {value!r} ({e})",
                job_id=job_id, field='startTime') from e
    else:
        raise JobValidationError(f"Job {job_id}: missing start time", job_id=job_id, field='startTime')

    try:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=tz)
        return dt.astimezone(tz)
    except (ValueError, OverflowError) as e:
        raise JobValidationError(
            f"Job {job_id}: start time {value!r} out of range ({e})",
            job_id=job_id, field='startTime') from e

def parse_duration(value, job_id=None):
    if isinstance(value, bool) or value is None:
        raise JobValidationError(f"Job {job_id}: missing duration", job_id=job_id, field='durationHours')
    try:
        hours = float(value)
    except (TypeError, ValueError) as e:
        raise JobValidationError(
            f"Job {job_id}: duration {value!r} is not a number",
            job_id=job_id, field='durationHours') from e
    if not math.isfinite(hours) or hours <= 0:
        raise JobValidationError(
            f"Job {job_id}: duration must be a positive number of hours, got {value!r}",
            job_id=job_id, field='durationHours')
    return hours

def parse_job(raw, tz):
    """
    Build a ``Job`` from a repository record.

    Accepts the calendar keys (``startTime``, ``durationHours``, ``statusTag``)
    as well as the backend row keys (``start_time``, ``duration``, ``status``)
    with their nested vehicle/employee/crew objects. When a record carries both
    spellings the backend column wins, since updates are written under it.

    Raises:
        JobValidationError: the record cannot be placed on the calendar.
    """
    if not isinstance(raw, dict):
        raise JobValidationError(f"Job record must be an object, got {type(raw).__name__}", field='id')

    job_id = raw.get('id')
    if job_id is None or (isinstance(job_id, str) and not job_id.strip()):
        raise JobValidationError("Job record has no id", field='id')
    job_id = str(job_id)

    start_time = parse_start_time(_first(raw, 'start_time', 'startTime'), tz, job_id)
    duration = parse_duration(_first(raw, 'duration', 'durationHours'), job_id)

    status = _first(raw, 'status', 'statusTag')
    if status is None:
        status = STATUS_NOT_STARTED
    if status not in STATUS_TAGS:
        raise JobValidationError(f"Job {job_id}: unknown status {status!r}", job_id=job_id, field='statusTag')

    try:
        # Reject durations that would run off the end of the calendar
        start_time.astimezone(datetime.timezone.utc) + datetime.timedelta(hours=duration)
    except OverflowError as e:
        raise JobValidationError(f"Job {job_id}: end time out of range", job_id=job_id, field='durationHours') from e

    title = raw.get('title')
    if not isinstance(title, str) or not title.strip():
        title = UNTITLED

    first_name = _nested_text(raw, [('vehicle', 'client', 'first_name')])
    last_name = _nested_text(raw, [('vehicle', 'client', 'last_name')])
    client_name = " ".join(part for part in (first_name, last_name) if part) or \
        _nested_text(raw, [('client', 'name')])

    return Job(
        id=job_id,
        title=title.strip(),
        start_time=start_time,
        duration_hours=duration,
        status=status,
        description=raw.get('description') or "",
        vehicle_model=_nested_text(raw, [('vehicle', 'model'), ('aircraft', 'model')]),
        vehicle_registration=_nested_text(raw, [('vehicle', 'registration'), ('aircraft', 'registration')]),
        assignee_name=_nested_text(raw, [('employee', 'name'), ('assignee', 'name')]),
        crew_name=_nested_text(raw, [('crew', 'name')]),
        client_name=client_name,
    )

def job_changes(job, tz, title=None, description=None, start_time=None, duration=None, status=None):
    """
    Validated backend-keyed changes for the edited fields of ``job``.

    Only fields that are passed and differ from the job are returned. Start
    times without an offset are taken to be in ``tz``.

    Raises:
        JobValidationError: an edited value cannot be placed on the calendar.
    """
    changes = {}
    if title is not None:
        title = title.strip()
        if not title:
            raise JobValidationError(f"Job {job.id}: title must not be empty", job_id=job.id, field='title')
        if title != job.title:
            changes['title'] = title
    if description is not None and description != job.description:
        changes['description'] = description

    start = job.start_time
    if start_time is not None:
        start = parse_start_time(start_time, tz, job.id)
        if start != job.start_time:
            changes['start_time'] = start.isoformat()
    hours = job.duration_hours
    if duration is not None:
        hours = parse_duration(duration, job.id)
        if hours != job.duration_hours:
            changes['duration'] = hours
    try:
        start.astimezone(datetime.timezone.utc) + datetime.timedelta(hours=hours)
    except OverflowError as e:
        raise JobValidationError(f"Job {job.id}: end time out of range", job_id=job.id, field='durationHours') from e

    if status is not None:
        if status not in STATUS_TAGS:
            raise JobValidationError(f"Job {job.id}: unknown status {status!r}", job_id=job.id, field='statusTag')
        if status != job.status:
            changes['status'] = status
    return changes

def load_jobs(raw_jobs, tz):
    """Validate a batch; bad records are logged and skipped, never fatal."""
    result = IngestionResult()
    for raw in raw_jobs or []:
        try:
            result.jobs.append(parse_job(raw, tz))
        except JobValidationError as e:
            logger.warning("Skipping job: %s", e)
            result.rejected.append((raw, e))
    return result

def find_job(jobs, job_id) -> Optional[Job]:
    job_id = str(job_id)
    for job in jobs:
        if job.id == job_id:
            return job
    return None
