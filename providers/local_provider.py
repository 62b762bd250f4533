import datetime
import json
import logging
import sqlite3
import uuid
from contextlib import contextmanager

from dateutil import parser as dateutil_parser

from .base_provider import BaseJobProvider
from config import LOCAL_PROVIDER_NAME
from db_manager import get_db_manager, init_jobs_table
from error_messages import DatabaseError, ErrorMessages

logger = logging.getLogger(__name__)

def safe_json_dumps(obj):
    """JSON with datetimes written as ISO strings"""
    def json_serializer(value):
        if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
            return value.isoformat()
        raise TypeError(f"Object {value} of type {type(value)} is not JSON serializable")

    return json.dumps(obj, default=json_serializer, ensure_ascii=False)

def _sort_key(start_value):
    """UTC ISO string when parseable so rows sort chronologically."""
    if isinstance(start_value, datetime.datetime):
        start_value = start_value.isoformat()
    if not isinstance(start_value, str):
        return ""
    try:
        parsed = dateutil_parser.isoparse(start_value)
    except (ValueError, OverflowError):
        return start_value
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        except (ValueError, OverflowError):
            return start_value
    return parsed.isoformat()


class LocalJobProvider(BaseJobProvider):
    name = LOCAL_PROVIDER_NAME

    def __init__(self, settings=None, db_connection=None):
        self.settings = settings or {}
        self._connection = db_connection
        if db_connection is not None:
            self.db_manager = None
            init_jobs_table(db_connection)
        else:
            self.db_manager = get_db_manager()

    @contextmanager
    def _get_connection(self):
        if self._connection is not None:
            yield self._connection
        else:
            with self.db_manager.get_local_connection() as conn:
                yield conn

    def _db_error(self, action, error):
        details = ErrorMessages.DATABASE_ERROR
        return DatabaseError(f"Local job store error while {action}: {error}",
                             error_code=details['code'], suggestions=details['suggestions'])

    def get_jobs(self):
        jobs = []
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT id, job_json FROM local_jobs ORDER BY start_time, id")
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise self._db_error("reading jobs", e) from e

        for job_id, job_json in rows:
            try:
                jobs.append(json.loads(job_json))
            except json.JSONDecodeError as e:
                logger.warning("Corrupted local job row %s skipped: %s", job_id, e)
        return jobs

    def get_job(self, job_id):
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT job_json FROM local_jobs WHERE id = ?", (str(job_id),))
                row = cursor.fetchone()
        except sqlite3.Error as e:
            raise self._db_error("reading a job", e) from e
        return json.loads(row[0]) if row else None

    def add_job(self, job_data):
        job = dict(job_data)
        if job.get('id') is None:
            job['id'] = str(uuid.uuid4())
        job['id'] = str(job['id'])
        start_value = job.get('start_time', job.get('startTime'))
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT OR REPLACE INTO local_jobs (id, start_time, job_json, updated_at) "
                    "VALUES (?, ?, ?, CURRENT_TIMESTAMP)",
                    (job['id'], _sort_key(start_value), safe_json_dumps(job)))
                conn.commit()
        except sqlite3.Error as e:
            raise self._db_error("saving a job", e) from e
        return job

    def update_job(self, job_id, changes):
        existing = self.get_job(job_id)
        if existing is None:
            logger.warning("Local job %s not found for update", job_id)
            return None
        existing.update(changes)
        existing['id'] = str(job_id)
        return self.add_job(existing)

    def delete_job(self, job_id):
        try:
            with self._get_connection() as conn:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM local_jobs WHERE id = ?", (str(job_id),))
                deleted = cursor.rowcount
                conn.commit()
        except sqlite3.Error as e:
            raise self._db_error("deleting a job", e) from e
        return deleted > 0
