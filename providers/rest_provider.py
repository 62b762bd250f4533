import logging

import requests

from .base_provider import BaseJobProvider
from config import DEFAULT_REQUEST_TIMEOUT, JOBS_TABLE, REST_PROVIDER_NAME
from error_messages import ErrorMessages, NetworkError

logger = logging.getLogger(__name__)

JOB_SELECT = (
    "*,"
    "vehicle:vehicles(id,make,model,registration,client:clients(id,first_name,last_name)),"
    "employee:employees(id,name,specialization),"
    "crew:crews(id,name,description)"
)


class RestJobProvider(BaseJobProvider):
    """Reads and updates maintenance jobs through a PostgREST endpoint."""

    name = REST_PROVIDER_NAME

    def __init__(self, api_url, api_key, session=None, timeout=DEFAULT_REQUEST_TIMEOUT):
        self.api_url = (api_url or "").rstrip("/")
        self.api_key = api_key or ""
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def jobs_url(self):
        return f"{self.api_url}/rest/v1/{JOBS_TABLE}"

    def _headers(self, extra=None):
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method, params=None, json_body=None, extra_headers=None):
        try:
            response = self.session.request(
                method, self.jobs_url,
                params=params, json=json_body,
                headers=self._headers(extra_headers),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            details = ErrorMessages.NETWORK_ERROR
            raise NetworkError(f"{method} {self.jobs_url} failed: {e}",
                               error_code=details['code'], suggestions=details['suggestions']) from e

        if not response.ok:
            details = ErrorMessages.SERVER_ERROR
            raise NetworkError(f"{method} {self.jobs_url} returned HTTP {response.status_code}: {response.text[:200]}",
                               error_code=details['code'], suggestions=details['suggestions'])
        try:
            return response.json()
        except ValueError as e:
            details = ErrorMessages.SERVER_ERROR
            raise NetworkError(f"{method} {self.jobs_url} returned invalid JSON",
                               error_code=details['code'], suggestions=details['suggestions']) from e

    def get_jobs(self):
        data = self._request("GET", params={"select": JOB_SELECT, "order": "start_time.asc"})
        if not isinstance(data, list):
            details = ErrorMessages.SERVER_ERROR
            raise NetworkError("Job list response is not an array",
                               error_code=details['code'], suggestions=details['suggestions'])
        logger.info("Fetched %d jobs from %s", len(data), self.api_url)
        return data

    def update_job(self, job_id, changes):
        data = self._request(
            "PATCH",
            params={"id": f"eq.{job_id}"},
            json_body=dict(changes),
            extra_headers={"Content-Type": "application/json", "Prefer": "return=representation"},
        )
        if isinstance(data, list):
            if not data:
                logger.warning("Job %s not found on server", job_id)
                return None
            return data[0]
        return data
