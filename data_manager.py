# data_manager.py
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from config import DEFAULT_JOB_SOURCE, DEFAULT_REQUEST_TIMEOUT
from error_messages import CalendarError, ErrorMessages
from job_schema import find_job, load_jobs
from providers.local_provider import LocalJobProvider
from providers.rest_provider import RestJobProvider
from settings_manager import get_int_setting
from timezone_helper import get_user_timezone
from views.view_controllers import LayoutOptions, build_plan_for_state

logger = logging.getLogger(__name__)

def create_provider(settings):
    """Job repository selected by the ``job_source`` setting."""
    source = settings.get("job_source", DEFAULT_JOB_SOURCE)
    api_url = settings.get("api_url")
    if source == "rest":
        if api_url:
            timeout = get_int_setting(settings, "request_timeout", DEFAULT_REQUEST_TIMEOUT, 1)
            return RestJobProvider(api_url, settings.get("api_key", ""), timeout=timeout)
        logger.warning("job_source is 'rest' but no api_url is set; using the local job store")
    return LocalJobProvider(settings)


class DataManager(QObject):
    data_updated = pyqtSignal()
    error_occurred = pyqtSignal(str, str, list)  # title, message, suggestions
    jobs_rejected = pyqtSignal(int)

    def __init__(self, settings, provider=None):
        super().__init__()
        self.settings = settings
        self.provider = provider if provider is not None else create_provider(settings)
        self._jobs = []
        self._rejected = []

    def report_error(self, error_type, detail, suggestions=None):
        info = ErrorMessages.get_message(error_type)
        self.error_occurred.emit(info['title'], f"{info['message']}\n{detail}",
                                 list(suggestions or info['suggestions']))

    @property
    def rejected(self):
        return list(self._rejected)

    def load_jobs(self):
        """Fetch the job list once and replace the snapshot. Returns False on failure."""
        try:
            raw_jobs = self.provider.get_jobs()
        except CalendarError as e:
            logger.warning("Loading jobs from %s failed: %s", self.provider.name, e)
            self.report_error(self._error_type(e), e, e.suggestions)
            return False
        self.replace_jobs(raw_jobs)
        return True

    def replace_jobs(self, raw_jobs):
        result = load_jobs(raw_jobs, get_user_timezone(self.settings))
        self._jobs = result.jobs
        self._rejected = result.rejected
        logger.info("Job snapshot: %d jobs, %d skipped", len(result.jobs), len(result.rejected))
        if result.rejected:
            self.jobs_rejected.emit(len(result.rejected))
        self.data_updated.emit()

    def update_job(self, job_id, changes):
        """Write ``changes`` through the provider, then reload everything."""
        try:
            updated = self.provider.update_job(job_id, changes)
        except CalendarError as e:
            logger.warning("Updating job %s failed: %s", job_id, e)
            self.report_error('JOB_UPDATE_FAILED', e, e.suggestions)
            return None
        if updated is None:
            self.report_error('JOB_UPDATE_FAILED', f"Job {job_id} was not found.")
            return None
        self.load_jobs()
        return self.get_job(job_id)

    def get_jobs(self):
        return list(self._jobs)

    def get_job(self, job_id):
        return find_job(self._jobs, job_id)

    def layout_options(self, today=None):
        return LayoutOptions.from_settings(self.settings, today=today)

    def get_render_plan(self, view_state, today=None):
        """Lay out the current snapshot for ``view_state``; never fetches."""
        return build_plan_for_state(self._jobs, view_state, self.layout_options(today))

    @staticmethod
    def _error_type(error):
        code = getattr(error, 'error_code', None)
        for name in ('NETWORK_ERROR', 'SERVER_ERROR', 'DATABASE_ERROR'):
            if getattr(ErrorMessages, name)['code'] == code:
                return name
        return 'UNEXPECTED_ERROR'
