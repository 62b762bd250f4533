# error_messages.py
"""
User-facing error messages and the exception hierarchy for the maintenance calendar.
"""

class ErrorMessages:
    """Error message definitions with recovery suggestions."""

    # Job repository errors
    NETWORK_ERROR = {
        'title': 'Network Connection Error',
        'message': 'Unable to reach the job repository. Please check your connection and try again.',
        'suggestions': [
            'Check your internet connection',
            'Verify the API URL in settings',
            'Try again in a few minutes'
        ],
        'code': 'NETWORK_001'
    }

    SERVER_ERROR = {
        'title': 'Server Error',
        'message': 'The job repository returned an error while processing the request.',
        'suggestions': [
            'Check that the API key is still valid',
            'Try again in a few minutes'
        ],
        'code': 'NETWORK_002'
    }

    DATABASE_ERROR = {
        'title': 'Database Error',
        'message': 'An error occurred while accessing the local job database.',
        'suggestions': [
            'Restart the application',
            'Check if the database file is corrupted'
        ],
        'code': 'DB_001'
    }

    # Job data errors
    INVALID_JOBS = {
        'title': 'Some Jobs Were Skipped',
        'message': 'One or more jobs have an invalid start time, duration or status and are not shown.',
        'suggestions': [
            'Check the start time and duration of the job in the repository',
            'See error.log for the list of skipped jobs'
        ],
        'code': 'DATA_001'
    }

    JOB_UPDATE_FAILED = {
        'title': 'Update Failed',
        'message': 'The maintenance job could not be updated.',
        'suggestions': [
            'Try again',
            'Reload the calendar to see the latest data'
        ],
        'code': 'DATA_002'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error has occurred.',
        'suggestions': [
            'Try the operation again',
            'Restart the application if problem persists'
        ],
        'code': 'APP_001'
    }

    SETTINGS_ERROR = {
        'title': 'Settings Error',
        'message': 'Unable to save or load application settings.',
        'suggestions': [
            'Check file permissions in the data folder',
            'Settings will use default values'
        ],
        'code': 'CONFIG_001'
    }

    @staticmethod
    def get_message(error_type):
        """
        Get error message details by error type.

        Args:
            error_type (str): The error type constant name

        Returns:
            dict: Error message details with title, message, suggestions, and code
        """
        return getattr(ErrorMessages, error_type, ErrorMessages.UNEXPECTED_ERROR)

    @staticmethod
    def format_suggestions(suggestions):
        """Format a suggestion list for display."""
        if not suggestions:
            return ""

        if len(suggestions) == 1:
            return f"Suggestion: {suggestions[0]}"

        formatted = "Suggestions:\n"
        for i, suggestion in enumerate(suggestions, 1):
            formatted += f"{i}. {suggestion}\n"

        return formatted.strip()

class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

class NetworkError(CalendarError):
    """Exception for job repository HTTP errors."""
    pass

class DatabaseError(CalendarError):
    """Exception for local job store errors."""
    pass

class SettingsError(CalendarError):
    """Exception for settings file errors."""
    pass

class JobValidationError(CalendarError):
    """A job record that cannot be laid out (bad start time, duration or status)."""

    def __init__(self, message, job_id=None, field=None):
        super().__init__(message, error_code='DATA_001')
        self.job_id = job_id
        self.field = field

class NavigationError(CalendarError):
    """Exception for calendar navigation errors."""
    pass

class InvalidGranularityError(NavigationError):
    """Unknown view granularity."""
    pass

class NavigationRangeError(NavigationError):
    """Anchor date moved outside the representable date range."""
    pass
