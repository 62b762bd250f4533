# constants/text_constants.py
"""
UI text constants.
All user-facing strings are kept here.
"""

# ============================================================================
# General UI text
# ============================================================================
class GeneralText:
    OK = "OK"
    SAVE = "Save"
    CLOSE = "Close"
    ERROR = "Error"
    LOADING = "Loading maintenance jobs..."


# ============================================================================
# Calendar text
# ============================================================================
class CalendarText:
    APP_TITLE = "Maintenance Schedule"

    MONTHS = [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December"
    ]
    MONTHS_SHORT = [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
    ]

    # Indexed by date.weekday() (Monday = 0)
    WEEKDAYS_SHORT = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    TODAY = "Today"
    PREVIOUS = "<"
    NEXT = ">"

    VIEW_NAMES = {
        "day": "Day",
        "week": "Week",
        "month": "Month",
        "year": "Year",
    }

    MORE_JOBS_FORMAT = "+{count} more"
    UNASSIGNED = "Unassigned"


# ============================================================================
# Job detail dialog text
# ============================================================================
class JobDetailText:
    WINDOW_TITLE = "Maintenance Job"
    LABEL_TITLE = "Title:"
    LABEL_DESCRIPTION = "Description:"
    LABEL_STATUS = "Status:"
    LABEL_START = "Start:"
    LABEL_DURATION = "Duration (hours):"
    LABEL_VEHICLE = "Vehicle:"
    LABEL_ASSIGNEE = "Assigned to:"
    LABEL_CLIENT = "Client:"
    DURATION_FORMAT = "{hours:g}"
    START_FORMAT = "%Y-%m-%d %H:%M"
    START_PLACEHOLDER = "YYYY-MM-DD HH:MM"
    DURATION_PLACEHOLDER = "hours"

    STATUS_NAMES = {
        "not-started": "Not Started",
        "in-progress": "In Progress",
        "qa": "QA",
        "done": "Done",
    }


def hour_label(hour):
    """0 -> '12 AM', 13 -> '1 PM'."""
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def day_label(date_obj):
    """'Wed 20'"""
    return f"{CalendarText.WEEKDAYS_SHORT[date_obj.weekday()]} {date_obj.day}"


def long_date_label(date_obj):
    """'March 20, 2024'"""
    return f"{CalendarText.MONTHS[date_obj.month - 1]} {date_obj.day}, {date_obj.year}"


def format_text(template: str, **kwargs) -> str:
    """Fill a text template."""
    return template.format(**kwargs)
