# constants/__init__.py
"""
Constant package.
Collects the UI, color and text constants in one import.
"""

from .ui_constants import (
    WindowSize, Spacing, TimeGridLayout, MonthViewLayout, YearViewLayout, Timer
)
from .color_constants import (
    CalendarColors, StatusColors,
    get_status_colors, get_theme_colors
)
from .text_constants import (
    GeneralText, CalendarText, JobDetailText,
    hour_label, day_label, long_date_label, format_text
)

__all__ = [
    # UI Constants
    'WindowSize', 'Spacing', 'TimeGridLayout', 'MonthViewLayout', 'YearViewLayout', 'Timer',

    # Color Constants
    'CalendarColors', 'StatusColors',
    'get_status_colors', 'get_theme_colors',

    # Text Constants
    'GeneralText', 'CalendarText', 'JobDetailText',
    'hour_label', 'day_label', 'long_date_label', 'format_text',
]
