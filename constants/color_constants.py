# constants/color_constants.py
"""
Color constants shared by the calendar widgets.
"""

# ============================================================================
# Calendar colors
# ============================================================================
class CalendarColors:
    BACKGROUND_DARK = "#1E293B"
    BACKGROUND_OTHER_MONTH_DARK = "#0F172A"
    BACKGROUND_LIGHT = "#FFFFFF"
    BACKGROUND_OTHER_MONTH_LIGHT = "#F1F5F9"

    GRID_LINE_DARK = "#334155"
    GRID_LINE_LIGHT = "#D0D0D0"

    TEXT_DARK = "#E2E8F0"
    TEXT_MUTED_DARK = "#64748B"
    TEXT_LIGHT = "#1E293B"
    TEXT_MUTED_LIGHT = "#94A3B8"

    TODAY_RING = "#3B82F6"
    TODAY_HIGHLIGHT_RGBA = (59, 130, 246, 40)
    CURRENT_TIME_LINE = "#FF3333"
    MORE_JOBS_TEXT = "#94A3B8"

# ============================================================================
# Job status colors (border, fill)
# ============================================================================
class StatusColors:
    NOT_STARTED = ("#3B82F6", "#1E3A8A")
    IN_PROGRESS = ("#EAB308", "#713F12")
    QA = ("#A855F7", "#581C87")
    DONE = ("#22C55E", "#14532D")
    UNKNOWN = ("#6B7280", "#111827")

    BY_STATUS = {
        "not-started": NOT_STARTED,
        "in-progress": IN_PROGRESS,
        "qa": QA,
        "done": DONE,
    }

def get_status_colors(status):
    """(border, fill) hex colors for a job status."""
    return StatusColors.BY_STATUS.get(status, StatusColors.UNKNOWN)

def get_theme_colors(theme_name: str) -> dict:
    """Palette for the 'dark' or 'light' theme."""
    if (theme_name or "").lower() == 'light':
        return {
            'background': CalendarColors.BACKGROUND_LIGHT,
            'background_other_month': CalendarColors.BACKGROUND_OTHER_MONTH_LIGHT,
            'grid_line': CalendarColors.GRID_LINE_LIGHT,
            'text': CalendarColors.TEXT_LIGHT,
            'text_muted': CalendarColors.TEXT_MUTED_LIGHT,
        }
    return {
        'background': CalendarColors.BACKGROUND_DARK,
        'background_other_month': CalendarColors.BACKGROUND_OTHER_MONTH_DARK,
        'grid_line': CalendarColors.GRID_LINE_DARK,
        'text': CalendarColors.TEXT_DARK,
        'text_muted': CalendarColors.TEXT_MUTED_DARK,
    }
