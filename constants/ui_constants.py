# constants/ui_constants.py
"""
UI size constants.
Sizes, margins and spacing for the calendar widgets.
"""

# ============================================================================
# Window sizes
# ============================================================================
class WindowSize:
    MIN_WIDTH = 700
    MIN_HEIGHT = 500

    DIALOG_WIDTH = 380
    DIALOG_HEIGHT = 340


# ============================================================================
# Spacing
# ============================================================================
class Spacing:
    SMALL = 5
    MEDIUM = 10
    LARGE = 15

    CONTAINER_MARGIN = 15


# ============================================================================
# Time grid (day / week views)
# ============================================================================
class TimeGridLayout:
    TIME_GUTTER_WIDTH = 64      # hour label column
    HEADER_HEIGHT = 56          # day header row
    BLOCK_GAP = 8               # vertical gap subtracted from every job block
    BLOCK_MARGIN = 4            # horizontal margin inside the day column
    BLOCK_RADIUS = 4
    STATUS_BAR_WIDTH = 4        # left border colored by status
    SCROLL_CONTEXT = 100        # pixels above the current hour when auto-scrolling


# ============================================================================
# Month / year grids
# ============================================================================
class MonthViewLayout:
    WEEKDAY_HEADER_HEIGHT = 28
    CELL_PADDING = 4
    DAY_NUMBER_HEIGHT = 18
    CHIP_HEIGHT = 18
    CHIP_SPACING = 2


class YearViewLayout:
    COLUMNS = 4
    CARD_SPACING = 12
    CARD_PADDING = 10
    TITLE_HEIGHT = 22
    CHIP_HEIGHT = 18
    CHIP_SPACING = 2
    CARD_RADIUS = 8


# ============================================================================
# Timers (ms)
# ============================================================================
class Timer:
    SINGLE_SHOT_DELAY = 0
    CURRENT_TIME_REFRESH = 60 * 1000
