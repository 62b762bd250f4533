# navigation_state.py
"""
Anchor date and granularity of the calendar screen.

The record is only changed through previous/next/today/granularity calls;
views read it through ``to_view_state()`` and recompute from jobs already in
memory. Nothing here is persisted: a new calendar starts at today.
"""
import calendar
import datetime
import logging
from dataclasses import dataclass

from dateutil.relativedelta import relativedelta

from config import DEFAULT_VIEW, DEFAULT_WEEK_START
from error_messages import InvalidGranularityError, NavigationRangeError
from views.time_buckets import start_of_week, month_grid_range

logger = logging.getLogger(__name__)


class Granularity:
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    ALL = (DAY, WEEK, MONTH, YEAR)

    @classmethod
    def validate(cls, value):
        if value not in cls.ALL:
            raise InvalidGranularityError(f"Unknown calendar view: {value!r}")
        return value


@dataclass(frozen=True)
class ViewState:
    anchor_date: datetime.date
    granularity: str


def visible_range(anchor_date, granularity, week_start=DEFAULT_WEEK_START):
    """First and last date shown for the anchor in the given view."""
    if granularity == Granularity.DAY:
        return anchor_date, anchor_date
    if granularity == Granularity.WEEK:
        first = start_of_week(anchor_date, week_start)
        return first, first + datetime.timedelta(days=6)
    if granularity == Granularity.MONTH:
        return month_grid_range(anchor_date.year, anchor_date.month, week_start)
    if granularity == Granularity.YEAR:
        return datetime.date(anchor_date.year, 1, 1), datetime.date(anchor_date.year, 12, 31)
    raise InvalidGranularityError(f"Unknown calendar view: {granularity!r}")


class NavigationState:
    def __init__(self, anchor_date=None, granularity=DEFAULT_VIEW,
                 week_start=DEFAULT_WEEK_START, today_provider=None):
        self._today_provider = today_provider or datetime.date.today
        self._week_start = week_start
        self._granularity = Granularity.validate(granularity)
        self._anchor_date = anchor_date if anchor_date is not None else self._today_provider()
        # Day of month to return to after clamping (Jan 31 -> Feb 29 -> Jan 31)
        self._preferred_day = None
        self._listeners = []

    @property
    def anchor_date(self):
        return self._anchor_date

    @property
    def granularity(self):
        return self._granularity

    @property
    def week_start(self):
        return self._week_start

    def to_view_state(self):
        return ViewState(self._anchor_date, self._granularity)

    def visible_range(self):
        return visible_range(self._anchor_date, self._granularity, self._week_start)

    def add_listener(self, callback):
        """``callback(view_state)`` runs after every change."""
        self._listeners.append(callback)

    def _notify(self):
        state = self.to_view_state()
        for callback in list(self._listeners):
            callback(state)

    # ---------------------------
    # Navigation
    # ---------------------------
    def next(self):
        self._step(1)

    def previous(self):
        self._step(-1)

    def go_to_today(self):
        self._apply(self._today_provider(), preferred_day=None)

    def go_to_date(self, date_obj):
        if isinstance(date_obj, datetime.datetime):
            date_obj = date_obj.date()
        self._apply(date_obj, preferred_day=None)

    def set_granularity(self, granularity):
        granularity = Granularity.validate(granularity)
        if granularity == self._granularity:
            return
        self._check_renderable(self._anchor_date, granularity)
        self._granularity = granularity
        logger.debug("Calendar view changed to %s", granularity)
        self._notify()

    def _step(self, direction):
        anchor = self._anchor_date
        preferred_day = None
        try:
            if self._granularity == Granularity.DAY:
                new_anchor = anchor + datetime.timedelta(days=direction)
            elif self._granularity == Granularity.WEEK:
                new_anchor = anchor + datetime.timedelta(days=7 * direction)
            else:
                months = direction if self._granularity == Granularity.MONTH else 12 * direction
                preferred_day = self._preferred_day or anchor.day
                first_of_month = anchor.replace(day=1) + relativedelta(months=months)
                last_day = calendar.monthrange(first_of_month.year, first_of_month.month)[1]
                new_anchor = first_of_month.replace(day=min(preferred_day, last_day))
        except (OverflowError, ValueError) as e:
            raise NavigationRangeError(f"Cannot move the calendar past {anchor.isoformat()}: {e}") from e
        self._apply(new_anchor, preferred_day=preferred_day)

    def _apply(self, new_anchor, preferred_day):
        self._check_renderable(new_anchor, self._granularity)
        self._anchor_date = new_anchor
        if preferred_day is not None and preferred_day == new_anchor.day:
            # Nothing was clamped; no need to remember the day
            preferred_day = None
        self._preferred_day = preferred_day
        self._notify()

    def _check_renderable(self, anchor, granularity):
        try:
            _, last = visible_range(anchor, granularity, self._week_start)
            # The layout needs the midnight after the last visible day
            last + datetime.timedelta(days=1)
        except (OverflowError, ValueError) as e:
            raise NavigationRangeError(f"Date {anchor.isoformat()} cannot be shown in {granularity} view") from e
