"""Pure tracker state, no UI toolkit dependencies."""

import enum
import logging
from typing import NamedTuple

from dot import Dot
from theme import Color, WHITE

LOGGER = logging.getLogger("daily_tracker.logic")

# Fixed calendar table (non-leap year).  Payloads are only ever generated
# from these two tables, so out-of-range (month, day) pairs never reach
# the tracker.
DAYS_IN_MONTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
MONTHS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

GREEN = Color.from_rgb(0.0, 1.0, 0.0)
RED = Color.from_rgb(1.0, 0.0, 0.0)


class DayState(enum.Enum):
    NONE = "none"
    POSITIVE = "positive"
    NEGATIVE = "negative"


_NEXT = {
    DayState.NONE: DayState.POSITIVE,
    DayState.POSITIVE: DayState.NEGATIVE,
    DayState.NEGATIVE: DayState.POSITIVE,
}

_COLORS = {
    DayState.NONE: WHITE,
    DayState.POSITIVE: GREEN,
    DayState.NEGATIVE: RED,
}


def next_state(state: DayState) -> DayState:
    """NONE -> POSITIVE -> NEGATIVE -> POSITIVE ...  NONE is never re-entered."""
    return _NEXT[state]


def day_color(state: DayState) -> Color:
    return _COLORS[state]


class DayPressed(NamedTuple):
    """Message emitted by a day's dot: month 0-11, day 1-31."""

    month: int
    day: int


class CalendarTracker:
    """Sparse (month, day) -> DayState map; untouched days read as NONE."""

    __slots__ = ("_days",)

    def __init__(self) -> None:
        self._days: dict[tuple[int, int], DayState] = {}

    def __len__(self) -> int:
        return len(self._days)

    def get_day(self, month: int, day: int) -> DayState:
        return self._days.get((month, day), DayState.NONE)

    def set_day(self, month: int, day: int, state: DayState) -> None:
        self._days[(month, day)] = state

    def on_day_clicked(self, month: int, day: int) -> DayState:
        """Advance one day to its next state and return the new state."""
        state = next_state(self.get_day(month, day))
        self.set_day(month, day, state)
        LOGGER.debug("day %s/%s -> %s", month, day, state.value)
        return state

    def counts(self) -> tuple[int, int]:
        """Return (positive, negative) day counts."""
        states = list(self._days.values())
        return states.count(DayState.POSITIVE), states.count(DayState.NEGATIVE)


def build_columns(tracker: CalendarTracker,
                  radius: float) -> list[tuple[str, list[Dot[DayPressed]]]]:
    """Return one (month name, dots) column per month, coloured from state.

    Dots are fresh values every call; nothing is carried over between
    renders.
    """
    columns: list[tuple[str, list[Dot[DayPressed]]]] = []
    for month, day_count in enumerate(DAYS_IN_MONTHS):
        dots = [
            Dot(radius, day_color(tracker.get_day(month, day)),
                DayPressed(month, day))
            for day in range(1, day_count + 1)
        ]
        columns.append((MONTHS[month], dots))
    return columns
