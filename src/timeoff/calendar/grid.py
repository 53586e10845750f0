from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Any, Protocol, Sequence, TypeVar

import numpy as np

from ._exceptions import CalendarError
from .businessdays import WORK_WEEK, BusinessCalendar, DateLike, as_day

SUNDAY = calendar.SUNDAY

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_DAY_ABBR: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class Span(Protocol):
    @property
    def start_date(self) -> date: ...

    @property
    def end_date(self) -> date: ...


S = TypeVar("S", bound=Span)


@dataclass(frozen=True, slots=True)
class MonthGrid:
    year: int
    month: int
    days_in_month: int
    leading_blank_cells: int

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)


@dataclass(frozen=True, slots=True)
class DayCell:
    day: date
    is_weekend: bool
    entries: tuple[Any, ...]

    @property
    def is_empty(self) -> bool:
        return not self.entries


def _check_weekday(first_weekday: int) -> None:
    if not 0 <= first_weekday <= 6:
        raise CalendarError(f"first_weekday must be in 0..6; got {first_weekday}.")


def weekday_names(first_weekday: int = SUNDAY) -> tuple[str, ...]:
    """Column headers for a week starting on ``first_weekday`` (0 = Monday)."""
    _check_weekday(first_weekday)
    return _DAY_ABBR[first_weekday:] + _DAY_ABBR[:first_weekday]


def month_grid(year: int, month: int, first_weekday: int = SUNDAY) -> MonthGrid:
    """
    Layout of one month.

    ``leading_blank_cells`` is the column of day 1 in a week that starts on
    ``first_weekday``; with the default Sunday start a month beginning on a
    Saturday has six blanks.
    """
    if not 1 <= month <= 12:
        raise CalendarError(f"Month must be in 1..12; got {month}.")
    _check_weekday(first_weekday)
    weekday_of_first, days_in_month = calendar.monthrange(year, month)
    return MonthGrid(
        year=year,
        month=month,
        days_in_month=days_in_month,
        leading_blank_cells=(weekday_of_first - first_weekday) % 7,
    )


def entries_for_date(entries: Sequence[S], day: DateLike) -> tuple[S, ...]:
    """Entries whose inclusive range covers ``day``, in their stored order."""
    d = as_day(day)
    return tuple(e for e in entries if e.start_date <= d <= e.end_date)


def month_cells(
    entries: Sequence[S],
    year: int,
    month: int,
    business_calendar: BusinessCalendar = WORK_WEEK,
) -> tuple[DayCell, ...]:
    """One cell per day of the month with its overlapping entries."""
    grid = month_grid(year, month)
    first = np.datetime64(grid.first_day, "D")
    days = first + np.arange(grid.days_in_month)

    starts = np.array([e.start_date for e in entries], dtype="datetime64[D]")
    ends = np.array([e.end_date for e in entries], dtype="datetime64[D]")

    # rows: days of the month, columns: entries
    covered = (starts[None, :] <= days[:, None]) & (ends[None, :] >= days[:, None])
    working = business_calendar.is_business_day(days)

    return tuple(
        DayCell(
            day=days[i].item(),
            is_weekend=not bool(working[i]),
            entries=tuple(entries[j] for j in np.flatnonzero(covered[i])),
        )
        for i in range(grid.days_in_month)
    )
