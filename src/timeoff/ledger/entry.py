from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Union

from timeoff.calendar import WORK_WEEK, BusinessCalendar, CalendarError, as_day

from ._exceptions import DraftError
from .categories import TimeOffType

HoursLike = Union[float, int, str, None]
DateInput = Union[date, str, None]

# Shared by every ledger in the process so ids never collide.
_next_id = itertools.count(1)


def parse_hours(value: HoursLike) -> Optional[float]:
    """
    Parse a user-supplied hour amount.

    Returns ``None`` for a missing value (``None`` or blank string) and raises
    ``ValueError`` for anything that is not a finite number.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not a number of hours: {value!r}.")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    hours = float(value)
    if not math.isfinite(hours):
        raise ValueError(f"Hours must be finite; got {value!r}.")
    return hours


def _parse_type(value: Union[TimeOffType, str]) -> TimeOffType:
    try:
        return TimeOffType(value)
    except ValueError as exc:
        raise DraftError(f"Unknown time-off type {value!r}.") from exc


def _parse_date(value: DateInput, field: str) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise DraftError(f"{field} is required.")
    try:
        return as_day(value.strip() if isinstance(value, str) else value)
    except CalendarError as exc:
        raise DraftError(f"{field}: {exc}") from exc


@dataclass(frozen=True, slots=True)
class TimeOffEntry:
    """A booked block of time off. Immutable once created."""

    id: int
    start_date: date
    end_date: date
    description: str
    type: TimeOffType
    hours: float
    days: int

    @property
    def deducts(self) -> bool:
        return self.type.deducts

    @property
    def is_single_day(self) -> bool:
        return self.start_date == self.end_date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True, slots=True)
class EntryDraft:
    """Unvalidated entry input as collected from a form."""

    start_date: DateInput = None
    end_date: DateInput = None
    description: str = ""
    type: Union[TimeOffType, str] = TimeOffType.VACATION
    hours: HoursLike = None

    def with_type(self, type: Union[TimeOffType, str]) -> "EntryDraft":
        """Switch category; stat drafts carry zero hours, others start blank."""
        kind = _parse_type(type)
        return replace(self, type=kind, hours=0.0 if kind is TimeOffType.STAT else None)

    def suggested_hours(
        self,
        hours_per_day: float,
        calendar: BusinessCalendar = WORK_WEEK,
    ) -> Optional[float]:
        """Business days in the range times ``hours_per_day``, once both dates are set."""
        try:
            kind = _parse_type(self.type)
            start = _parse_date(self.start_date, "start_date")
            end = _parse_date(self.end_date, "end_date")
        except DraftError:
            return None
        if not kind.deducts:
            return None
        return int(calendar.count(start, end)) * hours_per_day


def build_entry(draft: EntryDraft, calendar: BusinessCalendar = WORK_WEEK) -> TimeOffEntry:
    """Validate ``draft`` and turn it into an entry, or raise ``DraftError``."""
    start = _parse_date(draft.start_date, "start_date")
    end = _parse_date(draft.end_date, "end_date")
    if start > end:
        raise DraftError(f"start_date {start} is after end_date {end}.")
    kind = _parse_type(draft.type)

    if kind.deducts:
        try:
            hours = parse_hours(draft.hours)
        except (TypeError, ValueError) as exc:
            raise DraftError(f"hours: {exc}") from exc
        if hours is None:
            raise DraftError(f"hours are required for {kind.value} time off.")
        if hours < 0.0:
            raise DraftError(f"hours must be non-negative; got {hours}.")
    else:
        hours = 0.0

    return TimeOffEntry(
        id=next(_next_id),
        start_date=start,
        end_date=end,
        description=draft.description or "",
        type=kind,
        hours=hours,
        days=int(calendar.count(start, end)),
    )
