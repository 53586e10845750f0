from __future__ import annotations

from datetime import date
from typing import Sequence, Union

import numpy as np

from ._exceptions import CalendarError

DateLike = Union[date, str, np.datetime64]
ArrayLike = Union[DateLike, "np.ndarray", Sequence[DateLike]]


def as_day(value: DateLike) -> date:
    """Coerce a date, ISO ``YYYY-MM-DD`` string or datetime64 to ``date``."""
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    if not isinstance(value, (str, np.datetime64)):
        raise CalendarError(f"Not a calendar date: {value!r}.")
    day = _as_days(value)[0].item()
    # item() falls back to an int outside the range of datetime.date
    if not isinstance(day, date):
        raise CalendarError(f"Date out of range: {value!r}.")
    return day


def _as_days(value: ArrayLike) -> np.ndarray:
    try:
        days = np.atleast_1d(np.asarray(value, dtype="datetime64[D]"))
    except (TypeError, ValueError) as exc:
        raise CalendarError(f"Not a calendar date: {value!r}.") from exc
    # numpy parses "" as NaT
    if np.isnat(days).any():
        raise CalendarError(f"Not a calendar date: {value!r}.")
    return days


class BusinessCalendar:
    """
    Weekly working-day mask, anchored on Monday.

    ``count()`` is inclusive at both ends and vectorised through
    ``numpy.busday_count``; no public holidays are consulted.
    """

    DAYS_PER_WEEK: int = 7

    def __init__(self, pattern: Sequence[int] = (1, 1, 1, 1, 1, 0, 0)) -> None:
        if not pattern:
            raise CalendarError("Pattern must not be empty.")
        if len(pattern) != self.DAYS_PER_WEEK:
            raise CalendarError(
                f"Pattern must have {self.DAYS_PER_WEEK} entries; got {len(pattern)}."
            )
        for w in pattern:
            if w not in (0, 1):
                raise CalendarError(f"Pattern weights must be 0 or 1; got {w}.")
        if not any(pattern):
            raise CalendarError("At least one day of the week must be a working day.")

        self._pattern: tuple[int, ...] = tuple(int(w) for w in pattern)
        self._weekmask: np.ndarray = np.array(self._pattern, dtype=bool)

    # ── counting ─────────────────────────────────────────────────────────

    def count(self, start: ArrayLike, end: ArrayLike) -> Union[int, np.ndarray]:
        """Working days in ``[start, end]``; zero where ``start > end``."""
        scalar = np.ndim(start) == 0 and np.ndim(end) == 0
        s, e = np.broadcast_arrays(_as_days(start), _as_days(end))

        # busday_count is half-open and goes negative for inverted ranges.
        counts = np.busday_count(s, e + np.timedelta64(1, "D"), weekmask=self._weekmask)
        result = np.where(s <= e, counts, 0).astype(np.int64)
        return int(result.flat[0]) if scalar else result

    def is_business_day(self, day: ArrayLike) -> Union[bool, np.ndarray]:
        result = np.is_busday(_as_days(day), weekmask=self._weekmask)
        return bool(result.flat[0]) if np.ndim(day) == 0 else result

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def pattern(self) -> tuple[int, ...]:
        return self._pattern

    @property
    def work_days_per_week(self) -> int:
        return sum(self._pattern)

    def __repr__(self) -> str:
        return (
            f"BusinessCalendar(pattern={list(self._pattern)}, "
            f"work_days_per_week={self.work_days_per_week})"
        )


WORK_WEEK = BusinessCalendar()


def count_business_days(start: DateLike, end: DateLike) -> int:
    """Mon-Fri days between ``start`` and ``end`` inclusive."""
    return int(WORK_WEEK.count(start, end))
