"""
timeoff.calendar
~~~~~~~~~~~~~~~~

Date arithmetic for the time-off ledger: business-day spans over a weekly
working-day mask, and the month layouts used to draw scheduled time off.

Basic usage::

    from timeoff.calendar import count_business_days, month_grid

    count_business_days("2024-06-03", "2024-06-07")   # → 5
    month_grid(2024, 6)                                # Sunday-first layout

NumPy arrays of dates are accepted by ``BusinessCalendar.count``::

    import numpy as np
    from timeoff.calendar import WORK_WEEK

    starts = np.array(["2024-06-03", "2024-06-08"], dtype="datetime64[D]")
    WORK_WEEK.count(starts, starts + 6)                # → array([5, 5])

Public API
----------
BusinessCalendar     Weekly working-day mask with inclusive counting.
count_business_days  Mon–Fri days in an inclusive range.
month_grid           Days in month and leading blank cells.
entries_for_date     Entries covering a date, in stored order.
month_cells          Per-day cells with weekend flag and overlapping entries.
CalendarError        Base exception for all calendar-related errors.
"""

from __future__ import annotations

from timeoff.calendar._exceptions import CalendarError
from timeoff.calendar.businessdays import (
    WORK_WEEK,
    BusinessCalendar,
    as_day,
    count_business_days,
)
from timeoff.calendar.grid import (
    MONTH_NAMES,
    SUNDAY,
    DayCell,
    MonthGrid,
    entries_for_date,
    month_cells,
    month_grid,
    weekday_names,
)

__all__ = [
    "BusinessCalendar",
    "CalendarError",
    "DayCell",
    "MONTH_NAMES",
    "MonthGrid",
    "SUNDAY",
    "WORK_WEEK",
    "as_day",
    "count_business_days",
    "entries_for_date",
    "month_cells",
    "month_grid",
    "weekday_names",
]
