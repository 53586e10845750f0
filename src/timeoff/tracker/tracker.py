from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union

from timeoff.balance import compute_balance, hours_to_days
from timeoff.calendar import (
    DayCell,
    MonthGrid,
    entries_for_date,
    month_cells,
    month_grid,
    weekday_names,
)
from timeoff.calendar.businessdays import DateLike
from timeoff.config import Settings, get_settings
from timeoff.ledger import (
    Allocation,
    CommandResult,
    EntryDraft,
    LedgerRepository,
    TimeOffEntry,
    TimeOffType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class YearView:
    """Read-only snapshot of one year, recomputed on every request."""

    year: int
    allocation: Allocation
    used_hours: Mapping[TimeOffType, float]
    remaining_hours: Mapping[TimeOffType, float]
    entries: tuple[TimeOffEntry, ...]
    stat_holidays: tuple[TimeOffEntry, ...]

    @property
    def stat_count(self) -> int:
        return len(self.stat_holidays)


class TimeOffTracker:
    """
    Session facade for a presentation layer.

    Holds the selected year and routes queries and commands to the
    repository; every ``year`` argument defaults to the selected one.
    """

    def __init__(
        self,
        repository: Optional[LedgerRepository] = None,
        settings: Optional[Settings] = None,
        year: Optional[int] = None,
    ) -> None:
        self._settings = settings or get_settings()
        if repository is None:
            repository = LedgerRepository(
                default_allocation=Allocation(
                    vacation=self._settings.default_vacation_hours,
                    personal=self._settings.default_personal_hours,
                    floater=self._settings.default_floater_hours,
                )
            )
        self._repository = repository
        self._year: int = year if year is not None else date.today().year

    # ── year navigation ──────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._year

    def select_year(self, year: int) -> int:
        self._year = int(year)
        logger.debug("Selected year %d", self._year)
        return self._year

    def shift_year(self, delta: int) -> int:
        return self.select_year(self._year + int(delta))

    def _resolve(self, year: Optional[int]) -> int:
        return self._year if year is None else year

    # ── queries ──────────────────────────────────────────────────────────

    def get_year_view(self, year: Optional[int] = None) -> YearView:
        year = self._resolve(year)
        ledger = self._repository.get(year)
        balance = compute_balance(ledger)
        return YearView(
            year=year,
            allocation=ledger.allocation,
            used_hours=balance.used_hours,
            remaining_hours=balance.remaining_hours,
            entries=ledger.entries,
            stat_holidays=balance.stat_holidays,
        )

    def get_month_grid(self, month: int, year: Optional[int] = None) -> MonthGrid:
        return month_grid(self._resolve(year), month, self._settings.first_weekday)

    def get_weekday_names(self) -> tuple[str, ...]:
        return weekday_names(self._settings.first_weekday)

    def get_entries_for_date(
        self, day: DateLike, year: Optional[int] = None
    ) -> tuple[TimeOffEntry, ...]:
        return entries_for_date(self._repository.get(self._resolve(year)).entries, day)

    def get_month_cells(self, month: int, year: Optional[int] = None) -> tuple[DayCell, ...]:
        year = self._resolve(year)
        return month_cells(
            self._repository.get(year).entries,
            year,
            month,
            business_calendar=self._repository.calendar,
        )

    # ── commands ─────────────────────────────────────────────────────────

    def set_allocation(
        self,
        allocation: Union[Allocation, Mapping[str, Any]],
        year: Optional[int] = None,
    ) -> CommandResult:
        return self._repository.set_allocation(self._resolve(year), allocation)

    def add_entry(self, draft: EntryDraft, year: Optional[int] = None) -> CommandResult:
        return self._repository.add_entry(self._resolve(year), draft)

    def remove_entry(self, entry_id: int, year: Optional[int] = None) -> CommandResult:
        return self._repository.remove_entry(self._resolve(year), entry_id)

    # ── display helpers ──────────────────────────────────────────────────

    @property
    def hours_per_day(self) -> float:
        return self._settings.hours_per_day

    def hours_to_days(self, hours: float) -> float:
        return hours_to_days(hours, self._settings.hours_per_day)

    def suggest_hours(self, draft: EntryDraft) -> Optional[float]:
        return draft.suggested_hours(self._settings.hours_per_day, self._repository.calendar)

    @property
    def repository(self) -> LedgerRepository:
        return self._repository

    def __repr__(self) -> str:
        return (
            f"TimeOffTracker(year={self._year}, "
            f"hours_per_day={self._settings.hours_per_day}, "
            f"known_years={sorted(self._repository.years)})"
        )
