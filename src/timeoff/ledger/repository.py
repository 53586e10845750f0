from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Union

from timeoff.calendar import WORK_WEEK, BusinessCalendar

from ._exceptions import LedgerError
from .entry import EntryDraft, TimeOffEntry, build_entry
from .ledger import Allocation, YearLedger

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a repository command: applied, or a no-op with a reason."""

    applied: bool
    reason: Optional[str] = None
    entry: Optional[TimeOffEntry] = None

    def __bool__(self) -> bool:
        return self.applied

    @classmethod
    def ok(cls, entry: Optional[TimeOffEntry] = None) -> "CommandResult":
        return cls(applied=True, entry=entry)

    @classmethod
    def noop(cls, reason: str) -> "CommandResult":
        return cls(applied=False, reason=reason)


class LedgerRepository:
    """
    Year-keyed store of ledgers.

    Reading a year that was never written yields a fresh default ledger
    without storing it; a year is only stored once a command changes it.
    """

    def __init__(
        self,
        default_allocation: Optional[Allocation] = None,
        calendar: BusinessCalendar = WORK_WEEK,
    ) -> None:
        self._ledgers: dict[int, YearLedger] = {}
        self._default_allocation = default_allocation or Allocation()
        self._calendar = calendar

    # ── queries ──────────────────────────────────────────────────────────

    def get(self, year: int) -> YearLedger:
        ledger = self._ledgers.get(year)
        if ledger is None:
            return YearLedger(allocation=self._default_allocation)
        return ledger

    @property
    def years(self) -> frozenset[int]:
        return frozenset(self._ledgers)

    @property
    def default_allocation(self) -> Allocation:
        return self._default_allocation

    @property
    def calendar(self) -> BusinessCalendar:
        return self._calendar

    def __contains__(self, year: object) -> bool:
        return year in self._ledgers

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ledgers))

    # ── commands ─────────────────────────────────────────────────────────

    def _store(self, year: int, ledger: YearLedger) -> None:
        # whole-ledger replacement; readers never see a partial update
        self._ledgers[year] = ledger

    def set_allocation(
        self,
        year: int,
        allocation: Union[Allocation, Mapping[str, Any]],
    ) -> CommandResult:
        current = self.get(year)
        if not isinstance(allocation, Allocation):
            try:
                allocation = Allocation.from_mapping(allocation, base=current.allocation)
            except LedgerError as exc:
                logger.debug("Allocation for %s ignored: %s", year, exc)
                return CommandResult.noop(str(exc))
        self._store(year, current.with_allocation(allocation))
        logger.info("Allocation for %s set to %s", year, allocation.as_dict())
        return CommandResult.ok()

    def add_entry(self, year: int, draft: EntryDraft) -> CommandResult:
        try:
            entry = build_entry(draft, calendar=self._calendar)
        except LedgerError as exc:
            logger.debug("Entry for %s ignored: %s", year, exc)
            return CommandResult.noop(str(exc))
        self._store(year, self.get(year).add_entry(entry))
        logger.info(
            "Added %s entry %d for %s (%s..%s, %.2f h, %d days)",
            entry.type.value, entry.id, year,
            entry.start_date, entry.end_date, entry.hours, entry.days,
        )
        return CommandResult.ok(entry)

    def remove_entry(self, year: int, entry_id: int) -> CommandResult:
        current = self.get(year)
        entry = current.get_entry(entry_id)
        if entry is None:
            logger.debug("No entry %s in %s; nothing removed", entry_id, year)
            return CommandResult.noop(f"No entry with id {entry_id} in {year}.")
        self._store(year, current.remove_entry(entry_id))
        logger.info("Removed entry %d from %s", entry_id, year)
        return CommandResult.ok(entry)

    def __repr__(self) -> str:
        return (
            f"LedgerRepository(years={sorted(self._ledgers)}, "
            f"default_allocation={self._default_allocation.as_dict()})"
        )
