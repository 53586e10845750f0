from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Optional

from ._exceptions import AllocationError
from .categories import TimeOffType
from .entry import TimeOffEntry, parse_hours


@dataclass(frozen=True, slots=True)
class Allocation:
    """Hours granted per deducting category for one year."""

    vacation: float = 116.25
    personal: float = 23.25
    floater: float = 15.5

    def __post_init__(self) -> None:
        for f in fields(self):
            hours = getattr(self, f.name)
            if not math.isfinite(hours):
                raise AllocationError(f"{f.name} must be finite; got {hours}.")
            if hours < 0.0:
                raise AllocationError(f"{f.name} must be non-negative; got {hours}.")

    def __getitem__(self, kind: TimeOffType | str) -> float:
        kind = TimeOffType(kind)
        if not kind.deducts:
            return 0.0
        return getattr(self, kind.value)

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, Any],
        base: Optional["Allocation"] = None,
    ) -> "Allocation":
        """
        Build an allocation from loosely typed input.

        Missing keys keep the value from ``base``; a blank value counts as
        zero hours. Unknown keys, non-numeric and negative values raise
        ``AllocationError``.
        """
        base = base if base is not None else cls()
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise AllocationError(f"Unknown allocation categories: {sorted(unknown)}.")

        updates: dict[str, float] = {}
        for name, raw in values.items():
            try:
                hours = parse_hours(raw)
            except (TypeError, ValueError) as exc:
                raise AllocationError(f"{name}: {exc}") from exc
            hours = 0.0 if hours is None else hours
            if hours < 0.0:
                raise AllocationError(f"{name} must be non-negative; got {hours}.")
            updates[name] = hours
        return replace(base, **updates)


@dataclass(frozen=True, slots=True)
class YearLedger:
    """
    Allocation plus booked entries for one calendar year.

    Entries are kept sorted by start date; entries sharing a start date keep
    the order in which they were added. Every mutator returns a new ledger.
    """

    allocation: Allocation = field(default_factory=Allocation)
    entries: tuple[TimeOffEntry, ...] = ()

    def add_entry(self, entry: TimeOffEntry) -> "YearLedger":
        # sorted() is stable, so ties stay in insertion order
        entries = sorted(self.entries + (entry,), key=lambda e: e.start_date)
        return replace(self, entries=tuple(entries))

    def remove_entry(self, entry_id: int) -> "YearLedger":
        return replace(self, entries=tuple(e for e in self.entries if e.id != entry_id))

    def with_allocation(self, allocation: Allocation) -> "YearLedger":
        return replace(self, allocation=allocation)

    def get_entry(self, entry_id: int) -> Optional[TimeOffEntry]:
        return next((e for e in self.entries if e.id == entry_id), None)

    def __contains__(self, entry_id: object) -> bool:
        return any(e.id == entry_id for e in self.entries)

