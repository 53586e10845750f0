from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from timeoff.ledger import DEDUCTING_TYPES, Allocation, TimeOffEntry, TimeOffType, YearLedger


def hours_to_days(hours: float, hours_per_day: float) -> float:
    """Hours expressed in workdays, rounded to 2 decimals for display."""
    if hours_per_day <= 0.0:
        raise ValueError(f"hours_per_day must be positive; got {hours_per_day}.")
    return round(hours / hours_per_day, 2)


@dataclass(frozen=True, slots=True)
class Balance:
    """
    Used and remaining hours derived from one ledger snapshot.

    ``remaining_hours`` is never clamped: a negative value means more time
    was booked than allocated.
    """

    allocation: Allocation
    used_hours: Mapping[TimeOffType, float]
    remaining_hours: Mapping[TimeOffType, float]
    stat_holidays: tuple[TimeOffEntry, ...]

    @property
    def stat_count(self) -> int:
        return len(self.stat_holidays)

    def is_overdrawn(self, kind: TimeOffType | str) -> bool:
        return self.remaining_hours[TimeOffType(kind)] < 0.0

    def remaining_days(self, kind: TimeOffType | str, hours_per_day: float) -> float:
        return hours_to_days(self.remaining_hours[TimeOffType(kind)], hours_per_day)

    def allocated_days(self, kind: TimeOffType | str, hours_per_day: float) -> float:
        return hours_to_days(self.allocation[kind], hours_per_day)


def used_hours(entries: tuple[TimeOffEntry, ...], kind: TimeOffType) -> float:
    return sum((e.hours for e in entries if e.type is kind), 0.0)


def compute_balance(ledger: YearLedger) -> Balance:
    used = {kind: used_hours(ledger.entries, kind) for kind in DEDUCTING_TYPES}
    remaining = {kind: ledger.allocation[kind] - used[kind] for kind in DEDUCTING_TYPES}
    return Balance(
        allocation=ledger.allocation,
        used_hours=MappingProxyType(used),
        remaining_hours=MappingProxyType(remaining),
        stat_holidays=tuple(e for e in ledger.entries if e.type is TimeOffType.STAT),
    )
