"""
timeoff.ledger
~~~~~~~~~~~~~~

Per-year allocation and booked time off.

Basic usage::

    from timeoff.ledger import EntryDraft, LedgerRepository

    repo = LedgerRepository()
    result = repo.add_entry(2024, EntryDraft("2024-06-03", "2024-06-05", hours=23.25))
    result.applied          # → True
    repo.get(2024).entries  # → (TimeOffEntry(id=..., days=3, ...),)

Invalid drafts are not errors at the repository level: the command returns a
``CommandResult`` with ``applied=False`` and the reason.

Public API
----------
TimeOffType       Closed set of categories (vacation, personal, floater, stat).
DESCRIPTORS       Static label/colour/icon table keyed by TimeOffType.
Allocation        Hours granted per deducting category.
TimeOffEntry      Immutable booked block of time off.
EntryDraft        Unvalidated entry input.
build_entry       Validate a draft into an entry (raises DraftError).
YearLedger        Allocation plus sorted entries for one year.
LedgerRepository  Year-keyed store with lazy defaults.
CommandResult     Applied / no-op outcome of a repository command.
LedgerError       Base exception; DraftError and AllocationError derive from it.
"""

from __future__ import annotations

from timeoff.ledger._exceptions import AllocationError, DraftError, LedgerError
from timeoff.ledger.categories import (
    DEDUCTING_TYPES,
    DESCRIPTORS,
    TimeOffType,
    TypeDescriptor,
)
from timeoff.ledger.entry import EntryDraft, TimeOffEntry, build_entry, parse_hours
from timeoff.ledger.ledger import Allocation, YearLedger
from timeoff.ledger.repository import CommandResult, LedgerRepository

__all__ = [
    "Allocation",
    "AllocationError",
    "CommandResult",
    "DEDUCTING_TYPES",
    "DESCRIPTORS",
    "DraftError",
    "EntryDraft",
    "LedgerError",
    "LedgerRepository",
    "TimeOffEntry",
    "TimeOffType",
    "TypeDescriptor",
    "YearLedger",
    "build_entry",
    "parse_hours",
]
