"""
timeoff
~~~~~~~

Paid-time-off bookkeeping for one person: yearly allocations per category,
booked entries, derived balances and month grids for drawing a calendar.

Subpackages
-----------
timeoff.calendar  Business-day counting and month layouts.
timeoff.ledger    Allocations, entries, per-year ledgers and the repository.
timeoff.balance   Used and remaining hours derived from a ledger.
timeoff.tracker   Session facade with year selection.
"""

from timeoff.config import Settings, configure_logging, get_settings
from timeoff.ledger import EntryDraft, TimeOffType
from timeoff.tracker import TimeOffTracker

__all__ = [
    "EntryDraft",
    "Settings",
    "TimeOffTracker",
    "TimeOffType",
    "configure_logging",
    "get_settings",
]
