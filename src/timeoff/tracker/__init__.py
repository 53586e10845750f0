"""
timeoff.tracker
~~~~~~~~~~~~~~~

The read/write surface a presentation layer drives: a selected year,
derived year views, month grids and the ledger commands.

Basic usage::

    from timeoff.tracker import TimeOffTracker
    from timeoff.ledger import EntryDraft

    tracker = TimeOffTracker(year=2024)
    tracker.add_entry(EntryDraft("2024-12-25", "2024-12-25", "Christmas", "stat"))
    tracker.get_year_view().stat_count      # → 1
    tracker.shift_year(+1)                   # → 2025
"""

from timeoff.tracker.tracker import TimeOffTracker, YearView

__all__ = ["TimeOffTracker", "YearView"]
