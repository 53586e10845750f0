"""
tests/tracker/test_tracker.py

Covers:
  - The end-to-end scenarios: business-day count, vacation booking, stat
    holiday, date lookup, removal, reading an untouched year
  - Year selection and relative navigation
  - Commands and queries defaulting to the selected year
  - Month grids and cells through the facade
  - Settings-driven defaults (hours per day, allocation, first weekday)
"""

from datetime import date

import pytest

from timeoff.calendar import count_business_days
from timeoff.config import Settings
from timeoff.ledger import EntryDraft, LedgerRepository, TimeOffType
from timeoff.tracker import TimeOffTracker, YearView


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def tracker():
    return TimeOffTracker(settings=Settings(), year=2024)


@pytest.fixture
def vacation():
    """Mon 3 – Wed 5 June 2024."""
    return EntryDraft("2024-06-03", "2024-06-05", "beach", "vacation", "23.25")


@pytest.fixture
def christmas():
    return EntryDraft("2024-12-25", "2024-12-25", "Christmas", "stat")


# ── Scenarios ─────────────────────────────────────────────────────────────────

class TestScenarios:

    def test_monday_to_friday_is_five_days(self):
        assert count_business_days("2024-06-03", "2024-06-07") == 5

    def test_vacation_booking(self, tracker, vacation):
        result = tracker.add_entry(vacation)
        assert result.applied
        view = tracker.get_year_view()
        assert view.used_hours[TimeOffType.VACATION] == pytest.approx(23.25)
        assert view.remaining_hours[TimeOffType.VACATION] == pytest.approx(93.00)
        assert result.entry.days == 3

    def test_stat_holiday(self, tracker, christmas):
        before = tracker.get_year_view()
        tracker.add_entry(christmas)
        after = tracker.get_year_view()
        assert after.stat_count == 1
        assert dict(after.remaining_hours) == dict(before.remaining_hours)
        assert dict(after.used_hours) == dict(before.used_hours)

    def test_lookup_by_date(self, tracker, vacation):
        entry = tracker.add_entry(vacation).entry
        assert tracker.get_entries_for_date("2024-06-04") == (entry,)

    def test_remove_restores_balance(self, tracker, vacation):
        entry = tracker.add_entry(vacation).entry
        assert tracker.remove_entry(entry.id).applied
        view = tracker.get_year_view()
        assert view.used_hours[TimeOffType.VACATION] == pytest.approx(0.0)
        assert entry not in view.entries

    def test_untouched_year(self, tracker):
        view = tracker.get_year_view(2030)
        assert view.allocation.as_dict() == {
            "vacation": 116.25,
            "personal": 23.25,
            "floater": 15.5,
        }
        assert view.entries == ()
        assert 2030 not in tracker.repository.years


# ── Year navigation ───────────────────────────────────────────────────────────

class TestYearNavigation:

    def test_defaults_to_current_year(self):
        assert TimeOffTracker(settings=Settings()).year == date.today().year

    def test_select_year(self, tracker):
        assert tracker.select_year(2026) == 2026
        assert tracker.year == 2026

    def test_shift_year(self, tracker):
        assert tracker.shift_year(1) == 2025
        assert tracker.shift_year(-2) == 2023

    def test_navigation_does_not_store_years(self, tracker):
        for _ in range(5):
            tracker.shift_year(1)
            tracker.get_year_view()
            tracker.get_month_cells(1)
        for _ in range(10):
            tracker.shift_year(-1)
            tracker.get_year_view()
        assert tracker.repository.years == frozenset()

    def test_commands_follow_selected_year(self, tracker, vacation):
        tracker.select_year(2025)
        tracker.add_entry(vacation)
        assert tracker.repository.years == frozenset({2025})
        assert tracker.get_year_view().entries
        assert tracker.get_year_view(2024).entries == ()

    def test_view_is_tagged_with_year(self, tracker):
        view = tracker.get_year_view()
        assert isinstance(view, YearView)
        assert view.year == 2024


# ── Commands ──────────────────────────────────────────────────────────────────

class TestCommands:

    def test_invalid_draft_reports_noop(self, tracker):
        result = tracker.add_entry(EntryDraft("2024-06-03", "2024-06-05", hours="lots"))
        assert not result.applied
        assert result.reason
        assert tracker.get_year_view().entries == ()

    def test_inverted_range_rejected(self, tracker):
        assert not tracker.add_entry(EntryDraft("2024-06-07", "2024-06-03", hours=7.75))

    def test_set_allocation(self, tracker, vacation):
        tracker.add_entry(vacation)
        assert tracker.set_allocation({"vacation": "20"}).applied
        view = tracker.get_year_view()
        assert view.remaining_hours[TimeOffType.VACATION] == pytest.approx(-3.25)

    def test_set_allocation_blank_is_zero(self, tracker):
        tracker.set_allocation({"personal": ""})
        assert tracker.get_year_view().allocation.personal == 0.0

    def test_remove_unknown_is_noop(self, tracker):
        assert not tracker.remove_entry(123456789).applied

    def test_entries_sorted_in_view(self, tracker):
        for start in ("2024-09-02", "2024-01-15", "2024-05-20"):
            tracker.add_entry(EntryDraft(start, start, hours=7.75))
        starts = [e.start_date for e in tracker.get_year_view().entries]
        assert starts == sorted(starts)


# ── Grid queries ──────────────────────────────────────────────────────────────

class TestGrid:

    def test_month_grid_uses_selected_year(self, tracker):
        grid = tracker.get_month_grid(6)
        assert (grid.year, grid.days_in_month, grid.leading_blank_cells) == (2024, 30, 6)

    def test_monday_first_from_settings(self):
        tracker = TimeOffTracker(settings=Settings(first_weekday=0), year=2024)
        assert tracker.get_month_grid(6).leading_blank_cells == 5
        assert tracker.get_weekday_names()[0] == "Mon"

    def test_month_cells(self, tracker, vacation):
        entry = tracker.add_entry(vacation).entry
        cells = tracker.get_month_cells(6)
        assert [c.day.day for c in cells if c.entries] == [3, 4, 5]
        assert cells[3].entries == (entry,)


# ── Settings ──────────────────────────────────────────────────────────────────

class TestSettings:

    def test_hours_per_day(self, tracker):
        assert tracker.hours_per_day == 7.75
        assert tracker.hours_to_days(23.25) == 3.0

    def test_custom_hours_per_day(self):
        tracker = TimeOffTracker(settings=Settings(hours_per_day=8.0), year=2024)
        assert tracker.hours_to_days(20.0) == 2.5

    def test_suggest_hours(self, tracker):
        assert tracker.suggest_hours(EntryDraft("2024-06-03", "2024-06-07")) == pytest.approx(38.75)
        assert tracker.suggest_hours(EntryDraft("2024-06-03", "")) is None

    def test_default_allocation_from_settings(self):
        settings = Settings(default_vacation_hours=155.0, default_floater_hours=0.0)
        tracker = TimeOffTracker(settings=settings, year=2024)
        allocation = tracker.get_year_view().allocation
        assert allocation.vacation == 155.0
        assert allocation.personal == 23.25
        assert allocation.floater == 0.0

    def test_explicit_repository_is_used(self):
        repo = LedgerRepository()
        tracker = TimeOffTracker(repository=repo, settings=Settings(), year=2024)
        tracker.set_allocation({"vacation": 1})
        assert repo.years == frozenset({2024})

    def test_repr(self, tracker):
        assert "TimeOffTracker(year=2024" in repr(tracker)
