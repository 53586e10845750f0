"""
timeoff.balance
~~~~~~~~~~~~~~~

Used and remaining hours per category, derived on demand from a ledger.

Basic usage::

    from timeoff.balance import compute_balance, hours_to_days

    balance = compute_balance(repo.get(2024))
    balance.remaining_hours[TimeOffType.VACATION]     # → 93.0
    hours_to_days(93.0, 7.75)                         # → 12.0
"""

from timeoff.balance.balance import Balance, compute_balance, hours_to_days, used_hours

__all__ = ["Balance", "compute_balance", "hours_to_days", "used_hours"]
