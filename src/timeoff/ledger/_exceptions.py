class LedgerError(ValueError):
    """Base class for rejected ledger input."""


class DraftError(LedgerError):
    """An entry draft is incomplete or malformed."""


class AllocationError(LedgerError):
    """An allocation value is not a usable number of hours."""
