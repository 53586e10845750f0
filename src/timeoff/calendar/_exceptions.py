class CalendarError(ValueError):
    """Raised for invalid week masks or out-of-range calendar queries."""
