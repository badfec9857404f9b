class MebcalError(Exception):
    """Base error."""

class InvalidHijriDate(MebcalError, ValueError):
    """Raised for a Hijri month/day outside the arithmetic calendar's bounds."""

class RuleUnsatisfiable(MebcalError, ValueError):
    """Raised when a requested weekday/week occurrence does not exist in the month."""

class MalformedYearInput(MebcalError, ValueError):
    """Raised at the CLI boundary for a year argument that is not an integer."""

class StorageError(MebcalError):
    """Raised when the event store cannot read or write."""
