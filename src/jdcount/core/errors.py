class JDCountError(Exception):
    """Base error."""

class NonIntegerDayNumber(JDCountError, ValueError):
    """Raised when a purported day number is not integral."""

class FractionOutOfRange(JDCountError, ValueError):
    """Raised when a purported day fraction lies outside [0, 1)."""

class UnknownFlavourError(JDCountError, KeyError):
    """Raised when a flavour name is not in the flavour table."""
