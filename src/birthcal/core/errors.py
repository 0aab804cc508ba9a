class BirthcalError(Exception):
    """Base error."""

class InvalidDateError(BirthcalError, ValueError):
    """Raised for malformed date/time strings or dates that do not exist in their calendar."""

class InvalidPersonError(BirthcalError, ValueError):
    """Raised when a person record is missing fields or carries unknown enum values."""

class ConverterUnavailableError(BirthcalError):
    """Raised when a lunar/solar converter name is not registered."""

class ReferenceBeforeBirthError(BirthcalError, ValueError):
    """Raised when an elapsed-time query ends before the birth instant."""
