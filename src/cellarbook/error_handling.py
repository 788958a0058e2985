"""
Standardized Error Handling for Cellarbook

Exception taxonomy for rejected wine fields. Every rejection names the
field it belongs to, so a caller can re-prompt that field alone.
"""

from typing import Any, Optional

from cellarbook.constants import Messages, WineType
from cellarbook.config import MIN_AGE_MONTHS


class CellarError(Exception):
    """Base exception for Cellarbook application."""
    pass


class WineValidationError(CellarError):
    """A raw field value was rejected."""

    def __init__(self, field: str, value: Any = None, message: Optional[str] = None):
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for {field}: {value!r}"
        super().__init__(self.message)


class InvalidWineType(WineValidationError):
    """Type text is not one of the WineType names."""

    def __init__(self, value: Any):
        choices = ", ".join(WineType.names())
        super().__init__("type", value, Messages.INVALID_TYPE.format(choices=choices))


class InvalidYearFormat(WineValidationError):
    """Year text is not an integer."""

    def __init__(self, value: Any):
        super().__init__("year", value, Messages.INVALID_YEAR_FORMAT)


class WineTooYoung(WineValidationError):
    """Year parses but the wine is younger than the minimum age."""

    def __init__(self, year: int):
        self.year = year
        super().__init__("year", year, Messages.WINE_TOO_YOUNG.format(months=MIN_AGE_MONTHS))


class OtherValidationError(WineValidationError):
    """Any other rejection, e.g. a mandatory field missing from the input."""
    pass


# Export key functions and classes
__all__ = [
    'CellarError',
    'WineValidationError',
    'InvalidWineType',
    'InvalidYearFormat',
    'WineTooYoung',
    'OtherValidationError',
]
