"""
Validation pipeline: raw field text in, WineRecord out.

Hard rejections (type, year) raise WineValidationError subclasses naming the
offending field so the caller can re-prompt only that field. An unparseable
rating is a soft failure: the rating is dropped and a warning recorded.
"""

import re
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from cellarbook.config import (
    MIN_AGE_MONTHS,
    NOMINAL_PRODUCTION_DAY,
    NOMINAL_PRODUCTION_MONTH,
    PREMIUM_VINTAGE_LABEL,
)
from cellarbook.constants import Messages, WineType
from cellarbook.error_handling import (
    InvalidWineType,
    InvalidYearFormat,
    OtherValidationError,
    WineTooYoung,
    WineValidationError,
)
from cellarbook.schema import PremiumVariant, RawWineFields, StandardVariant, WineRecord
from cellarbook.utils import logger, subtract_months, today as resolve_today

_INTEGER = re.compile(r"[+-]?\d+")

RawInput = Union[RawWineFields, Mapping[str, Any]]


# =======================
# FIELD PARSERS
# =======================

def parse_wine_type(text: str) -> WineType:
    """
    Match type text against WineType names, ignoring case.

    Raises:
        InvalidWineType: text is not RED, WHITE, ROSE or SPARKLING
    """
    try:
        return WineType[text.upper()]
    except (KeyError, AttributeError):
        logger.debug(f"Rejected wine type: {text!r}")
        raise InvalidWineType(text) from None


def is_old_enough(year: int, today: Optional[date] = None) -> bool:
    """
    Minimum-age rule: July 1 of the year must fall strictly before
    today minus six months.
    """
    if year < MINYEAR:
        return True
    if year > MAXYEAR:
        return False
    production_date = date(year, NOMINAL_PRODUCTION_MONTH, NOMINAL_PRODUCTION_DAY)
    cutoff = subtract_months(resolve_today(today), MIN_AGE_MONTHS)
    return production_date < cutoff


def parse_year(text: str, today: Optional[date] = None) -> int:
    """
    Parse a production year and enforce the minimum-age rule.

    Raises:
        InvalidYearFormat: text is not an integer
        WineTooYoung: the year is too recent
    """
    if not isinstance(text, str) or not _INTEGER.fullmatch(text):
        logger.debug(f"Rejected year format: {text!r}")
        raise InvalidYearFormat(text)

    try:
        year = int(text)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit
        logger.debug(f"Rejected year format: {len(text)} digit string")
        raise InvalidYearFormat(text) from None

    if not is_old_enough(year, today):
        logger.debug(f"Rejected year {year}: younger than {MIN_AGE_MONTHS} months")
        raise WineTooYoung(year)
    return year


def parse_rating(text: Optional[str], warnings: Optional[List[str]] = None) -> Optional[float]:
    """
    Parse an optional rating. Empty or unparseable text yields None.

    Never raises; an unparseable value is logged, noted in warnings
    (when given) and dropped.
    """
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        logger.warning(f"Unparseable rating {text!r}, storing wine as unrated")
        if warnings is not None:
            warnings.append(Messages.INVALID_RATING)
        return None


# =======================
# RECORD BUILDING
# =======================

def _coerce_raw(raw: RawInput) -> RawWineFields:
    if isinstance(raw, RawWineFields):
        return raw
    try:
        return RawWineFields.model_validate(dict(raw))
    except ValidationError as e:
        first = e.errors()[0]
        field_name = str(first["loc"][0]) if first.get("loc") else "fields"
        logger.debug(f"Raw fields rejected: {e}")
        if first.get("type") == "missing":
            message = Messages.MISSING_FIELD.format(field=field_name)
        else:
            message = first.get("msg")
        raise OtherValidationError(field_name, first.get("input"), message) from e
    except (TypeError, ValueError) as e:
        raise OtherValidationError("fields", raw, f"Unreadable wine fields: {e}") from e


def build_wine(
    raw: RawInput,
    today: Optional[date] = None,
    vintage_label: str = PREMIUM_VINTAGE_LABEL,
    warnings: Optional[List[str]] = None
) -> WineRecord:
    """
    Validate raw fields and build a WineRecord.

    The record is Premium when it has a rating or non-empty comments,
    Standard otherwise.

    Args:
        raw: RawWineFields or a mapping with the same keys
        today: Reference date for the minimum-age rule
        vintage_label: Label given to premium records
        warnings: Collects soft-failure messages (unparseable rating)

    Returns:
        Frozen WineRecord

    Raises:
        WineValidationError: a mandatory field was rejected
    """
    fields = _coerce_raw(raw)

    wine_type = parse_wine_type(fields.type)
    year = parse_year(fields.year, today)
    rating = parse_rating(fields.rating, warnings)
    comments = fields.comments or None

    if rating is not None or comments:
        variant = PremiumVariant(vintage_label=vintage_label)
    else:
        variant = StandardVariant()

    wine = WineRecord(
        name=fields.name,
        type=wine_type,
        year=year,
        country=fields.country,
        rating=rating,
        comments=comments,
        variant=variant
    )
    logger.debug(f"Built {variant.kind} wine: {wine.name} ({wine.year})")
    return wine


@dataclass
class BuildResult:
    """Outcome of validate_and_build: either a record or an error."""
    record: Optional[WineRecord] = None
    error: Optional[WineValidationError] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None


def validate_and_build(raw: RawInput, today: Optional[date] = None) -> BuildResult:
    """
    Result-returning wrapper around build_wine.

    Args:
        raw: RawWineFields or a mapping with the same keys
        today: Reference date for the minimum-age rule

    Returns:
        BuildResult with record set on success, error set on rejection.
        An unparseable rating shows up in warnings, not as an error.
    """
    warnings: List[str] = []
    try:
        record = build_wine(raw, today=today, warnings=warnings)
    except WineValidationError as e:
        return BuildResult(error=e, warnings=warnings)
    return BuildResult(record=record, warnings=warnings)
