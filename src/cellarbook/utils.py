"""
Utility functions for Cellarbook.

Includes logging setup and calendar helpers.
"""

import calendar
import logging
from datetime import date
from typing import Optional

from cellarbook.config import LOG_FORMAT, LOG_LEVEL

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT
)
logger = logging.getLogger(__name__)


def set_log_level(level: int) -> None:
    """Change the level of the root logger and the cellarbook loggers."""
    logging.getLogger().setLevel(level)
    logging.getLogger("cellarbook").setLevel(level)
    logger.debug(f"Log level set to {logging.getLevelName(level)}")


# =======================
# DATES
# =======================

def today(override: Optional[date] = None) -> date:
    """
    Return the date used for date-sensitive rules.

    Args:
        override: Fixed date to use instead of the wall clock

    Returns:
        override if given, otherwise the current local date
    """
    return override if override is not None else date.today()


def subtract_months(value: date, months: int) -> date:
    """
    Move a date back by whole calendar months.

    The day is clamped to the last day of the target month, so
    2025-08-31 minus 6 months is 2025-02-28.

    Args:
        value: Starting date
        months: Number of months to go back (may be negative)

    Returns:
        Shifted date
    """
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))
