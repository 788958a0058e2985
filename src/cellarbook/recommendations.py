"""
Storage and aging recommendations.

Both derivations are pure functions of the wine type, the production year
and (for aging) the reference date. Nothing is cached on the record: the
aging advice for a stored wine moves with the calendar.
"""

from datetime import date
from typing import Optional

from cellarbook.constants import AgingBands, StorageBands, WineType
from cellarbook.utils import today as resolve_today


def recommend_storage(wine_type: WineType) -> str:
    """
    Recommended storage temperature band for a wine type.

    Args:
        wine_type: Wine category

    Returns:
        Temperature band, e.g. "15-17 degrees Celsius"
    """
    return StorageBands.BY_TYPE[WineType(wine_type)]


def recommend_aging(wine_type: WineType, year: int, today: Optional[date] = None) -> str:
    """
    Consumption advice based on the age of a red wine.

    Only red wines get advice; every other type returns "". A negative age
    (production year in the future) falls in the no-advice band.

    Args:
        wine_type: Wine category
        year: Production year
        today: Reference date (defaults to the current date)

    Returns:
        Advice text, or "" when there is none
    """
    if WineType(wine_type) is not WineType.RED:
        return ""

    age = resolve_today(today).year - year

    if age <= AgingBands.TOO_YOUNG:
        return ""
    if age < AgingBands.READY:
        return AgingBands.WAIT_TEMPLATE.format(
            ready=AgingBands.READY,
            ready_year=year + AgingBands.READY
        )
    if age < AgingBands.OLD:
        return AgingBands.ANY_TIME
    if age < AgingBands.COLLECTIBLE:
        return AgingBands.ALREADY_OLD
    return AgingBands.COLLECTING_ONLY
