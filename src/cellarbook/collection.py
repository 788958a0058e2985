"""
In-memory wine collection.

Append-only and ordered: wines come back in insertion order, duplicates
are kept, and there is no removal or update.
"""

import logging
from typing import Callable, Iterator, List

import pandas as pd

from cellarbook.schema import WineRecord

logger = logging.getLogger(__name__)

WinePredicate = Callable[[WineRecord], bool]

DATAFRAME_COLUMNS = [
    'name', 'type', 'year', 'country', 'rating', 'comments', 'variant', 'vintage_label'
]


def has_rating(wine: WineRecord) -> bool:
    """True when the wine carries a rating."""
    return wine.rating is not None


def is_unrated(wine: WineRecord) -> bool:
    return wine.rating is None


class WineCollection:
    """Ordered, append-only store of WineRecords."""

    def __init__(self):
        self._wines: List[WineRecord] = []

    def add(self, *wines: WineRecord) -> int:
        """
        Append one or more wines as a single batch.

        Every item is checked before any is appended, so a bad item leaves
        the collection untouched.

        Returns:
            Number of wines added

        Raises:
            TypeError: an item is not a WineRecord
        """
        for wine in wines:
            if not isinstance(wine, WineRecord):
                raise TypeError(f"Expected WineRecord, got {type(wine).__name__}")

        self._wines.extend(wines)
        logger.info(f"Added {len(wines)} wine(s), collection size is now {len(self._wines)}")
        return len(wines)

    def all(self) -> List[WineRecord]:
        """Snapshot of every wine; mutating it does not affect the store."""
        return list(self._wines)

    def filter(self, predicate: WinePredicate) -> List[WineRecord]:
        """Wines matching predicate, in insertion order."""
        return [wine for wine in self._wines if predicate(wine)]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabular view of the collection, one row per wine.

        Returns:
            DataFrame with DATAFRAME_COLUMNS in insertion order
        """
        rows = [
            {
                'name': wine.name,
                'type': wine.type.name,
                'year': wine.year,
                'country': wine.country,
                'rating': wine.rating,
                'comments': wine.comments,
                'variant': wine.variant.kind,
                'vintage_label': wine.vintage_label,
            }
            for wine in self._wines
        ]
        df = pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)
        logger.debug(f"Built dataframe for {len(df)} wines")
        return df

    def __len__(self) -> int:
        return len(self._wines)

    def __iter__(self) -> Iterator[WineRecord]:
        return iter(list(self._wines))
