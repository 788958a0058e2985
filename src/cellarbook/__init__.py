"""Cellarbook - a small catalog manager for wine records with storage and aging advice."""

from cellarbook.collection import WineCollection, has_rating, is_unrated
from cellarbook.constants import WineType
from cellarbook.recommendations import recommend_aging, recommend_storage
from cellarbook.schema import WineRecord, render_wine
from cellarbook.validation import BuildResult, build_wine, validate_and_build

__version__ = "0.1.0"

__all__ = [
    'WineCollection',
    'has_rating',
    'is_unrated',
    'WineType',
    'recommend_aging',
    'recommend_storage',
    'WineRecord',
    'render_wine',
    'BuildResult',
    'build_wine',
    'validate_and_build',
    '__version__',
]
