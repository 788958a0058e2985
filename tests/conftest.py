"""Shared fixtures for Cellarbook tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Allow running without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cellarbook.constants import WineType
from cellarbook.schema import PremiumVariant, StandardVariant, WineRecord

FIXED_TODAY = date(2025, 3, 15)


@pytest.fixture
def today():
    """Fixed reference date so age-based rules do not drift."""
    return FIXED_TODAY


@pytest.fixture
def raw_fields():
    """Valid raw input for a plain red wine."""
    return {
        'name': 'Rioja Reserva',
        'type': 'red',
        'year': '2015',
        'country': 'Spain',
        'rating': '',
        'comments': '',
    }


@pytest.fixture
def sample_wines():
    """Three wines: rated premium, unrated standard, rated premium."""
    return [
        WineRecord(
            name='Barolo', type=WineType.RED, year=2010, country='Italy',
            rating=9.0, variant=PremiumVariant(vintage_label='Special Vintage')
        ),
        WineRecord(
            name='Albariño', type=WineType.WHITE, year=2022, country='Spain',
            variant=StandardVariant()
        ),
        WineRecord(
            name='Cava', type=WineType.SPARKLING, year=2021, country='Spain',
            rating=7.5, variant=PremiumVariant(vintage_label='Special Vintage')
        ),
    ]
