"""
Cellarbook Constants and Enums

Centralized constants, enums, and display strings shared by the
recommendation engine, the validation pipeline and the console shell.
"""

from enum import Enum
from typing import Dict, Tuple


# =======================
# WINE ATTRIBUTE ENUMS
# =======================

class WineType(str, Enum):
    """Wine categories. Closed set."""
    RED = "RED"
    WHITE = "WHITE"
    ROSE = "ROSE"
    SPARKLING = "SPARKLING"

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        """Enum names in declaration order."""
        return tuple(member.name for member in cls)


# =======================
# RECOMMENDATION CONSTANTS
# =======================

class StorageBands:
    """Recommended storage temperature per wine type."""

    RED = "15-17 degrees Celsius"
    WHITE_ROSE = "10-12 degrees Celsius"
    SPARKLING = "5-7 degrees Celsius"

    BY_TYPE: Dict[WineType, str] = {
        WineType.RED: RED,
        WineType.WHITE: WHITE_ROSE,
        WineType.ROSE: WHITE_ROSE,
        WineType.SPARKLING: SPARKLING,
    }


class AgingBands:
    """
    Age thresholds (in years) for red wine consumption advice.

    Bands are evaluated in order:
        age <= TOO_YOUNG           -> no advice
        TOO_YOUNG < age < READY    -> wait until READY years old
        READY <= age < OLD         -> any time
        OLD <= age < COLLECTIBLE   -> already old
        age >= COLLECTIBLE         -> collecting only
    """

    TOO_YOUNG = 2
    READY = 5
    OLD = 15
    COLLECTIBLE = 25

    WAIT_TEMPLATE = (
        "Recommended to consume no earlier than when the wine is "
        "{ready} years old (Year: {ready_year})"
    )
    ANY_TIME = "Can be consumed at any time."
    ALREADY_OLD = "Can be consumed, but it is already old."
    COLLECTING_ONLY = "Better not to consume, as it is only suitable for collecting."


# =======================
# MESSAGES
# =======================

class Messages:
    """User-facing validation and shell messages."""

    INVALID_TYPE = "Error: Please enter a valid Wine Type ({choices})."
    INVALID_YEAR_FORMAT = "Error: Please enter a valid number for the year."
    WINE_TOO_YOUNG = "Error: The wine cannot be younger than {months} months."
    INVALID_RATING = "Invalid rating format. Skipping rating."
    MISSING_FIELD = "Error: {field} is mandatory."
    WINE_ADDED = "Wine added successfully!"


# =======================
# UI CONSTANTS
# =======================

class UIConstants:
    """Console layout constants."""

    HEADER = "********** Wine Collection **********"
    SEPARATOR = "=" * 40
    LIST_TITLE = "List of all entered wines:"
    PREMIUM_DETAILS = "Premium Wine Details:"
    STANDARD_DETAILS = "Wine Details:"
    NOT_AVAILABLE = "n/a"

    PROMPT_NAME = "Enter Wine Name (mandatory)"
    PROMPT_TYPE = "Enter Wine Type ({choices})"
    PROMPT_YEAR = "Enter year of production (mandatory)"
    PROMPT_COUNTRY = "Enter country of production (mandatory)"
    PROMPT_RATING = "Enter rating (optional, press enter to skip)"
    PROMPT_COMMENTS = "Enter comments (optional, press enter to skip)"
    PROMPT_CONTINUE = "Do you want to add another wine? (yes/no)"

    CONTINUE_ANSWERS = frozenset({"yes", "y"})

    TYPE_STYLES: Dict[WineType, str] = {
        WineType.RED: "bold red",
        WineType.WHITE: "bold yellow",
        WineType.ROSE: "bold magenta",
        WineType.SPARKLING: "bold cyan",
    }
