"""Pydantic schemas for Cellarbook wine records."""

from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cellarbook.constants import UIConstants, WineType
from cellarbook.recommendations import recommend_aging, recommend_storage


class RawWineFields(BaseModel):
    """Unvalidated field values as typed by the user."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(..., description="Wine name")
    type: str = Field(..., description="Wine type text, e.g. 'red'")
    year: str = Field(..., description="Production year text")
    country: str = Field(..., description="Country of production")
    rating: Optional[str] = Field(None, description="Rating text, empty to skip")
    comments: Optional[str] = Field(None, description="Free-form comments")


class StandardVariant(BaseModel):
    """Plain record, no extra data."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["standard"] = "standard"


class PremiumVariant(BaseModel):
    """Rated or commented record, carries a vintage label."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["premium"] = "premium"
    vintage_label: str = Field(..., description="Curator's vintage designation")


WineVariant = Annotated[
    Union[StandardVariant, PremiumVariant],
    Field(discriminator="kind")
]


class WineRecord(BaseModel):
    """
    A validated wine. Immutable once built.

    Build records through cellarbook.validation; the model itself does not
    re-check the minimum-age rule.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Wine name")
    type: WineType = Field(..., description="Wine category")
    year: int = Field(..., description="Production year")
    country: str = Field(..., description="Country of production")
    rating: Optional[float] = Field(None, description="Rating, None when unrated")
    comments: Optional[str] = Field(None, description="Comments, None when absent")
    variant: WineVariant = Field(default_factory=StandardVariant)

    @field_validator("comments")
    @classmethod
    def _empty_comments_are_absent(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @property
    def is_premium(self) -> bool:
        return isinstance(self.variant, PremiumVariant)

    @property
    def has_rating(self) -> bool:
        return self.rating is not None

    @property
    def vintage_label(self) -> Optional[str]:
        """Premium vintage label, None for standard records."""
        if isinstance(self.variant, PremiumVariant):
            return self.variant.vintage_label
        return None

    def storage_recommendation(self) -> str:
        return recommend_storage(self.type)

    def aging_recommendation(self, today: Optional[date] = None) -> str:
        return recommend_aging(self.type, self.year, today)

    def render(self, today: Optional[date] = None, show_vintage: bool = True) -> str:
        return render_wine(self, today=today, show_vintage=show_vintage)

    def __str__(self) -> str:
        return self.render()


def _or_not_available(value) -> str:
    return UIConstants.NOT_AVAILABLE if value is None else str(value)


def render_wine(wine: WineRecord, today: Optional[date] = None, show_vintage: bool = True) -> str:
    """
    Human-readable rendering of a wine with its recommendations.

    The aging line is left out when there is no aging advice. Premium
    records get a trailing vintage line unless show_vintage is False.

    Args:
        wine: Record to render
        today: Reference date for the aging advice
        show_vintage: Whether to append the premium vintage label

    Returns:
        Multi-line text, one attribute per line
    """
    lines = [
        f"Wine name: {wine.name}",
        f"Type: {wine.type.name}",
        f"Year: {wine.year}",
        f"Country: {wine.country}",
        f"Rating: {_or_not_available(wine.rating)}",
        f"Comments: {_or_not_available(wine.comments)}",
        f"Recommended Storage Temperature: {wine.storage_recommendation()}",
    ]

    aging = wine.aging_recommendation(today)
    if aging:
        lines.append(aging)

    variant = wine.variant
    if isinstance(variant, PremiumVariant) and show_vintage:
        lines.append(f"Vintage: {variant.vintage_label}")

    return "\n".join(lines)
