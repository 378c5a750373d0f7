"""Baseline rate cards for each production content type.

Each content type has a RateCard holding its unscaled per-minute price range
(AED) at zero complexity and how strongly that range responds to complexity.
CGI/VFX work costs more per unit of added complexity, so its sensitivity is
higher than Motion Graphics.
"""

from pydantic import BaseModel, Field, model_validator

from blended_pricing.domain.models import PriceRange
from blended_pricing.domain.types import ContentType


class RateCard(BaseModel, frozen=True):
    """Immutable baseline pricing for a content type.

    Attributes:
        content_type: The content type this card applies to.
        min_rate: Lowest baseline price per minute.
        mean_rate: Central baseline price per minute.
        max_rate: Highest baseline price per minute.
        complexity_sensitivity: Fractional uplift applied at full complexity.
    """

    content_type: ContentType
    min_rate: float = Field(ge=0.0)
    mean_rate: float = Field(ge=0.0)
    max_rate: float = Field(ge=0.0)
    complexity_sensitivity: float = Field(ge=0.0)

    @model_validator(mode="after")
    def rates_must_be_ordered(self) -> "RateCard":
        """Ensure min_rate <= mean_rate <= max_rate."""
        if not self.min_rate <= self.mean_rate <= self.max_rate:
            raise ValueError(
                f"rate card for {self.content_type} must satisfy min <= mean <= max"
            )
        return self

    @property
    def base_range(self) -> PriceRange:
        """The unscaled per-minute range for this content type."""
        return PriceRange(min=self.min_rate, mean=self.mean_rate, max=self.max_rate)


DEFAULT_RATE_CARDS: dict[ContentType, RateCard] = {
    ContentType.MOTION_GRAPHICS: RateCard(
        content_type=ContentType.MOTION_GRAPHICS,
        min_rate=2000.0,
        mean_rate=2500.0,
        max_rate=3000.0,
        complexity_sensitivity=0.20,
    ),
    ContentType.CGFX: RateCard(
        content_type=ContentType.CGFX,
        min_rate=3500.0,
        mean_rate=3750.0,
        max_rate=4000.0,
        complexity_sensitivity=0.35,
    ),
}


def get_rate_card(content_type: ContentType) -> RateCard:
    """Look up the rate card for a content type.

    Args:
        content_type: The content type to look up.

    Returns:
        The RateCard for the given content type.
    """
    return DEFAULT_RATE_CARDS[content_type]
