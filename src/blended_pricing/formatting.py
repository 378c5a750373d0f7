"""Display helpers for pricing results.

Thin, stateless presentation functions. Display rounding uses Decimal with
ROUND_HALF_UP so a value exactly halfway between two steps rounds away from
zero, matching how prices are quoted.
"""

from decimal import ROUND_HALF_UP, Decimal

from blended_pricing.domain.models import MixRatio, PriceRange
from blended_pricing.domain.types import CONTENT_TYPE_NAMES, ComplexityLevel, ContentType
from blended_pricing.pricing.rate_cards import get_rate_card

DEFAULT_CURRENCY = "AED"

# Upper bounds (exclusive) of the Simple and Moderate complexity bands
SIMPLE_THRESHOLD = 0.3
MODERATE_THRESHOLD = 0.7


def round_to_nearest(value: float, step: int = 10) -> int:
    """Round *value* half-up to the nearest multiple of *step*."""
    steps = (Decimal(str(value)) / Decimal(step)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(steps) * step


def format_price(value: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format a price as whole currency units, e.g. ``"AED 2,500"``."""
    return f"{currency} {round_to_nearest(value, 1):,}"


def format_price_range(price_range: PriceRange, currency: str = DEFAULT_CURRENCY) -> str:
    """Format the bounds of a range, e.g. ``"AED 2,000 - AED 3,000"``."""
    return f"{format_price(price_range.min, currency)} - {format_price(price_range.max, currency)}"


def get_complexity_text(complexity_factor: float) -> ComplexityLevel:
    """Map a complexity factor to its Simple / Moderate / Complex label."""
    if complexity_factor < SIMPLE_THRESHOLD:
        return ComplexityLevel.SIMPLE
    if complexity_factor < MODERATE_THRESHOLD:
        return ComplexityLevel.MODERATE
    return ComplexityLevel.COMPLEX


def get_content_type_name(content_type: ContentType) -> str:
    """Display name of a content type."""
    return CONTENT_TYPE_NAMES[content_type]


def get_price_range_text(content_type: ContentType, currency: str = DEFAULT_CURRENCY) -> str:
    """Baseline per-minute range of a content type, e.g. for a legend."""
    card = get_rate_card(content_type)
    return f"{format_price_range(card.base_range, currency)} per minute"


def format_percentage(ratio: float) -> str:
    """Format a 0-1 ratio as a whole percentage, e.g. ``"95%"``."""
    return f"{round_to_nearest(ratio * 100, 1)}%"


def format_minutes(minutes: float) -> str:
    """Format a duration to one decimal place, e.g. ``"4.8 min"``."""
    return f"{minutes:.1f} min"


def format_mix_summary(mix_ratio: MixRatio) -> str:
    """One-line description of the content split."""
    return (
        f"{format_percentage(mix_ratio.motion_graphics_ratio)} Motion Graphics + "
        f"{format_percentage(mix_ratio.cgfx_ratio)} CGI/VFX"
    )


def mean_position(price_range: PriceRange) -> float:
    """Position of the mean inside the range as a percentage (0-100).

    A zero-width range places the mean in the middle.
    """
    if price_range.width == 0:
        return 50.0
    return (price_range.mean - price_range.min) / price_range.width * 100.0
