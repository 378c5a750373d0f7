"""Blended content pricing engine for video production quotes."""

from blended_pricing.domain.models import MixRatio, PriceRange, PricingInput, PricingResult
from blended_pricing.pricing.engine import calculate_price

__all__ = [
    "MixRatio",
    "PriceRange",
    "PricingInput",
    "PricingResult",
    "calculate_price",
]
