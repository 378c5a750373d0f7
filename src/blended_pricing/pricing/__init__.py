"""Blended content pricing engine.

Re-exports key functions and types for convenient access:
    from blended_pricing.pricing import calculate_price, compute_mix_ratio
"""

from blended_pricing.pricing.distribution import (
    DEFAULT_SAMPLE_COUNT,
    confidence_sigma,
    nearest_sample_index,
    sample_positions,
    synthesize_distribution,
)
from blended_pricing.pricing.engine import baseline_envelope, calculate_price
from blended_pricing.pricing.mix import compute_mix_ratio, duration_adjustment
from blended_pricing.pricing.ranges import blend, compute_price_range, scale_by_duration
from blended_pricing.pricing.rate_cards import (
    DEFAULT_RATE_CARDS,
    RateCard,
    get_rate_card,
)

__all__ = [
    "DEFAULT_RATE_CARDS",
    "DEFAULT_SAMPLE_COUNT",
    "RateCard",
    "baseline_envelope",
    "blend",
    "calculate_price",
    "compute_mix_ratio",
    "compute_price_range",
    "confidence_sigma",
    "duration_adjustment",
    "get_rate_card",
    "nearest_sample_index",
    "sample_positions",
    "scale_by_duration",
    "synthesize_distribution",
]
