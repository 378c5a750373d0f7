"""Domain types, models, and errors for the blended pricing engine."""

from blended_pricing.domain.errors import (
    DistributionError,
    InvalidWeightsError,
    PricingError,
)
from blended_pricing.domain.models import (
    MixRatio,
    PriceRange,
    PricingInput,
    PricingResult,
)
from blended_pricing.domain.types import (
    CONTENT_TYPE_NAMES,
    ComplexityLevel,
    ContentType,
)

__all__ = [
    "CONTENT_TYPE_NAMES",
    "ComplexityLevel",
    "ContentType",
    "DistributionError",
    "InvalidWeightsError",
    "MixRatio",
    "PriceRange",
    "PricingError",
    "PricingInput",
    "PricingResult",
]
