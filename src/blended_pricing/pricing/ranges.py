"""Per-type price ranges, blending, and duration scaling.

- ``compute_price_range`` scales a baseline per-minute range by complexity.
- ``blend`` combines two ranges into one mix-weighted range.
- ``scale_by_duration`` turns a per-minute range into a total-cost range.

None of these round; display rounding lives in ``blended_pricing.formatting``.
"""

from blended_pricing.domain.errors import InvalidWeightsError, PricingError
from blended_pricing.domain.models import RATIO_TOLERANCE, PriceRange


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def compute_price_range(
    base_range: PriceRange,
    complexity_factor: float,
    weight: float,
) -> PriceRange:
    """Scale a baseline range upward with complexity.

    Formula: every bound is multiplied by ``1 + weight * complexity``. A
    complexity of 0 returns the baseline unchanged; 1 applies the full
    uplift of ``weight``.

    Args:
        base_range: Unscaled per-minute range for a content type.
        complexity_factor: Complexity rating; clamped into [0, 1].
        weight: Complexity sensitivity of the content type.

    Returns:
        The complexity-adjusted per-minute range.

    Raises:
        PricingError: If *weight* is negative.
    """
    if weight < 0:
        raise PricingError(f"complexity sensitivity must be non-negative, got {weight}")

    complexity = _clamp(complexity_factor, 0.0, 1.0)
    if complexity == 0.0:
        return base_range
    return base_range.scaled(1.0 + weight * complexity)


def blend(
    range_a: PriceRange,
    weight_a: float,
    range_b: PriceRange,
    weight_b: float,
) -> PriceRange:
    """Combine two ranges into a weighted blend.

    Each bound is ``weight_a * a + weight_b * b``. A zero weight returns
    the other range as-is. The result is kept inside the envelope of the
    two inputs.

    Args:
        range_a: First range.
        weight_a: Share of the first range.
        range_b: Second range.
        weight_b: Share of the second range.

    Returns:
        The blended range.

    Raises:
        InvalidWeightsError: If a weight is negative or they do not sum to 1.
    """
    if weight_a < 0 or weight_b < 0 or abs(weight_a + weight_b - 1.0) > RATIO_TOLERANCE:
        raise InvalidWeightsError(weight_a, weight_b)

    if weight_b == 0:
        return range_a
    if weight_a == 0:
        return range_b

    lower = min(range_a.min, range_b.min)
    upper = max(range_a.max, range_b.max)

    def mix(a: float, b: float) -> float:
        return _clamp(weight_a * a + weight_b * b, lower, upper)

    return PriceRange(
        min=mix(range_a.min, range_b.min),
        mean=mix(range_a.mean, range_b.mean),
        max=mix(range_a.max, range_b.max),
    )


def scale_by_duration(price_range: PriceRange, minutes: float) -> PriceRange:
    """Multiply every bound of a per-minute range by *minutes*.

    Negative durations are treated as zero.
    """
    return price_range.scaled(max(minutes, 0.0))
