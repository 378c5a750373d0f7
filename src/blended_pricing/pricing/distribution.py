"""Distribution synthesizer for the 68% confidence-interval curve.

Models the blended per-minute range as a normal distribution whose
one-standard-deviation band is ``[range.min, range.max]`` around
``range.mean``, and samples it at evenly spaced prices across the baseline
axis. The curve is for visualization only and never feeds back into pricing.
"""

import math

from blended_pricing.domain.errors import DistributionError
from blended_pricing.domain.models import PriceRange

# Number of samples used when none is requested (0..100 inclusive)
DEFAULT_SAMPLE_COUNT = 101


def confidence_sigma(price_range: PriceRange) -> float:
    """Standard deviation whose +/-1 sigma band spans *price_range*."""
    return price_range.width / 2.0


def sample_positions(axis: PriceRange, sample_count: int = DEFAULT_SAMPLE_COUNT) -> tuple[float, ...]:
    """Evenly spaced prices from ``axis.min`` to ``axis.max`` inclusive.

    Raises:
        DistributionError: If fewer than two samples are requested.
    """
    if sample_count < 2:
        raise DistributionError(f"sample_count must be at least 2, got {sample_count}")

    step = axis.width / (sample_count - 1)
    return tuple(axis.min + step * i for i in range(sample_count))


def nearest_sample_index(value: float, axis: PriceRange, sample_count: int) -> int:
    """Index of the sample position closest to *value*, clamped to the axis."""
    if axis.width == 0:
        return 0
    position = (value - axis.min) / axis.width * (sample_count - 1)
    if position <= 0:
        return 0
    if position >= sample_count - 1:
        return sample_count - 1
    return round(position)


def _unit_spike(value: float, axis: PriceRange, sample_count: int) -> tuple[float, ...]:
    peak = nearest_sample_index(value, axis, sample_count)
    return tuple(1.0 if i == peak else 0.0 for i in range(sample_count))


def synthesize_distribution(
    price_range: PriceRange,
    base_range: PriceRange,
    sample_count: int = DEFAULT_SAMPLE_COUNT,
) -> tuple[float, ...]:
    """Sample a normalized Gaussian curve across the baseline axis.

    The density is evaluated in log space relative to its largest value, so
    the peak sample is exactly 1.0 even when the mean sits far off the axis.

    Edge case: a zero-width *price_range* (sigma of 0) has no density; the
    curve is a single unit spike at the sample nearest ``price_range.mean``.
    The same spike is returned when sigma is so small relative to the axis
    that every sample underflows.

    Args:
        price_range: Blended per-minute range (defines mean and sigma).
        base_range: Axis bounds the samples span.
        sample_count: Number of samples to produce.

    Returns:
        A tuple of *sample_count* values in [0, 1] with maximum 1.0.

    Raises:
        DistributionError: If fewer than two samples are requested.
    """
    positions = sample_positions(base_range, sample_count)
    sigma = confidence_sigma(price_range)

    if sigma == 0:
        return _unit_spike(price_range.mean, base_range, sample_count)

    exponents = []
    for x in positions:
        z = (x - price_range.mean) / sigma
        exponents.append(-0.5 * z * z)

    top = max(exponents)
    if not math.isfinite(top):
        return _unit_spike(price_range.mean, base_range, sample_count)
    return tuple(math.exp(e - top) for e in exponents)
