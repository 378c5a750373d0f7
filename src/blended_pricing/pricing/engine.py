"""Blended pricing engine.

Runs the pricing stages in order for one request::

    (minutes, complexity) -> mix ratio -> per-type ranges
        -> blended range -> total range
                         -> distribution curve (visualization only)

The calculation is pure and deterministic: identical inputs always produce
identical results, with no randomness and no shared state.
"""

import structlog

from blended_pricing.domain.models import PriceRange, PricingInput, PricingResult
from blended_pricing.domain.types import ContentType
from blended_pricing.pricing.distribution import DEFAULT_SAMPLE_COUNT, synthesize_distribution
from blended_pricing.pricing.mix import compute_mix_ratio
from blended_pricing.pricing.ranges import blend, compute_price_range, scale_by_duration
from blended_pricing.pricing.rate_cards import RateCard, get_rate_card

logger = structlog.get_logger()


def baseline_envelope(
    motion_graphics: RateCard,
    cgfx: RateCard,
    motion_graphics_ratio: float,
) -> PriceRange:
    """Unscaled axis spanning both rate cards.

    The bounds are the lowest and highest baseline rates; the mean is the
    baseline mean weighted by the current mix.
    """
    lower = min(motion_graphics.min_rate, cgfx.min_rate)
    upper = max(motion_graphics.max_rate, cgfx.max_rate)
    mean = (
        motion_graphics_ratio * motion_graphics.mean_rate
        + (1.0 - motion_graphics_ratio) * cgfx.mean_rate
    )
    return PriceRange(min=lower, mean=max(lower, min(upper, mean)), max=upper)


def calculate_price(
    pricing_input: PricingInput | None = None,
    *,
    minutes: int | None = None,
    complexity_factor: float | None = None,
    sample_count: int = DEFAULT_SAMPLE_COUNT,
) -> PricingResult:
    """Calculate the blended price range for a video.

    Either pass a PricingInput or the ``minutes`` / ``complexity_factor``
    keywords, which are validated (and clamped) the same way.

    Args:
        pricing_input: Requested duration and complexity.
        minutes: Duration shorthand when no PricingInput is given.
        complexity_factor: Complexity shorthand when no PricingInput is given.
        sample_count: Length of the distribution curve.

    Returns:
        A fresh PricingResult.

    Raises:
        DistributionError: If *sample_count* is below 2.
        pydantic.ValidationError: If the shorthand values are not numeric.
    """
    if pricing_input is None:
        fields: dict[str, float] = {}
        if minutes is not None:
            fields["minutes"] = minutes
        if complexity_factor is not None:
            fields["complexity_factor"] = complexity_factor
        pricing_input = PricingInput.model_validate(fields)

    minutes = pricing_input.minutes
    complexity = pricing_input.complexity_factor

    mix_ratio = compute_mix_ratio(minutes, complexity)

    mg_card = get_rate_card(ContentType.MOTION_GRAPHICS)
    cgfx_card = get_rate_card(ContentType.CGFX)

    mg_price_range = compute_price_range(
        mg_card.base_range, complexity, mg_card.complexity_sensitivity
    )
    cgfx_price_range = compute_price_range(
        cgfx_card.base_range, complexity, cgfx_card.complexity_sensitivity
    )

    price_per_minute_range = blend(
        mg_price_range,
        mix_ratio.motion_graphics_ratio,
        cgfx_price_range,
        mix_ratio.cgfx_ratio,
    )

    base_range = baseline_envelope(mg_card, cgfx_card, mix_ratio.motion_graphics_ratio)
    distribution = synthesize_distribution(price_per_minute_range, base_range, sample_count)

    result = PricingResult(
        minutes=minutes,
        complexity_factor=complexity,
        mix_ratio=mix_ratio,
        base_range=base_range,
        motion_graphics_price_range=mg_price_range,
        motion_graphics_total_range=scale_by_duration(
            mg_price_range, mix_ratio.motion_graphics_minutes
        ),
        cgfx_price_range=cgfx_price_range,
        cgfx_total_range=scale_by_duration(cgfx_price_range, mix_ratio.cgfx_minutes),
        price_per_minute_range=price_per_minute_range,
        total_price_range=scale_by_duration(price_per_minute_range, minutes),
        distribution=distribution,
    )

    logger.debug(
        "price_calculated",
        minutes=minutes,
        complexity_factor=complexity,
        cgfx_ratio=mix_ratio.cgfx_ratio,
        total_min=result.total_price_range.min,
        total_max=result.total_price_range.max,
    )
    return result
