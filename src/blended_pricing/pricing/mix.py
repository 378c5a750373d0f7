"""Complexity model: splits a video's duration between the two content types.

The CGI/VFX share grows super-linearly with complexity (``complexity ** 1.5``)
and is then tempered by a bounded duration adjustment: sustaining peak CGI
density across a long runtime is costlier, so longer videos lean slightly
more on Motion Graphics.
"""

from blended_pricing.domain.models import MixRatio

# CGI/VFX share at full complexity before the duration adjustment
BASE_CGFX_SHARE = 1.0

# Exponent of the complexity curve
COMPLEXITY_EXPONENT = 1.5

# Minutes at which the duration factor reaches one half
DURATION_HALF_LIFE = 100.0

# Portion of the CGI/VFX share that is independent of duration
DURATION_FLOOR_WEIGHT = 0.8


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp *value* into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def duration_adjustment(minutes: float) -> float:
    """Return the multiplier applied to the CGI/VFX share for *minutes*.

    Decreases monotonically from 1.0 (at zero minutes) towards
    ``DURATION_FLOOR_WEIGHT`` as the duration grows, never crossing it.
    """
    duration_factor = 1.0 / (1.0 + max(minutes, 0.0) / DURATION_HALF_LIFE)
    return DURATION_FLOOR_WEIGHT + (1.0 - DURATION_FLOOR_WEIGHT) * duration_factor


def compute_mix_ratio(minutes: float, complexity_factor: float) -> MixRatio:
    """Split *minutes* between Motion Graphics and CGI/VFX.

    Formula: ``cgfx = BASE_CGFX_SHARE * complexity ** 1.5 * duration_adjustment``,
    clamped into [0, 1]. The Motion Graphics share is the remainder.

    Args:
        minutes: Requested duration; values below 1 are treated as 1.
        complexity_factor: Complexity rating; clamped into [0, 1].

    Returns:
        A MixRatio whose ratios sum to 1 and whose minutes sum to *minutes*.
    """
    minutes = max(1.0, minutes)
    complexity = clamp(complexity_factor, 0.0, 1.0)

    cgfx_raw = BASE_CGFX_SHARE * complexity**COMPLEXITY_EXPONENT
    cgfx_ratio = clamp(cgfx_raw * duration_adjustment(minutes), 0.0, 1.0)
    motion_graphics_ratio = 1.0 - cgfx_ratio

    cgfx_minutes = cgfx_ratio * minutes
    return MixRatio(
        motion_graphics_ratio=motion_graphics_ratio,
        cgfx_ratio=cgfx_ratio,
        motion_graphics_minutes=minutes - cgfx_minutes,
        cgfx_minutes=cgfx_minutes,
    )
