"""Pydantic v2 models for the data flowing through the pricing engine.

Every model is frozen: a calculation builds fresh instances and nothing is
mutated after construction.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Tolerance for floating-point identities (ratio sums, minute sums)
RATIO_TOLERANCE = 1e-9

# Longest accepted duration (about 70 days of footage)
MAX_MINUTES = 100_000


class PricingInput(BaseModel):
    """Requested duration and complexity for a single calculation.

    Out-of-domain values are clamped rather than rejected, matching a UI
    slider that cannot emit out-of-range values in the first place. The one
    exception is a duration above MAX_MINUTES, which is rejected.
    """

    model_config = ConfigDict(frozen=True)

    minutes: int = Field(default=1, le=MAX_MINUTES)
    complexity_factor: float = Field(default=0.5, allow_inf_nan=False)

    @field_validator("minutes")
    @classmethod
    def floor_minutes_at_one(cls, v: int) -> int:
        """Raise durations below one minute to one minute."""
        return max(1, v)

    @field_validator("complexity_factor")
    @classmethod
    def clamp_complexity(cls, v: float) -> float:
        """Clamp the complexity factor into [0, 1]."""
        return max(0.0, min(1.0, v))


class PriceRange(BaseModel):
    """A price range with a central estimate.

    Used for baseline rate cards, per-minute ranges and total-cost ranges.
    """

    model_config = ConfigDict(frozen=True)

    min: float
    mean: float
    max: float

    @field_validator("min", "mean", "max")
    @classmethod
    def must_be_non_negative(cls, v: float) -> float:
        """Ensure prices are finite and non-negative."""
        if not v >= 0 or v == float("inf"):
            raise ValueError("price bounds must be finite and non-negative")
        return v

    @model_validator(mode="after")
    def bounds_must_be_ordered(self) -> "PriceRange":
        """Ensure min <= mean <= max."""
        if not self.min <= self.mean <= self.max:
            raise ValueError(
                f"price range must satisfy min <= mean <= max "
                f"(got {self.min}, {self.mean}, {self.max})"
            )
        return self

    @property
    def width(self) -> float:
        """Distance between the upper and lower bound."""
        return self.max - self.min

    def scaled(self, factor: float) -> "PriceRange":
        """Return a new range with every bound multiplied by *factor*."""
        return PriceRange(
            min=self.min * factor,
            mean=self.mean * factor,
            max=self.max * factor,
        )


class MixRatio(BaseModel):
    """Split of the requested duration between the two content types."""

    model_config = ConfigDict(frozen=True)

    motion_graphics_ratio: float = Field(ge=0.0, le=1.0)
    cgfx_ratio: float = Field(ge=0.0, le=1.0)
    motion_graphics_minutes: float = Field(ge=0.0)
    cgfx_minutes: float = Field(ge=0.0)

    @model_validator(mode="after")
    def ratios_must_sum_to_one(self) -> "MixRatio":
        """Ensure the two shares form a complete split."""
        total = self.motion_graphics_ratio + self.cgfx_ratio
        if abs(total - 1.0) > RATIO_TOLERANCE:
            raise ValueError(f"mix ratios must sum to 1 (got {total})")
        return self

    @property
    def minutes(self) -> float:
        """Total duration covered by the split."""
        return self.motion_graphics_minutes + self.cgfx_minutes


class PricingResult(BaseModel):
    """Complete output of one pricing calculation.

    Attributes:
        minutes: The (clamped) duration the result was calculated for.
        complexity_factor: The (clamped) complexity the result was calculated for.
        mix_ratio: Duration split between Motion Graphics and CGI/VFX.
        base_range: Unscaled baseline envelope, also the distribution axis.
        motion_graphics_price_range: Per-minute range for Motion Graphics.
        motion_graphics_total_range: Motion Graphics range times its minutes.
        cgfx_price_range: Per-minute range for CGI/VFX.
        cgfx_total_range: CGI/VFX range times its minutes.
        price_per_minute_range: Mix-weighted blended per-minute range.
        total_price_range: Blended per-minute range times total minutes.
        distribution: Normalized density samples across ``base_range``.
    """

    model_config = ConfigDict(frozen=True)

    minutes: int
    complexity_factor: float
    mix_ratio: MixRatio
    base_range: PriceRange
    motion_graphics_price_range: PriceRange
    motion_graphics_total_range: PriceRange
    cgfx_price_range: PriceRange
    cgfx_total_range: PriceRange
    price_per_minute_range: PriceRange
    total_price_range: PriceRange
    distribution: tuple[float, ...]

    @field_validator("distribution")
    @classmethod
    def samples_must_be_normalized(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Ensure every distribution sample lies in [0, 1]."""
        if not v:
            raise ValueError("distribution must not be empty")
        if any(not 0.0 <= sample <= 1.0 for sample in v):
            raise ValueError("distribution samples must lie in [0, 1]")
        return v
