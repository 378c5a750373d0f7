"""Tests for the confidence-interval distribution synthesizer."""

import math

import pytest

from blended_pricing.domain.errors import DistributionError, PricingError
from blended_pricing.domain.models import PriceRange
from blended_pricing.pricing.distribution import (
    DEFAULT_SAMPLE_COUNT,
    confidence_sigma,
    nearest_sample_index,
    sample_positions,
    synthesize_distribution,
)


class TestConfidenceSigma:
    """Tests for the one-sigma band identity."""

    def test_sigma_is_half_the_range_width(self, sample_range: PriceRange):
        assert confidence_sigma(sample_range) == 500.0

    def test_zero_width_range_has_zero_sigma(self):
        assert confidence_sigma(PriceRange(min=3000.0, mean=3000.0, max=3000.0)) == 0.0


class TestSamplePositions:
    """Tests for evenly spaced axis positions."""

    def test_spans_axis_inclusive(self, axis_range: PriceRange):
        positions = sample_positions(axis_range, 5)
        assert positions == (2000.0, 2500.0, 3000.0, 3500.0, 4000.0)

    def test_default_length(self, axis_range: PriceRange):
        assert len(sample_positions(axis_range)) == DEFAULT_SAMPLE_COUNT

    @pytest.mark.parametrize("count", [1, 0, -3])
    def test_rejects_fewer_than_two_samples(self, axis_range: PriceRange, count: int):
        with pytest.raises(DistributionError, match="at least 2"):
            sample_positions(axis_range, count)


class TestNearestSampleIndex:
    """Tests for locating a price on the sample grid."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2000.0, 0), (3000.0, 50), (3009.0, 50), (3011.0, 51), (4000.0, 100)],
        ids=["axis_min", "midpoint", "just_below_step", "just_above_step", "axis_max"],
    )
    def test_on_axis(self, axis_range: PriceRange, value: float, expected: int):
        assert nearest_sample_index(value, axis_range, 101) == expected

    def test_clamps_off_axis_values(self, axis_range: PriceRange):
        assert nearest_sample_index(1000.0, axis_range, 101) == 0
        assert nearest_sample_index(9000.0, axis_range, 101) == 100

    def test_value_far_beyond_axis(self, axis_range: PriceRange):
        assert nearest_sample_index(1e300, axis_range, 101) == 100

    def test_zero_width_axis(self):
        flat = PriceRange(min=3000.0, mean=3000.0, max=3000.0)
        assert nearest_sample_index(3000.0, flat, 11) == 0


class TestSynthesizeDistribution:
    """Tests for synthesize_distribution."""

    def test_length_and_bounds(self, sample_range: PriceRange, axis_range: PriceRange):
        curve = synthesize_distribution(sample_range, axis_range)
        assert len(curve) == DEFAULT_SAMPLE_COUNT
        assert all(0.0 <= y <= 1.0 for y in curve)
        assert max(curve) == 1.0

    def test_peak_sits_at_the_mean(self, sample_range: PriceRange, axis_range: PriceRange):
        curve = synthesize_distribution(sample_range, axis_range)
        assert curve.index(1.0) == 50

    def test_gaussian_shape(self, sample_range: PriceRange, axis_range: PriceRange):
        curve = synthesize_distribution(sample_range, axis_range)
        # One sigma away (3500 is index 75) the density drops to exp(-1/2)
        assert curve[75] == pytest.approx(math.exp(-0.5))
        # Two sigma away at the axis edge: exp(-2)
        assert curve[0] == pytest.approx(math.exp(-2.0))
        assert curve[0] == pytest.approx(curve[100])

    def test_symmetric_around_centred_mean(self, sample_range: PriceRange, axis_range: PriceRange):
        curve = synthesize_distribution(sample_range, axis_range)
        for offset in range(1, 51):
            assert curve[50 - offset] == pytest.approx(curve[50 + offset])

    def test_mean_off_axis_peaks_at_nearest_edge(self, axis_range: PriceRange):
        narrow = PriceRange(min=4750.0, mean=5000.0, max=5250.0)
        curve = synthesize_distribution(narrow, axis_range)
        # Far tail values underflow relative to the peak but never produce NaN
        assert curve[-1] == 1.0
        assert all(not math.isnan(y) for y in curve)

    def test_zero_width_range_gives_unit_spike(self, axis_range: PriceRange):
        flat = PriceRange(min=3000.0, mean=3000.0, max=3000.0)
        curve = synthesize_distribution(flat, axis_range)
        assert curve[50] == 1.0
        assert sum(curve) == 1.0

    def test_custom_sample_count(self, sample_range: PriceRange, axis_range: PriceRange):
        assert len(synthesize_distribution(sample_range, axis_range, 11)) == 11

    def test_rejects_single_sample(self, sample_range: PriceRange, axis_range: PriceRange):
        with pytest.raises(PricingError):
            synthesize_distribution(sample_range, axis_range, 1)

    def test_tiny_sigma_does_not_divide_by_zero(self):
        tiny = PriceRange(min=0.0, mean=0.0, max=1e-170)
        axis = PriceRange(min=0.0, mean=0.5, max=1.0)
        curve = synthesize_distribution(tiny, axis, 11)
        assert curve == (1.0,) + (0.0,) * 10

    def test_tiny_sigma_off_axis_falls_back_to_spike(self, axis_range: PriceRange):
        # Every sample is infinitely many sigmas away from the mean
        tiny = PriceRange(min=0.0, mean=0.0, max=1e-300)
        curve = synthesize_distribution(tiny, axis_range)
        assert curve[0] == 1.0
        assert sum(curve) == 1.0

    def test_huge_mean_does_not_overflow(self, axis_range: PriceRange):
        huge = PriceRange(min=0.0, mean=1e200, max=2e200)
        curve = synthesize_distribution(huge, axis_range)
        assert len(curve) == DEFAULT_SAMPLE_COUNT
        assert all(0.0 <= y <= 1.0 for y in curve)
        assert max(curve) == 1.0

    def test_returns_restartable_tuple(self, sample_range: PriceRange, axis_range: PriceRange):
        curve = synthesize_distribution(sample_range, axis_range)
        assert isinstance(curve, tuple)
        assert list(curve) == list(curve)
