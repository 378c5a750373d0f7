"""Shared pytest fixtures for the blended pricing test suite."""

import pytest

from blended_pricing.domain.models import PriceRange, PricingInput


@pytest.fixture
def sample_input() -> PricingInput:
    """The calculator's default request: 5 minutes at moderate complexity."""
    return PricingInput(minutes=5, complexity_factor=0.5)


@pytest.fixture
def sample_range() -> PriceRange:
    """A representative per-minute range with a 500 sigma."""
    return PriceRange(min=2500.0, mean=3000.0, max=3500.0)


@pytest.fixture
def axis_range() -> PriceRange:
    """Baseline axis spanning both default rate cards."""
    return PriceRange(min=2000.0, mean=3000.0, max=4000.0)
