"""Domain-specific exception classes for the blended pricing engine."""


class PricingError(Exception):
    """Base class for all errors raised by the pricing engine."""


class InvalidWeightsError(PricingError):
    """Raised when blend weights are negative or do not sum to one.

    Attributes:
        weight_a: The weight applied to the first range.
        weight_b: The weight applied to the second range.
    """

    def __init__(self, weight_a: float, weight_b: float) -> None:
        self.weight_a = weight_a
        self.weight_b = weight_b
        super().__init__(
            f"Blend weights must be non-negative and sum to 1 "
            f"(got {weight_a} + {weight_b})"
        )


class DistributionError(PricingError):
    """Raised when a distribution curve cannot be sampled as requested."""
