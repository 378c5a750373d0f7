"""Command-line quote tool for the blended pricing engine.

Calculates a blended price for a duration and complexity and prints it as
a human-readable table (default) or as JSON.

Usage::

    python -m blended_pricing.cli --minutes 5 --complexity 0.5
    python -m blended_pricing.cli --minutes 12 --complexity 0.9 --format json
"""

from __future__ import annotations

import argparse
import json
import sys

import structlog
from pydantic import ValidationError

from blended_pricing.config import get_settings
from blended_pricing.domain.errors import PricingError
from blended_pricing.domain.models import PriceRange, PricingInput, PricingResult
from blended_pricing.domain.types import ContentType
from blended_pricing.formatting import (
    format_minutes,
    format_mix_summary,
    format_price,
    get_complexity_text,
    get_content_type_name,
    round_to_nearest,
)
from blended_pricing.observability.logs import configure_logging
from blended_pricing.pricing.engine import calculate_price

logger = structlog.get_logger()

# Exit status for invalid input, matching argparse usage errors
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for price quotes.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(description="Quote a blended video production price")

    parser.add_argument(
        "--minutes",
        type=int,
        default=5,
        help="Video duration in minutes (default: 5)",
    )
    parser.add_argument(
        "--complexity",
        type=float,
        default=0.5,
        help="Complexity from 0 (simple) to 1 (complex) (default: 0.5)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["table", "json"],
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Distribution curve length (default: DISTRIBUTION_SAMPLES setting)",
    )
    parser.add_argument(
        "--currency",
        type=str,
        default=None,
        help="Currency code shown in the table (default: CURRENCY setting)",
    )

    return parser


def _per_minute(price_range: PriceRange, currency: str) -> str:
    low = format_price(round_to_nearest(price_range.min), currency)
    high = format_price(round_to_nearest(price_range.max), currency)
    return f"{low} - {high} /min"


def _total(price_range: PriceRange, currency: str) -> str:
    return f"{format_price(price_range.min, currency)} - {format_price(price_range.max, currency)}"


def format_table(result: PricingResult, currency: str = "AED") -> str:
    """Format a pricing result as a human-readable breakdown.

    Per-minute figures are rounded to the nearest 10, totals to whole units.

    Args:
        result: The calculated pricing result.
        currency: Currency code to prefix prices with.

    Returns:
        Multi-line table string.
    """
    mix = result.mix_ratio
    label = get_complexity_text(result.complexity_factor)
    plural = "" if result.minutes == 1 else "s"

    rows = [
        (
            get_content_type_name(ContentType.MOTION_GRAPHICS),
            format_minutes(mix.motion_graphics_minutes),
            _per_minute(result.motion_graphics_price_range, currency),
            _total(result.motion_graphics_total_range, currency),
        ),
        (
            get_content_type_name(ContentType.CGFX),
            format_minutes(mix.cgfx_minutes),
            _per_minute(result.cgfx_price_range, currency),
            _total(result.cgfx_total_range, currency),
        ),
    ]
    widths = [18, 10, 30, 30]

    lines = [
        f"Duration:    {result.minutes} minute{plural}",
        f"Complexity:  {label} ({result.complexity_factor:.2f})",
        f"Mix:         {format_mix_summary(mix)}",
        "",
    ]
    headers = ["Content", "Minutes", "Per Minute", "Total"]
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths, strict=True))
    lines.append(header_line)
    lines.append("-" * len(header_line))
    for row in rows:
        lines.append("  ".join(c.ljust(w) for c, w in zip(row, widths, strict=True)))
    lines.append("")
    lines.append(f"Blended:     {_per_minute(result.price_per_minute_range, currency)}")
    lines.append(f"Total:       {_total(result.total_price_range, currency)}")
    lines.append(
        f"Estimate:    {format_price(result.total_price_range.mean, currency)} "
        "(68% confidence interval above)"
    )

    return "\n".join(lines)


def format_json(result: PricingResult) -> str:
    """Format a pricing result as a JSON string.

    Args:
        result: The calculated pricing result.

    Returns:
        Pretty-printed JSON string.
    """
    return json.dumps(result.model_dump(mode="json"), indent=2)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, calculate the price, and print the result.

    Returns:
        Process exit status: 0 on success, 2 on invalid input.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(production=settings.production, log_level=settings.log_level)

    sample_count = args.samples if args.samples is not None else settings.distribution_samples
    currency = args.currency or settings.currency

    try:
        pricing_input = PricingInput(minutes=args.minutes, complexity_factor=args.complexity)
        result = calculate_price(pricing_input, sample_count=sample_count)
    except (PricingError, ValidationError) as exc:
        logger.error("quote_failed", error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    output = format_json(result) if args.output_format == "json" else format_table(result, currency)
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
