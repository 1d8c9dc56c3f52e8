"""Slippage guard — minimum acceptable output in basis points."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from suiswap.errors import InvalidAmount, InvalidSlippage

BPS_DENOMINATOR = 10000

SlippageInput = Union[Decimal, int, float, str]


def slippage_to_bps(slippage_percent: SlippageInput) -> int:
    """Convert a percentage (0.5 == 0.5%) to whole basis points, half-up."""
    if isinstance(slippage_percent, bool):
        raise InvalidSlippage(f"Invalid slippage: {slippage_percent!r}")
    try:
        pct = Decimal(str(slippage_percent).strip())
    except (InvalidOperation, ValueError):
        raise InvalidSlippage(f"Invalid slippage: {slippage_percent!r}") from None
    if not pct.is_finite() or pct < 0 or pct >= 100:
        raise InvalidSlippage(f"Slippage must be in [0, 100), got {slippage_percent}")
    return int((pct * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def min_acceptable_output(expected: int, slippage_percent: SlippageInput) -> int:
    """expected * (10000 - bps) // 10000, integer floor division."""
    if isinstance(expected, bool) or not isinstance(expected, int) or expected < 0:
        raise InvalidAmount(f"Expected output must be a non-negative integer, got {expected!r}")
    bps = slippage_to_bps(slippage_percent)
    return expected * (BPS_DENOMINATOR - bps) // BPS_DENOMINATOR
