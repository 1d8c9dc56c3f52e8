"""
Amount codec: human decimal strings <-> integer base units.

Parsing scales the decimal digits directly; nothing on this path goes
through float.
"""

import re
from typing import Optional

from suiswap.errors import InvalidAmount
from suiswap.services.tokens import TokenRegistry

U64_MAX = 2**64 - 1

_AMOUNT_RE = re.compile(r"^(?P<whole>\d*)(?:\.(?P<frac>\d*))?$", re.ASCII)


def to_base_units(human_amount: str, coin_type: str, registry: TokenRegistry) -> int:
    """Parse ``human_amount`` into base units of ``coin_type``.

    Digits past the token's precision are truncated, never rounded up.
    Raises InvalidAmount for malformed, negative, zero or out-of-range input.
    """
    if not isinstance(human_amount, str):
        raise InvalidAmount(f"Amount must be a decimal string, got {type(human_amount).__name__}")
    text = human_amount.strip()
    match = _AMOUNT_RE.match(text)
    if not text or match is None or text == ".":
        raise InvalidAmount(f"Invalid amount: {human_amount!r}")

    decimals = registry.decimals_of(coin_type)
    whole = match.group("whole") or "0"
    frac = (match.group("frac") or "")[:decimals].ljust(decimals, "0")

    value = int(whole) * 10**decimals + (int(frac) if frac else 0)
    if value <= 0:
        raise InvalidAmount(f"Amount must be greater than zero: {human_amount!r}")
    if value > U64_MAX:
        raise InvalidAmount(f"Amount exceeds the maximum on-chain balance: {human_amount!r}")
    return value


def to_human_units(
    amount: int,
    coin_type: str,
    registry: TokenRegistry,
    max_display_decimals: Optional[int] = None,
) -> str:
    """Format base units as a decimal string, truncating to ``max_display_decimals``.

    ``None`` keeps every significant fractional digit.
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise InvalidAmount(f"Base-unit amount must be a non-negative integer, got {amount!r}")
    if max_display_decimals is not None and max_display_decimals < 0:
        raise ValueError("max_display_decimals must be non-negative")

    decimals = registry.decimals_of(coin_type)
    whole, remainder = divmod(amount, 10**decimals)
    if decimals == 0:
        return str(whole)

    frac = str(remainder).zfill(decimals)
    if max_display_decimals is not None:
        frac = frac[:max_display_decimals]
    frac = frac.rstrip("0")
    return f"{whole}.{frac}" if frac else str(whole)
