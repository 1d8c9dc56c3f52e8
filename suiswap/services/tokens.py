"""
Token registry: coin type -> display symbol and decimal precision.

The registry is an explicit immutable value handed to whatever needs it,
so tests can build synthetic registries without touching process state.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

SUI_COIN_TYPE = "0x2::sui::SUI"
USDC_COIN_TYPE = "0xdba34672e30cb065b1f93e3ab55318768fd6fef66c15942c9f7cb846e2f900e7::usdc::USDC"
CETUS_COIN_TYPE = "0x6864a6f921804860930db6ddbe2e16acdf8504495ea7481637a1c8b9a8fe54b::cetus::CETUS"

DEFAULT_DECIMALS = 9


@dataclass(frozen=True)
class TokenInfo:
    coin_type: str
    symbol: str
    decimals: int


def _normalize_address(address: str) -> str:
    body = address.lower()
    if body.startswith("0x"):
        body = body[2:]
    return "0x" + (body.lstrip("0") or "0")


def normalize_coin_type(coin_type: str) -> str:
    """Canonical form of a coin type: the address part lower-cased with leading zeros dropped."""
    parts = coin_type.strip().split("::", 2)
    if len(parts) != 3:
        return coin_type
    return "::".join([_normalize_address(parts[0]), parts[1], parts[2]])


def same_coin(a: str, b: str) -> bool:
    return normalize_coin_type(a) == normalize_coin_type(b)


def is_native(coin_type: str) -> bool:
    """True for SUI in either the short (0x2) or the zero-padded address form."""
    return normalize_coin_type(coin_type) == SUI_COIN_TYPE


@dataclass(frozen=True)
class TokenRegistry:
    tokens: Mapping[str, TokenInfo] = field(default_factory=dict)
    default_decimals: int = DEFAULT_DECIMALS

    def __post_init__(self):
        if self.default_decimals < 0:
            raise ValueError("default_decimals must be non-negative")
        object.__setattr__(self, "tokens", MappingProxyType(dict(self.tokens)))

    @classmethod
    def from_tokens(cls, tokens: Iterable[TokenInfo], default_decimals: int = DEFAULT_DECIMALS) -> "TokenRegistry":
        return cls(tokens={t.coin_type: t for t in tokens}, default_decimals=default_decimals)

    def _lookup(self, coin_type: str):
        info = self.tokens.get(coin_type)
        if info is None and is_native(coin_type):
            info = self.tokens.get(SUI_COIN_TYPE)
        return info

    def decimals_of(self, coin_type: str) -> int:
        info = self._lookup(coin_type)
        return info.decimals if info else self.default_decimals

    def symbol_of(self, coin_type: str) -> str:
        info = self._lookup(coin_type)
        if info:
            return info.symbol
        return coin_type.rsplit("::", 1)[-1]

    def all(self) -> list[TokenInfo]:
        return list(self.tokens.values())


BUILTIN_TOKENS = (
    TokenInfo(coin_type=SUI_COIN_TYPE, symbol="SUI", decimals=9),
    TokenInfo(coin_type=USDC_COIN_TYPE, symbol="USDC", decimals=6),
    TokenInfo(coin_type=CETUS_COIN_TYPE, symbol="CETUS", decimals=9),
)


def default_registry(default_decimals: int = DEFAULT_DECIMALS) -> TokenRegistry:
    return TokenRegistry.from_tokens(BUILTIN_TOKENS, default_decimals=default_decimals)
