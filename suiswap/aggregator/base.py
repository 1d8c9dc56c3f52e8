"""
Aggregator abstraction: the normalized quote model every oracle adapter
produces, and the interface the swap service talks to.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Step:
    pool_id: str
    call_target: Optional[str]  # "<package>::<module>::<function>"
    type_arguments: tuple[str, ...]
    estimated_amount_out: int


@dataclass(frozen=True)
class Route:
    path: tuple[Step, ...]


@dataclass(frozen=True)
class Quote:
    from_coin: str
    to_coin: str
    amount_in: int
    amount_out: int
    routes: tuple[Route, ...]
    raw: Optional[dict] = field(default=None, compare=False, repr=False)

    @property
    def best_route(self) -> Optional[Route]:
        return self.routes[0] if self.routes else None


class Aggregator(ABC):
    name: str

    @abstractmethod
    async def initialize(self) -> None:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass

    @abstractmethod
    async def find_route(self, from_coin: str, to_coin: str, amount_in: int) -> Any:
        """Raw oracle reply for one route search."""

    @abstractmethod
    async def fetch_quote(self, from_coin: str, to_coin: str, amount_in: int) -> Quote:
        """Validated Quote, or NoRoute."""
