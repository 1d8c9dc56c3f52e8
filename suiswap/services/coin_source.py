"""Input coin resolution for swaps."""

import logging
from typing import Protocol

from suiswap.chain.plan import CoinSource, GasCoin, OwnedCoin
from suiswap.chain.sui import Holding
from suiswap.errors import InsufficientBalance
from suiswap.services.tokens import is_native

logger = logging.getLogger(__name__)


class BalanceSource(Protocol):
    async def list_holdings(self, owner: str, coin_type: str) -> list[Holding]: ...


async def resolve_input(owner: str, coin_type: str, amount: int, balances: BalanceSource) -> CoinSource:
    """Pick the coin the swap input is split from.

    Native SUI comes from the gas coin with no lookup. Otherwise the first
    owned coin holding at least ``amount`` is used; coins are never merged.
    """
    if is_native(coin_type):
        return GasCoin()

    holdings = await balances.list_holdings(owner, coin_type)
    if not holdings:
        raise InsufficientBalance(f"No {coin_type} coins found for {owner}")
    for h in holdings:
        if h.balance >= amount:
            return OwnedCoin(object_id=h.object_id, balance=h.balance)

    logger.info(f"No single {coin_type} coin covers {amount} for {owner} ({len(holdings)} coins)")
    raise InsufficientBalance(f"Insufficient balance for the swap amount: need {amount} in a single coin")
