"""Swap orchestration: human intent -> quote -> transaction plan."""

import logging
from dataclasses import dataclass
from typing import Optional

from suiswap.aggregator.base import Aggregator, Quote
from suiswap.chain.plan import CoinSource, TransactionPlan
from suiswap.errors import InvalidPair
from suiswap.services.amounts import to_base_units, to_human_units
from suiswap.services.coin_source import BalanceSource, resolve_input
from suiswap.services.compiler import compile_plan
from suiswap.services.slippage import SlippageInput, slippage_to_bps
from suiswap.services.tokens import TokenRegistry, same_coin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteView:
    quote: Quote
    amount_out_formatted: str


@dataclass(frozen=True)
class PreparedSwap:
    quote: Quote
    input_source: CoinSource
    min_amount_out: int
    plan: TransactionPlan


class SwapService:
    def __init__(
        self,
        aggregator: Aggregator,
        balances: BalanceSource,
        registry: TokenRegistry,
        gas_budget: Optional[int] = None,
        max_display_decimals: Optional[int] = None,
    ):
        self.aggregator = aggregator
        self.balances = balances
        self.registry = registry
        self.gas_budget = gas_budget
        self.max_display_decimals = max_display_decimals

    def format_amount(self, amount: int, coin_type: str) -> str:
        return to_human_units(amount, coin_type, self.registry, self.max_display_decimals)

    async def _fetch(self, from_coin: str, to_coin: str, human_amount: str) -> Quote:
        if same_coin(from_coin, to_coin):
            raise InvalidPair("Input and output tokens must be different")
        amount_in = to_base_units(human_amount, from_coin, self.registry)
        return await self.aggregator.fetch_quote(from_coin, to_coin, amount_in)

    async def quote(self, from_coin: str, to_coin: str, human_amount: str) -> QuoteView:
        quote = await self._fetch(from_coin, to_coin, human_amount)
        return QuoteView(quote=quote, amount_out_formatted=self.format_amount(quote.amount_out, to_coin))

    async def prepare(
        self,
        owner: str,
        from_coin: str,
        to_coin: str,
        human_amount: str,
        slippage_percent: SlippageInput,
    ) -> PreparedSwap:
        """Fresh quote, input coin lookup, then compile. Nothing is signed here."""
        slippage_to_bps(slippage_percent)
        quote = await self._fetch(from_coin, to_coin, human_amount)
        source = await resolve_input(owner, from_coin, quote.amount_in, self.balances)
        plan = compile_plan(quote, owner, source, slippage_percent, gas_budget=self.gas_budget)
        logger.info(f"Prepared swap for {owner}: {human_amount} {from_coin} -> {to_coin}, {len(plan)} operations")
        return PreparedSwap(
            quote=quote,
            input_source=source,
            min_amount_out=plan.operations[-2].min_out,
            plan=plan,
        )
