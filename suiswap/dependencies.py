from functools import lru_cache

from suiswap.aggregator.navi import navi_aggregator
from suiswap.chain.sui import sui_client
from suiswap.config import settings
from suiswap.services.swap import SwapService
from suiswap.services.tokens import TokenRegistry, default_registry


@lru_cache
def get_registry() -> TokenRegistry:
    return default_registry(default_decimals=settings.default_token_decimals)


def get_swap_service() -> SwapService:
    return SwapService(
        aggregator=navi_aggregator,
        balances=sui_client,
        registry=get_registry(),
        gas_budget=settings.gas_budget,
        max_display_decimals=settings.max_display_decimals,
    )
