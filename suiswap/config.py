from decimal import Decimal
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # NAVI aggregator
    navi_api_base_url: str = "https://open-aggregator-api.naviprotocol.io"
    navi_api_key: str = ""
    navi_route_depth: int = 3
    navi_referer: str = "sui-swap-app"
    http_timeout_seconds: float = 30.0

    # Sui
    sui_rpc_url: str = "https://fullnode.mainnet.sui.io:443"
    gas_budget: int = 100_000_000  # 0.1 SUI

    # Swap defaults
    default_slippage_percent: Decimal = Decimal("0.5")
    default_token_decimals: int = 9
    max_display_decimals: Optional[int] = 6

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
