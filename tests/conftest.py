import pytest

from suiswap.services.tokens import SUI_COIN_TYPE, USDC_COIN_TYPE, TokenInfo, TokenRegistry


@pytest.fixture()
def registry() -> TokenRegistry:
    return TokenRegistry.from_tokens([
        TokenInfo(coin_type=SUI_COIN_TYPE, symbol="SUI", decimals=9),
        TokenInfo(coin_type=USDC_COIN_TYPE, symbol="USDC", decimals=6),
        TokenInfo(coin_type="0xabc::whole::WHOLE", symbol="WHOLE", decimals=0),
    ])
