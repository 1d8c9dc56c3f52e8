from fastapi import APIRouter, Depends

from suiswap.dependencies import get_registry
from suiswap.schemas.swap import TokenResponse
from suiswap.services.tokens import TokenRegistry

router = APIRouter()


@router.get("/tokens", response_model=list[TokenResponse])
async def list_tokens(registry: TokenRegistry = Depends(get_registry)):
    return [
        TokenResponse(coin_type=t.coin_type, symbol=t.symbol, decimals=t.decimals)
        for t in registry.all()
    ]
