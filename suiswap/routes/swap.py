import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from suiswap.aggregator.base import Quote
from suiswap.chain.sui import SuiRpcError
from suiswap.config import settings
from suiswap.dependencies import get_swap_service
from suiswap.errors import MissingCallTarget, NoRoute, SwapError
from suiswap.schemas.common import ErrorResponse
from suiswap.schemas.swap import PrepareRequest, PrepareResponse, QuoteResponse
from suiswap.services.swap import SwapService
from suiswap.services.tokens import TokenRegistry

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, NoRoute):
        return HTTPException(status_code=404, detail=f"{e.message}. Try a different pair or amount.")
    if isinstance(e, MissingCallTarget):
        return HTTPException(status_code=502, detail=e.message)
    if isinstance(e, SwapError):
        return HTTPException(status_code=400, detail=e.message)
    if isinstance(e, httpx.HTTPStatusError):
        return HTTPException(status_code=e.response.status_code, detail=f"Upstream error: {e.response.text or e}")
    if isinstance(e, SuiRpcError):
        return HTTPException(status_code=502, detail=str(e))
    return HTTPException(status_code=502, detail=f"Upstream request failed: {e}")


def _quote_response(quote: Quote, formatted: str, registry: TokenRegistry) -> QuoteResponse:
    raw_routes = (quote.raw or {}).get("routes")
    return QuoteResponse(
        from_coin=quote.from_coin,
        to_coin=quote.to_coin,
        from_symbol=registry.symbol_of(quote.from_coin),
        to_symbol=registry.symbol_of(quote.to_coin),
        amount_in=str(quote.amount_in),
        amount_out=str(quote.amount_out),
        amount_out_formatted=formatted,
        routes=raw_routes if isinstance(raw_routes, list) else [],
    )


@router.get("/quote", response_model=QuoteResponse, responses=ERROR_RESPONSES)
async def get_quote(
    from_coin: str = Query(..., alias="from"),
    to_coin: str = Query(..., alias="to"),
    amount: str = Query(...),
    service: SwapService = Depends(get_swap_service),
):
    try:
        view = await service.quote(from_coin, to_coin, amount)
    except (SwapError, SuiRpcError, httpx.HTTPError) as e:
        raise _http_error(e)
    return _quote_response(view.quote, view.amount_out_formatted, service.registry)


@router.post("/swap/prepare", response_model=PrepareResponse, responses=ERROR_RESPONSES)
async def prepare_swap(
    req: PrepareRequest,
    service: SwapService = Depends(get_swap_service),
):
    slippage = req.slippage if req.slippage is not None else settings.default_slippage_percent
    try:
        prepared = await service.prepare(req.wallet_address, req.from_coin, req.to_coin, req.amount, slippage)
    except (SwapError, SuiRpcError, httpx.HTTPError) as e:
        raise _http_error(e)

    quote = prepared.quote
    return PrepareResponse(
        quote=_quote_response(quote, service.format_amount(quote.amount_out, quote.to_coin), service.registry),
        slippage=slippage,
        min_amount_out=str(prepared.min_amount_out),
        min_amount_out_formatted=service.format_amount(prepared.min_amount_out, quote.to_coin),
        plan=prepared.plan.to_dict(),
    )
