import asyncio

import httpx
import pytest

from suiswap.aggregator.navi import NaviAggregator, parse_quote
from suiswap.errors import NoRoute
from suiswap.services.tokens import SUI_COIN_TYPE, USDC_COIN_TYPE


def _hop(pool, amount_out, **ptb):
    info = {"packageId": "0xcetus", "moduleName": "router", "functionName": "swap",
            "typeArguments": [SUI_COIN_TYPE, USDC_COIN_TYPE]}
    info.update(ptb)
    return {"id": pool, "provider": "cetus", "from": SUI_COIN_TYPE, "target": USDC_COIN_TYPE,
            "amount_in": "1500000000", "amount_out": amount_out, "info_for_ptb": info}


def _reply(routes, amount_out="2000000"):
    return {"data": {"amount_in": "1500000000", "amount_out": amount_out, "routes": routes}}


TWO_HOP = _reply([
    {
        "amount_in": "1500000000",
        "amount_out": "2000000",
        "path": [_hop("0xpool1", "9000000000"), _hop("0xpool2", "2000000", packageId="0xturbos")],
    },
    {"amount_in": "1500000000", "amount_out": "1900000", "path": [_hop("0xpool3", "1900000")]},
])


def test_parse_two_hop_reply():
    quote = parse_quote(TWO_HOP, SUI_COIN_TYPE, USDC_COIN_TYPE, 1_500_000_000)

    assert quote.amount_in == 1_500_000_000
    assert quote.amount_out == 2_000_000
    assert len(quote.routes) == 2
    first, second = quote.best_route.path
    assert first.pool_id == "0xpool1"
    assert first.call_target == "0xcetus::router::swap"
    assert first.type_arguments == (SUI_COIN_TYPE, USDC_COIN_TYPE)
    assert first.estimated_amount_out == 9_000_000_000
    assert second.call_target == "0xturbos::router::swap"
    assert quote.raw["routes"] == TWO_HOP["data"]["routes"]


def test_parse_accepts_unwrapped_reply_and_full_target():
    reply = {"amount_out": 5, "routes": [{"path": [{"id": "0xp", "amount_out": 5,
                                                     "info_for_ptb": {"target": "0x1::m::f"}}]}]}
    quote = parse_quote(reply, SUI_COIN_TYPE, USDC_COIN_TYPE, 77)
    assert quote.amount_in == 77
    assert quote.best_route.path[0].call_target == "0x1::m::f"


def test_missing_call_target_is_kept_for_the_compiler():
    reply = _reply([{"path": [{"id": "0xpool1", "amount_out": "2000000"}]}])
    quote = parse_quote(reply, SUI_COIN_TYPE, USDC_COIN_TYPE, 1)
    assert quote.best_route.path[0].call_target is None


@pytest.mark.parametrize(
    "reply",
    [
        None,
        {},
        {"data": None},
        _reply([], amount_out="2000000"),
        _reply([{"path": [_hop("0xpool1", "2000000")]}], amount_out="0"),
        _reply([{"path": [_hop("0xpool1", "2000000")]}], amount_out="1.5"),
        _reply([{"path": []}]),
        _reply([{"path": [{"amount_out": "1"}]}]),
        _reply([{"path": [_hop("0xpool1", "-3")]}]),
        _reply([{"path": [_hop("0xpool1", "1", typeArguments="oops")]}]),
        {"data": {"amount_out": "10", "routes": "nope"}},
    ],
)
def test_degenerate_replies_are_no_route(reply):
    with pytest.raises(NoRoute):
        parse_quote(reply, SUI_COIN_TYPE, USDC_COIN_TYPE, 1)


def _navi(handler) -> NaviAggregator:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://navi.test")
    return NaviAggregator(http=http)


def test_fetch_quote_calls_find_routes():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=TWO_HOP)

    quote = asyncio.run(_navi(handler).fetch_quote(SUI_COIN_TYPE, USDC_COIN_TYPE, 1_500_000_000))

    assert quote.amount_out == 2_000_000
    assert len(seen) == 1
    req = seen[0]
    assert req.url.path == "/find_routes"
    assert req.url.params["from"] == SUI_COIN_TYPE
    assert req.url.params["target"] == USDC_COIN_TYPE
    assert req.url.params["amount"] == "1500000000"
    assert req.url.params["by_amount_in"] == "true"
    assert req.url.params["depth"] == "3"
    assert req.url.params["referer"] == "sui-swap-app"


def test_upstream_http_errors_propagate_without_retry():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, json={"error": "boom"})

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_navi(handler).fetch_quote(SUI_COIN_TYPE, USDC_COIN_TYPE, 1))
    assert len(calls) == 1


@pytest.mark.parametrize("body", ["<html>gateway</html>", '{"data": {"amount_out": "1"', ""])
def test_non_json_reply_is_no_route(body):
    def handler(request):
        return httpx.Response(200, text=body)

    with pytest.raises(NoRoute):
        asyncio.run(_navi(handler).fetch_quote(SUI_COIN_TYPE, USDC_COIN_TYPE, 1))
