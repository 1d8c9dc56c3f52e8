"""
NAVI aggregator adapter.
Finds swap routes across Sui DEX pools via the NAVI open aggregator API.
"""

import logging
from typing import Any, Optional

import httpx

from suiswap.aggregator.base import Aggregator, Quote, Route, Step
from suiswap.config import settings
from suiswap.errors import NoRoute

logger = logging.getLogger(__name__)


def _first(data: dict, *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _parse_amount(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"not an amount: {value!r}")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and value.strip().isdigit():
        amount = int(value.strip())
    else:
        raise ValueError(f"not an amount: {value!r}")
    if amount < 0:
        raise ValueError(f"negative amount: {value!r}")
    return amount


def _parse_call_target(hop: dict) -> tuple[Optional[str], tuple[str, ...]]:
    ptb = hop.get("info_for_ptb") or hop.get("infoForPtb") or {}
    if not isinstance(ptb, dict):
        return None, ()
    type_args = _first(ptb, "type_arguments", "typeArguments") or ()
    if not isinstance(type_args, (list, tuple)) or not all(isinstance(t, str) for t in type_args):
        raise ValueError("type arguments must be a list of strings")

    target = _first(ptb, "call_target", "target")
    if isinstance(target, str) and target.count("::") == 2:
        return target, tuple(type_args)

    package = _first(ptb, "package_id", "packageId", "package")
    module = _first(ptb, "module", "moduleName")
    function = _first(ptb, "function", "functionName")
    if all(isinstance(p, str) and p for p in (package, module, function)):
        return f"{package}::{module}::{function}", tuple(type_args)
    return None, tuple(type_args)


def _parse_step(hop: Any) -> Step:
    if not isinstance(hop, dict):
        raise ValueError("step is not an object")
    pool_id = _first(hop, "id", "pool_id", "poolId")
    if not isinstance(pool_id, str) or not pool_id:
        raise ValueError("step has no pool id")
    call_target, type_args = _parse_call_target(hop)
    return Step(
        pool_id=pool_id,
        call_target=call_target,
        type_arguments=type_args,
        estimated_amount_out=_parse_amount(_first(hop, "amount_out", "amountOut")),
    )


def _parse_route(data: Any) -> Route:
    if not isinstance(data, dict):
        raise ValueError("route is not an object")
    path = data.get("path")
    if not isinstance(path, list) or not path:
        raise ValueError("route has no path")
    return Route(path=tuple(_parse_step(hop) for hop in path))


def parse_quote(reply: Any, from_coin: str, to_coin: str, amount_in: int) -> Quote:
    """Normalize a raw find_routes reply; anything unusable is NoRoute."""
    if isinstance(reply, dict) and isinstance(reply.get("data"), dict):
        reply = reply["data"]
    if not isinstance(reply, dict):
        raise NoRoute(f"No route found from {from_coin} to {to_coin}")

    try:
        amount_out = _parse_amount(_first(reply, "amount_out", "amountOut"))
        raw_in = _first(reply, "amount_in", "amountIn")
        quoted_in = _parse_amount(raw_in) if raw_in is not None else amount_in
        routes = reply.get("routes")
        if not isinstance(routes, list):
            raise ValueError("routes is not a list")
        parsed_routes = tuple(_parse_route(r) for r in routes)
    except ValueError as e:
        logger.warning(f"Rejected aggregator reply for {from_coin} -> {to_coin}: {e}")
        raise NoRoute(f"No route found from {from_coin} to {to_coin}") from None

    if amount_out <= 0 or not parsed_routes:
        raise NoRoute(f"No route found from {from_coin} to {to_coin}")

    return Quote(
        from_coin=from_coin,
        to_coin=to_coin,
        amount_in=quoted_in,
        amount_out=amount_out,
        routes=parsed_routes,
        raw=reply,
    )


class NaviAggregator(Aggregator):
    name = "NAVI"

    def __init__(self, http: Optional[httpx.AsyncClient] = None):
        self._http = http
        self._depth = settings.navi_route_depth

    async def initialize(self) -> None:
        if self._http is not None:
            return
        headers = {"Content-Type": "application/json"}
        if settings.navi_api_key:
            headers["x-navi-token"] = settings.navi_api_key
        self._http = httpx.AsyncClient(
            base_url=settings.navi_api_base_url,
            timeout=settings.http_timeout_seconds,
            headers=headers,
        )

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    async def find_route(self, from_coin: str, to_coin: str, amount_in: int) -> Any:
        params = {
            "from": from_coin,
            "target": to_coin,
            "amount": str(amount_in),
            "by_amount_in": "true",
            "depth": self._depth,
            "referer": settings.navi_referer,
        }
        logger.info(f"Fetching NAVI route {from_coin} -> {to_coin}, amount: {amount_in}")
        resp = await self._http.get("/find_routes", params=params)
        resp.raise_for_status()
        try:
            return resp.json()
        except ValueError:
            logger.warning(f"Non-JSON NAVI reply for {from_coin} -> {to_coin}: {resp.text[:200]!r}")
            raise NoRoute(f"No route found from {from_coin} to {to_coin}") from None

    async def fetch_quote(self, from_coin: str, to_coin: str, amount_in: int) -> Quote:
        reply = await self.find_route(from_coin, to_coin, amount_in)
        return parse_quote(reply, from_coin, to_coin, amount_in)


navi_aggregator = NaviAggregator()
