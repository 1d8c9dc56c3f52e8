"""
Minimal Sui JSON-RPC client.
Only the read calls the swap flow needs: owned coin listing.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from suiswap.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Holding:
    object_id: str
    balance: int


class SuiRpcError(Exception):
    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        self.code = code
        super().__init__(f"[sui] {message}")


class SuiClient:
    def __init__(self, http: Optional[httpx.AsyncClient] = None):
        self._http = http
        self._ids = itertools.count(1)

    async def initialize(self) -> None:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=settings.sui_rpc_url,
                timeout=settings.http_timeout_seconds,
                headers={"Content-Type": "application/json"},
            )

    async def close(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    async def _rpc(self, method: str, params: list) -> Any:
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        resp = await self._http.post("", json=payload)
        resp.raise_for_status()
        try:
            body = resp.json()
        except ValueError:
            raise SuiRpcError(f"non-JSON reply to {method}") from None
        if not isinstance(body, dict):
            raise SuiRpcError(f"unexpected reply to {method}")
        if body.get("error"):
            err = body["error"]
            if not isinstance(err, dict):
                raise SuiRpcError(str(err))
            raise SuiRpcError(err.get("message", "unknown error"), err.get("code"))
        return body.get("result")

    async def list_holdings(self, owner: str, coin_type: str) -> list[Holding]:
        """Coins of ``coin_type`` owned by ``owner``, first page only, in RPC order."""
        result = await self._rpc("suix_getCoins", [owner, coin_type, None, None]) or {}
        try:
            holdings = [
                Holding(object_id=str(c["coinObjectId"]), balance=int(c["balance"]))
                for c in result.get("data", [])
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SuiRpcError(f"malformed suix_getCoins reply: {e!r}") from None
        logger.info(f"Found {len(holdings)} {coin_type} coins for {owner}")
        return holdings


sui_client = SuiClient()
