from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


class QuoteResponse(BaseModel):
    from_coin: str
    to_coin: str
    from_symbol: str
    to_symbol: str
    amount_in: str  # base units
    amount_out: str  # base units
    amount_out_formatted: str
    routes: list[dict[str, Any]] = Field(default_factory=list)  # raw oracle routes, for display


class PrepareRequest(BaseModel):
    wallet_address: str
    from_coin: str
    to_coin: str
    amount: str  # human units, e.g. "1.5"
    slippage: Decimal | None = None  # percent; settings default when omitted


class InputCoin(BaseModel):
    kind: str
    object_id: str | None = None
    balance: str | None = None


class OperationData(BaseModel):
    op: str
    source: InputCoin | None = None
    amount: str | None = None
    pool_id: str | None = None
    call_target: str | None = None
    type_arguments: list[str] | None = None
    input: int | None = None
    min_out: str | None = None
    value: int | None = None
    recipient: str | None = None


class TransactionPlanData(BaseModel):
    sender: str
    gas_budget: str | None = None
    operations: list[OperationData]


class PrepareResponse(BaseModel):
    quote: QuoteResponse
    slippage: Decimal
    min_amount_out: str
    min_amount_out_formatted: str
    plan: TransactionPlanData


class TokenResponse(BaseModel):
    coin_type: str
    symbol: str
    decimals: int
