"""
Transaction plan: a linear list of primitive operations handed to an
external signer.

Values are single-assignment. ``ValueRef(i)`` names the value produced by
operation ``i`` and may be consumed by exactly one later operation.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class GasCoin:
    """The sender's native gas coin."""

    kind = "gas"


@dataclass(frozen=True)
class OwnedCoin:
    object_id: str
    balance: int

    kind = "object"


CoinSource = Union[GasCoin, OwnedCoin]


@dataclass(frozen=True)
class ValueRef:
    index: int


@dataclass(frozen=True)
class SplitValue:
    source: CoinSource
    amount: int


@dataclass(frozen=True)
class InvokeStep:
    pool_id: str
    call_target: str
    type_arguments: tuple[str, ...]
    input: ValueRef
    min_out: int


@dataclass(frozen=True)
class TransferValue:
    value: ValueRef
    recipient: str


Operation = Union[SplitValue, InvokeStep, TransferValue]


class PlanError(ValueError):
    pass


def _source_to_dict(source: CoinSource) -> dict:
    if isinstance(source, OwnedCoin):
        return {"kind": source.kind, "object_id": source.object_id, "balance": str(source.balance)}
    return {"kind": source.kind}


@dataclass(frozen=True)
class TransactionPlan:
    sender: str
    operations: tuple[Operation, ...]
    gas_budget: Optional[int] = None

    def __len__(self) -> int:
        return len(self.operations)

    def check_linear(self) -> None:
        """Raise PlanError unless the plan is Split, Invoke..., Transfer with each value used once."""
        ops = self.operations
        if len(ops) < 3:
            raise PlanError("plan needs a split, at least one invoke and a transfer")
        if not isinstance(ops[0], SplitValue):
            raise PlanError("plan must start with a split")
        if not isinstance(ops[-1], TransferValue):
            raise PlanError("plan must end with a transfer")

        consumed: set[int] = set()
        for i, op in enumerate(ops[1:], start=1):
            if isinstance(op, SplitValue):
                raise PlanError(f"unexpected split at operation {i}")
            if isinstance(op, TransferValue) and i != len(ops) - 1:
                raise PlanError(f"unexpected transfer at operation {i}")
            ref = op.input if isinstance(op, InvokeStep) else op.value
            if ref.index != i - 1:
                raise PlanError(f"operation {i} consumes {ref.index}, expected {i - 1}")
            if ref.index in consumed:
                raise PlanError(f"value {ref.index} consumed twice")
            consumed.add(ref.index)

    def to_dict(self) -> dict:
        out = []
        for op in self.operations:
            if isinstance(op, SplitValue):
                out.append({"op": "split", "source": _source_to_dict(op.source), "amount": str(op.amount)})
            elif isinstance(op, InvokeStep):
                out.append({
                    "op": "invoke",
                    "pool_id": op.pool_id,
                    "call_target": op.call_target,
                    "type_arguments": list(op.type_arguments),
                    "input": op.input.index,
                    "min_out": str(op.min_out),
                })
            else:
                out.append({"op": "transfer", "value": op.value.index, "recipient": op.recipient})
        return {
            "sender": self.sender,
            "gas_budget": str(self.gas_budget) if self.gas_budget is not None else None,
            "operations": out,
        }
