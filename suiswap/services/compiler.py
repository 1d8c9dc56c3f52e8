"""
Quote -> transaction plan compiler.

The chosen route is the first one the aggregator returned. The input value
is split once, threaded through every hop in order, and the final output is
transferred back to the payer. Only the last hop carries a minimum-output
bound; intermediate hops accept any output.
"""

import logging
from typing import Optional

from suiswap.aggregator.base import Quote
from suiswap.chain.plan import (
    CoinSource,
    InvokeStep,
    Operation,
    SplitValue,
    TransactionPlan,
    TransferValue,
    ValueRef,
)
from suiswap.errors import MissingCallTarget, NoRoute
from suiswap.services.slippage import SlippageInput, min_acceptable_output, slippage_to_bps

logger = logging.getLogger(__name__)


def compile_plan(
    quote: Quote,
    payer: str,
    input_source: CoinSource,
    slippage_percent: SlippageInput,
    gas_budget: Optional[int] = None,
) -> TransactionPlan:
    slippage_to_bps(slippage_percent)
    route = quote.best_route
    if route is None or not route.path:
        raise NoRoute(f"No route found from {quote.from_coin} to {quote.to_coin}")

    ops: list[Operation] = [SplitValue(source=input_source, amount=quote.amount_in)]
    current = ValueRef(0)
    last = len(route.path) - 1

    for i, step in enumerate(route.path):
        if not step.call_target:
            raise MissingCallTarget(f"Route step {i} (pool {step.pool_id}) has no call target")
        min_out = min_acceptable_output(step.estimated_amount_out, slippage_percent) if i == last else 0
        ops.append(
            InvokeStep(
                pool_id=step.pool_id,
                call_target=step.call_target,
                type_arguments=step.type_arguments,
                input=current,
                min_out=min_out,
            )
        )
        current = ValueRef(len(ops) - 1)

    ops.append(TransferValue(value=current, recipient=payer))

    plan = TransactionPlan(sender=payer, operations=tuple(ops), gas_budget=gas_budget)
    plan.check_linear()
    logger.info(
        f"Compiled {len(route.path)}-hop swap {quote.from_coin} -> {quote.to_coin} "
        f"for {payer}: min_out={ops[-2].min_out}"
    )
    return plan
