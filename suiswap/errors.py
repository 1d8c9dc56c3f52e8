"""Error taxonomy for quoting and swap compilation."""

from typing import Optional


class SwapError(Exception):
    code = "swap_error"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class InvalidAmount(SwapError):
    code = "invalid_amount"


class InvalidSlippage(SwapError):
    code = "invalid_slippage"


class InvalidPair(SwapError):
    code = "invalid_pair"


class NoRoute(SwapError):
    code = "no_route"


class MissingCallTarget(SwapError):
    """A route step has no call target; the oracle reply format is incompatible."""

    code = "missing_call_target"


class InsufficientBalance(SwapError):
    code = "insufficient_balance"
