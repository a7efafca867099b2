"""Initial-deposit and proposal-format policy over a transaction's messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .codec import DecodeError, MessageDecoder
from .coins import Coins
from .context import Context
from .deposit import DEFAULT_MIN_INITIAL_DEPOSIT_RATE, min_initial_deposit
from .errors import DeprecatedProposalFormat, GateConfigError, InsufficientInitialDeposit, MalformedExecMessage
from .messages import Msg, MsgExec, MsgKind
from .params import ParameterStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolicyEvaluator:
    """Checks proposal submissions, unwrapping MsgExec batches.

    ``exec_nesting_limit`` is how many MsgExec layers are unwrapped. A MsgExec
    found deeper than that is treated like any other message and passes.
    """

    params: ParameterStore
    decoder: MessageDecoder
    rate: Decimal = DEFAULT_MIN_INITIAL_DEPOSIT_RATE
    exec_nesting_limit: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.rate, Decimal) or not self.rate.is_finite() or self.rate < 0:
            raise GateConfigError(f"rate must be a non-negative Decimal: {self.rate!r}")
        if isinstance(self.exec_nesting_limit, bool) or not isinstance(self.exec_nesting_limit, int):
            raise GateConfigError("exec_nesting_limit must be an integer")
        if self.exec_nesting_limit < 1:
            raise GateConfigError("exec_nesting_limit must be >= 1")

    def required_deposit(self, ctx: Context) -> Coins:
        return min_initial_deposit(self.params.get_min_deposit(ctx), self.rate)

    def check_messages(self, ctx: Context, msgs: Iterable[Msg]) -> None:
        required = self.required_deposit(ctx)
        for msg in msgs:
            self.check_message(msg, required)

    def check_message(self, msg: Msg, required: Coins, *, depth: int = 0) -> None:
        kind = getattr(msg, "kind", MsgKind.OTHER)
        if kind == MsgKind.EXEC:
            if depth >= self.exec_nesting_limit:
                logger.debug("GSG nested MsgExec beyond limit=%s passed through", self.exec_nesting_limit)
                return
            self._check_exec(msg, required, depth + 1)
        elif kind == MsgKind.DEPRECATED_PROPOSAL:
            raise DeprecatedProposalFormat(msg.type_url)
        elif kind == MsgKind.PROPOSAL:
            if msg.initial_deposit.is_all_lt(required):
                raise InsufficientInitialDeposit(required)

    def _check_exec(self, msg: MsgExec, required: Coins, depth: int) -> None:
        for index, any_msg in enumerate(msg.msgs):
            try:
                inner = self.decoder.unpack_any(any_msg)
            except DecodeError as exc:
                logger.debug("GSG MsgExec decode failed index=%s type_url=%s error=%s", index, any_msg.type_url, exc)
                raise MalformedExecMessage(required, index, any_msg.type_url) from exc
            self.check_message(inner, required, depth=depth)
