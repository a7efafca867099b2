"""Gov spam prevention ante decorator and pipeline chaining."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Protocol

from .codec import JsonMsgCodec, MessageDecoder
from .config import GateProfile
from .context import Context
from .errors import GateConfigError, GateError
from .messages import Tx
from .params import ParameterStore, YamlParameterStore
from .policy import PolicyEvaluator

logger = logging.getLogger(__name__)

AnteHandler = Callable[[Context, Tx, bool], Context]


class AnteDecorator(Protocol):
    def ante_handle(self, ctx: Context, tx: Tx, simulate: bool, next_handler: AnteHandler) -> Context:
        ...


@dataclass(frozen=True)
class GovSpamPreventionGate:
    """Rejects underfunded or deprecated proposals during local admission (CheckTx) only."""

    evaluator: PolicyEvaluator

    @classmethod
    def build(
        cls,
        profile: GateProfile,
        *,
        decoder: MessageDecoder | None = None,
        params: ParameterStore | None = None,
    ) -> "GovSpamPreventionGate":
        if params is None:
            if not profile.params_ref:
                raise GateConfigError(f"profile {profile.profile_id}: wiring.params_ref is required")
            params = YamlParameterStore(Path(profile.params_ref))
        evaluator = PolicyEvaluator(
            params=params,
            decoder=decoder or JsonMsgCodec(),
            rate=profile.min_initial_deposit_rate,
            exec_nesting_limit=profile.exec_nesting_limit,
        )
        logger.info(
            "GSG built profile_id=%s rate=%s exec_nesting_limit=%s",
            profile.profile_id,
            profile.min_initial_deposit_rate,
            profile.exec_nesting_limit,
        )
        return cls(evaluator=evaluator)

    def ante_handle(self, ctx: Context, tx: Tx, simulate: bool, next_handler: AnteHandler) -> Context:
        if not ctx.is_check_tx or simulate or ctx.is_simulate:
            return next_handler(ctx, tx, simulate)
        msgs = tx.get_msgs()
        try:
            self.evaluator.check_messages(ctx, msgs)
        except GateError as exc:
            logger.warning(
                "GSG reject chain_id=%s height=%s msgs=%s reason=%s detail=%s",
                ctx.chain_id,
                ctx.block_height,
                len(msgs),
                exc.code,
                exc.detail,
            )
            raise
        logger.debug("GSG pass chain_id=%s height=%s msgs=%s", ctx.chain_id, ctx.block_height, len(msgs))
        return next_handler(ctx, tx, simulate)


def chain_ante_decorators(*decorators: AnteDecorator) -> AnteHandler:
    """Compose decorators into one handler; the last forwards to a terminator."""
    handler: AnteHandler = _terminator
    for decorator in reversed(decorators):
        handler = _bind(decorator, handler)
    return handler


def _bind(decorator: AnteDecorator, next_handler: AnteHandler) -> AnteHandler:
    def handle(ctx: Context, tx: Tx, simulate: bool) -> Context:
        return decorator.ante_handle(ctx, tx, simulate, next_handler)

    return handle


def _terminator(ctx: Context, tx: Tx, simulate: bool) -> Context:
    return ctx
