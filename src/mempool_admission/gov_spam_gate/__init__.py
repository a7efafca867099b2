"""Gov spam gate package."""

from .admission import AnteDecorator, AnteHandler, GovSpamPreventionGate, chain_ante_decorators
from .codec import DecodeError, JsonMsgCodec, MessageDecoder
from .coins import Coin, Coins
from .config import GateProfile
from .context import Context, ExecMode
from .deposit import DEFAULT_MIN_INITIAL_DEPOSIT_RATE, min_initial_deposit
from .errors import (
    DeprecatedProposalFormat,
    GateConfigError,
    GateError,
    InsufficientInitialDeposit,
    MalformedExecMessage,
)
from .messages import AnyMsg, GenericMsg, MsgExec, MsgKind, MsgSubmitProposal, ProposalFormat, Tx
from .params import ParameterStore, StaticParameterStore, YamlParameterStore
from .policy import PolicyEvaluator

__all__ = [
    "AnteDecorator",
    "AnteHandler",
    "AnyMsg",
    "Coin",
    "Coins",
    "Context",
    "DEFAULT_MIN_INITIAL_DEPOSIT_RATE",
    "DecodeError",
    "DeprecatedProposalFormat",
    "ExecMode",
    "GateConfigError",
    "GateError",
    "GateProfile",
    "GenericMsg",
    "GovSpamPreventionGate",
    "InsufficientInitialDeposit",
    "JsonMsgCodec",
    "MalformedExecMessage",
    "MessageDecoder",
    "MsgExec",
    "MsgKind",
    "MsgSubmitProposal",
    "ParameterStore",
    "PolicyEvaluator",
    "ProposalFormat",
    "StaticParameterStore",
    "Tx",
    "YamlParameterStore",
    "chain_ante_decorators",
    "min_initial_deposit",
]
