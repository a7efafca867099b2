"""Transaction message variants seen by the gate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .coins import Coins

GOV_V1BETA1_SUBMIT_PROPOSAL = "/cosmos.gov.v1beta1.MsgSubmitProposal"
GOV_V1_SUBMIT_PROPOSAL = "/cosmos.gov.v1.MsgSubmitProposal"
AUTHZ_MSG_EXEC = "/cosmos.authz.v1beta1.MsgExec"
BANK_MSG_SEND = "/cosmos.bank.v1beta1.MsgSend"


class MsgKind(str, Enum):
    PROPOSAL = "proposal"
    DEPRECATED_PROPOSAL = "deprecated_proposal"
    EXEC = "exec"
    OTHER = "other"


class ProposalFormat(str, Enum):
    V1BETA1 = "v1beta1"
    V1 = "v1"


@dataclass(frozen=True)
class AnyMsg:
    """Opaque encoded message: a type URL plus its serialized payload."""

    type_url: str
    value: bytes


@dataclass(frozen=True)
class MsgSubmitProposal:
    initial_deposit: Coins
    proposer: str = ""
    format: ProposalFormat = ProposalFormat.V1BETA1
    content: dict[str, Any] = field(default_factory=dict)

    @property
    def type_url(self) -> str:
        if self.format == ProposalFormat.V1:
            return GOV_V1_SUBMIT_PROPOSAL
        return GOV_V1BETA1_SUBMIT_PROPOSAL

    @property
    def kind(self) -> MsgKind:
        if self.format == ProposalFormat.V1:
            return MsgKind.DEPRECATED_PROPOSAL
        return MsgKind.PROPOSAL


@dataclass(frozen=True)
class MsgExec:
    grantee: str
    msgs: tuple[AnyMsg, ...] = ()

    type_url = AUTHZ_MSG_EXEC

    @property
    def kind(self) -> MsgKind:
        return MsgKind.EXEC


@dataclass(frozen=True)
class GenericMsg:
    """Any message kind the gate has no rule for."""

    type_url: str
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> MsgKind:
        return MsgKind.OTHER


Msg = Union[MsgSubmitProposal, MsgExec, GenericMsg]


@dataclass(frozen=True)
class Tx:
    msgs: tuple[Msg, ...]
    memo: str = ""

    def get_msgs(self) -> tuple[Msg, ...]:
        return self.msgs
