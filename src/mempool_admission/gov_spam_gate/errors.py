"""Gov spam gate error taxonomy and helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .coins import Coins


class GateError(RuntimeError):
    """Stable, policy-safe rejection surfaced to the submitter as a reason code."""

    def __init__(self, code: str, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = f"{code}:{detail}" if detail else code
        super().__init__(message)


class InsufficientInitialDeposit(GateError):
    def __init__(self, required: "Coins") -> None:
        self.required = required
        super().__init__(
            "INSUFFICIENT_INITIAL_DEPOSIT",
            f"not enough initial deposit. required: {required}",
        )


class DeprecatedProposalFormat(GateError):
    def __init__(self, type_url: str) -> None:
        self.type_url = type_url
        super().__init__(
            "DEPRECATED_PROPOSAL_FORMAT",
            f"failed to send a new proposal: {type_url} is not allowed, submit a v1beta1 proposal",
        )


class MalformedExecMessage(GateError):
    """Undecodable inner MsgExec message; reports the requirement in force."""

    def __init__(self, required: "Coins", index: int, type_url: str) -> None:
        self.required = required
        self.index = index
        self.type_url = type_url
        super().__init__(
            "MALFORMED_EXEC_MSG",
            f"undecodable msg[{index}] type_url={type_url or '<empty>'}. required: {required}",
        )


class GateConfigError(ValueError):
    """Raised when gate profiles or parameter files are invalid."""

