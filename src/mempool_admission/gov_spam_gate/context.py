"""Execution context handed to ante decorators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExecMode(str, Enum):
    CHECK = "check"
    RECHECK = "recheck"
    SIMULATE = "simulate"
    FINALIZE = "finalize"


@dataclass(frozen=True)
class Context:
    mode: ExecMode = ExecMode.FINALIZE
    chain_id: str = ""
    block_height: int = 0

    @property
    def is_check_tx(self) -> bool:
        # ReCheckTx is still local admission.
        return self.mode in (ExecMode.CHECK, ExecMode.RECHECK)

    @property
    def is_simulate(self) -> bool:
        return self.mode == ExecMode.SIMULATE

