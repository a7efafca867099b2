from __future__ import annotations

import logging
from pathlib import Path

from mempool_admission.gov_spam_gate.coins import Coins
from mempool_admission.gov_spam_gate.errors import (
    DeprecatedProposalFormat,
    GateError,
    InsufficientInitialDeposit,
    MalformedExecMessage,
)
from mempool_admission.gov_spam_gate.logging_utils import GATE_LOGGER_NAME, configure_logging


def test_gate_errors_carry_stable_codes() -> None:
    required = Coins.parse("200stake")
    assert str(InsufficientInitialDeposit(required)) == (
        "INSUFFICIENT_INITIAL_DEPOSIT:not enough initial deposit. required: 200stake"
    )
    assert DeprecatedProposalFormat("/cosmos.gov.v1.MsgSubmitProposal").code == "DEPRECATED_PROPOSAL_FORMAT"
    malformed = MalformedExecMessage(required, 0, "")
    assert malformed.code == "MALFORMED_EXEC_MSG"
    assert "<empty>" in str(malformed)
    assert isinstance(malformed, GateError)


def test_configure_logging_attaches_one_handler(tmp_path: Path) -> None:
    gate_logger = logging.getLogger(GATE_LOGGER_NAME)
    saved_handlers = list(gate_logger.handlers)
    saved_level = gate_logger.level
    for handler in saved_handlers:
        gate_logger.removeHandler(handler)
    try:
        log_path = tmp_path / "logs" / "gate.log"
        configured = configure_logging(logging.DEBUG, str(log_path))
        configure_logging(logging.INFO, str(log_path))
        assert configured is gate_logger
        assert len(gate_logger.handlers) == 1
        assert gate_logger.level == logging.INFO
        logging.getLogger(f"{GATE_LOGGER_NAME}.gov_spam_gate.policy").warning("GSG file handler check")
        gate_logger.handlers[0].flush()
        assert "GSG file handler check" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in list(gate_logger.handlers):
            gate_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            gate_logger.addHandler(handler)
        gate_logger.setLevel(saved_level)
