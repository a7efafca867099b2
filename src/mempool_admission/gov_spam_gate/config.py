"""Gate profile loader (policy + wiring)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path
import re
from typing import Any, Mapping

import yaml

from .deposit import DEFAULT_MIN_INITIAL_DEPOSIT_RATE
from .errors import GateConfigError


@dataclass(frozen=True)
class GateProfile:
    profile_id: str
    min_initial_deposit_rate: Decimal = DEFAULT_MIN_INITIAL_DEPOSIT_RATE
    exec_nesting_limit: int = 1
    params_ref: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.min_initial_deposit_rate, Decimal):
            raise GateConfigError("min_initial_deposit_rate must be a Decimal")
        if not (Decimal(0) <= self.min_initial_deposit_rate <= Decimal(1)):
            raise GateConfigError(
                f"min_initial_deposit_rate must be within [0, 1]: {self.min_initial_deposit_rate}"
            )
        if isinstance(self.exec_nesting_limit, bool) or not isinstance(self.exec_nesting_limit, int):
            raise GateConfigError("exec_nesting_limit must be an integer")
        if self.exec_nesting_limit < 1:
            raise GateConfigError("exec_nesting_limit must be >= 1")

    @classmethod
    def load(cls, path: Path) -> "GateProfile":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, Mapping):
            raise GateConfigError("gate profile must be a mapping")
        policy = data.get("policy") or {}
        wiring = data.get("wiring") or {}
        if not isinstance(policy, Mapping) or not isinstance(wiring, Mapping):
            raise GateConfigError("policy and wiring must be mappings")
        profile_id = str(data.get("profile_id") or "").strip()
        if not profile_id:
            raise GateConfigError("profile_id is required")
        return cls(
            profile_id=profile_id,
            min_initial_deposit_rate=_to_rate(
                _resolve_env(policy.get("min_initial_deposit_rate", str(DEFAULT_MIN_INITIAL_DEPOSIT_RATE)))
            ),
            exec_nesting_limit=_to_int(_resolve_env(policy.get("exec_nesting_limit", 1)), "exec_nesting_limit"),
            params_ref=_resolve_env(wiring.get("params_ref")),
        )


def _to_rate(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise GateConfigError(f"min_initial_deposit_rate is not a decimal: {value!r}")
    # str() first so YAML floats like 0.2 do not carry binary noise
    try:
        rate = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise GateConfigError(f"min_initial_deposit_rate is not a decimal: {value!r}") from exc
    if not rate.is_finite():
        raise GateConfigError(f"min_initial_deposit_rate is not finite: {value!r}")
    return rate


def _to_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise GateConfigError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise GateConfigError(f"{field_name} must be an integer") from exc


_ENV_PATTERN = re.compile(r"^\$\{([A-Z0-9_]+)\}$")


def _resolve_env(value: Any) -> Any:
    if value is None or not isinstance(value, str):
        return value
    match = _ENV_PATTERN.match(value.strip())
    if not match:
        return value
    return os.getenv(match.group(1))
