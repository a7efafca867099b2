"""Read-only access to the gov module's deposit parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml

from .coins import Coins
from .context import Context
from .errors import GateConfigError


class ParameterStore(Protocol):
    def get_min_deposit(self, ctx: Context) -> Coins:
        ...


class StaticParameterStore:
    """In-memory parameters; used for wiring tests and single-node tooling."""

    def __init__(self, min_deposit: Coins) -> None:
        self._min_deposit = min_deposit

    def get_min_deposit(self, ctx: Context) -> Coins:
        return self._min_deposit

    def set_min_deposit(self, min_deposit: Coins) -> None:
        self._min_deposit = min_deposit


class YamlParameterStore:
    """Reads ``deposit_params.min_deposit`` from a params or exported genesis file on every call."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_min_deposit(self, ctx: Context) -> Coins:
        data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        return parse_min_deposit(data, source=str(self.path))


def parse_min_deposit(data: Any, *, source: str = "<params>") -> Coins:
    if not isinstance(data, Mapping):
        raise GateConfigError(f"{source}: params must be a mapping")
    app_state = data.get("app_state")
    if isinstance(app_state, Mapping):
        data = app_state.get("gov") or {}
    deposit_params = data.get("deposit_params")
    if not isinstance(deposit_params, Mapping):
        raise GateConfigError(f"{source}: deposit_params must be a mapping")
    min_deposit = deposit_params.get("min_deposit")
    if min_deposit is None:
        return Coins()
    if not isinstance(min_deposit, list):
        raise GateConfigError(f"{source}: deposit_params.min_deposit must be a list")
    try:
        return Coins.from_payload(min_deposit)
    except ValueError as exc:
        raise GateConfigError(f"{source}: invalid min_deposit: {exc}") from exc
