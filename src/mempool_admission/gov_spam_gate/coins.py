"""Coin sets (denom -> amount) with SDK-compatible sanitising."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Iterable, Iterator, Mapping

_DENOM_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$")
_COIN_RE = re.compile(r"^([0-9]+)\s*([a-zA-Z][a-zA-Z0-9/:._-]{2,127})$")


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.denom, str) or not _DENOM_RE.match(self.denom):
            raise ValueError(f"invalid denom: {self.denom!r}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"coin amount must be an integer: {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}{self.denom}")

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class Coins:
    """Sorted by denom, one entry per denom, never holds a zero amount."""

    items: tuple[Coin, ...] = ()

    def __post_init__(self) -> None:
        denoms = [coin.denom for coin in self.items]
        if denoms != sorted(set(denoms)):
            raise ValueError(f"coins must be sorted with unique denoms: {denoms}")
        if any(coin.amount == 0 for coin in self.items):
            raise ValueError("coins must not contain zero amounts")

    @classmethod
    def of(cls, coins: Iterable[Coin] | Mapping[str, int] | None = None) -> "Coins":
        if coins is None:
            return cls()
        if isinstance(coins, Mapping):
            coins = [Coin(denom=denom, amount=amount) for denom, amount in coins.items()]
        seen: dict[str, Coin] = {}
        for coin in coins:
            if coin.denom in seen:
                raise ValueError(f"duplicate denom: {coin.denom}")
            seen[coin.denom] = coin
        kept = [seen[denom] for denom in sorted(seen) if seen[denom].amount != 0]
        return cls(items=tuple(kept))

    @classmethod
    def parse(cls, text: str) -> "Coins":
        """Parse the text form, e.g. ``"200stake,5uatom"``."""
        text = (text or "").strip()
        if not text:
            return cls()
        coins: list[Coin] = []
        for part in text.split(","):
            match = _COIN_RE.match(part.strip())
            if not match:
                raise ValueError(f"invalid coin expression: {part!r}")
            coins.append(Coin(denom=match.group(2), amount=int(match.group(1))))
        return cls.of(coins)

    @classmethod
    def from_payload(cls, payload: Iterable[Mapping[str, Any]] | None) -> "Coins":
        """Build from the JSON/YAML list form ``[{denom, amount}]``; amounts may be strings."""
        coins: list[Coin] = []
        for item in payload or []:
            if not isinstance(item, Mapping):
                raise ValueError(f"coin entry must be a mapping: {item!r}")
            amount = item.get("amount")
            if isinstance(amount, str):
                if not amount.strip().isdigit():
                    raise ValueError(f"invalid coin amount: {amount!r}")
                amount = int(amount.strip())
            coins.append(Coin(denom=item.get("denom"), amount=amount))
        return cls.of(coins)

    def to_payload(self) -> list[dict[str, str]]:
        return [{"denom": coin.denom, "amount": str(coin.amount)} for coin in self.items]

    def __iter__(self) -> Iterator[Coin]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __str__(self) -> str:
        return ",".join(str(coin) for coin in self.items)

    def denoms(self) -> list[str]:
        return [coin.denom for coin in self.items]

    def amount_of(self, denom: str) -> int:
        for coin in self.items:
            if coin.denom == denom:
                return coin.amount
        return 0

    def as_dict(self) -> dict[str, int]:
        return {coin.denom: coin.amount for coin in self.items}

    def is_all_lt(self, other: "Coins") -> bool:
        """True when every denom of ``other`` holds strictly more than this set.

        Denoms missing from this set count as zero. An empty ``other`` imposes
        nothing, so the result is False.
        """
        if not other:
            return False
        return all(self.amount_of(coin.denom) < coin.amount for coin in other)

