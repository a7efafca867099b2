"""Minimum initial deposit derivation."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from .coins import Coin, Coins

DEFAULT_MIN_INITIAL_DEPOSIT_RATE = Decimal("0.20")

# Amounts are 256-bit integers on chain; keep every digit through the multiply.
_PRECISION = 120


def min_initial_deposit(min_deposit: Coins, rate: Decimal = DEFAULT_MIN_INITIAL_DEPOSIT_RATE) -> Coins:
    """Scale each ``min_deposit`` amount by ``rate``, rounding half to even.

    Entries that round to zero drop out, so their denom is unconstrained.
    """
    required = []
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        for coin in min_deposit:
            amount = (rate * coin.amount).quantize(Decimal(1), rounding=ROUND_HALF_EVEN)
            required.append(Coin(denom=coin.denom, amount=int(amount)))
    return Coins.of(required)
