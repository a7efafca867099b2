from __future__ import annotations

from decimal import Decimal

from mempool_admission.gov_spam_gate.coins import Coins
from mempool_admission.gov_spam_gate.deposit import DEFAULT_MIN_INITIAL_DEPOSIT_RATE, min_initial_deposit


def test_default_rate_is_twenty_percent() -> None:
    assert DEFAULT_MIN_INITIAL_DEPOSIT_RATE == Decimal("0.20")
    assert str(min_initial_deposit(Coins.parse("1000stake"))) == "200stake"


def test_each_denom_is_scaled_independently() -> None:
    required = min_initial_deposit(Coins.parse("1000stake,55uatom"))
    assert required.as_dict() == {"stake": 200, "uatom": 11}


def test_rounds_to_nearest_integer() -> None:
    assert min_initial_deposit(Coins.parse("1003stake")).amount_of("stake") == 201
    assert min_initial_deposit(Coins.parse("1002stake")).amount_of("stake") == 200


def test_ties_round_half_to_even() -> None:
    rate = Decimal("0.5")
    assert min_initial_deposit(Coins.parse("5stake"), rate).amount_of("stake") == 2
    assert min_initial_deposit(Coins.parse("7stake"), rate).amount_of("stake") == 4


def test_amounts_rounding_to_zero_leave_denom_unconstrained() -> None:
    required = min_initial_deposit(Coins.parse("2stake,1000uatom"))
    assert required.denoms() == ["uatom"]
    assert not min_initial_deposit(Coins.parse("1000stake"), Decimal(0))


def test_empty_parameter_gives_empty_requirement() -> None:
    assert not min_initial_deposit(Coins())


def test_requirement_is_monotonic_in_min_deposit() -> None:
    previous = 0
    for amount in range(0, 600):
        current = min_initial_deposit(Coins.of({"stake": amount})).amount_of("stake")
        assert current >= previous
        previous = current


def test_large_amounts_keep_full_precision() -> None:
    amount = 10**70 + 5
    required = min_initial_deposit(Coins.of({"stake": amount}))
    assert required.amount_of("stake") == 2 * 10**69 + 1
