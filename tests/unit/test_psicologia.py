"""Unit tests for emotional spending, impulsive behavior and consistency scorers"""

import random
from datetime import datetime

import pytest

from finwise.domain.psicologia import consistency, emotional_spending, impulsive_behavior, is_impulsive


def test_single_excited_purchase_is_impulsive_and_emotional(make_txn):
    """250 while excited, description "compra" -> impulsive (amount > 200) and emotional"""
    transactions = [make_txn(250, emotional_state="excited", description="compra")]

    impulsive = impulsive_behavior(transactions)
    emotional = emotional_spending(transactions)

    assert impulsive.impulsive_count == 1
    assert impulsive.impulsive_amount == 250
    assert emotional.emotional_spending == 250
    assert emotional.patterns == {"excited": 250}


def test_emotional_patterns_grouped_by_state(make_txn):
    transactions = [
        make_txn(100, emotional_state="sad"),
        make_txn(50, emotional_state="sad"),
        make_txn(200, emotional_state="anxious"),
        make_txn(650, emotional_state="happy"),
    ]

    result = emotional_spending(transactions)

    assert result.patterns == {"sad": 150, "anxious": 200}
    assert result.emotional_spending == 350
    assert result.percentage == pytest.approx(35.0)
    assert result.tier == "high_concern"


def test_emotional_spending_ignores_income(make_txn):
    transactions = [make_txn(3000, type="income", category="bonus", emotional_state="excited")]
    assert emotional_spending(transactions).emotional_spending == 0


def test_emotional_tiers(make_txn):
    def tier(emotional_amount):
        return emotional_spending(
            [make_txn(emotional_amount, emotional_state="stressed"), make_txn(100 - emotional_amount)]
        ).tier

    assert tier(40) == "high_concern"
    assert tier(20) == "moderate"
    assert tier(10) == "fine"


def test_impulsive_thresholds_are_strict(make_txn):
    long_description = "Jantar de aniversário"
    assert not is_impulsive(make_txn(200, emotional_state="excited", description=long_description))
    assert is_impulsive(make_txn(200.01, emotional_state="excited", description=long_description))
    assert is_impulsive(make_txn(10, emotional_state="anxious", description="Compra 12"))  # 9 chars
    assert not is_impulsive(make_txn(10, emotional_state="anxious", description="Compra 123"))  # 10 chars


def test_impulsive_requires_volatile_state(make_txn):
    assert not is_impulsive(make_txn(5000, emotional_state="sad", description="x"))
    assert not is_impulsive(make_txn(5000, emotional_state="neutral", description="x"))
    assert is_impulsive(make_txn(5, emotional_state="stressed", description=None))


def test_impulsive_tiers(make_txn):
    def tier(count):
        return impulsive_behavior(
            [make_txn(300, emotional_state="excited", description="Loja") for _ in range(count)]
        ).tier

    assert tier(0) == "fine"
    assert tier(1) == "fine"
    assert tier(2) == "some"
    assert tier(5) == "some"
    assert tier(6) == "strong_pattern"


def test_consistency_insufficient_data(make_txn):
    assert consistency([]).consistency_score == 100
    assert consistency([]).tier == "insufficient_data"

    same_week = [make_txn(100, date=datetime(2024, 6, 1)), make_txn(900, date=datetime(2024, 6, 6))]
    assert consistency(same_week).consistency_score == 100


def test_consistency_uses_week_of_month_buckets(make_txn):
    """Day 1-7 of every month in a year fall in the same W1 bucket"""
    transactions = [make_txn(100, date=datetime(2024, 1, 3)), make_txn(500, date=datetime(2024, 2, 2))]

    result = consistency(transactions)

    assert result.weekly_spending == {"2024-W1": 600}
    assert result.tier == "insufficient_data"


def test_consistency_steady_spending(make_txn):
    transactions = [make_txn(100, date=datetime(2024, 6, day)) for day in (1, 8, 15, 22)]

    result = consistency(transactions)

    assert result.consistency_score == pytest.approx(100.0)
    assert result.tier == "excellent"
    assert set(result.weekly_spending) == {"2024-W1", "2024-W2", "2024-W3", "2024-W4"}


def test_consistency_variable_spending(make_txn):
    """Weeks of 100 and 300: mean 200, population std 100 -> 50"""
    transactions = [make_txn(100, date=datetime(2024, 6, 2)), make_txn(300, date=datetime(2024, 6, 9))]

    result = consistency(transactions)

    assert result.consistency_score == pytest.approx(50.0)
    assert result.tier == "erratic"


def test_consistency_clamped_at_zero(make_txn):
    transactions = [make_txn(0, date=datetime(2024, 6, day)) for day in (1, 8, 15)]
    transactions.append(make_txn(1000, date=datetime(2024, 6, 22)))

    assert consistency(transactions).consistency_score == 0


def test_consistency_zero_mean(make_txn):
    transactions = [make_txn(0, date=datetime(2024, 6, 1)), make_txn(0, date=datetime(2024, 6, 20))]
    assert consistency(transactions).consistency_score == 100


@pytest.mark.parametrize("seed", range(5))
def test_consistency_score_in_range(make_txn, seed):
    rng = random.Random(seed)
    transactions = [
        make_txn(rng.uniform(0, 2000), date=datetime(2024, rng.randint(1, 12), rng.randint(1, 28)))
        for _ in range(30)
    ]

    assert 0 <= consistency(transactions).consistency_score <= 100
