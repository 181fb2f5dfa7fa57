"""Unit tests for monthly statistics and debt progress"""

from datetime import date, datetime

import pytest

from finwise.domain.models import UserFinancialProfile
from finwise.domain.stats import debt_progress, monthly_stats

TODAY = date(2024, 6, 15)


def test_monthly_stats(sample_transactions, make_txn, profile):
    transactions = sample_transactions + [
        make_txn(400, category="debt_payment", description="Parcela", date=datetime(2024, 6, 20)),
        make_txn(999, date=datetime(2024, 5, 31, 23, 59)),
        make_txn(888, date=datetime(2024, 7, 1)),
    ]

    stats = monthly_stats(transactions, profile, 2024, 6)

    assert stats.year == 2024
    assert stats.month == 6
    assert stats.income == 5000
    assert stats.expenses == 3680
    assert stats.savings == 1320
    assert stats.savings_rate == pytest.approx(26.4)
    assert stats.assets == 300
    assert stats.liabilities == 1750
    assert stats.debt_payments == 400
    assert stats.debt_payment_rate == pytest.approx(8.0)


def test_monthly_stats_december_rolls_over(make_txn, profile):
    transactions = [
        make_txn(100, date=datetime(2023, 12, 31, 23, 59)),
        make_txn(200, date=datetime(2024, 1, 1)),
    ]

    stats = monthly_stats(transactions, profile, 2023, 12)

    assert stats.expenses == 100


def test_monthly_stats_without_income(make_txn, profile):
    stats = monthly_stats([make_txn(100, category="debt_payment")], profile, 2024, 6)

    assert stats.savings == -100
    assert stats.savings_rate == 0
    assert stats.debt_payment_rate == 0


def test_debt_progress(make_txn):
    profile = UserFinancialProfile(monthly_income=5000, current_debt=6000)
    transactions = [
        make_txn(300, category="debt_payment", date=datetime(2024, 5, 5)),
        make_txn(300, category="debt_payment", date=datetime(2024, 5, 20)),
        make_txn(400, category="debt_payment", date=datetime(2024, 6, 5)),
        make_txn(400, type="income", category="debt_payment", date=datetime(2024, 6, 6)),
        make_txn(700, category="groceries", date=datetime(2024, 6, 7)),
    ]

    progress = debt_progress(transactions, profile, today=TODAY)

    assert progress.total_debt == 6000
    assert progress.paid_amount == 1000
    assert progress.remaining_debt == 5000
    assert progress.progress_percentage == pytest.approx(100 / 6)
    assert progress.monthly_payment_average == 500
    assert progress.months_to_payoff == 10
    assert progress.estimated_payoff_date == date(2025, 4, 15)


def test_debt_progress_without_payments(make_txn):
    profile = UserFinancialProfile(monthly_income=5000, current_debt=1000)

    progress = debt_progress([make_txn(100)], profile, today=TODAY)

    assert progress.paid_amount == 0
    assert progress.remaining_debt == 1000
    assert progress.monthly_payment_average == 0
    assert progress.months_to_payoff is None
    assert progress.estimated_payoff_date is None


def test_debt_progress_without_debt(make_txn, profile):
    progress = debt_progress([make_txn(250, category="debt_payment")], profile, today=TODAY)

    assert progress.remaining_debt == 0
    assert progress.progress_percentage == 0
    assert progress.months_to_payoff == 0
    assert progress.estimated_payoff_date == TODAY


def test_debt_progress_payoff_beyond_calendar(make_txn):
    profile = UserFinancialProfile(monthly_income=5000, current_debt=200000)

    progress = debt_progress([make_txn(1.0, category="debt_payment")], profile, today=TODAY)

    assert progress.months_to_payoff == 199999
    assert progress.estimated_payoff_date is None
