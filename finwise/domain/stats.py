"""Monthly statistics and debt payoff progress"""

import math
from datetime import date
from typing import Dict, List, Optional, Tuple

from finwise.domain import rules
from finwise.domain.classification import resolve_classification
from finwise.domain.models import DebtProgress, MonthlyStats, Transaction, UserFinancialProfile
from finwise.domain.totals import expenses, percentage_of, total_expenses, total_income
from finwise.utils.date_utils import add_months, month_bounds


def _is_debt_payment(transaction: Transaction) -> bool:
    return transaction.type == "expense" and transaction.category in rules.DEBT_PAYMENT_CATEGORIES


def monthly_stats(
    transactions: List[Transaction], profile: UserFinancialProfile, year: int, month: int
) -> MonthlyStats:
    """Income, expenses, savings and asset/liability split for one calendar month"""
    start, end = month_bounds(year, month)
    in_month = [t for t in transactions if start <= t.date < end]

    income = total_income(in_month)
    spent = total_expenses(in_month)

    assets = 0.0
    liabilities = 0.0
    for txn in expenses(in_month):
        classification = resolve_classification(txn, profile)
        if classification == "asset":
            assets += txn.amount
        elif classification == "liability":
            liabilities += txn.amount

    debt_payments = sum(t.amount for t in in_month if _is_debt_payment(t))

    return MonthlyStats(
        year=year,
        month=month,
        income=income,
        expenses=spent,
        savings=income - spent,
        savings_rate=percentage_of(income - spent, income),
        assets=assets,
        liabilities=liabilities,
        debt_payments=debt_payments,
        debt_payment_rate=percentage_of(debt_payments, income),
    )


def debt_progress(
    transactions: List[Transaction],
    profile: UserFinancialProfile,
    today: Optional[date] = None,
) -> DebtProgress:
    """
    Track payments against the profile's outstanding debt.

    The payment average is taken over calendar months that had at least one
    payment. Payoff estimates are None until a payment exists; the date is also
    None when it would fall past the last representable year.
    """
    today = today or date.today()

    paid_by_month: Dict[Tuple[int, int], float] = {}
    for txn in transactions:
        if _is_debt_payment(txn):
            key = (txn.date.year, txn.date.month)
            paid_by_month[key] = paid_by_month.get(key, 0.0) + txn.amount

    total_debt = profile.current_debt
    paid_amount = sum(paid_by_month.values())
    remaining_debt = max(0.0, total_debt - paid_amount)
    monthly_average = paid_amount / len(paid_by_month) if paid_by_month else 0.0

    months_to_payoff: Optional[int] = None
    estimated_payoff_date: Optional[date] = None
    if monthly_average > 0:
        months_to_payoff = math.ceil(remaining_debt / monthly_average)
        try:
            estimated_payoff_date = add_months(today, months_to_payoff)
        except ValueError:
            # Past date.max; the month count still stands
            estimated_payoff_date = None

    return DebtProgress(
        total_debt=total_debt,
        paid_amount=paid_amount,
        remaining_debt=remaining_debt,
        progress_percentage=percentage_of(paid_amount, total_debt),
        monthly_payment_average=monthly_average,
        months_to_payoff=months_to_payoff,
        estimated_payoff_date=estimated_payoff_date,
    )
