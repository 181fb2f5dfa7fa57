"""Asset / liability classifier following "Pai Rico, Pai Pobre" """

from dataclasses import replace
from typing import Iterable, List

from finwise.domain import rules
from finwise.domain.models import Transaction, UserFinancialProfile
from finwise.domain.totals import description_matches


def classify(transaction: Transaction, profile: UserFinancialProfile) -> str:
    """
    Label a transaction as "asset", "liability" or "neutral".

    Precedence (first match wins):
    1. Asset keyword in description
    2. Liability keyword in description
    3. Asset category
    4. Liability category
    5. Amount above 15% of monthly income -> liability
    6. Neutral
    """
    if description_matches(transaction, rules.ASSET_KEYWORDS):
        return "asset"
    if description_matches(transaction, rules.LIABILITY_KEYWORDS):
        return "liability"
    if transaction.category in rules.ASSET_CATEGORIES:
        return "asset"
    if transaction.category in rules.LIABILITY_CATEGORIES:
        return "liability"
    if transaction.amount > profile.monthly_income * rules.HIGH_VALUE_INCOME_SHARE:
        return "liability"
    return "neutral"


def resolve_classification(transaction: Transaction, profile: UserFinancialProfile) -> str:
    """Use the stored classification when present, otherwise classify"""
    return transaction.classification or classify(transaction, profile)


def classify_transactions(
    transactions: Iterable[Transaction], profile: UserFinancialProfile
) -> List[Transaction]:
    """Return copies of the transactions with classification filled in by the rules above"""
    return [replace(t, classification=classify(t, profile)) for t in transactions]
