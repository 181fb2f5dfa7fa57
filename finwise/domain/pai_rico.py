"""Scorers based on "Pai Rico, Pai Pobre": assets vs liabilities and financial education"""

from typing import List, Tuple

from finwise.domain import rules
from finwise.domain.classification import resolve_classification
from finwise.domain.models import (
    AssetLiabilityRatio,
    FinancialEducation,
    Transaction,
    UserFinancialProfile,
)
from finwise.domain.totals import description_matches, expenses, percentage_of, total_expenses


def asset_liability_ratio(
    transactions: List[Transaction], profile: UserFinancialProfile
) -> AssetLiabilityRatio:
    """
    Sum expenses by classification and compare assets against liabilities.

    Pre-classified transactions keep their label; the rest go through the classifier.
    ratio = assets / liabilities; with no liabilities it is inf if any assets were bought, else 0.
    """
    totals = {"asset": 0.0, "liability": 0.0, "neutral": 0.0}
    for txn in expenses(transactions):
        totals[resolve_classification(txn, profile)] += txn.amount

    assets_total = totals["asset"]
    liabilities_total = totals["liability"]

    if liabilities_total > 0:
        ratio = assets_total / liabilities_total
    else:
        ratio = float("inf") if assets_total > 0 else 0.0

    tier, recommendation = ratio_tier(ratio)

    return AssetLiabilityRatio(
        assets_total=assets_total,
        liabilities_total=liabilities_total,
        neutral_total=totals["neutral"],
        ratio=ratio,
        tier=tier,
        recommendation=recommendation,
    )


def ratio_tier(ratio: float) -> Tuple[str, str]:
    """
    Map asset/liability ratio to a tier.

    - < 0.5:       too_many_liabilities
    - 0.5 - 1.0:   improving
    - >= 1.0:      good
    """
    if ratio < 0.5:
        return (
            "too_many_liabilities",
            "Você está comprando muitos passivos! Foque em adquirir ativos que gerem renda.",
        )
    elif ratio < 1:
        return (
            "improving",
            "Bom progresso! Tente aumentar a proporção de ativos em relação aos passivos.",
        )
    else:
        return (
            "good",
            "Excelente! Você está priorizando ativos sobre passivos, como ensina o Pai Rico.",
        )


def financial_education(transactions: List[Transaction]) -> FinancialEducation:
    """Share of expenses invested in books, courses and other education"""
    education_spending = sum(
        t.amount
        for t in expenses(transactions)
        if t.category in rules.EDUCATION_CATEGORIES or description_matches(t, rules.EDUCATION_KEYWORDS)
    )
    percentage = percentage_of(education_spending, total_expenses(transactions))

    if percentage < 1:
        tier = "low"
        recommendation = "Invista mais em educação financeira! O Pai Rico diz que é o melhor investimento."
    elif percentage < 3:
        tier = "medium"
        recommendation = "Bom investimento em educação! Continue aprendendo para aumentar sua inteligência financeira."
    else:
        tier = "good"
        recommendation = "Excelente! Você entende que educação é o ativo mais importante."

    return FinancialEducation(
        education_spending=education_spending,
        percentage=percentage,
        tier=tier,
        recommendation=recommendation,
    )
