"""Scorers based on "O Homem Mais Rico da Babilônia": ten-percent rule, discipline, wealth protection"""

from typing import List

from finwise.domain import rules
from finwise.domain.models import Discipline, TenPercentRule, Transaction, WealthProtection
from finwise.domain.totals import (
    description_matches,
    expenses,
    percentage_of,
    total_expenses,
    total_income,
)


def ten_percent_rule(transactions: List[Transaction]) -> TenPercentRule:
    """
    Check whether at least 10% of income was kept ("pay yourself first").

    Tiers by savings rate:
    - < 5%:     urgent
    - 5 - 10%:  getting_there
    - 10 - 20%: good
    - >= 20%:   excellent
    """
    income = total_income(transactions)
    savings_amount = income - total_expenses(transactions)
    savings_rate = percentage_of(savings_amount, income)

    if savings_rate < 5:
        tier = "urgent"
        recommendation = "Urgente! Você não está poupando. Comece guardando pelo menos 5% e aumente gradualmente."
    elif savings_rate < 10:
        tier = "getting_there"
        recommendation = "Você está poupando, mas ainda não chegou aos 10%. Continue aumentando!"
    elif savings_rate < 20:
        tier = "good"
        recommendation = "Parabéns! Você segue a regra dos 10%. Considere aumentar para 15-20%."
    else:
        tier = "excellent"
        recommendation = "Excelente! Você é um verdadeiro discípulo da Babilônia!"

    return TenPercentRule(
        savings_amount=savings_amount,
        savings_rate=savings_rate,
        is_following_rule=savings_rate >= rules.TEN_PERCENT_RULE_RATE,
        tier=tier,
        recommendation=recommendation,
    )


def discipline(transactions: List[Transaction]) -> Discipline:
    """
    Start from 100, subtract the unnecessary-spending share and add half the
    investment share. Clamped to [0, 100].
    """
    spent = expenses(transactions)
    total = total_expenses(spent)

    unnecessary = sum(t.amount for t in spent if t.category in rules.UNNECESSARY_CATEGORIES)
    invested = sum(t.amount for t in spent if t.category in rules.INVESTMENT_CATEGORIES)

    score = 100 - percentage_of(unnecessary, total)
    score += percentage_of(invested, total) * rules.INVESTMENT_BONUS_WEIGHT
    score = max(0.0, min(100.0, score))

    if score > 80:
        tier = "excellent"
        recommendation = "Excelente disciplina! Você tem o autocontrole dos sábios da Babilônia."
    elif score > 60:
        tier = "good"
        recommendation = "Boa disciplina. Continue focando no essencial e evitando gastos desnecessários."
    else:
        tier = "needs_work"
        recommendation = 'Trabalhe sua disciplina. Lembre-se: "Uma parte de tudo que ganho é minha para guardar".'

    return Discipline(discipline_score=score, tier=tier, recommendation=recommendation)


def wealth_protection(transactions: List[Transaction]) -> WealthProtection:
    """Share of expenses going to gambling, speculation and other high-risk bets"""
    risky_amount = sum(
        t.amount
        for t in expenses(transactions)
        if t.category in rules.HIGH_RISK_CATEGORIES or description_matches(t, rules.HIGH_RISK_KEYWORDS)
    )
    risk_percentage = percentage_of(risky_amount, total_expenses(transactions))

    if risk_percentage > 10:
        risk_level = "high"
        recommendation = "Alto risco! Você está especulando demais. Proteja seu patrimônio com investimentos seguros."
    elif risk_percentage >= 5:
        risk_level = "medium"
        recommendation = "Risco moderado. Seja cauteloso e não arrisque mais do que pode perder."
    else:
        risk_level = "low"
        recommendation = "Bom! Você protege seu patrimônio como ensinado na Babilônia."

    return WealthProtection(
        risky_amount=risky_amount,
        risk_percentage=risk_percentage,
        risk_level=risk_level,
        recommendation=recommendation,
    )
