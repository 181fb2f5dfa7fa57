"""Scorers based on "Psicologia Financeira": emotional spending, impulsivity, consistency"""

from typing import Dict, List

import numpy as np

from finwise.domain import rules
from finwise.domain.models import Consistency, EmotionalSpending, ImpulsiveBehavior, Transaction
from finwise.domain.totals import expenses, percentage_of, total_expenses
from finwise.utils.date_utils import week_of_month_key


def emotional_spending(transactions: List[Transaction]) -> EmotionalSpending:
    """
    Sum expenses made while stressed, sad, excited or anxious.

    Tiers by share of total expenses:
    - > 30%:    high_concern
    - 15 - 30%: moderate
    - < 15%:    fine
    """
    patterns: Dict[str, float] = {}
    for txn in expenses(transactions):
        if txn.emotional_state in rules.EMOTIONAL_SPENDING_STATES:
            patterns[txn.emotional_state] = patterns.get(txn.emotional_state, 0.0) + txn.amount

    amount = sum(patterns.values())
    percentage = percentage_of(amount, total_expenses(transactions))

    if percentage > 30:
        tier = "high_concern"
        recommendation = 'Cuidado! Muitos gastos emocionais. Implemente uma "pausa de 24h" antes de compras.'
    elif percentage >= 15:
        tier = "moderate"
        recommendation = "Alguns gastos emocionais detectados. Pratique mindfulness antes de comprar."
    else:
        tier = "fine"
        recommendation = "Bom controle emocional nos gastos! Continue assim."

    return EmotionalSpending(
        emotional_spending=amount,
        percentage=percentage,
        patterns=patterns,
        tier=tier,
        recommendation=recommendation,
    )


def is_impulsive(transaction: Transaction) -> bool:
    """Volatile emotional state plus either a high amount or a vague (short) description"""
    if transaction.type != "expense" or transaction.emotional_state not in rules.IMPULSIVE_STATES:
        return False
    is_high_value = transaction.amount > rules.IMPULSIVE_AMOUNT_THRESHOLD
    is_quick_decision = len(transaction.description or "") < rules.VAGUE_DESCRIPTION_LENGTH
    return is_high_value or is_quick_decision


def impulsive_behavior(transactions: List[Transaction]) -> ImpulsiveBehavior:
    impulsive = [t for t in transactions if is_impulsive(t)]
    count = len(impulsive)

    if count > 5:
        tier = "strong_pattern"
        recommendation = "Padrão impulsivo detectado! Crie uma lista de desejos e espere 24h antes de comprar."
    elif count >= 2:
        tier = "some"
        recommendation = 'Alguns gastos impulsivos. Questione-se: "Preciso realmente disso?" antes de comprar.'
    else:
        tier = "fine"
        recommendation = "Bom controle de impulsos! Você pensa antes de gastar."

    return ImpulsiveBehavior(
        impulsive_count=count,
        impulsive_amount=sum(t.amount for t in impulsive),
        tier=tier,
        recommendation=recommendation,
    )


def consistency(transactions: List[Transaction]) -> Consistency:
    """
    Score week-to-week spending regularity from 0 to 100.

    Expenses are bucketed by week of month ("{year}-W{ceil(day/7)}"), so the first
    week of every month in a year shares a bucket.
    score = max(0, 100 - coefficient_of_variation * 100)

    Fewer than two buckets returns 100 with tier "insufficient_data"; callers
    should not read that as a strong consistency signal.
    """
    weekly_spending: Dict[str, float] = {}
    for txn in expenses(transactions):
        key = week_of_month_key(txn.date)
        weekly_spending[key] = weekly_spending.get(key, 0.0) + txn.amount

    if len(weekly_spending) < 2:
        return Consistency(
            consistency_score=100.0,
            weekly_spending=weekly_spending,
            tier="insufficient_data",
            recommendation="Dados insuficientes para análise.",
        )

    amounts = np.array(list(weekly_spending.values()))
    mean = float(amounts.mean())
    std_dev = float(amounts.std())

    variation = std_dev / mean if mean > 0 else 0.0
    score = max(0.0, 100 - variation * 100)

    if score > 80:
        tier = "excellent"
        recommendation = "Excelente consistência nos gastos! Você tem bom controle financeiro."
    elif score > 60:
        tier = "good"
        recommendation = "Boa consistência. Tente manter um padrão mais regular de gastos."
    else:
        tier = "erratic"
        recommendation = "Gastos muito variáveis. Crie um orçamento mensal e siga-o religiosamente."

    return Consistency(
        consistency_score=score,
        weekly_spending=weekly_spending,
        tier=tier,
        recommendation=recommendation,
    )
