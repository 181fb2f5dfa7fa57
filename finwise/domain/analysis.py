"""Analysis aggregator - combines the book scorers over a time window"""

from datetime import datetime
from typing import List, Optional

from finwise.domain.babilonia import discipline, ten_percent_rule, wealth_protection
from finwise.domain.models import (
    AnalysisReport,
    BookAnalysis,
    FinancialTrend,
    Transaction,
    UserFinancialProfile,
)
from finwise.domain.pai_rico import asset_liability_ratio, financial_education
from finwise.domain.psicologia import consistency, emotional_spending, impulsive_behavior
from finwise.domain.totals import percentage_of, total_expenses, total_income
from finwise.utils.date_utils import period_start


def filter_by_period(
    transactions: List[Transaction], period: str, now: Optional[datetime] = None
) -> List[Transaction]:
    """
    Keep transactions dated on or after the period's start boundary.

    There is no end boundary: future-dated transactions are included.
    """
    start = period_start(period, now or datetime.now())
    return [t for t in transactions if t.date >= start]


def generate_complete_analysis(
    transactions: List[Transaction],
    profile: UserFinancialProfile,
    period: str = "monthly",
    now: Optional[datetime] = None,
) -> AnalysisReport:
    """
    Main entry point: filter by period and combine the three books into one report.

    behavior_score = (discipline + consistency) / 2
    recommendations = [asset/liability text, emotional text, ten-percent text]
    """
    filtered = filter_by_period(transactions, period, now)

    ratio = asset_liability_ratio(filtered, profile)
    emotional = emotional_spending(filtered)
    savings = ten_percent_rule(filtered)

    income = total_income(filtered)
    spent = total_expenses(filtered)

    discipline_score = discipline(filtered).discipline_score
    consistency_score = consistency(filtered).consistency_score

    return AnalysisReport(
        user_id=profile.user_id,
        period=period,
        total_income=income,
        total_expenses=spent,
        savings_rate=percentage_of(income - spent, income),
        assets_purchased=ratio.assets_total,
        liabilities_purchased=ratio.liabilities_total,
        behavior_score=(discipline_score + consistency_score) / 2,
        recommendations=[ratio.recommendation, emotional.recommendation, savings.recommendation],
        trends=_placeholder_trends(),
    )


def _placeholder_trends() -> List[FinancialTrend]:
    # Period-over-period comparison is not computed; the shape is kept for consumers
    return [
        FinancialTrend(
            category="gastos_totais",
            direction="stable",
            percentage=0.0,
            description="Gastos mantidos em relação ao período anterior",
        )
    ]


def analyze_by_book(
    transactions: List[Transaction],
    profile: UserFinancialProfile,
    period: str = "monthly",
    now: Optional[datetime] = None,
) -> BookAnalysis:
    """Run every scorer over the period, grouped by book"""
    filtered = filter_by_period(transactions, period, now)

    return BookAnalysis(
        period=period,
        asset_liability=asset_liability_ratio(filtered, profile),
        education=financial_education(filtered),
        emotional=emotional_spending(filtered),
        impulsive=impulsive_behavior(filtered),
        consistency=consistency(filtered),
        ten_percent=ten_percent_rule(filtered),
        discipline=discipline(filtered),
        wealth_protection=wealth_protection(filtered),
    )


def generate_personalized_tips(report: AnalysisReport) -> List[str]:
    """Short tips derived from a finished report"""
    tips = []

    if report.savings_rate < 10:
        tips.append("Comece guardando 1% da sua renda e aumente 1% a cada mês até chegar aos 10%.")

    if report.behavior_score < 70:
        tips.append('Pratique mindfulness antes de fazer compras. Pergunte-se: "Isso é um ativo ou passivo?"')

    if report.liabilities_purchased > report.assets_purchased:
        tips.append("Foque em comprar ativos que gerem renda, como cursos, livros ou investimentos.")

    return tips
