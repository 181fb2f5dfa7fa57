"""Recommendation engine - turns scorer results and goals into prioritized advice"""

import random
from datetime import date
from typing import Dict, List, Optional, Sequence

from finwise.domain import rules
from finwise.domain.babilonia import discipline, ten_percent_rule
from finwise.domain.classification import resolve_classification
from finwise.domain.models import (
    FinancialGoal,
    PersonalizedRecommendations,
    Recommendation,
    Transaction,
    UserFinancialProfile,
)
from finwise.domain.pai_rico import asset_liability_ratio, financial_education
from finwise.domain.psicologia import consistency, emotional_spending
from finwise.utils.date_utils import months_remaining


def generate_recommendations(
    transactions: List[Transaction],
    profile: UserFinancialProfile,
    goals: Optional[Sequence[FinancialGoal]] = None,
    today: Optional[date] = None,
) -> PersonalizedRecommendations:
    """
    Main entry point: evaluate every rule and bucket the results.

    Rules are independent; each one that matches adds a recommendation:
    - liabilities > assets                       -> high / investing  (Pai Rico)
    - education spending < 3% of monthly income  -> high / education  (Pai Rico)
    - emotional spending > 20% of monthly income -> high / behavior   (Psicologia)
    - consistency < 70                           -> medium / behavior (Psicologia)
    - not following the ten-percent rule         -> high / saving     (Babilônia)
    - discipline < 80                            -> medium / behavior (Babilônia)
    - active goal needing > 30% of income/month  -> medium / saving   (Psicologia)
    """
    income = profile.monthly_income
    recommendations: List[Recommendation] = []

    ratio = asset_liability_ratio(transactions, profile)
    if ratio.liabilities_total > ratio.assets_total:
        recommendations.append(_assets_over_liabilities())

    if financial_education(transactions).education_spending < income * rules.EDUCATION_INCOME_SHARE:
        recommendations.append(_financial_education())

    if emotional_spending(transactions).emotional_spending > income * rules.EMOTIONAL_INCOME_SHARE:
        recommendations.append(_emotional_spending())

    if consistency(transactions).consistency_score < rules.CONSISTENCY_THRESHOLD:
        recommendations.append(_consistency())

    if not ten_percent_rule(transactions).is_following_rule:
        recommendations.append(_ten_percent_rule())

    if discipline(transactions).discipline_score < rules.DISCIPLINE_THRESHOLD:
        recommendations.append(_discipline())

    if goals:
        recommendations.extend(goal_recommendations(goals, profile, today or date.today()))

    return categorize_recommendations(recommendations)


def goal_recommendations(
    goals: Sequence[FinancialGoal], profile: UserFinancialProfile, today: date
) -> List[Recommendation]:
    """
    One "adjust goal" recommendation per active goal whose remaining amount
    would take more than 30% of monthly income per month.

    Months remaining is floored at 1, so a past-due goal asks for the full
    remaining amount now.
    """
    income = profile.monthly_income
    recommendations = []

    for goal in goals:
        if goal.status != "active":
            continue

        months = months_remaining(goal.deadline, today, rules.GOAL_DAYS_PER_MONTH)
        monthly_needed = (goal.target_amount - goal.current_amount) / months

        if monthly_needed > income * rules.GOAL_INCOME_SHARE:
            share = (monthly_needed / income) * 100
            recommendations.append(
                Recommendation(
                    id=f"goal_adjustment_{goal.goal_id}",
                    title=f"Ajuste a Meta: {goal.title}",
                    description=(
                        f'Para atingir sua meta "{goal.title}", você precisaria poupar {share:.1f}% '
                        "da sua renda mensal, o que pode ser insustentável."
                    ),
                    priority="medium",
                    category="saving",
                    book_reference=rules.PSICOLOGIA,
                    action_steps=[
                        "Revise o prazo da meta para algo mais realista",
                        "Considere reduzir o valor alvo",
                        "Busque fontes de renda extra",
                        "Otimize seus gastos para liberar mais dinheiro",
                        "Divida a meta em marcos menores",
                    ],
                    expected_impact="Meta mais alcançável e menos estresse financeiro",
                    timeframe="1 semana",
                    difficulty="easy",
                )
            )

    return recommendations


def bucket_for(recommendation: Recommendation) -> str:
    """
    Assign a recommendation to exactly one bucket (first match wins):
    1. high priority, saving/behavior category -> urgent
    2. high priority, any other category       -> important
    3. medium priority                         -> suggested
    4. low priority or education category      -> educational
    """
    if recommendation.priority == "high" and recommendation.category in rules.URGENT_CATEGORIES:
        return "urgent"
    elif recommendation.priority == "high":
        return "important"
    elif recommendation.priority == "medium":
        return "suggested"
    return "educational"


def categorize_recommendations(recommendations: List[Recommendation]) -> PersonalizedRecommendations:
    buckets: Dict[str, List[Recommendation]] = {
        "urgent": [],
        "important": [],
        "suggested": [],
        "educational": [],
    }
    for recommendation in recommendations:
        buckets[bucket_for(recommendation)].append(recommendation)

    return PersonalizedRecommendations(**buckets)


def generate_transaction_recommendation(
    transaction: Transaction, profile: UserFinancialProfile
) -> Optional[Recommendation]:
    """
    Advice for a single large expense (over 10% of monthly income).

    A liability takes precedence over an emotional purchase; returns None
    when neither applies.
    """
    if transaction.type != "expense":
        return None
    if transaction.amount <= profile.monthly_income * rules.TRANSACTION_INCOME_SHARE:
        return None

    if resolve_classification(transaction, profile) == "liability":
        return Recommendation(
            id=f"transaction_{transaction.transaction_id}_liability",
            title="Cuidado com este Passivo",
            description=(
                f'Você gastou R$ {transaction.amount:.2f} em "{transaction.description or ""}". '
                "Segundo o Pai Rico, isso é um passivo que tira dinheiro do seu bolso."
            ),
            priority="high",
            category="spending",
            book_reference=rules.PAI_RICO,
            action_steps=[
                "Avalie se essa compra era realmente necessária",
                "Considere vender o item se não agregar valor",
                'Na próxima vez, pense: "Isso vai me enriquecer ou empobrecer?"',
                "Use esse valor para comprar ativos no futuro",
            ],
            expected_impact="Redução de gastos em passivos e foco em ativos",
            timeframe="Imediato",
            difficulty="easy",
        )

    if transaction.emotional_state in rules.TRANSACTION_EMOTIONAL_STATES:
        return Recommendation(
            id=f"transaction_{transaction.transaction_id}_emotional",
            title="Gasto Emocional Detectado",
            description=(
                f"Você fez uma compra de R$ {transaction.amount:.2f} em estado emocional. "
                "A Psicologia Financeira nos ensina que emoções podem prejudicar decisões financeiras."
            ),
            priority="medium",
            category="behavior",
            book_reference=rules.PSICOLOGIA,
            action_steps=[
                "Reflita sobre o que estava sentindo na hora da compra",
                "Identifique padrões emocionais nos seus gastos",
                "Crie estratégias para lidar com essas emoções",
                "Implemente a regra das 24 horas para compras futuras",
            ],
            expected_impact="Maior consciência emocional nas decisões financeiras",
            timeframe="1 semana",
            difficulty="medium",
        )

    return None


DAILY_TIPS = {
    rules.PAI_RICO: (
        'Antes de comprar algo hoje, pergunte: "Isso é um ativo ou passivo?"',
        "Lembre-se: os ricos compram ativos primeiro, luxos depois.",
        "Sua casa não é um ativo se você mora nela - ela é um passivo.",
        "Invista em sua educação financeira hoje, mesmo que seja só 15 minutos.",
        "Pense como um empresário: como posso gerar renda com isso?",
    ),
    rules.PSICOLOGIA: (
        "Suas emoções podem ser seu maior inimigo financeiro hoje.",
        "Antes de gastar, respire fundo e conte até 10.",
        "O dinheiro é mais sobre comportamento do que sobre matemática.",
        "Pequenas decisões consistentes criam grandes resultados.",
        "Não compare seus gastos com os dos outros - cada um tem sua jornada.",
    ),
    rules.BABILONIA: (
        "Pague-se primeiro hoje - guarde pelo menos 10% do que ganhar.",
        "Uma parte de tudo que você ganha é sua para guardar.",
        "Controle seus gastos e não deixe que eles controlem você.",
        "Busque conselhos daqueles que são bem-sucedidos com dinheiro.",
        "Proteja seu dinheiro de perdas - não invista no que não conhece.",
    ),
}


def generate_daily_tip(rng: Optional[random.Random] = None) -> str:
    """Pick a random book, then a random tip from it"""
    rng = rng or random.Random()
    book = rng.choice(sorted(DAILY_TIPS))
    return rng.choice(DAILY_TIPS[book])


# Rule-based recommendations


def _assets_over_liabilities() -> Recommendation:
    return Recommendation(
        id="pai_rico_assets_vs_liabilities",
        title="Foque em Ativos, não Passivos",
        description=(
            "Você está gastando mais em passivos (coisas que tiram dinheiro do seu bolso) "
            "do que em ativos (coisas que colocam dinheiro no seu bolso)."
        ),
        priority="high",
        category="investing",
        book_reference=rules.PAI_RICO,
        action_steps=[
            'Antes de cada compra, pergunte: "Isso vai colocar ou tirar dinheiro do meu bolso?"',
            "Reduza gastos com eletrônicos, carros caros e itens de luxo",
            "Invista em cursos, ações, fundos imobiliários ou negócios",
            "Estabeleça uma meta: 70% dos gastos extras em ativos",
        ],
        expected_impact="Aumento da renda passiva e redução de gastos desnecessários",
        timeframe="3-6 meses",
        difficulty="medium",
    )


def _financial_education() -> Recommendation:
    return Recommendation(
        id="pai_rico_financial_education",
        title="Invista em Educação Financeira",
        description="Seu ativo mais importante é sua mente. Você está investindo pouco em educação financeira.",
        priority="high",
        category="education",
        book_reference=rules.PAI_RICO,
        action_steps=[
            "Destine pelo menos 3% da renda para educação",
            "Leia livros sobre investimentos e finanças",
            "Faça cursos online sobre mercado financeiro",
            "Participe de grupos de investidores",
            "Acompanhe canais especializados em finanças",
        ],
        expected_impact="Melhores decisões financeiras e aumento da renda",
        timeframe="1-3 meses",
        difficulty="easy",
    )


def _emotional_spending() -> Recommendation:
    return Recommendation(
        id="psicologia_emotional_spending",
        title="Controle os Gastos Emocionais",
        description=(
            "Você está gastando muito por impulso emocional. "
            "Isso pode prejudicar seus objetivos financeiros."
        ),
        priority="high",
        category="behavior",
        book_reference=rules.PSICOLOGIA,
        action_steps=[
            "Implemente a regra das 24 horas: espere um dia antes de compras não essenciais",
            "Identifique seus gatilhos emocionais (estresse, tristeza, ansiedade)",
            "Crie alternativas saudáveis para lidar com emoções",
            "Use uma lista de compras e siga rigorosamente",
            "Pratique mindfulness antes de decisões financeiras",
        ],
        expected_impact="Redução de 30-50% nos gastos impulsivos",
        timeframe="2-4 semanas",
        difficulty="medium",
    )


def _consistency() -> Recommendation:
    return Recommendation(
        id="psicologia_consistency",
        title="Desenvolva Consistência Financeira",
        description=(
            "Seus hábitos financeiros são inconsistentes. "
            "A consistência é fundamental para o sucesso financeiro."
        ),
        priority="medium",
        category="behavior",
        book_reference=rules.PSICOLOGIA,
        action_steps=[
            "Crie um orçamento mensal e siga-o religiosamente",
            "Automatize poupanças e investimentos",
            "Revise seus gastos semanalmente",
            "Estabeleça rotinas financeiras fixas",
            "Use aplicativos para acompanhar gastos diariamente",
        ],
        expected_impact="Maior previsibilidade e controle financeiro",
        timeframe="1-2 meses",
        difficulty="medium",
    )


def _ten_percent_rule() -> Recommendation:
    return Recommendation(
        id="babilonia_ten_percent_rule",
        title="Implemente a Regra dos 10%",
        description=(
            "Você não está guardando pelo menos 10% da sua renda. "
            "Esta é a base fundamental da riqueza."
        ),
        priority="high",
        category="saving",
        book_reference=rules.BABILONIA,
        action_steps=[
            "Pague-se primeiro: separe 10% assim que receber",
            "Abra uma conta poupança separada para este valor",
            "Automatize a transferência no dia do pagamento",
            "Trate essa poupança como uma conta intocável",
            "Aumente gradualmente para 15% ou 20%",
        ],
        expected_impact="Criação de reserva de emergência e base para investimentos",
        timeframe="1 mês",
        difficulty="easy",
    )


def _discipline() -> Recommendation:
    return Recommendation(
        id="babilonia_discipline",
        title="Fortaleça sua Disciplina Financeira",
        description=(
            "Sua disciplina financeira precisa melhorar. "
            "A disciplina é o que separa os ricos dos pobres."
        ),
        priority="medium",
        category="behavior",
        book_reference=rules.BABILONIA,
        action_steps=[
            "Defina regras claras para seus gastos",
            "Crie consequências para quando quebrar as regras",
            "Celebre pequenas vitórias de disciplina",
            "Encontre um parceiro de accountability",
            "Pratique o autocontrole em pequenas decisões diárias",
        ],
        expected_impact="Maior controle sobre impulsos e decisões mais racionais",
        timeframe="2-3 meses",
        difficulty="hard",
    )
