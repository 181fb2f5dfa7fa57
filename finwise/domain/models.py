"""Domain models - pure Python dataclasses representing business entities"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional

from finwise.domain import rules
from finwise.domain.exceptions import (
    InvalidGoalError,
    InvalidProfileError,
    InvalidTransactionDataError,
)


def _is_non_negative(value: float) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value) and value >= 0


@dataclass
class Transaction:
    """Income or expense record supplied by the finance data API"""

    transaction_id: str
    date: datetime
    amount: float
    type: str  # "income" or "expense"
    category: str
    description: Optional[str] = None
    emotional_state: str = "neutral"
    is_recurring: bool = False
    classification: Optional[str] = None  # "asset" | "liability" | "neutral", filled by the classifier

    def __post_init__(self) -> None:
        if not _is_non_negative(self.amount):
            raise InvalidTransactionDataError(
                f"Transaction {self.transaction_id}: amount must be a non-negative number, got {self.amount!r}"
            )
        if self.type not in rules.TRANSACTION_TYPES:
            raise InvalidTransactionDataError(f"Transaction {self.transaction_id}: unknown type {self.type!r}")
        if self.emotional_state not in rules.EMOTIONAL_STATES:
            raise InvalidTransactionDataError(
                f"Transaction {self.transaction_id}: unknown emotional state {self.emotional_state!r}"
            )
        if self.classification is not None and self.classification not in rules.CLASSIFICATIONS:
            raise InvalidTransactionDataError(
                f"Transaction {self.transaction_id}: unknown classification {self.classification!r}"
            )
        if not isinstance(self.date, datetime):
            raise InvalidTransactionDataError(f"Transaction {self.transaction_id}: date must be a datetime")


@dataclass
class UserFinancialProfile:
    """Per-user financial context supplied with every analysis call"""

    monthly_income: float
    savings_goal: float = 0.0
    risk_tolerance: str = "moderate"  # conservative | moderate | aggressive
    financial_knowledge: str = "beginner"  # beginner | intermediate | advanced
    behavior_pattern: str = "analytical"  # impulsive | analytical | emotional
    user_id: str = ""
    current_debt: float = 0.0

    def __post_init__(self) -> None:
        if not _is_non_negative(self.monthly_income) or self.monthly_income == 0:
            raise InvalidProfileError(f"monthly_income must be positive, got {self.monthly_income!r}")
        if not _is_non_negative(self.savings_goal):
            raise InvalidProfileError(f"savings_goal must be non-negative, got {self.savings_goal!r}")
        if not _is_non_negative(self.current_debt):
            raise InvalidProfileError(f"current_debt must be non-negative, got {self.current_debt!r}")


@dataclass
class FinancialGoal:
    """Savings target with a deadline"""

    goal_id: str
    title: str
    target_amount: float
    current_amount: float
    deadline: date
    status: str = "active"
    priority: str = "medium"
    category: str = "purchase"  # emergency_fund | investment | purchase | debt_payment | debt_payoff

    def __post_init__(self) -> None:
        if not _is_non_negative(self.target_amount) or self.target_amount == 0:
            raise InvalidGoalError(f"Goal {self.goal_id}: target_amount must be positive")
        if not _is_non_negative(self.current_amount):
            raise InvalidGoalError(f"Goal {self.goal_id}: current_amount must be non-negative")
        if self.status not in rules.GOAL_STATUSES:
            raise InvalidGoalError(f"Goal {self.goal_id}: unknown status {self.status!r}")
        if self.priority not in rules.PRIORITIES:
            raise InvalidGoalError(f"Goal {self.goal_id}: unknown priority {self.priority!r}")


# Scorer results


@dataclass
class AssetLiabilityRatio:
    assets_total: float
    liabilities_total: float
    neutral_total: float
    ratio: float  # inf when there are assets but no liabilities
    tier: str
    recommendation: str


@dataclass
class FinancialEducation:
    education_spending: float
    percentage: float
    tier: str
    recommendation: str


@dataclass
class EmotionalSpending:
    emotional_spending: float
    percentage: float
    patterns: Dict[str, float]
    tier: str
    recommendation: str


@dataclass
class ImpulsiveBehavior:
    impulsive_count: int
    impulsive_amount: float
    tier: str
    recommendation: str


@dataclass
class Consistency:
    consistency_score: float
    weekly_spending: Dict[str, float]
    tier: str
    recommendation: str


@dataclass
class TenPercentRule:
    savings_amount: float
    savings_rate: float
    is_following_rule: bool
    tier: str
    recommendation: str


@dataclass
class Discipline:
    discipline_score: float
    tier: str
    recommendation: str


@dataclass
class WealthProtection:
    risky_amount: float
    risk_percentage: float
    risk_level: str  # "low" | "medium" | "high"
    recommendation: str


# Aggregated outputs


@dataclass
class FinancialTrend:
    category: str
    direction: str  # "up" | "down" | "stable"
    percentage: float
    description: str


@dataclass
class AnalysisReport:
    """Output of the analysis aggregator for one period"""

    user_id: str
    period: str
    total_income: float
    total_expenses: float
    savings_rate: float
    assets_purchased: float
    liabilities_purchased: float
    behavior_score: float
    recommendations: List[str]
    trends: List[FinancialTrend]


@dataclass
class BookAnalysis:
    """Every scorer grouped by the book it comes from"""

    period: str
    # Pai Rico, Pai Pobre
    asset_liability: AssetLiabilityRatio
    education: FinancialEducation
    # Psicologia Financeira
    emotional: EmotionalSpending
    impulsive: ImpulsiveBehavior
    consistency: Consistency
    # O Homem Mais Rico da Babilônia
    ten_percent: TenPercentRule
    discipline: Discipline
    wealth_protection: WealthProtection


@dataclass
class Recommendation:
    """Actionable advice tied to one of the three books"""

    id: str
    title: str
    description: str
    priority: str  # "high" | "medium" | "low"
    category: str  # spending | saving | investing | education | behavior
    book_reference: str
    action_steps: List[str]
    expected_impact: str
    timeframe: str
    difficulty: str  # "easy" | "medium" | "hard"


@dataclass
class PersonalizedRecommendations:
    urgent: List[Recommendation] = field(default_factory=list)
    important: List[Recommendation] = field(default_factory=list)
    suggested: List[Recommendation] = field(default_factory=list)
    educational: List[Recommendation] = field(default_factory=list)


@dataclass
class MonthlyStats:
    year: int
    month: int
    income: float
    expenses: float
    savings: float
    savings_rate: float
    assets: float
    liabilities: float
    debt_payments: float
    debt_payment_rate: float


@dataclass
class DebtProgress:
    total_debt: float
    paid_amount: float
    remaining_debt: float
    progress_percentage: float
    monthly_payment_average: float
    months_to_payoff: Optional[int]
    estimated_payoff_date: Optional[date]
