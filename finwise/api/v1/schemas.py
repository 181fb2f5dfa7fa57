"""Pydantic schemas for API request/response validation"""

import math
from dataclasses import asdict
from datetime import date, datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from finwise.domain.models import (
    AnalysisReport,
    BookAnalysis,
    DebtProgress,
    MonthlyStats,
    PersonalizedRecommendations,
    Recommendation,
    Transaction,
)
from finwise.utils.date_utils import to_naive_local

Period = Literal["daily", "weekly", "monthly", "yearly"]


class TransactionSchema(BaseModel):
    """Transaction submitted for a single-purchase recommendation"""

    transaction_id: str = Field(..., min_length=1)
    date: datetime
    amount: float = Field(..., ge=0)
    type: Literal["income", "expense"]
    category: str
    description: Optional[str] = None
    emotional_state: Literal[
        "happy", "sad", "stressed", "neutral", "excited", "anxious", "motivated", "satisfied"
    ] = "neutral"
    is_recurring: bool = False
    classification: Optional[Literal["asset", "liability", "neutral"]] = None

    def to_domain(self) -> Transaction:
        return Transaction(
            transaction_id=self.transaction_id,
            date=to_naive_local(self.date),
            amount=self.amount,
            type=self.type,
            category=self.category,
            description=self.description,
            emotional_state=self.emotional_state,
            is_recurring=self.is_recurring,
            classification=self.classification,
        )


class TrendSchema(BaseModel):
    category: str
    direction: Literal["up", "down", "stable"]
    percentage: float
    description: str


class AnalysisResponse(BaseModel):
    """Response for GET /v1/analysis"""

    user_id: str
    period: Period
    total_income: float
    total_expenses: float
    savings_rate: float
    assets_purchased: float
    liabilities_purchased: float
    behavior_score: float
    recommendations: List[str]
    trends: List[TrendSchema]
    tips: List[str] = []

    @classmethod
    def from_report(cls, report: AnalysisReport, tips: List[str]) -> "AnalysisResponse":
        return cls(**asdict(report), tips=tips)


class AssetLiabilitySchema(BaseModel):
    assets_total: float
    liabilities_total: float
    neutral_total: float
    ratio: Optional[float] = Field(None, description="null when assets were bought and no liabilities")
    tier: str
    recommendation: str


class EducationSchema(BaseModel):
    education_spending: float
    percentage: float
    tier: str
    recommendation: str


class EmotionalSchema(BaseModel):
    emotional_spending: float
    percentage: float
    patterns: Dict[str, float]
    tier: str
    recommendation: str


class ImpulsiveSchema(BaseModel):
    impulsive_count: int
    impulsive_amount: float
    tier: str
    recommendation: str


class ConsistencySchema(BaseModel):
    consistency_score: float
    weekly_spending: Dict[str, float]
    tier: str
    recommendation: str


class TenPercentSchema(BaseModel):
    savings_amount: float
    savings_rate: float
    is_following_rule: bool
    tier: str
    recommendation: str


class DisciplineSchema(BaseModel):
    discipline_score: float
    tier: str
    recommendation: str


class WealthProtectionSchema(BaseModel):
    risky_amount: float
    risk_percentage: float
    risk_level: Literal["low", "medium", "high"]
    recommendation: str


class BookAnalysisResponse(BaseModel):
    """Response for GET /v1/analysis/books"""

    user_id: str
    period: Period
    asset_liability: AssetLiabilitySchema
    education: EducationSchema
    emotional: EmotionalSchema
    impulsive: ImpulsiveSchema
    consistency: ConsistencySchema
    ten_percent: TenPercentSchema
    discipline: DisciplineSchema
    wealth_protection: WealthProtectionSchema

    @classmethod
    def from_books(cls, user_id: str, books: BookAnalysis) -> "BookAnalysisResponse":
        data = asdict(books)
        # JSON has no infinity
        if math.isinf(data["asset_liability"]["ratio"]):
            data["asset_liability"]["ratio"] = None
        return cls(user_id=user_id, **data)


class RecommendationSchema(BaseModel):
    id: str
    title: str
    description: str
    priority: Literal["high", "medium", "low"]
    category: Literal["spending", "saving", "investing", "education", "behavior"]
    book_reference: str
    action_steps: List[str]
    expected_impact: str
    timeframe: str
    difficulty: Literal["easy", "medium", "hard"]

    @classmethod
    def from_domain(cls, recommendation: Recommendation) -> "RecommendationSchema":
        return cls(**asdict(recommendation))


class RecommendationsResponse(BaseModel):
    """Response for GET /v1/recommendations"""

    user_id: str
    urgent: List[RecommendationSchema]
    important: List[RecommendationSchema]
    suggested: List[RecommendationSchema]
    educational: List[RecommendationSchema]

    @classmethod
    def from_buckets(cls, user_id: str, buckets: PersonalizedRecommendations) -> "RecommendationsResponse":
        return cls(user_id=user_id, **asdict(buckets))


class TransactionRecommendationRequest(BaseModel):
    """Request body for POST /v1/recommendations/transaction"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    transaction: TransactionSchema


class TransactionRecommendationResponse(BaseModel):
    recommendation: Optional[RecommendationSchema] = None


class DailyTipResponse(BaseModel):
    tip: str


class MonthlyStatsResponse(BaseModel):
    """Response for GET /v1/stats/monthly"""

    user_id: str
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

    @classmethod
    def from_stats(cls, user_id: str, stats: MonthlyStats) -> "MonthlyStatsResponse":
        return cls(user_id=user_id, **asdict(stats))


class DebtProgressResponse(BaseModel):
    """Response for GET /v1/stats/debt"""

    user_id: str
    total_debt: float
    paid_amount: float
    remaining_debt: float
    progress_percentage: float
    monthly_payment_average: float
    months_to_payoff: Optional[int] = None
    estimated_payoff_date: Optional[date] = None

    @classmethod
    def from_progress(cls, user_id: str, progress: DebtProgress) -> "DebtProgressResponse":
        return cls(user_id=user_id, **asdict(progress))
