"""Recommendation endpoints: personalized buckets, single transaction, daily tip"""

import time
from dataclasses import asdict
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request

from finwise.api.dependencies import fetch_concurrently, get_data_client, get_request_id
from finwise.api.errors import domain_errors
from finwise.api.v1.schemas import (
    DailyTipResponse,
    Period,
    RecommendationSchema,
    RecommendationsResponse,
    TransactionRecommendationRequest,
    TransactionRecommendationResponse,
)
from finwise.config import settings
from finwise.domain.analysis import filter_by_period
from finwise.domain.recommendations import (
    generate_daily_tip,
    generate_recommendations,
    generate_transaction_recommendation,
)
from finwise.infrastructure.clients.finance_data import FinanceDataClient
from finwise.infrastructure.observability.logging import log_recommendations
from finwise.infrastructure.observability.metrics import record_recommendations

router = APIRouter()


@router.get("/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    period: Period = Query(settings.default_period),
    client: FinanceDataClient = Depends(get_data_client),
):
    """
    Personalized recommendations bucketed as urgent / important / suggested / educational.

    Spending rules run over the period's transactions; goals are always included.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    with domain_errors(request_id):
        profile, transactions, goals = await fetch_concurrently(
            client.get_profile(user_id),
            client.list_transactions(user_id),
            client.list_goals(user_id),
        )
        in_period = filter_by_period(transactions, period, datetime.now())
        buckets = generate_recommendations(in_period, profile, goals)

    bucket_sizes = {name: len(items) for name, items in asdict(buckets).items()}
    record_recommendations(bucket_sizes)
    log_recommendations(request_id, user_id, bucket_sizes, (time.time() - start_time) * 1000)

    return RecommendationsResponse.from_buckets(user_id, buckets)


@router.post("/recommendations/transaction", response_model=TransactionRecommendationResponse)
async def recommend_for_transaction(
    request_body: TransactionRecommendationRequest,
    request: Request,
    client: FinanceDataClient = Depends(get_data_client),
):
    """Advice for one freshly recorded transaction; recommendation is null when none applies"""
    request_id = get_request_id(request)

    with domain_errors(request_id):
        profile = await client.get_profile(request_body.user_id)
        recommendation = generate_transaction_recommendation(request_body.transaction.to_domain(), profile)

    if recommendation is None:
        return TransactionRecommendationResponse(recommendation=None)
    return TransactionRecommendationResponse(recommendation=RecommendationSchema.from_domain(recommendation))


@router.get("/tips/daily", response_model=DailyTipResponse)
def get_daily_tip():
    return DailyTipResponse(tip=generate_daily_tip())
