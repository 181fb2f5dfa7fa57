"""GET /v1/analysis - period report and per-book breakdown"""

import time
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request

from finwise.api.dependencies import fetch_concurrently, get_data_client, get_request_id
from finwise.api.errors import domain_errors
from finwise.api.v1.schemas import AnalysisResponse, BookAnalysisResponse, Period
from finwise.config import settings
from finwise.domain.analysis import analyze_by_book, generate_complete_analysis, generate_personalized_tips
from finwise.infrastructure.clients.finance_data import FinanceDataClient
from finwise.infrastructure.observability.logging import log_analysis
from finwise.infrastructure.observability.metrics import record_analysis
from finwise.utils.date_utils import period_start

router = APIRouter()


async def _load(client: FinanceDataClient, user_id: str, period: str, now: datetime):
    """Fetch profile and the transactions that can fall inside the period"""
    start = period_start(period, now).date()
    return await fetch_concurrently(
        client.get_profile(user_id),
        client.list_transactions(user_id, start=start),
    )


@router.get("/analysis", response_model=AnalysisResponse)
async def get_analysis(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    period: Period = Query(settings.default_period),
    client: FinanceDataClient = Depends(get_data_client),
):
    """
    Complete analysis for one period.

    Flow:
    1. Fetch profile and transactions from the finance data API
    2. Filter by period and run the three books' scorers
    3. Attach personalized tips
    """
    start_time = time.time()
    request_id = get_request_id(request)

    with domain_errors(request_id):
        now = datetime.now()
        profile, transactions = await _load(client, user_id, period, now)
        report = generate_complete_analysis(transactions, profile, period, now=now)
        tips = generate_personalized_tips(report)

    duration_ms = (time.time() - start_time) * 1000
    record_analysis(period, report.behavior_score)
    log_analysis(request_id, user_id, period, len(transactions), report.behavior_score, duration_ms)

    return AnalysisResponse.from_report(report, tips)


@router.get("/analysis/books", response_model=BookAnalysisResponse)
async def get_book_analysis(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    period: Period = Query(settings.default_period),
    client: FinanceDataClient = Depends(get_data_client),
):
    """Every scorer for the period, grouped by book"""
    request_id = get_request_id(request)

    with domain_errors(request_id):
        now = datetime.now()
        profile, transactions = await _load(client, user_id, period, now)
        books = analyze_by_book(transactions, profile, period, now=now)

    return BookAnalysisResponse.from_books(user_id, books)
