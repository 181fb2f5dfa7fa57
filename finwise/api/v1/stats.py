"""GET /v1/stats - monthly statistics and debt payoff progress"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request

from finwise.api.dependencies import fetch_concurrently, get_data_client, get_request_id
from finwise.api.errors import domain_errors
from finwise.api.v1.schemas import DebtProgressResponse, MonthlyStatsResponse
from finwise.domain.stats import debt_progress, monthly_stats
from finwise.infrastructure.clients.finance_data import FinanceDataClient
from finwise.utils.date_utils import month_bounds

router = APIRouter()


@router.get("/stats/monthly", response_model=MonthlyStatsResponse)
async def get_monthly_stats(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    year: int = Query(..., ge=1900, le=9998),
    month: int = Query(..., ge=1, le=12),
    client: FinanceDataClient = Depends(get_data_client),
):
    request_id = get_request_id(request)

    with domain_errors(request_id):
        start, end = month_bounds(year, month)
        profile, transactions = await fetch_concurrently(
            client.get_profile(user_id),
            client.list_transactions(user_id, start=start.date(), end=end.date()),
        )
        stats = monthly_stats(transactions, profile, year, month)

    return MonthlyStatsResponse.from_stats(user_id, stats)


@router.get("/stats/debt", response_model=DebtProgressResponse)
async def get_debt_progress(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    client: FinanceDataClient = Depends(get_data_client),
):
    """Payments made against the profile's current debt and an estimated payoff date"""
    request_id = get_request_id(request)

    with domain_errors(request_id):
        profile, transactions = await fetch_concurrently(
            client.get_profile(user_id),
            client.list_transactions(user_id),
        )
        progress = debt_progress(transactions, profile, today=date.today())

    return DebtProgressResponse.from_progress(user_id, progress)
