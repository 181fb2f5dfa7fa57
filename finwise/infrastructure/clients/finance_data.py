"""Finance data API client: transactions, profiles and goals with retry/backoff"""

import asyncio
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import httpx

from finwise.config import settings
from finwise.domain.exceptions import DataAPIError, InvalidInputError, UserNotFoundError
from finwise.domain.models import FinancialGoal, Transaction, UserFinancialProfile
from finwise.infrastructure.observability.metrics import (
    data_fetch_failures_counter,
    data_fetch_latency_histogram,
)
from finwise.utils.date_utils import to_naive_local


class FinanceDataClient:
    """Client for the external service that stores users' transactions, profiles and goals"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.data_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.fetch_max_retries
        self.backoff_base = backoff_base if backoff_base is not None else settings.fetch_backoff_base
        self.transport = transport

    async def list_transactions(
        self,
        user_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[Transaction]:
        """
        Fetch a user's transactions, optionally restricted to a date range.

        Raises:
            UserNotFoundError: Unknown user
            DataAPIError: On timeout, HTTP errors, or invalid response
        """
        params = {}
        if start is not None:
            params["start"] = start.isoformat()
        if end is not None:
            params["end"] = end.isoformat()

        data = await self._get_json(f"/users/{user_id}/transactions", params)
        try:
            return [parse_transaction(txn) for txn in data.get("transactions", [])]
        except (KeyError, ValueError, TypeError, AttributeError, InvalidInputError) as e:
            raise DataAPIError(f"Invalid transaction data for user {user_id}: {e}") from e

    async def get_profile(self, user_id: str) -> UserFinancialProfile:
        data = await self._get_json(f"/users/{user_id}/profile")
        try:
            return UserFinancialProfile(
                monthly_income=data["monthly_income"],
                savings_goal=data.get("savings_goal", 0.0),
                risk_tolerance=data.get("risk_tolerance", "moderate"),
                financial_knowledge=data.get("financial_knowledge", "beginner"),
                behavior_pattern=data.get("behavior_pattern", "analytical"),
                user_id=user_id,
                current_debt=data.get("current_debt", 0.0),
            )
        except (KeyError, ValueError, TypeError, AttributeError, InvalidInputError) as e:
            raise DataAPIError(f"Invalid profile data for user {user_id}: {e}") from e

    async def list_goals(self, user_id: str) -> List[FinancialGoal]:
        data = await self._get_json(f"/users/{user_id}/goals")
        try:
            return [
                FinancialGoal(
                    goal_id=goal["goal_id"],
                    title=goal.get("title", ""),
                    target_amount=goal["target_amount"],
                    current_amount=goal.get("current_amount", 0.0),
                    deadline=date.fromisoformat(goal["deadline"]),
                    status=goal.get("status", "active"),
                    priority=goal.get("priority", "medium"),
                    category=goal.get("category", "purchase"),
                )
                for goal in data.get("goals", [])
            ]
        except (KeyError, ValueError, TypeError, AttributeError, InvalidInputError) as e:
            raise DataAPIError(f"Invalid goal data for user {user_id}: {e}") from e

    async def _get_json(self, path: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        GET with retry logic.

        Retry strategy:
        - Exponential backoff: base * 2^(attempt-1)
        - Retries on 5xx errors, timeouts and network failures
        - 404 means the user is unknown; other 4xx fail immediately
        """
        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            while True:
                try:
                    with data_fetch_latency_histogram.time():
                        response = await client.get(f"{self.base_url}{path}", params=params)
                        response.raise_for_status()
                    return response.json()

                except httpx.HTTPStatusError as e:
                    data_fetch_failures_counter.inc()
                    status = e.response.status_code
                    if status == 404:
                        raise UserNotFoundError(f"Finance data API has no resource at {path}") from e
                    if status < 500:
                        raise DataAPIError(f"Finance data API error: {status}") from e
                    error: Exception = e

                except httpx.RequestError as e:
                    data_fetch_failures_counter.inc()
                    error = e

                except ValueError as e:
                    raise DataAPIError(f"Finance data API returned invalid JSON for {path}") from e

                attempt += 1
                if attempt >= self.max_retries:
                    raise DataAPIError(
                        f"Finance data API unavailable after {attempt} attempts: {error!r}"
                    ) from error

                backoff = self.backoff_base * (2 ** (attempt - 1))
                await asyncio.sleep(backoff)


def parse_transaction(txn: Dict[str, Any]) -> Transaction:
    """Build a Transaction from its JSON representation"""
    return Transaction(
        transaction_id=str(txn["transaction_id"]),
        date=to_naive_local(datetime.fromisoformat(txn["date"])),
        amount=txn["amount"],
        type=txn["type"],
        category=txn["category"],
        description=txn.get("description"),
        emotional_state=txn.get("emotional_state", "neutral"),
        is_recurring=txn.get("is_recurring", False),
        classification=txn.get("classification"),
    )
