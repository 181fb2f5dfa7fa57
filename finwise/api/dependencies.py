"""Dependency injection for FastAPI endpoints"""

import asyncio
from typing import Any, Awaitable, List

from fastapi import Request
from finwise.infrastructure.clients.finance_data import FinanceDataClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_data_client() -> FinanceDataClient:
    """Provide finance data API client instance"""
    return FinanceDataClient()


async def fetch_concurrently(*fetches: Awaitable[Any]) -> List[Any]:
    """
    Run data API fetches concurrently.

    The first failure cancels the remaining fetches (so they stop retrying)
    and is re-raised unwrapped for domain_errors to map.
    """
    tasks = [asyncio.ensure_future(fetch) for fetch in fetches]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
