"""Unit tests for the finance data API client (httpx MockTransport, no network)"""

from datetime import date, datetime

import httpx
import pytest

from finwise.domain.exceptions import DataAPIError, UserNotFoundError
from finwise.infrastructure.clients.finance_data import FinanceDataClient, parse_transaction

BASE = "http://finance-data.test"

TRANSACTION = {
    "transaction_id": "t1",
    "date": "2024-06-10T14:30:00",
    "amount": 120.5,
    "type": "expense",
    "category": "groceries",
    "description": "Feira",
    "emotional_state": "happy",
}


def _client(handler, max_retries=3):
    return FinanceDataClient(
        base_url=BASE,
        timeout=1.0,
        max_retries=max_retries,
        backoff_base=0,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_list_transactions_with_range():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"transactions": [TRANSACTION]})

    transactions = await _client(handler).list_transactions(
        "user_1", start=date(2024, 6, 1), end=date(2024, 7, 1)
    )

    assert seen[0].url.path == "/users/user_1/transactions"
    assert seen[0].url.params["start"] == "2024-06-01"
    assert seen[0].url.params["end"] == "2024-07-01"
    assert len(transactions) == 1
    assert transactions[0].amount == 120.5
    assert transactions[0].date == datetime(2024, 6, 10, 14, 30)
    assert transactions[0].emotional_state == "happy"


@pytest.mark.asyncio
async def test_retries_server_errors_then_succeeds():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(502)
        return httpx.Response(200, json={"monthly_income": 4000, "current_debt": 1200})

    profile = await _client(handler).get_profile("user_1")

    assert len(calls) == 3
    assert profile.user_id == "user_1"
    assert profile.monthly_income == 4000
    assert profile.current_debt == 1200


@pytest.mark.asyncio
async def test_gives_up_after_max_retries():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503)

    with pytest.raises(DataAPIError):
        await _client(handler, max_retries=2).get_profile("user_1")

    assert len(calls) == 2


@pytest.mark.asyncio
async def test_network_errors_are_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DataAPIError):
        await _client(handler).list_goals("user_1")

    assert len(calls) == 3


@pytest.mark.asyncio
async def test_not_found_maps_to_unknown_user():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(404)

    with pytest.raises(UserNotFoundError):
        await _client(handler).get_profile("ghost")

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_client_errors_are_not_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(400)

    with pytest.raises(DataAPIError) as exc_info:
        await _client(handler).list_transactions("user_1")

    assert not isinstance(exc_info.value, UserNotFoundError)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(DataAPIError):
        await _client(handler).get_profile("user_1")


@pytest.mark.asyncio
async def test_invalid_records_become_data_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/profile"):
            return httpx.Response(200, json={"monthly_income": -1})
        return httpx.Response(200, json={"transactions": [{**TRANSACTION, "type": "transfer"}]})

    client = _client(handler)

    with pytest.raises(DataAPIError):
        await client.get_profile("user_1")
    with pytest.raises(DataAPIError):
        await client.list_transactions("user_1")


@pytest.mark.asyncio
async def test_list_goals():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "goals": [
                    {
                        "goal_id": "g1",
                        "title": "Reserva de emergência",
                        "target_amount": 10000,
                        "current_amount": 2500,
                        "deadline": "2025-01-31",
                        "priority": "high",
                        "category": "emergency_fund",
                    }
                ]
            },
        )

    [goal] = await _client(handler).list_goals("user_1")

    assert goal.deadline == date(2025, 1, 31)
    assert goal.status == "active"
    assert goal.priority == "high"


def test_parse_transaction_converts_aware_dates():
    txn = parse_transaction({**TRANSACTION, "date": "2024-06-10T14:30:00+00:00"})

    assert txn.date.tzinfo is None
    assert txn.classification is None
