"""Pytest fixtures for testing"""

import itertools
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from finwise.api.dependencies import get_data_client
from finwise.api.main import create_app
from finwise.domain.exceptions import DataAPIError, UserNotFoundError
from finwise.domain.models import FinancialGoal, Transaction, UserFinancialProfile

# Fixed clock for period-dependent tests (a Saturday in mid-June)
NOW = datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_txn() -> Callable[..., Transaction]:
    """Factory for transactions with sensible defaults (a neutral, mid-sized expense)"""
    ids = itertools.count(1)

    def _make(
        amount: float,
        type: str = "expense",
        category: str = "groceries",
        description: Optional[str] = "Compra no supermercado",
        emotional_state: str = "neutral",
        date: Optional[datetime] = None,
        classification: Optional[str] = None,
    ) -> Transaction:
        return Transaction(
            transaction_id=f"txn_{next(ids)}",
            date=date or NOW,
            amount=amount,
            type=type,
            category=category,
            description=description,
            emotional_state=emotional_state,
            classification=classification,
        )

    return _make


@pytest.fixture
def profile() -> UserFinancialProfile:
    """Profile with R$ 5.000 monthly income"""
    return UserFinancialProfile(monthly_income=5000, savings_goal=500, user_id="user_test")


@pytest.fixture
def sample_transactions(make_txn) -> List[Transaction]:
    """A month of activity: salary, rent, groceries, a course and a night out"""
    base = datetime(2024, 6, 1, 9, 0)
    return [
        make_txn(5000, type="income", category="salary", description="Salário", date=base),
        make_txn(1500, category="housing", description="Aluguel do apartamento", date=base + timedelta(days=1)),
        make_txn(400, category="groceries", date=base + timedelta(days=3)),
        make_txn(450, category="groceries", date=base + timedelta(days=10)),
        make_txn(380, category="groceries", date=base + timedelta(days=17)),
        make_txn(300, category="education", description="Curso de investimentos", date=base + timedelta(days=5)),
        make_txn(250, category="entertainment", description="Show", emotional_state="excited",
                 date=base + timedelta(days=12)),
    ]


class StubDataClient:
    """In-memory stand-in for FinanceDataClient"""

    def __init__(
        self,
        profiles: Optional[Dict[str, UserFinancialProfile]] = None,
        transactions: Optional[Dict[str, List[Transaction]]] = None,
        goals: Optional[Dict[str, List[FinancialGoal]]] = None,
        error: Optional[Exception] = None,
    ):
        self.profiles = profiles or {}
        self.transactions = transactions or {}
        self.goals = goals or {}
        self.error = error
        self.transaction_calls = []

    def _check(self, user_id: str) -> None:
        if self.error is not None:
            raise self.error
        if user_id not in self.profiles:
            raise UserNotFoundError(f"unknown user {user_id}")

    async def get_profile(self, user_id: str) -> UserFinancialProfile:
        self._check(user_id)
        return self.profiles[user_id]

    async def list_transactions(self, user_id: str, start: Optional[date] = None, end: Optional[date] = None):
        self._check(user_id)
        self.transaction_calls.append((user_id, start, end))
        return list(self.transactions.get(user_id, []))

    async def list_goals(self, user_id: str) -> List[FinancialGoal]:
        self._check(user_id)
        return list(self.goals.get(user_id, []))


@pytest.fixture
def stub_client(profile) -> StubDataClient:
    return StubDataClient(profiles={profile.user_id: profile})


@pytest.fixture
def client(stub_client: StubDataClient) -> TestClient:
    """Create FastAPI test client backed by the stub data client"""
    app = create_app()
    app.dependency_overrides[get_data_client] = lambda: stub_client
    return TestClient(app)


@pytest.fixture
def unavailable_client() -> TestClient:
    """Test client whose data API is down"""
    app = create_app()
    app.dependency_overrides[get_data_client] = lambda: StubDataClient(
        error=DataAPIError("Finance data API unavailable after 3 attempts")
    )
    return TestClient(app)
