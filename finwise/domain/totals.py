"""Income and expense sums shared by the scorers"""

from typing import Iterable, List
from finwise.domain.models import Transaction


def expenses(transactions: Iterable[Transaction]) -> List[Transaction]:
    return [t for t in transactions if t.type == "expense"]


def total_income(transactions: Iterable[Transaction]) -> float:
    return sum(t.amount for t in transactions if t.type == "income")


def total_expenses(transactions: Iterable[Transaction]) -> float:
    return sum(t.amount for t in transactions if t.type == "expense")


def percentage_of(part: float, whole: float) -> float:
    """part / whole * 100, or 0 when whole is zero"""
    return (part / whole) * 100 if whole > 0 else 0.0


def description_matches(transaction: Transaction, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match; a missing description matches nothing"""
    description = (transaction.description or "").lower()
    return any(keyword in description for keyword in keywords)
