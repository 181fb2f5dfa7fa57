"""Date manipulation utilities"""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Tuple

from finwise.domain.exceptions import InvalidPeriodError


def period_start(period: str, now: datetime) -> datetime:
    """
    Start boundary of an analysis period.

    - daily:   today at midnight
    - weekly:  trailing 7 x 24h from now
    - monthly: first day of the current month at midnight
    - yearly:  January 1st of the current year at midnight
    """
    if period == "daily":
        return datetime(now.year, now.month, now.day)
    elif period == "weekly":
        return now - timedelta(days=7)
    elif period == "monthly":
        return datetime(now.year, now.month, 1)
    elif period == "yearly":
        return datetime(now.year, 1, 1)
    raise InvalidPeriodError(f"Unknown period: {period!r}")


def week_of_month_key(moment: datetime) -> str:
    """Bucket key "{year}-W{ceil(day/7)}". Week-of-month, not ISO week numbering."""
    return f"{moment.year}-W{math.ceil(moment.day / 7)}"


def months_remaining(deadline: date, today: date, days_per_month: int = 30) -> int:
    """Whole months left until deadline, never less than 1 (past-due goals count as due now)"""
    days = (deadline - today).days
    return max(1, math.ceil(days / days_per_month))


def month_bounds(year: int, month: int) -> Tuple[datetime, datetime]:
    """[start, end) of a calendar month"""
    start = datetime(year, month, 1)
    if month == 12:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, month + 1, 1)
    return start, end


def add_months(from_date: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length"""
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    day = min(from_date.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def to_naive_local(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through"""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)
