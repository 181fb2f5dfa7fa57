"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from finwise.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_analysis(
    request_id: str,
    user_id: str,
    period: str,
    transaction_count: int,
    behavior_score: float,
    duration_ms: float,
) -> None:
    """Log structured analysis outcome"""
    logging.info(
        "Analysis completed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "analysis_complete",
            "period": period,
            "transaction_count": transaction_count,
            "behavior_score": round(behavior_score, 2),
            "duration_ms": duration_ms,
        },
    )


def log_recommendations(
    request_id: str,
    user_id: str,
    bucket_sizes: Dict[str, int],
    duration_ms: float,
) -> None:
    """Log how many recommendations landed in each bucket"""
    logging.info(
        "Recommendations generated",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "recommendations_complete",
            **{f"{bucket}_count": size for bucket, size in bucket_sizes.items()},
            "duration_ms": duration_ms,
        },
    )
