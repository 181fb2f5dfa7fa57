"""Prometheus metrics for analysis volume, behavior scores and data API health"""

from typing import Dict
from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "finwise_analysis_total",
    "Total analyses generated",
    ["period"],  # daily | weekly | monthly | yearly
)

behavior_score_histogram = Histogram(
    "finwise_behavior_score",
    "Distribution of behavior scores (0-100)",
    buckets=[20, 40, 60, 70, 80, 90, 100],
)

recommendation_counter = Counter(
    "finwise_recommendations_total",
    "Recommendations issued by bucket",
    ["bucket"],  # urgent | important | suggested | educational
)

# Finance data API metrics
data_fetch_latency_histogram = Histogram(
    "finwise_data_fetch_latency_seconds",
    "Finance data API response time",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

data_fetch_failures_counter = Counter(
    "finwise_data_fetch_failures_total",
    "Failed finance data API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(period: str, behavior_score: float) -> None:
    analysis_counter.labels(period=period).inc()
    behavior_score_histogram.observe(behavior_score)


def record_recommendations(bucket_sizes: Dict[str, int]) -> None:
    for bucket, size in bucket_sizes.items():
        if size:
            recommendation_counter.labels(bucket=bucket).inc(size)
