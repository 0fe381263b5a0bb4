"""Prometheus metrics for DTI outcomes, tax tip volume and record store health"""

from prometheus_client import Counter, Histogram

# Analysis metrics
dti_analysis_counter = Counter(
    "sfms_dti_analysis_total",
    "Debt affordability analyses by DTI label",
    ["label"],  # safe | borderline | risky
)

tax_tips_counter = Counter(
    "sfms_tax_tips_total",
    "Tax tip reports by total remaining quota",
    ["bucket"],  # RM0, RM0-RM5k, RM5k-RM20k, RM20k+
)

# Record store metrics
record_store_latency_histogram = Histogram(
    "record_store_latency_seconds",
    "Supabase record store response time",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

record_store_failures_counter = Counter(
    "record_store_failures_total",
    "Failed record store lookups",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_dti_analysis(label: str) -> None:
    """Record DTI label distribution"""
    dti_analysis_counter.labels(label=label).inc()


def record_tax_tips(total_remaining_quota: float) -> None:
    """Record tax tip report, bucketed by how much relief is left unclaimed"""
    if total_remaining_quota == 0:
        bucket = "RM0"
    elif total_remaining_quota <= 5_000:
        bucket = "RM0-RM5k"
    elif total_remaining_quota <= 20_000:
        bucket = "RM5k-RM20k"
    else:
        bucket = "RM20k+"

    tax_tips_counter.labels(bucket=bucket).inc()
