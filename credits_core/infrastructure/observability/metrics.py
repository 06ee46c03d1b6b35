"""Prometheus metrics for monitoring approval rates, requested amounts, and lifecycle traffic"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

from credits_core.domain.models import CreditStatus

# Evaluation metrics
evaluation_counter = Counter(
    "credits_evaluation_total",
    "Total credit evaluations made",
    ["outcome"],  # approved | rejected
)

requested_amount_histogram = Histogram(
    "credits_requested_amount",
    "Requested amounts that went through evaluation",
    buckets=[100, 1_000, 5_000, 10_000, 25_000, 50_000, 100_000, 250_000],
)

# Lifecycle metrics
operation_counter = Counter(
    "credits_operation_total",
    "Completed credit application operations",
    ["operation"],  # create | update | delete
)

not_found_counter = Counter(
    "credits_not_found_total",
    "Lookups for credit applications that do not exist",
    ["operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(status: CreditStatus, amount: Decimal) -> None:
    """Record evaluation outcome and requested amount distribution"""
    evaluation_counter.labels(outcome=status.value.lower()).inc()
    requested_amount_histogram.observe(float(amount))
