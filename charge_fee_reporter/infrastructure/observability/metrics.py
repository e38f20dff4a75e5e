"""Prometheus metrics for Stripe API calls and report outcomes"""

from prometheus_client import REGISTRY, Counter, Histogram, write_to_textfile

# Stripe API metrics
stripe_request_latency_histogram = Histogram(
    "stripe_request_latency_seconds",
    "Stripe API response time",
    ["endpoint"],  # charges.retrieve | charges.list | balance_transactions.retrieve
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

stripe_request_failures_counter = Counter(
    "stripe_request_failures_total",
    "Failed Stripe API calls",
    ["endpoint", "reason"],  # auth | not_found | http | timeout | network | malformed
)

# Report metrics
report_counter = Counter(
    "charge_report_total",
    "Charge fee reports produced",
    ["outcome"],  # success | failure
)


def record_report(success: bool) -> None:
    """Record the outcome of one report run"""
    outcome = "success" if success else "failure"
    report_counter.labels(outcome=outcome).inc()


def write_metrics(path: str) -> None:
    """Dump the default registry in node_exporter textfile-collector format"""
    write_to_textfile(path, REGISTRY)
