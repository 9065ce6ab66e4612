"""
Prometheus metrics for gadget operations (scraped from /metrics).
"""

from prometheus_client import Counter

GADGET_OPERATIONS = Counter(
    "gadget_operations_total",
    "Gadget registry operations by outcome",
    ["operation", "outcome"],
)


def record(operation: str, outcome: str = "ok") -> None:
    GADGET_OPERATIONS.labels(operation=operation, outcome=outcome).inc()
