"""
Prometheus Metrics — validation wrapper observability.

Exposes:
- Validation outcomes per operation (success / error kind)
- Validation latency per operation

Usage
-----
    from schema_guard.validation.metrics import record_outcome, timed_validation

    with timed_validation("validate"):
        result = schema.parse(data)

    record_outcome("validate", "success")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total calls, labelled by operation and outcome ("success" or an ErrorKind value).
VALIDATIONS: Counter = Counter(
    "schema_guard_validations_total",
    "Total validation calls by operation and outcome",
    ["operation", "outcome"],
)

# Time spent inside a validation call (seconds).
VALIDATION_LATENCY: Histogram = Histogram(
    "schema_guard_validation_seconds",
    "Time spent validating a value in seconds",
    ["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_outcome(operation: str, outcome: str) -> None:
    """Increment the outcome counter for *operation*."""
    VALIDATIONS.labels(operation=operation, outcome=outcome).inc()


@contextmanager
def timed_validation(operation: str) -> Generator[None, None, None]:
    """
    Context manager that records validation latency.

    Usage::

        with timed_validation("validate_or_throw"):
            value = schema.parse(data)
    """
    with VALIDATION_LATENCY.labels(operation=operation).time():
        yield
