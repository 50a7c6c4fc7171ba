"""
Prometheus Metrics — evaluation observability.

Exposes counters and a histogram for:
- Bundle evaluations per strategy
- Condition failures per strategy
- Evaluation latency

Recording is skipped when ``VALKIT_METRICS_ENABLED`` is false, so embedding
applications that do not scrape metrics pay only for a flag check.

Usage
-----
    from valkit.validation.metrics import record_evaluation, timed_evaluation

    with timed_evaluation("fail_fast"):
        error = _validate_until_failure(value, conditions)
    record_evaluation("fail_fast")
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from valkit.config import settings

logger = logging.getLogger(__name__)

STRATEGY_FAIL_FAST: str = "fail_fast"
STRATEGY_ALL: str = "all"


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total bundle evaluations, labelled by strategy.
EVALUATIONS: Counter = Counter(
    "valkit_evaluations_total",
    "Total bundle evaluations by strategy",
    ["strategy"],
)

# Total failed conditions observed, labelled by strategy.
CONDITION_FAILURES: Counter = Counter(
    "valkit_condition_failures_total",
    "Total failed conditions by strategy",
    ["strategy"],
)

# Evaluation latency (seconds).
EVALUATION_LATENCY: Histogram = Histogram(
    "valkit_evaluation_seconds",
    "Time spent evaluating a bundle in seconds",
    ["strategy"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_evaluation(strategy: str) -> None:
    """Increment the evaluation counter for *strategy*."""
    if settings.METRICS_ENABLED:
        EVALUATIONS.labels(strategy=strategy).inc()


def record_failures(strategy: str, count: int) -> None:
    """Add *count* failed conditions to the counter for *strategy*."""
    if settings.METRICS_ENABLED and count > 0:
        CONDITION_FAILURES.labels(strategy=strategy).inc(count)


@contextmanager
def timed_evaluation(strategy: str) -> Generator[None, None, None]:
    """
    Context manager that records evaluation latency.

    Usage::

        with timed_evaluation("all"):
            errors = _collect_failures(value, conditions)
    """
    if not settings.METRICS_ENABLED:
        yield
        return
    with EVALUATION_LATENCY.labels(strategy=strategy).time():
        yield
