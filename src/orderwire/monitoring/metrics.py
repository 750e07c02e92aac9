"""
Prometheus metrics for order encoding and submission.
"""

from prometheus_client import Counter, Info
import structlog

logger = structlog.get_logger()


# ============== INFO ==============

orderwire_info = Info(
    'orderwire_build_info',
    'orderwire build information',
)

orderwire_info.info({
    'version': '1.0.0',
    'wire_decimals': '8',
})


# ============== COUNTERS ==============

# Encoding
orders_encoded_total = Counter(
    'orderwire_orders_encoded_total',
    'Total orders encoded into wire records',
    ['order_type'],
)

encoding_failures_total = Counter(
    'orderwire_encoding_failures_total',
    'Total orders rejected during encoding',
    ['error_type'],
)

actions_built_total = Counter(
    'orderwire_actions_built_total',
    'Total order actions assembled',
    ['grouping'],
)

# Submission
actions_submitted_total = Counter(
    'orderwire_actions_submitted_total',
    'Total signed actions posted to the exchange',
    ['grouping'],
)

submission_failures_total = Counter(
    'orderwire_submission_failures_total',
    'Total action submissions that raised',
    ['error_type'],
)


# ============== HELPERS ==============

def record_order_encoded(order_type: str) -> None:
    orders_encoded_total.labels(order_type=order_type).inc()


def record_encoding_failure(error: Exception) -> None:
    encoding_failures_total.labels(error_type=type(error).__name__).inc()


def record_action_built(grouping: str, order_count: int) -> None:
    actions_built_total.labels(grouping=grouping).inc()
    logger.debug("action_built_metric", grouping=grouping, orders=order_count)


def record_action_submitted(grouping: str) -> None:
    actions_submitted_total.labels(grouping=grouping).inc()


def record_submission_failure(error: Exception) -> None:
    submission_failures_total.labels(error_type=type(error).__name__).inc()


__all__ = [
    "orders_encoded_total",
    "encoding_failures_total",
    "actions_built_total",
    "actions_submitted_total",
    "submission_failures_total",
    "record_order_encoded",
    "record_encoding_failure",
    "record_action_built",
    "record_action_submitted",
    "record_submission_failure",
]
