"""
Order signing and submission.
"""

from orderwire.execution.models import OrderSubmission
from orderwire.execution.engine import (
    OrderSubmitter,
    build_order_action,
    get_timestamp_ms,
)

__all__ = [
    "OrderSubmission",
    "OrderSubmitter",
    "build_order_action",
    "get_timestamp_ms",
]
