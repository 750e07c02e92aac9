"""
Execution models for order submissions.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class OrderSubmission:
    """A signed order action and the exchange's raw reply."""

    action: Dict[str, Any]
    nonce: int
    signature: Dict[str, Any]
    response: Any = None

    @property
    def order_count(self) -> int:
        return len(self.action["orders"])


__all__ = ["OrderSubmission"]
