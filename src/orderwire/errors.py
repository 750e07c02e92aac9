"""
Validation errors raised while building an order action.

All of them are local, non-retryable failures detected before anything is
signed or sent.
"""

from typing import Any


class OrderWireError(ValueError):
    """Base class for order encoding failures."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class PrecisionLoss(OrderWireError):
    """Numeric value cannot be represented exactly with 8 decimal places."""


class InvalidCloidFormat(OrderWireError):
    """Client order id is not a 0x-prefixed 16-byte hex string."""


class InvalidOrderType(OrderWireError):
    """Order type is neither a limit nor a trigger order."""


class UnknownAsset(OrderWireError):
    """Coin symbol has no asset index on the exchange."""


__all__ = [
    "OrderWireError",
    "PrecisionLoss",
    "InvalidCloidFormat",
    "InvalidOrderType",
    "UnknownAsset",
]
