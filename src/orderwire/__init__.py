"""
orderwire - Canonical order encoding for exchange L1 actions.

Turns order requests into the exact wire records and order actions that get
signed and submitted to the exchange.
"""

__version__ = "1.0.0"
__author__ = "orderwire Team"

from orderwire.config import config
from orderwire.errors import (
    OrderWireError,
    PrecisionLoss,
    InvalidCloidFormat,
    InvalidOrderType,
    UnknownAsset,
)

__all__ = [
    "config",
    "__version__",
    "OrderWireError",
    "PrecisionLoss",
    "InvalidCloidFormat",
    "InvalidOrderType",
    "UnknownAsset",
]
