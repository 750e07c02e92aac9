"""
Order request and wire models.

Request types are what callers build; wire types are the canonical records
that get signed. Numeric wire fields are always strings.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from orderwire.encoding.cloid import Cloid


class Tif(str, Enum):
    """Time in force for limit orders."""
    ALO = "Alo"  # Add-Liquidity-Only
    IOC = "Ioc"  # Immediate-Or-Cancel
    GTC = "Gtc"  # Good-Til-Cancelled


class Tpsl(str, Enum):
    """Trigger order purpose."""
    TAKE_PROFIT = "tp"
    STOP_LOSS = "sl"


class Grouping(str, Enum):
    """How the orders of one action relate to each other."""
    NA = "na"
    NORMAL_TPSL = "normalTpsl"
    POSITION_TPSL = "positionTpsl"


Numeric = Union[float, int, Decimal]


@dataclass(frozen=True)
class LimitOrderType:
    """Resting limit order."""

    tif: Tif


@dataclass(frozen=True)
class TriggerOrderType:
    """Take-profit or stop-loss order fired at trigger_px."""

    trigger_px: Numeric
    is_market: bool
    tpsl: Tpsl


OrderType = Union[LimitOrderType, TriggerOrderType]


@dataclass(frozen=True)
class OrderRequest:
    """Request to place one order."""

    coin: str
    is_buy: bool
    sz: Numeric
    limit_px: Numeric
    order_type: Union[OrderType, Dict[str, Any]]
    reduce_only: bool = False
    cloid: Optional[Cloid] = None


@dataclass(frozen=True)
class OrderWire:
    """
    Canonical order record.

    Field order here is the serialization order: a, b, p, s, r, t, c.
    """

    asset: int
    is_buy: bool
    limit_px: str
    sz: str
    reduce_only: bool
    order_type: Dict[str, Any]
    cloid: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with wire field names; "c" is omitted when no cloid."""
        wire: Dict[str, Any] = {
            "a": self.asset,
            "b": self.is_buy,
            "p": self.limit_px,
            "s": self.sz,
            "r": self.reduce_only,
            "t": _copy_order_type(self.order_type),
        }
        if self.cloid is not None:
            wire["c"] = self.cloid
        return wire


@dataclass(frozen=True)
class OrderAction:
    """Batch of order wires submitted as a single signed action."""

    orders: Tuple[OrderWire, ...]
    grouping: Grouping = Grouping.NA

    type: str = field(default="order", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """The exact structure handed to the signer and the transport."""
        return {
            "type": self.type,
            "orders": [order.to_dict() for order in self.orders],
            "grouping": self.grouping.value,
        }


def _copy_order_type(order_type: Dict[str, Any]) -> Dict[str, Any]:
    return {variant: dict(fields) for variant, fields in order_type.items()}


__all__ = [
    "Tif",
    "Tpsl",
    "Grouping",
    "Numeric",
    "LimitOrderType",
    "TriggerOrderType",
    "OrderType",
    "OrderRequest",
    "OrderWire",
    "OrderAction",
]
