"""
Canonical order encoding: numbers, client ids, order types, wires, actions.
"""

from orderwire.encoding.cloid import Cloid
from orderwire.encoding.models import (
    Tif,
    Tpsl,
    Grouping,
    LimitOrderType,
    TriggerOrderType,
    OrderType,
    OrderRequest,
    OrderWire,
    OrderAction,
)
from orderwire.encoding.numeric import float_to_wire
from orderwire.encoding.order_type import parse_order_type, order_type_to_wire
from orderwire.encoding.order import order_request_to_order_wire
from orderwire.encoding.action import order_wires_to_order_action

__all__ = [
    "Cloid",
    "Tif",
    "Tpsl",
    "Grouping",
    "LimitOrderType",
    "TriggerOrderType",
    "OrderType",
    "OrderRequest",
    "OrderWire",
    "OrderAction",
    "float_to_wire",
    "parse_order_type",
    "order_type_to_wire",
    "order_request_to_order_wire",
    "order_wires_to_order_action",
]
