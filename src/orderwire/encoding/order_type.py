"""
Order type normalization.

Converts the user-facing limit/trigger variant into its wire form.
"""

from typing import Any, Dict, Mapping, Union

from orderwire.encoding.models import (
    LimitOrderType,
    OrderType,
    Tif,
    Tpsl,
    TriggerOrderType,
)
from orderwire.encoding.numeric import float_to_wire
from orderwire.errors import InvalidOrderType


def parse_order_type(order_type: Union[OrderType, Mapping[str, Any]]) -> OrderType:
    """
    Coerce an order type into its typed variant.

    Accepts a LimitOrderType/TriggerOrderType as-is, or the mapping form
    {"limit": {"tif": "Gtc"}} / {"trigger": {"triggerPx": .., "isMarket": ..,
    "tpsl": ..}}.

    Raises:
        InvalidOrderType: If no single known variant is present
    """
    if isinstance(order_type, (LimitOrderType, TriggerOrderType)):
        return order_type

    if not isinstance(order_type, Mapping):
        raise InvalidOrderType("Invalid order type", value=order_type)

    limit = order_type.get("limit")
    trigger = order_type.get("trigger")
    if (limit is None) == (trigger is None):
        raise InvalidOrderType("Invalid order type", value=order_type)

    try:
        if limit is not None:
            return LimitOrderType(tif=Tif(limit["tif"]))
        return TriggerOrderType(
            trigger_px=trigger["triggerPx"],
            is_market=trigger["isMarket"],
            tpsl=Tpsl(trigger["tpsl"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidOrderType("Invalid order type", value=order_type) from e


def order_type_to_wire(order_type: Union[OrderType, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Normalize an order type into its wire variant.

    Raises:
        InvalidOrderType: If neither limit nor trigger is populated
        PrecisionLoss: If the trigger price cannot be encoded exactly
    """
    parsed = parse_order_type(order_type)

    try:
        if isinstance(parsed, LimitOrderType):
            return {"limit": {"tif": Tif(parsed.tif).value}}

        tpsl = Tpsl(parsed.tpsl).value
        if not isinstance(parsed.is_market, bool):
            raise ValueError(f"isMarket must be a bool: {parsed.is_market!r}")
    except ValueError as e:
        raise InvalidOrderType("Invalid order type", value=order_type) from e

    return {
        "trigger": {
            "isMarket": parsed.is_market,
            "triggerPx": float_to_wire(parsed.trigger_px),
            "tpsl": tpsl,
        }
    }


__all__ = ["parse_order_type", "order_type_to_wire"]
