"""
Order request encoding.
"""

from orderwire.encoding.models import OrderRequest, OrderWire
from orderwire.encoding.numeric import float_to_wire
from orderwire.encoding.order_type import order_type_to_wire


def order_request_to_order_wire(order: OrderRequest, asset: int) -> OrderWire:
    """
    Encode one order request into its canonical wire record.

    Args:
        order: Order request
        asset: Exchange asset index for order.coin

    Returns:
        Order wire record

    Raises:
        PrecisionLoss: If price, size or trigger price is not exact
        InvalidOrderType: If the order type has no valid variant
    """
    if isinstance(asset, bool) or not isinstance(asset, int) or asset < 0:
        raise ValueError(f"Invalid asset index: {asset!r}")
    for name in ("is_buy", "reduce_only"):
        if not isinstance(getattr(order, name), bool):
            raise ValueError(f"{name} must be a bool: {getattr(order, name)!r}")

    return OrderWire(
        asset=asset,
        is_buy=order.is_buy,
        limit_px=float_to_wire(order.limit_px),
        sz=float_to_wire(order.sz),
        reduce_only=order.reduce_only,
        order_type=order_type_to_wire(order.order_type),
        cloid=order.cloid.to_raw() if order.cloid is not None else None,
    )


__all__ = ["order_request_to_order_wire"]
