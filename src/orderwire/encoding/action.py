"""
Order action assembly.
"""

from typing import Iterable, Union

from orderwire.encoding.models import Grouping, OrderAction, OrderWire


def order_wires_to_order_action(
    order_wires: Iterable[OrderWire],
    grouping: Union[Grouping, str] = Grouping.NA,
) -> OrderAction:
    """
    Wrap order wires into one signable order action.

    Input order is preserved; it is part of the signed bytes.
    """
    return OrderAction(orders=tuple(order_wires), grouping=Grouping(grouping))


__all__ = ["order_wires_to_order_action"]
