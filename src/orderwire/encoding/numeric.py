"""
Canonical decimal encoding for prices and sizes.

The exchange re-derives the signed payload from these strings, so every value
must have exactly one textual form.
"""

import math
import numbers
from decimal import Decimal, InvalidOperation, Overflow, localcontext

from orderwire.encoding.models import Numeric
from orderwire.errors import PrecisionLoss

WIRE_DECIMALS = 8
ROUNDING_TOLERANCE = 1e-12


def float_to_wire(value: Numeric) -> str:
    """
    Encode a number as the shortest exact decimal string.

    Args:
        value: Price, size or trigger price

    Returns:
        Decimal string without exponent, trailing zeros or negative zero

    Raises:
        PrecisionLoss: If the value needs more than 8 decimal places
    """
    if isinstance(value, bool):
        raise PrecisionLoss("float_to_wire expects a number", value=value)

    if isinstance(value, Decimal):
        rounded = _round_decimal(value)
    elif isinstance(value, numbers.Integral):
        # ints beyond 2**53 have no exact float, so they take the exact path
        rounded = _round_decimal(Decimal(int(value)))
    elif isinstance(value, numbers.Real):
        rounded = _round_float(value)
    else:
        raise PrecisionLoss("float_to_wire expects a number", value=value)

    return _strip(rounded)


def _round_float(value) -> str:
    x = float(value)

    if not math.isfinite(x):
        raise PrecisionLoss("float_to_wire causes rounding", value=value)

    rounded = f"{x:.{WIRE_DECIMALS}f}"
    if abs(float(rounded) - x) >= ROUNDING_TOLERANCE:
        raise PrecisionLoss("float_to_wire causes rounding", value=value)

    return rounded


def _round_decimal(value: Decimal) -> str:
    # Decimals are exact already, so the check is equality, not tolerance.
    if not value.is_finite():
        raise PrecisionLoss("float_to_wire causes rounding", value=value)

    try:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + WIRE_DECIMALS + 2)
            rounded = value.quantize(Decimal(1).scaleb(-WIRE_DECIMALS))
    except (InvalidOperation, Overflow) as e:
        raise PrecisionLoss("float_to_wire causes rounding", value=value) from e

    if rounded != value:
        raise PrecisionLoss("float_to_wire causes rounding", value=value)

    return f"{rounded:f}"


def _strip(rounded: str) -> str:
    # rounded always carries exactly WIRE_DECIMALS fractional digits
    stripped = rounded.rstrip("0").rstrip(".")
    if stripped in ("-0", "0", ""):
        return "0"
    return stripped


__all__ = ["float_to_wire", "WIRE_DECIMALS", "ROUNDING_TOLERANCE"]
