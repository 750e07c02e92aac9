"""
Client order id.
"""

import string
from dataclasses import dataclass

from orderwire.errors import InvalidCloidFormat

CLOID_PREFIX = "0x"
CLOID_HEX_LENGTH = 32  # 16 bytes

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class Cloid:
    """
    Client-assigned order id: "0x" followed by 32 hex digits.

    Validated on construction and immutable afterwards.
    """

    raw: str

    def __post_init__(self):
        if not isinstance(self.raw, str) or not self.raw.startswith(CLOID_PREFIX):
            raise InvalidCloidFormat("cloid is not a hex string", value=self.raw)

        payload = self.raw[len(CLOID_PREFIX):]
        if len(payload) != CLOID_HEX_LENGTH:
            raise InvalidCloidFormat("cloid is not 16 bytes", value=self.raw)
        if not _HEX_DIGITS.issuperset(payload):
            raise InvalidCloidFormat("cloid is not a hex string", value=self.raw)

    @classmethod
    def from_int(cls, cloid: int) -> "Cloid":
        """Build from an integer, zero-padded to 32 hex digits."""
        if isinstance(cloid, bool) or not isinstance(cloid, int):
            raise InvalidCloidFormat("cloid must be an integer", value=cloid)
        if cloid < 0:
            raise InvalidCloidFormat("cloid must not be negative", value=cloid)
        return cls(f"{CLOID_PREFIX}{cloid:0{CLOID_HEX_LENGTH}x}")

    @classmethod
    def from_str(cls, cloid: str) -> "Cloid":
        return cls(cloid)

    def to_raw(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


__all__ = ["Cloid", "CLOID_PREFIX", "CLOID_HEX_LENGTH"]
