"""
Test client order ids.
"""

import pytest

from orderwire.encoding import Cloid
from orderwire.errors import InvalidCloidFormat


class TestCloid:
    """Test Cloid construction and validation."""

    def test_from_int_pads_to_32_digits(self):
        cloid = Cloid.from_int(1)

        assert cloid.to_raw() == "0x" + "0" * 31 + "1"

    def test_from_int_max_value(self):
        cloid = Cloid.from_int(2 ** 128 - 1)

        assert cloid.to_raw() == "0x" + "f" * 32

    def test_from_str_returns_raw_verbatim(self):
        raw = "0x1234567890ABCDEF1234567890abcdef"

        assert Cloid.from_str(raw).to_raw() == raw
        assert str(Cloid.from_str(raw)) == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "0x" + "0" * 31,  # 15.5 bytes
            "0x" + "0" * 33,
            "0" * 34,  # missing prefix
            "1x" + "0" * 32,
            "0x" + "g" * 32,  # not hex
            "",
        ],
    )
    def test_from_str_rejects_malformed(self, raw):
        with pytest.raises(InvalidCloidFormat):
            Cloid.from_str(raw)

    @pytest.mark.parametrize("value", [-1, 2 ** 128, True, "1"])
    def test_from_int_rejects_out_of_range(self, value):
        with pytest.raises(InvalidCloidFormat):
            Cloid.from_int(value)

    def test_immutable_and_hashable(self):
        cloid = Cloid.from_int(42)

        with pytest.raises(AttributeError):
            cloid.raw = "0x" + "1" * 32

        assert cloid == Cloid.from_int(42)
        assert len({cloid, Cloid.from_int(42)}) == 1
