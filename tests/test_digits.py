"""
Tests for decimal string conversion of large integers
"""

import pytest

from paired_binary.digits import from_decimal, to_decimal


class TestToDecimal:
    def test_small_values(self):
        assert to_decimal(0) == "0"
        assert to_decimal(12345) == "12345"
        assert to_decimal(-7) == "-7"

    def test_power_of_ten(self):
        assert to_decimal(10 ** 5000) == "1" + "0" * 5000

    def test_inner_zero_blocks_are_padded(self):
        assert to_decimal(10 ** 9000 + 1) == "1" + "0" * 8999 + "1"

    def test_all_nines(self):
        assert to_decimal(10 ** 12000 - 1) == "9" * 12000


class TestFromDecimal:
    def test_small_values(self):
        assert from_decimal("0") == 0
        assert from_decimal("000123") == 123

    def test_long_strings(self):
        assert from_decimal("1" + "0" * 5000) == 10 ** 5000
        assert from_decimal("9" * 12000) == 10 ** 12000 - 1

    def test_leading_zeros_in_long_string(self):
        assert from_decimal("0" * 6000 + "42") == 42

    def test_inverse_of_to_decimal(self):
        value = 3 ** 20000 + 17
        assert from_decimal(to_decimal(value)) == value


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
