"""
Tests for the decimal-string boundary
"""

import pytest

from paired_binary import api
from paired_binary.api import PropagatorSession, parse_decimal, parse_decimal_list
from paired_binary.errors import (
    BitWidthMismatch,
    EmptyPattern,
    InvalidBaseBitWidth,
    InvalidComponentCount,
    NotAMember,
    NotConfigured,
    OutOfRange,
    ParseError,
)
from paired_binary.pattern import InitialPattern
from paired_binary.propagator import Propagator


@pytest.fixture
def session():
    return PropagatorSession()


@pytest.fixture
def default_session():
    api.get_default_session().reset()
    yield api.get_default_session()
    api.get_default_session().reset()


class TestParsing:
    def test_parse_decimal(self):
        assert parse_decimal("42") == 42
        assert parse_decimal(" 7 ") == 7
        assert parse_decimal("340282366920938463463374607431768211456") == 2 ** 128

    @pytest.mark.parametrize("text", ["", "abc", "-1", "+5", "1_0", "1.5", "0x10", 5, None])
    def test_parse_decimal_rejects(self, text):
        with pytest.raises(ParseError):
            parse_decimal(text)

    def test_parse_list_from_string(self):
        assert parse_decimal_list("0, 1,2,") == [0, 1, 2]

    def test_parse_list_from_sequence(self):
        assert parse_decimal_list(["3", "4"]) == [3, 4]


class TestSession:
    def test_not_configured(self, session):
        assert not session.is_configured
        with pytest.raises(NotConfigured):
            session.is_member("0", 4)
        with pytest.raises(NotConfigured):
            session.decompose_to_base("0", 4)
        with pytest.raises(NotConfigured):
            session.compose_from_base(["0"])
        with pytest.raises(NotConfigured):
            session.generate_random_member(4)
        with pytest.raises(NotConfigured):
            session.propagator

    def test_zero_base_scenario(self, session):
        session.setup_propagator(["0"], 2)
        assert session.is_member("0", 4) is True
        assert session.is_member("1", 4) is False
        assert session.decompose_to_base("0", 4) == ["0", "0"]
        assert session.compose_from_base(["0", "0"]) == {"value": "0", "n_bits": 4}

    def test_comma_separated_setup(self, session):
        session.setup_propagator("0, 1, 2,", 3)
        assert session.propagator.pattern.values() == (0, 1, 2)
        assert session.decompose_to_base("10", 6) == ["1", "2"]
        assert session.compose_from_base(["1", "2"]) == {"value": "10", "n_bits": 6}

    def test_invalid_component_count(self, session):
        session.setup_propagator(["0", "1", "2"], 3)
        with pytest.raises(InvalidComponentCount):
            session.compose_from_base(["0", "1", "2"])

    def test_bit_width_mismatch(self, session):
        session.setup_propagator(["0", "1", "2"], 3)
        with pytest.raises(BitWidthMismatch):
            session.is_member("5", 5)

    def test_not_a_member(self, session):
        session.setup_propagator(["0", "1", "2"], 3)
        with pytest.raises(NotAMember):
            session.decompose_to_base("24", 6)
        with pytest.raises(NotAMember):
            session.compose_from_base(["3", "0"])

    def test_parse_errors(self, session):
        session.setup_propagator(["0"], 2)
        with pytest.raises(ParseError):
            session.is_member("zero", 4)
        with pytest.raises(ParseError):
            session.is_member("0", "4")
        with pytest.raises(ParseError):
            session.is_member("0", True)
        with pytest.raises(ParseError):
            session.setup_propagator(["0", "x"], 2)

    def test_setup_errors(self, session):
        with pytest.raises(InvalidBaseBitWidth):
            session.setup_propagator(["0"], 0)
        with pytest.raises(EmptyPattern):
            session.setup_propagator([], 2)
        with pytest.raises(OutOfRange):
            session.setup_propagator(["9"], 3)
        assert not session.is_configured

    def test_failed_setup_keeps_previous(self, session):
        session.setup_propagator(["0"], 2)
        with pytest.raises(EmptyPattern):
            session.setup_propagator("", 2)
        assert session.is_member("0", 4)

    def test_setup_replaces(self, session):
        session.setup_propagator(["0"], 2)
        session.setup_propagator(["1"], 2)
        assert not session.is_member("0", 4)
        assert session.is_member("5", 4)

    def test_reset(self, session):
        session.setup_propagator(["0"], 2)
        session.reset()
        with pytest.raises(NotConfigured):
            session.is_member("0", 4)

    def test_wide_values(self, session):
        session.setup_propagator(["1"], 2)
        x = int("01" * 64, 2)
        assert session.is_member(str(x), 128)
        assert session.decompose_to_base(str(x), 128) == ["1"] * 64
        assert session.compose_from_base(["1"] * 64) == {"value": str(x), "n_bits": 128}

    def test_values_past_int_string_digit_limit(self, session):
        # 16384-bit members have about 4900 decimal digits
        session.setup_propagator(["1"], 2)
        value = session.generate_random_member(16384)
        assert len(value) > 4300
        assert parse_decimal(value) == int("01" * 8192, 2)
        assert session.is_member(value, 16384)

        components = session.decompose_to_base(value, 16384)
        assert components == ["1"] * 8192
        assert session.compose_from_base(components) == {"value": value, "n_bits": 16384}

    def test_huge_out_of_range_value(self, session):
        session.setup_propagator(["1"], 2)
        text = "9" * 5000
        with pytest.raises(OutOfRange) as exc:
            session.is_member(text, 16384)
        assert exc.value.to_dict()["details"] == {"value": text, "n_bits": 16384}

    def test_wide_paired_entity(self, session):
        text = "1" + "0" * 4999
        pair = session.create_paired_entity(text, 20000)
        assert pair["x"] == text
        assert parse_decimal(pair["x_prime"]) == 2 ** 20000 - 1 - 10 ** 4999

    def test_random_member(self, session):
        session.setup_propagator(["0", "1", "2"], 3)
        value = session.generate_random_member(12, 3)
        assert isinstance(value, str)
        assert session.is_member(value, 12)
        assert session.generate_random_member(12, 3) == value

    def test_random_member_uses_configured_seed(self, session):
        session.setup_propagator(["0", "1", "2"], 3, seed=99)
        p = Propagator(InitialPattern.new(3, [0, 1, 2]))
        expected = p.generate_random_member(12, seed_offset=4, seed=99)
        assert session.generate_random_member(12, 4) == str(expected)

    def test_canonical_halves(self, session):
        session.setup_propagator(["0"], 2, canonical_halves=True)
        assert session.is_member("15", 4)
        assert session.config.canonical_halves

    def test_create_paired_entity(self, session):
        assert session.create_paired_entity("12", 4) == {"x": "3", "x_prime": "12", "n_bits": 4}
        with pytest.raises(OutOfRange):
            session.create_paired_entity("16", 4)
        with pytest.raises(InvalidBaseBitWidth):
            session.create_paired_entity("5", 0)


class TestErrorRecords:
    def test_to_dict(self, session):
        session.setup_propagator(["0", "1", "2"], 3)
        with pytest.raises(BitWidthMismatch) as exc:
            session.is_member("5", 5)
        record = exc.value.to_dict()
        assert record["kind"] == "BitWidthMismatch"
        assert "not a valid hierarchical level" in record["message"]
        assert record["details"] == {"n_bits": 5, "n_bits_base": 3}

    def test_not_configured_record(self, session):
        with pytest.raises(NotConfigured) as exc:
            session.is_member("0", 4)
        assert exc.value.to_dict()["kind"] == "NotConfigured"


class TestDefaultSession:
    def test_module_functions(self, default_session):
        with pytest.raises(NotConfigured):
            api.is_member("0", 4)
        api.setup_propagator(["0", "1", "2"], 3)
        assert api.is_member("10", 6)
        assert api.decompose_to_base("10", 6) == ["1", "2"]
        assert api.compose_from_base(["1", "2"]) == {"value": "10", "n_bits": 6}
        assert api.is_member(api.generate_random_member(24, 1), 24)

    def test_create_paired_entity_without_setup(self, default_session):
        assert api.create_paired_entity("0", 2) == {"x": "0", "x_prime": "3", "n_bits": 2}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
