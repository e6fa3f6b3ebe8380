import uuid

import pytest

from tests.helpers import Flavor, Level
from tweaks.core.converters import (
    ConversionError,
    SymmetricConverting,
    array,
    description,
    identity,
    optional,
    raw_value,
)


class TestDescription:
    """Tests for description converters of primitive types."""

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_round_trip(self, value):
        converter = description(bool)
        assert converter.decode(converter.encode(value)) is value

    def test_bool_text_form(self):
        converter = description(bool)
        assert converter.encode(True) == "true"
        assert converter.encode(False) == "false"

    def test_bool_rejects_other_text(self):
        with pytest.raises(ConversionError):
            description(bool).decode("True")
        with pytest.raises(ConversionError):
            description(bool).decode("1")

    @pytest.mark.parametrize("value", [0, 1, -1, 42, 2**63, -(2**40)])
    def test_int_round_trip(self, value):
        converter = description(int)
        assert converter.decode(converter.encode(value)) == value

    @pytest.mark.parametrize("text", ["", "1.5", "12abc", " 3", "1_000"])
    def test_int_rejects_malformed(self, text):
        with pytest.raises(ConversionError):
            description(int).decode(text)

    @pytest.mark.parametrize("value", [0.0, 0.1, 1.0, -2.5, 1e-12, 123456.789])
    def test_float_round_trip(self, value):
        converter = description(float)
        assert converter.decode(converter.encode(value)) == value

    def test_float_accepts_int_values(self):
        converter = description(float)
        assert converter.encode(1) == "1.0"

    def test_float_rejects_malformed(self):
        with pytest.raises(ConversionError):
            description(float).decode("one")

    def test_uuid_round_trip(self):
        value = uuid.uuid4()
        converter = description(uuid.UUID)
        assert converter.decode(converter.encode(value)) == value
        with pytest.raises(ConversionError):
            converter.decode("not-a-uuid")

    def test_custom_parser(self):
        converter = description(str, parse=lambda text: text.upper())
        assert converter.decode("abc") == "ABC"

    @pytest.mark.parametrize(
        "value_type, value",
        [
            (int, True),
            (int, "5"),
            (int, 5.0),
            (float, False),
            (float, "0.5"),
            (bool, 1),
            (str, 5),
            (uuid.UUID, "12345678-1234-5678-1234-567812345678"),
        ],
    )
    def test_encode_rejects_other_types(self, value_type, value):
        with pytest.raises(ConversionError):
            description(value_type).encode(value)


class TestRawValue:
    """Tests for enum-backed converters."""

    def test_string_backed_enum(self):
        converter = raw_value(Flavor)
        assert converter.encode(Flavor.MINT) == "mint"
        assert converter.decode("chocolate") is Flavor.CHOCOLATE

    def test_int_backed_enum(self):
        converter = raw_value(Level)
        assert converter.encode(Level.MEDIUM) == "2"
        assert converter.decode("3") is Level.HIGH

    @pytest.mark.parametrize("member", list(Level))
    def test_round_trip(self, member):
        converter = raw_value(Level)
        assert converter.decode(converter.encode(member)) is member

    def test_unknown_raw_value_fails(self):
        with pytest.raises(ConversionError):
            raw_value(Flavor).decode("strawberry")

    def test_foreign_member_fails_to_encode(self):
        with pytest.raises(ConversionError):
            raw_value(Flavor).encode(Level.LOW)


class TestArray:
    """Tests for comma-joined array converters."""

    def test_int_array_round_trip(self):
        converter = array(description(int))
        assert converter.encode([1, 2, 3]) == "1,2,3"
        assert converter.decode("1,2,3") == [1, 2, 3]

    def test_empty_array(self):
        converter = array(description(int))
        assert converter.encode([]) == ""
        assert converter.decode("") == []

    def test_decode_drops_undecodable_elements(self):
        converter = array(description(int))
        assert converter.decode("1,x,3") == [1, 3]

    def test_decode_skips_empty_pieces(self):
        converter = array(identity())
        assert converter.decode("a,,b") == ["a", "b"]

    def test_element_containing_comma_does_not_round_trip(self):
        # Known format limitation: no escaping of the separator.
        converter = array(identity())
        encoded = converter.encode(["a,b", "c"])
        assert encoded == "a,b,c"
        assert converter.decode(encoded) == ["a", "b", "c"]

    def test_encode_skips_unencodable_elements(self):
        converter = array(raw_value(Flavor))
        assert converter.encode([Flavor.MINT, Level.LOW, Flavor.VANILLA]) == "mint,vanilla"

    def test_array_of_enums(self):
        converter = array(raw_value(Level))
        assert converter.decode(converter.encode([Level.HIGH, Level.LOW])) == [Level.HIGH, Level.LOW]


class TestOptional:
    """Tests for the marker-prefixed optional converter."""

    def test_absent_encodes_as_nil(self):
        assert optional(description(int)).encode(None) == "nil"

    def test_present_gets_marker(self):
        assert optional(description(int)).encode(5) == "?5"

    def test_round_trip(self):
        converter = optional(description(int))
        assert converter.decode(converter.encode(5)) == 5
        assert converter.decode(converter.encode(None)) is None

    def test_present_nil_string_is_not_absence(self):
        converter = optional(identity())
        encoded = converter.encode("nil")
        assert encoded == "?nil"
        assert converter.decode(encoded) == "nil"
        assert converter.decode("nil") is None

    def test_unmarked_text_fails(self):
        with pytest.raises(ConversionError):
            optional(description(int)).decode("5")

    def test_wrapped_failure_propagates(self):
        with pytest.raises(ConversionError):
            optional(description(int)).decode("?five")

    def test_nested_optional_of_array(self):
        converter = optional(array(description(int)))
        assert converter.encode([1, 2]) == "?1,2"
        assert converter.decode("?1,2") == [1, 2]


def test_identity_is_noop():
    converter = identity()
    assert converter.encode("x") == "x"
    assert converter.decode("x") == "x"


def test_from_functions():
    converter = SymmetricConverting.from_functions(lambda v: v[::-1], lambda v: v[::-1])
    assert converter.encode("abc") == "cba"
    assert converter.decode("cba") == "abc"
