import pytest

from tweaks.core.converters import COULD_NOT_CONVERT, ConversionError, Converting


def _parse_int(text):
    return int(text)


def test_convert_wraps_value_errors():
    converter = Converting(_parse_int)
    assert converter.convert("42") == 42
    with pytest.raises(ConversionError) as excinfo:
        converter.convert("forty-two")
    assert excinfo.value.kind == COULD_NOT_CONVERT
    assert excinfo.value.value == "forty-two"


def test_convert_with_fallback_swallows_failure():
    converter = Converting(_parse_int)
    assert converter.convert("nope", -1) == -1
    assert converter.convert("7", -1) == 7


def test_fallback_can_be_none():
    converter = Converting(_parse_int)
    assert converter.convert("nope", None) is None


def test_pullback_precomposes():
    converter = Converting(_parse_int).pullback(lambda text: text.strip())
    assert converter.convert("  12 ") == 12


def test_chain_postcomposes_and_short_circuits():
    calls = []

    def double(value):
        calls.append(value)
        return value * 2

    converter = Converting(_parse_int).chain(Converting(double))
    assert converter.convert("3") == 6
    with pytest.raises(ConversionError):
        converter.convert("x")
    assert calls == [3]


def test_chain_failure_in_second_stage():
    def reject(value):
        raise ConversionError("rejected", value)

    converter = Converting(_parse_int).chain(Converting(reject))
    with pytest.raises(ConversionError):
        converter.convert("3")
    assert converter.convert("3", "fallback") == "fallback"


def test_map_preserves_upstream_failure():
    converter = Converting(_parse_int).map(lambda value: value + 1)
    assert converter.convert("1") == 2
    with pytest.raises(ConversionError):
        converter.convert("bad")


def test_identity():
    sentinel = object()
    assert Converting.identity().convert(sentinel) is sentinel


def test_default_value():
    converter = Converting.default_value(5)
    assert converter.convert(None) == 5
    assert converter.convert(0) == 0


def test_string_and_data_codecs():
    assert Converting.data("utf-8").convert("héllo") == "héllo".encode("utf-8")
    assert Converting.string("utf-8").convert(b"abc") == "abc"
    assert Converting.string("utf-8").convert(b"\xff\xfe\xfa") is None
    assert Converting.data("ascii").convert("é") is None


def test_description_stringify_and_raw_value():
    from tests.helpers import Level

    assert Converting.description().convert(True) == "true"
    assert Converting.description().convert(1.5) == "1.5"
    assert Converting.stringify().convert(12) == "12"
    assert Converting.raw_value().convert(Level.HIGH) == 3
