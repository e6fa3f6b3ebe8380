import pytest

from tweaks.core.converters import BLACK_TRANSPARENT, Color, hex_color


def test_encode_uppercase_with_alpha():
    color = Color.from_rgba255(255, 128, 0, 255)
    assert hex_color.encode(color) == "#FF8000FF"


def test_encode_pads_with_leading_zeros():
    assert hex_color.encode(Color.from_rgba255(1, 2, 3, 4)) == "#01020304"


def test_decode_byte_order():
    color = hex_color.decode("#11223344")
    assert color.rgba255() == (0x11, 0x22, 0x33, 0x44)


def test_decode_without_hash_and_with_whitespace():
    assert hex_color.decode("  aabbccdd \n").rgba255() == (0xAA, 0xBB, 0xCC, 0xDD)


@pytest.mark.parametrize("text", ["", "#", "#FFF", "#zzzzzzzz", "12345"])
def test_malformed_input_is_black_transparent(text):
    assert hex_color.decode(text) == BLACK_TRANSPARENT


def test_decode_ignores_trailing_characters():
    assert hex_color.decode("#FF0000FFextra").rgba255() == (255, 0, 0, 255)


@pytest.mark.parametrize(
    "color",
    [
        Color(0.0, 0.0, 0.0, 0.0),
        Color(1.0, 1.0, 1.0, 1.0),
        Color(0.5, 0.25, 0.75, 0.1),
        Color(0.333, 0.667, 0.999, 0.001),
    ],
)
def test_round_trip_within_one_step(color):
    decoded = hex_color.decode(hex_color.encode(color))
    assert decoded.is_close(color, tolerance=1 / 255)


def test_byte_aligned_colors_round_trip_exactly():
    for value in (0, 17, 128, 254, 255):
        color = Color.from_rgba255(value, 255 - value, value, 255)
        assert hex_color.decode(hex_color.encode(color)) == color


def test_out_of_range_components_are_clamped():
    assert hex_color.encode(Color(1.5, -0.5, 0.0, 1.0)) == "#FF0000FF"


def test_hex_helpers():
    color = Color.from_hex("#00FF0080")
    assert color.hex == "#00FF0080"
