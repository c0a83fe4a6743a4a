import pytest

from kdutils.color import hex_to_int, hex_to_rgb, hex_to_rgba


@pytest.mark.parametrize(
    "char, expected",
    [("0", 0), ("9", 9), ("a", 10), ("f", 15), ("A", 10), ("F", 15)],
)
def test_hex_to_int_digits(char, expected):
    assert hex_to_int(char) == expected


@pytest.mark.parametrize("char", ["g", "G", "z", " ", "#", "", "ab"])
def test_hex_to_int_rejects_non_hex(char):
    with pytest.raises(ValueError, match="Invalid hex code"):
        hex_to_int(char)


@pytest.mark.parametrize("code", ["#000000", "#ffffff", "#ef4444", "#0EA5E9", "#1a2e05"])
def test_integral_rgb_round_trips(code):
    red, green, blue = hex_to_rgb(code, integral=True)
    assert all(isinstance(c, int) for c in (red, green, blue))
    assert f"#{red:02x}{green:02x}{blue:02x}" == code.lower()


def test_black_is_zero():
    assert hex_to_rgb("#000000") == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("code", ["#000000", "#ffffff", "#7c3aed", "#A855F7"])
def test_float_rgb_matches_integral(code):
    floats = hex_to_rgb(code)
    ints = hex_to_rgb(code, integral=True)
    assert all(0.0 <= c <= 1.0 for c in floats)
    assert [round(c * 255) for c in floats] == list(ints)


def test_white_is_one():
    assert hex_to_rgb("#ffffff") == (1.0, 1.0, 1.0)


def test_rgba_keeps_alpha_and_rgb():
    code = "#3b82f6"
    rgba = hex_to_rgba(code, 0.5)
    assert rgba[3] == 0.5
    assert rgba[:3] == hex_to_rgb(code)


def test_rgba_integral():
    code = "#3b82f6"
    rgba = hex_to_rgba(code, 128, integral=True)
    assert rgba == hex_to_rgb(code, integral=True) + (128,)


@pytest.mark.parametrize("code", ["ffffff", "", "0x0000", "fffffff"])
def test_missing_hash(code):
    with pytest.raises(ValueError, match="Missing hashtag"):
        hex_to_rgb(code)


@pytest.mark.parametrize("code", ["#fff", "#fffffff", "#", "#12345"])
def test_wrong_length(code):
    with pytest.raises(ValueError, match="Length of hexadecimal string"):
        hex_to_rgb(code)


def test_wrong_length_rgba():
    with pytest.raises(ValueError, match="Length of hexadecimal string"):
        hex_to_rgba("#abc", 1.0)


def test_invalid_digit():
    with pytest.raises(ValueError, match="Invalid hex code"):
        hex_to_rgb("#gg0000")