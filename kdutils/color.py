"""Conversion of ``#rrggbb`` colour codes to RGB and RGBA tuples."""

from __future__ import annotations

from typing import Tuple, Union

Component = Union[int, float]
Rgb = Tuple[Component, Component, Component]
Rgba = Tuple[Component, Component, Component, Component]


def hex_to_int(char: str) -> int:
    """Return the value of a single hexadecimal digit."""
    if len(char) == 1:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "a" <= char <= "f":
            return ord(char) - ord("a") + 10
        if "A" <= char <= "F":
            return ord(char) - ord("A") + 10
    raise ValueError("Invalid hex code")


def _components(hex_code: str) -> tuple[int, int, int]:
    if not hex_code.startswith("#"):
        raise ValueError("Missing hashtag at start of hexadecimal string")
    if len(hex_code) != 7:
        raise ValueError("Length of hexadecimal string must be 7 characters")
    return tuple(  # type: ignore[return-value]
        ((hex_to_int(hex_code[i]) << 4) | hex_to_int(hex_code[i + 1])) & 0xFF
        for i in (1, 3, 5)
    )


def hex_to_rgb(hex_code: str, integral: bool = False) -> Rgb:
    """Parse ``#rrggbb``.

    With ``integral`` the components are ints in 0..255; otherwise they are
    floats normalised to 0..1.
    """
    red, green, blue = _components(hex_code)
    if integral:
        return red, green, blue
    return red / 255.0, green / 255.0, blue / 255.0


def hex_to_rgba(hex_code: str, alpha: Component, integral: bool = False) -> Rgba:
    """Parse ``#rrggbb`` and append ``alpha`` unchanged."""
    red, green, blue = hex_to_rgb(hex_code, integral)
    return red, green, blue, alpha