"""Translation of Windows keyboard scan codes to :class:`Key` values."""

from __future__ import annotations

from kdutils.keys import Key

_TABLE_SIZE = 512


def _build_table() -> dict[int, Key]:
    table: dict[int, Key] = {0x01: Key.ESCAPE}
    table.update(zip(range(0x02, 0x0B), (Key[f"DIGIT_{d}"] for d in range(1, 10))))
    table.update({
        0x0B: Key.DIGIT_0,
        0x0C: Key.MINUS,
        0x0D: Key.EQUAL,
        0x0E: Key.BACKSPACE,
        0x0F: Key.TAB,
    })
    table.update(zip(range(0x10, 0x1A), (Key[c] for c in "QWERTYUIOP")))
    table.update({
        0x1A: Key.BRACKET_LEFT,
        0x1B: Key.BRACKET_RIGHT,
        0x1C: Key.ENTER,
        0x1D: Key.LEFT_CONTROL,
    })
    table.update(zip(range(0x1E, 0x27), (Key[c] for c in "ASDFGHJKL")))
    table.update({
        0x27: Key.SEMICOLON,
        0x28: Key.APOSTROPHE,
        0x29: Key.QUOTE_LEFT,
        0x2A: Key.LEFT_SHIFT,
        0x2B: Key.BACKSLASH,
    })
    table.update(zip(range(0x2C, 0x33), (Key[c] for c in "ZXCVBNM")))
    table.update({
        0x33: Key.COMMA,
        0x34: Key.PERIOD,
        0x35: Key.SLASH,
        0x36: Key.RIGHT_SHIFT,
        0x37: Key.NUMPAD_MULTIPLY,
        0x38: Key.LEFT_ALT,
        0x39: Key.SPACE,
        0x3A: Key.CAPS_LOCK,
    })
    table.update(zip(range(0x3B, 0x45), (Key[f"F{n}"] for n in range(1, 11))))
    table.update({
        0x45: Key.PAUSE,
        0x46: Key.SCROLL_LOCK,
        0x47: Key.NUMPAD_7,
        0x48: Key.NUMPAD_8,
        0x49: Key.NUMPAD_9,
        0x4A: Key.NUMPAD_SUBTRACT,
        0x4B: Key.NUMPAD_4,
        0x4C: Key.NUMPAD_5,
        0x4D: Key.NUMPAD_6,
        0x4E: Key.NUMPAD_ADD,
        0x4F: Key.NUMPAD_1,
        0x50: Key.NUMPAD_2,
        0x51: Key.NUMPAD_3,
        0x52: Key.NUMPAD_0,
        0x53: Key.NUMPAD_DECIMAL,
        0x57: Key.F11,
        0x58: Key.F12,
        0x59: Key.NUMPAD_EQUAL,
    })
    table.update(zip(range(0x64, 0x6F), (Key[f"F{n}"] for n in range(13, 24))))
    table.update({
        0x76: Key.F24,
        # Extended (E0-prefixed) scan codes
        0x11C: Key.NUMPAD_ENTER,
        0x11D: Key.RIGHT_CONTROL,
        0x135: Key.NUMPAD_DIVIDE,
        0x137: Key.PRINT_SCREEN,
        0x138: Key.RIGHT_ALT,
        0x145: Key.NUM_LOCK,
        0x146: Key.PAUSE,
        0x147: Key.HOME,
        0x148: Key.UP,
        0x149: Key.PAGE_UP,
        0x14B: Key.LEFT,
        0x14D: Key.RIGHT,
        0x14F: Key.END,
        0x150: Key.DOWN,
        0x151: Key.PAGE_DOWN,
        0x152: Key.INSERT,
        0x153: Key.DELETE,
        0x15B: Key.LEFT_SUPER,
        0x15C: Key.RIGHT_SUPER,
        0x15D: Key.MENU,
    })
    return table


_SCAN_CODES = _build_table()


def windows_scan_code_to_key(scan_code: int) -> Key:
    """Return the key for a scan code (bits 0-7 code, bit 8 extended).

    Codes that are unmapped or outside 0..511 give :attr:`Key.UNKNOWN`.
    """
    if not 0 <= scan_code < _TABLE_SIZE:
        return Key.UNKNOWN
    return _SCAN_CODES.get(scan_code, Key.UNKNOWN)