"""Keyboard keys and modifier flags."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class KeyboardModifier(IntFlag):
    """Modifier keys and lock states held while a key event occurred."""

    NO_MODIFIERS = 0x00000000
    SHIFT = 0x00000001
    CONTROL = 0x00000002
    ALT = 0x00000004
    LOGO = 0x00000008
    CAPS_LOCK = 0x00000010
    NUM_LOCK = 0x00000020


class Key(IntEnum):
    """Platform-independent key codes.

    Printable keys carry their 7-bit ASCII value; the others lie above 0xff.
    """

    UNKNOWN = -1

    # 7 bit printable ASCII
    SPACE = 0x20
    EXCLAMATION = 0x21
    DOUBLE_QUOTE = 0x22
    HASH_SIGN = 0x23
    DOLLAR = 0x24
    PERCENT = 0x25
    AMPERSAND = 0x26
    APOSTROPHE = 0x27
    PAREN_LEFT = 0x28
    PAREN_RIGHT = 0x29
    ASTERISK = 0x2A
    PLUS = 0x2B
    COMMA = 0x2C
    MINUS = 0x2D
    PERIOD = 0x2E
    SLASH = 0x2F
    DIGIT_0 = 0x30
    DIGIT_1 = 0x31
    DIGIT_2 = 0x32
    DIGIT_3 = 0x33
    DIGIT_4 = 0x34
    DIGIT_5 = 0x35
    DIGIT_6 = 0x36
    DIGIT_7 = 0x37
    DIGIT_8 = 0x38
    DIGIT_9 = 0x39
    COLON = 0x3A
    SEMICOLON = 0x3B
    LESS = 0x3C
    EQUAL = 0x3D
    GREATER = 0x3E
    QUESTION = 0x3F
    AT = 0x40
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    BRACKET_LEFT = 0x5B
    BACKSLASH = 0x5C
    BRACKET_RIGHT = 0x5D
    ASCII_CIRCUM = 0x5E
    UNDERSCORE = 0x5F
    QUOTE_LEFT = 0x60
    BRACE_LEFT = 0x7B
    BAR = 0x7C
    BRACE_RIGHT = 0x7D
    ASCII_TILDE = 0x7E

    # Function keys, numpad and others
    ESCAPE = 0x100
    ENTER = 0x101
    TAB = 0x102
    BACKSPACE = 0x103
    INSERT = 0x104
    DELETE = 0x105
    RIGHT = 0x106
    LEFT = 0x107
    DOWN = 0x108
    UP = 0x109
    PAGE_UP = 0x10A
    PAGE_DOWN = 0x10B
    HOME = 0x10C
    END = 0x10D
    CAPS_LOCK = 0x10E
    SCROLL_LOCK = 0x10F
    NUM_LOCK = 0x110
    PRINT_SCREEN = 0x111
    PAUSE = 0x112

    F1 = 0x113
    F2 = 0x114
    F3 = 0x115
    F4 = 0x116
    F5 = 0x117
    F6 = 0x118
    F7 = 0x119
    F8 = 0x11A
    F9 = 0x11B
    F10 = 0x11C
    F11 = 0x11D
    F12 = 0x11E
    F13 = 0x11F
    F14 = 0x120
    F15 = 0x121
    F16 = 0x122
    F17 = 0x123
    F18 = 0x124
    F19 = 0x125
    F20 = 0x126
    F21 = 0x127
    F22 = 0x128
    F23 = 0x129
    F24 = 0x12A
    F25 = 0x12B
    F26 = 0x12C
    F27 = 0x12D
    F28 = 0x12E
    F29 = 0x12F
    F30 = 0x130

    NUMPAD_0 = 0x150
    NUMPAD_1 = 0x151
    NUMPAD_2 = 0x152
    NUMPAD_3 = 0x153
    NUMPAD_4 = 0x154
    NUMPAD_5 = 0x155
    NUMPAD_6 = 0x156
    # Shares its code with NUMPAD_6, so it is an alias of that member.
    NUMPAD_7 = 0x156
    NUMPAD_8 = 0x157
    NUMPAD_9 = 0x158
    NUMPAD_DECIMAL = 0x159
    NUMPAD_DIVIDE = 0x15A
    NUMPAD_MULTIPLY = 0x15B
    NUMPAD_SUBTRACT = 0x15C
    NUMPAD_ADD = 0x15D
    NUMPAD_ENTER = 0x15E
    NUMPAD_EQUAL = 0x15F

    LEFT_SHIFT = 0x160
    LEFT_CONTROL = 0x161
    LEFT_ALT = 0x162
    LEFT_SUPER = 0x163
    RIGHT_SHIFT = 0x164
    RIGHT_CONTROL = 0x165
    RIGHT_ALT = 0x168
    RIGHT_SUPER = 0x169
    MENU = 0x16A