"""Keyboard keys known to the mouse, looked up by scan code, key code or code."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Key:
    """A key: HID scan code, JS-style keyCode, JS-style code and modifier bit."""

    scan_code: int
    key_code: int
    code: str
    modifier: int | None = None


KEYS: tuple[Key, ...] = (
    *(Key(4 + i, 65 + i, f"Key{chr(ord('A') + i)}") for i in range(26)),
    *(Key(29 + n, 48 + n, f"Digit{n}") for n in range(1, 10)),
    Key(39, 48, "Digit0"),
    Key(40, 13, "Enter"),
    Key(41, 27, "Escape"),
    Key(42, 8, "Backspace"),
    Key(43, 9, "Tab"),
    Key(44, 32, "Space"),
    Key(45, 189, "Minus"),
    Key(46, 187, "Equal"),
    Key(47, 219, "BracketLeft"),
    Key(48, 221, "BracketRight"),
    Key(49, 220, "Backslash"),
    Key(51, 186, "Semicolon"),
    Key(52, 222, "Quote"),
    Key(53, 192, "Backquote"),
    Key(54, 188, "Comma"),
    Key(55, 190, "Period"),
    Key(56, 191, "Slash"),
    Key(57, 20, "CapsLock"),
    *(Key(57 + n, 111 + n, f"F{n}") for n in range(1, 13)),
    Key(70, 44, "PrintScreen"),
    Key(71, 145, "ScrollLock"),
    Key(72, 19, "Pause"),
    Key(73, 45, "Insert"),
    Key(74, 36, "Home"),
    Key(75, 33, "PageUp"),
    Key(76, 46, "Delete"),
    Key(77, 35, "End"),
    Key(78, 34, "PageDown"),
    Key(79, 39, "ArrowRight"),
    Key(80, 37, "ArrowLeft"),
    Key(81, 40, "ArrowDown"),
    Key(82, 38, "ArrowUp"),
    Key(83, 144, "NumLock"),
    Key(84, 111, "NumpadDivide"),
    Key(85, 106, "NumpadMultiply"),
    Key(86, 109, "NumpadSubtract"),
    Key(87, 107, "NumpadAdd"),
    Key(99, 110, "NumpadDecimal"),
    Key(101, 93, "ContextMenu"),
    Key(224, 17, "ControlLeft", 1),
    Key(225, 16, "ShiftRight", 2),
    Key(226, 18, "AltRight", 4),
    Key(227, 91, "MetaLeft", 8),
    Key(231, 92, "MetaRight", 128),
)


def _parse_u8(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 0xFF:
        raise ValueError("number too large to fit in target type")
    return value


def _accept(found: Key | None) -> Key:
    # Only keys that carry a modifier bit are accepted.
    if found is None or found.modifier is None:
        raise ValueError("key code is invalid")
    return found


def parse_scan_code(text: str) -> Key:
    """Find a key by its decimal HID scan code."""
    value = _parse_u8(text)
    return _accept(next((key for key in KEYS if key.scan_code == value), None))


def parse_key_code(text: str) -> Key:
    """Find a key by its decimal JS-style keyCode."""
    value = _parse_u8(text)
    return _accept(next((key for key in KEYS if key.key_code == value), None))


def parse_code(text: str) -> Key:
    """Find a key by its JS-style code name, such as ``ControlLeft``."""
    return _accept(next((key for key in KEYS if key.code == text), None))