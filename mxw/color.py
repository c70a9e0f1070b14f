"""RGB colors given on the command line as six hex digits."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_DIGITS = re.compile(r"\+?[0-9A-Fa-f]+")


@dataclass(frozen=True)
class Color:
    """An RGB color with one byte per channel."""

    red: int
    green: int
    blue: int

    def __bytes__(self) -> bytes:
        return bytes((self.red, self.green, self.blue))


def parse_hex(text: str) -> Color:
    """Parse a color such as ``FF8800``; raise ValueError if it is malformed."""
    if len(text.encode()) != 6:
        raise ValueError("color hex must be of length 6")
    if not _HEX_DIGITS.fullmatch(text):
        raise ValueError("could not parse color hex")
    value = int(text, 16)
    return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)