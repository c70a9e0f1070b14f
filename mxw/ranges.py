"""Validators for decimal values that must fall in an inclusive range."""

from __future__ import annotations

import re
from collections.abc import Callable

_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    return int(text)


def contains(low: int, high: int) -> Callable[[str], int]:
    """Return a validator that parses text and checks ``low <= value <= high``."""

    def check(text: str) -> int:
        value = _parse_unsigned(text)
        if not low <= value <= high:
            raise ValueError(f"not in range {low}-{high}")
        return value

    return check