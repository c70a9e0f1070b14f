"""Binding mouse buttons to keys, mouse, keyboard, DPI and media functions."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from termcolor import colored

from mxw.keys import Key
from mxw.status import REPORT_LENGTH, FeatureDevice

DEFAULT_PROFILE = 1

_CHECK_LENGTH = 55
_BINDING_OFFSET = 10
_BINDING_LENGTH = 4

_REPLY_RESEND = 0xA2
_REPLY_RETRY = 0xA0
_REPLY_WAIT = 0xA4

_MODIFIER_BITS = {
    "ControlLeft": 0x01,
    "ShiftRight": 0x02,
    "AltRight": 0x04,
    "MetaLeft": 0x08,
}


class Button(IntEnum):
    """Physical mouse buttons, valued by their wire id."""

    LEFT = 1
    RIGHT = 2
    SCROLL = 3
    BACK = 4
    FORWARD = 5
    SCROLL_UP = 16
    SCROLL_DOWN = 17
    DPI_BTN = 20


class MouseFn(IntEnum):
    """Mouse functions a button can perform."""

    LEFT = 1
    RIGHT = 2
    SCROLL = 3
    BACK = 4
    FORWARD = 5
    BATTERY_STATUS = 12
    SCROLL_UP = 16
    SCROLL_DOWN = 17
    PROFILE_CYCLE_UP = 24
    PROFILE_CYCLE_DOWN = 25


class KeyboardFn(IntEnum):
    """Keyboard functions a button can perform."""

    PROFILE_CYCLE_UP = 1
    PROFILE_CYCLE_DOWN = 2
    LAYER_CYCLE_UP = 3
    LAYER_CYCLE_DOWN = 4


class DPIFn(IntEnum):
    """DPI modifiers a button can perform."""

    STAGE_UP = 1
    STAGE_DOWN = 2
    CYCLE_UP = 6
    CYCLE_DOWN = 7


class MediaFn(Enum):
    """Multimedia functions, valued by their two wire bytes."""

    PLAYER = (1, 131)
    PLAY_PAUSE = (0, 205)
    NEXT = (0, 181)
    PREVIOUS = (0, 182)
    STOP = (0, 183)
    MUTE = (0, 226)
    VOLUME_UP = (0, 233)
    VOLUME_DOWN = (0, 234)


@dataclass(frozen=True)
class KeyBinding:
    """A single keyboard key with an optional modifier key."""

    key: Key
    modifier: Key | None = None


@dataclass(frozen=True)
class NoBinding:
    """The button does nothing."""


Binding = Union[MouseFn, KeyboardFn, DPIFn, MediaFn, KeyBinding, NoBinding]

# Mouse functions whose encoding differs from the plain (1, 1, id) form.
_MOUSE_SPECIAL = {
    MouseFn.BATTERY_STATUS: (12, 1, 1),
    MouseFn.PROFILE_CYCLE_UP: (8, 1, 4),
    MouseFn.PROFILE_CYCLE_DOWN: (8, 1, 3),
}


def _encode_key(binding: KeyBinding) -> bytes:
    encoded = bytearray((0x04, 0x02, 0x00, 0x00))
    if binding.modifier is not None:
        encoded[2] = _MODIFIER_BITS.get(binding.modifier.code, 0x00)
    if binding.key.modifier is not None:
        encoded[2] |= binding.key.modifier
    else:
        encoded[3] = binding.key.scan_code
    return bytes(encoded)


def encode_binding(binding: Binding) -> bytes:
    """Return the four bytes that describe ``binding`` in a bind report."""
    if isinstance(binding, KeyBinding):
        return _encode_key(binding)
    if isinstance(binding, MouseFn):
        return bytes((*_MOUSE_SPECIAL.get(binding, (0x01, 0x01, int(binding))), 0))
    if isinstance(binding, KeyboardFn):
        return bytes((0x05, 0x02, int(binding), 0x0F))
    if isinstance(binding, MediaFn):
        return bytes((0x05, 0x02, *binding.value))
    if isinstance(binding, DPIFn):
        return bytes((0x07, 0x01, int(binding), 0x00))
    if isinstance(binding, NoBinding):
        return bytes(_BINDING_LENGTH)
    raise TypeError(f"unsupported binding: {binding!r}")


def bind_report(profile: int | None, button: Button, binding: Binding) -> bytes:
    """Build the feature report that binds ``button`` in ``profile``."""
    report = bytearray(REPORT_LENGTH)
    report[3] = 0x02
    report[4] = 0x09
    report[5] = 0x03
    report[7] = DEFAULT_PROFILE if profile is None else profile
    report[8] = int(button)
    report[_BINDING_OFFSET:_BINDING_OFFSET + _BINDING_LENGTH] = encode_binding(binding)
    return bytes(report)


def bind(
    device: FeatureDevice, profile: int | None, button: Button, binding: Binding
) -> None:
    """Send a binding and follow the device's replies until it accepts it."""
    report = bind_report(profile, button, binding)
    device.send_feature_report(report)
    set_and_check(device, report, 0, False)


def set_and_check(
    device: FeatureDevice, report: bytes, depth: int = 0, waiting: bool = False
) -> None:
    """Poll the device after a bind, resending ``report`` when it asks for it."""
    while True:
        if depth >= 3:
            print(f"{colored('error', 'red', attrs=['bold'])}: failed to bind key")
        time.sleep(0.1)
        if not waiting:
            reply = device.get_feature_report(_CHECK_LENGTH)
            time.sleep(0.04)
            code = reply[0] if reply else 0
            if code == _REPLY_RESEND:
                device.send_feature_report(report)
            elif code == _REPLY_WAIT:
                waiting = True
            elif code != _REPLY_RETRY:
                return
        depth += 1