"""Changing the mouse's settings."""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from enum import Enum

from mxw.bindings import DEFAULT_PROFILE, Button, MouseFn, bind
from mxw.color import Color
from mxw.status import REPORT_LENGTH, FeatureDevice, check_sleep

POLLING_RATES = (1, 2, 4, 8)
LIFT_OFF_DISTANCES = (1, 2)


class ScrollDirection(Enum):
    """Whether the scroll wheel keeps or swaps its directions."""

    DEFAULT = "default"
    INVERT = "invert"


def _report(fields: Mapping[int, int]) -> bytearray:
    report = bytearray(REPORT_LENGTH)
    for offset, value in fields.items():
        report[offset] = value
    return report


def _profile(profile: int | None) -> int:
    return DEFAULT_PROFILE if profile is None else profile


def set_profile(device: FeatureDevice, profile_id: int) -> None:
    """Make ``profile_id`` the active profile."""
    check_sleep(device)
    device.send_feature_report(bytes(_report({3: 0x02, 4: 0x01, 6: 0x05, 7: profile_id})))


def set_sleep(device: FeatureDevice, minutes: int, seconds: int | None = None) -> None:
    """Set the idle time before sleeping; zero disables sleeping."""
    check_sleep(device)
    total = minutes * 60 + (seconds or 0)
    delay = total.to_bytes(2, "big") if total > 0 else b"\xff\xff"
    report = _report({3: 0x02, 4: 0x02, 6: 0x07})
    report[7:9] = delay
    device.send_feature_report(bytes(report))


def set_led_brightness(device: FeatureDevice, wired: int, wireless: int | None = None) -> None:
    """Set LED brightness for wired use and, defaulting to the same, wireless use."""
    check_sleep(device)
    report = _report({3: 0x02, 4: 0x02, 5: 0x02, 6: 0x02, 7: 0x01, 8: wired})
    device.send_feature_report(bytes(report))
    time.sleep(0.03)
    report[7] = 0x00
    report[8] = wired if wireless is None else wireless
    device.send_feature_report(bytes(report))


def set_polling_rate(device: FeatureDevice, ms: int | str) -> None:
    """Set the polling interval in milliseconds (1, 2, 4 or 8)."""
    value = int(ms)
    if value not in POLLING_RATES:
        raise ValueError("polling rate must be one of 1, 2, 4, 8")
    check_sleep(device)
    device.send_feature_report(bytes(_report({3: 0x02, 4: 0x01, 5: 0x01, 7: value})))


def set_lift_off(device: FeatureDevice, mm: int | str) -> None:
    """Set the lift-off distance in millimetres (1 or 2)."""
    value = int(mm)
    if value not in LIFT_OFF_DISTANCES:
        raise ValueError("lift-off distance must be 1 or 2")
    check_sleep(device)
    device.send_feature_report(
        bytes(_report({3: 0x02, 4: 0x01, 5: 0x01, 6: 0x07, 7: value - 1}))
    )


def set_debounce(device: FeatureDevice, profile: int | None, ms: int) -> None:
    """Set the button debounce time in milliseconds."""
    check_sleep(device)
    device.send_feature_report(
        bytes(_report({3: 0x02, 4: 0x01, 6: 0x08, 7: _profile(profile), 8: ms}))
    )


def set_dpi_stage(device: FeatureDevice, profile: int | None, stage_id: int) -> None:
    """Select the active DPI stage."""
    check_sleep(device)
    device.send_feature_report(
        bytes(
            _report({3: 0x02, 4: 0x02, 5: 0x01, 6: 0x02, 7: _profile(profile), 8: stage_id})
        )
    )


def set_dpi_stages(device: FeatureDevice, profile: int | None, stages: Iterable[int]) -> None:
    """Set the DPI value of each stage."""
    values = list(stages)
    report = _report({3: 0x02, 4: 0x12, 5: 0x01, 6: 0x01, 7: _profile(profile), 8: len(values)})
    for offset, stage in zip(range(9, REPORT_LENGTH, 4), values):
        encoded = stage.to_bytes(2, "big")
        report[offset:offset + 4] = encoded + encoded
    device.send_feature_report(bytes(report))


def set_dpi_colors(device: FeatureDevice, profile: int | None, colors: Iterable[Color]) -> None:
    """Set the indicator color of each DPI stage."""
    check_sleep(device)
    report = _report({3: 0x02, 4: 0x13, 5: 0x02, 6: 0x01, 7: _profile(profile)})
    for offset, color in zip(range(8, REPORT_LENGTH, 3), colors):
        report[offset:offset + 3] = bytes(color)
    device.send_feature_report(bytes(report))


def set_scroll(device: FeatureDevice, direction: ScrollDirection) -> None:
    """Keep or invert the scroll wheel in every profile."""
    check_sleep(device)
    if direction is ScrollDirection.INVERT:
        up, down = MouseFn.SCROLL_DOWN, MouseFn.SCROLL_UP
    else:
        up, down = MouseFn.SCROLL_UP, MouseFn.SCROLL_DOWN
    for profile in range(1, 4):
        bind(device, profile, Button.SCROLL_UP, up)
        bind(device, profile, Button.SCROLL_DOWN, down)