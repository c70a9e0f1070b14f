"""LED effects and the feature reports that select them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from mxw.bindings import DEFAULT_PROFILE
from mxw.color import Color
from mxw.status import REPORT_LENGTH, FeatureDevice, check_sleep

RATE_DEFAULT = 40


class EffectKind(IntEnum):
    """LED effects, valued by their wire id."""

    OFF = 0
    GLORIOUS = 1
    CYCLE = 2
    PULSE = 3
    SOLID = 4
    PULSE_ONE = 5
    TAIL = 6
    RAVE = 7
    WAVE = 8


# Allowed number of colors, and the number of color slots in the report.
_COLOR_COUNTS = {
    EffectKind.PULSE: (2, 6),
    EffectKind.RAVE: (1, 2),
    EffectKind.SOLID: (1, 1),
    EffectKind.PULSE_ONE: (1, 1),
}

_RATELESS = frozenset((EffectKind.SOLID, EffectKind.OFF))


@dataclass(frozen=True)
class Effect:
    """An LED effect with its optional rate (0-100) and colors."""

    kind: EffectKind
    rate: int | None = None
    colors: Sequence[Color] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        low, high = _COLOR_COUNTS.get(self.kind, (0, 0))
        if not low <= len(self.colors) <= high:
            if low == high:
                raise ValueError(f"{self.kind.name.lower()} takes {low} color(s)")
            raise ValueError(
                f"{self.kind.name.lower()} takes from {low} to {high} colors"
            )


def rate_check(rate: int | None, effect_id: int) -> int:
    """Convert a 0-100 rate into the device's speed byte for ``effect_id``."""
    value = RATE_DEFAULT if rate is None else rate
    if not 0 <= value <= 100:
        raise ValueError("rate must be in the range of 0-100")
    if effect_id in (EffectKind.RAVE, EffectKind.WAVE):
        return (105 - value) * 2
    return (105 - value) // 5


def effect_report(profile: int | None, effect: Effect) -> bytes:
    """Build the feature report that selects ``effect`` in ``profile``."""
    kind = effect.kind
    report = bytearray(REPORT_LENGTH)
    report[3] = 0x02
    report[5] = 0x02
    report[7] = DEFAULT_PROFILE if profile is None else profile
    report[8] = 0xFF
    report[9] = int(kind)

    if kind in (EffectKind.PULSE, EffectKind.RAVE):
        report[4] = len(effect.colors) * 3 + 5
    elif kind in (EffectKind.SOLID, EffectKind.PULSE_ONE):
        report[4] = 0x08
    else:
        report[4] = 0x05

    if kind not in _RATELESS:
        report[11] = rate_check(effect.rate, int(kind))
    if kind is EffectKind.CYCLE:
        report[12] = 0xFF

    for offset, color in zip(range(12, REPORT_LENGTH, 3), effect.colors):
        report[offset:offset + 3] = bytes(color)
    return bytes(report)


def set_led_effect(device: FeatureDevice, profile: int | None, effect: Effect) -> None:
    """Select an LED effect on the device."""
    check_sleep(device)
    device.send_feature_report(effect_report(profile, effect))