import time

import pytest

from mxw.color import Color, parse_hex
from mxw.effects import Effect, EffectKind, effect_report, rate_check, set_led_effect
from mxw.status import DeviceSleepingError


def status_reply(status_byte):
    reply = bytearray(65)
    reply[1] = status_byte
    reply[6] = 0x83
    return bytes(reply)


READY = status_reply(0xA1)
ASLEEP = status_reply(0xA4)


class FakeDevice:
    def __init__(self, replies=()):
        self.sent = []
        self.replies = list(replies)

    def send_feature_report(self, data):
        self.sent.append(bytes(data))
        return len(data)

    def get_feature_report(self, length):
        reply = self.replies.pop(0) if self.replies else READY
        return bytes(reply[:length]).ljust(length, b"\0")


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)


RED = parse_hex("FF0000")
GREEN = parse_hex("00FF00")
BLUE = parse_hex("0000FF")


def test_rate_check_default_is_forty():
    assert rate_check(None, 1) == rate_check(40, 1)
    assert rate_check(None, 7) == rate_check(40, 7)


def test_rate_check_values():
    assert rate_check(40, 1) == 13
    assert rate_check(40, 7) == 130


def test_rate_check_faster_rate_gives_smaller_byte():
    for effect_id in (1, 2, 3, 5, 6, 7, 8):
        assert rate_check(100, effect_id) < rate_check(0, effect_id)


def test_rate_check_out_of_range():
    with pytest.raises(ValueError, match="0-100"):
        rate_check(101, 1)


def test_off_report():
    report = effect_report(None, Effect(EffectKind.OFF))
    assert len(report) == 65
    assert report[3] == 0x02
    assert report[4] == 0x05
    assert report[5] == 0x02
    assert report[7] == 1
    assert report[8] == 0xFF
    assert report[9] == 0x00
    assert report[11] == 0


def test_cycle_report():
    report = effect_report(2, Effect(EffectKind.CYCLE, rate=70))
    assert report[7] == 2
    assert report[9] == 0x02
    assert report[11] == rate_check(70, 2)
    assert report[12] == 0xFF


def test_solid_report_has_color_and_no_rate():
    report = effect_report(1, Effect(EffectKind.SOLID, rate=10, colors=[BLUE]))
    assert report[4] == 0x08
    assert report[9] == 0x04
    assert report[11] == 0
    assert report[12:15] == bytes(BLUE)


def test_pulse_report_pads_colors():
    report = effect_report(1, Effect(EffectKind.PULSE, colors=[RED, GREEN]))
    assert report[9] == 0x03
    assert report[12:18] == bytes(RED) + bytes(GREEN)
    assert report[18:30] == bytes(12)


def test_pulse_length_byte_grows_with_colors():
    two = effect_report(1, Effect(EffectKind.PULSE, colors=[RED, GREEN]))
    three = effect_report(1, Effect(EffectKind.PULSE, colors=[RED, GREEN, BLUE]))
    assert three[4] - two[4] == 3


def test_rave_report():
    report = effect_report(1, Effect(EffectKind.RAVE, rate=50, colors=[RED]))
    assert report[9] == 0x07
    assert report[11] == rate_check(50, 7)
    assert report[12:15] == bytes(RED)
    assert report[15:18] == bytes(3)


def test_pulse_one_report():
    color = Color(1, 2, 3)
    report = effect_report(3, Effect(EffectKind.PULSE_ONE, colors=[color]))
    assert report[9] == 0x05
    assert report[12:15] == bytes([1, 2, 3])


@pytest.mark.parametrize(
    "kind, colors",
    [
        (EffectKind.PULSE, [RED]),
        (EffectKind.RAVE, [RED, GREEN, BLUE]),
        (EffectKind.SOLID, []),
        (EffectKind.WAVE, [RED]),
    ],
)
def test_effect_rejects_wrong_color_count(kind, colors):
    with pytest.raises(ValueError):
        Effect(kind, colors=colors)


def test_set_led_effect_sends_report():
    device = FakeDevice()
    effect = Effect(EffectKind.WAVE, rate=20)
    set_led_effect(device, 2, effect)
    assert device.sent[-1] == effect_report(2, effect)


def test_set_led_effect_refuses_sleeping_device():
    device = FakeDevice([ASLEEP, ASLEEP])
    with pytest.raises(DeviceSleepingError):
        set_led_effect(device, 1, Effect(EffectKind.OFF))
    assert len(device.sent) == 1