import time

import pytest

from mxw.bindings import (
    DEFAULT_PROFILE,
    Button,
    DPIFn,
    KeyBinding,
    KeyboardFn,
    MediaFn,
    MouseFn,
    NoBinding,
    bind,
    bind_report,
    encode_binding,
    set_and_check,
)
from mxw.keys import parse_code


class FakeDevice:
    def __init__(self, replies=()):
        self.sent = []
        self.replies = list(replies)
        self.reads = 0

    def send_feature_report(self, data):
        self.sent.append(bytes(data))
        return len(data)

    def get_feature_report(self, length):
        self.reads += 1
        reply = self.replies.pop(0) if self.replies else bytes(length)
        return bytes(reply[:length]).ljust(length, b"\0")


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda seconds: None)


def reply(first):
    return bytes([first]) + bytes(54)


@pytest.mark.parametrize(
    "binding, expected",
    [
        (MouseFn.LEFT, bytes([1, 1, 1, 0])),
        (MouseFn.SCROLL_DOWN, bytes([1, 1, 17, 0])),
        (MouseFn.BATTERY_STATUS, bytes([12, 1, 1, 0])),
        (MouseFn.PROFILE_CYCLE_UP, bytes([8, 1, 4, 0])),
        (MouseFn.PROFILE_CYCLE_DOWN, bytes([8, 1, 3, 0])),
        (KeyboardFn.PROFILE_CYCLE_UP, bytes([5, 2, 1, 0x0F])),
        (KeyboardFn.LAYER_CYCLE_DOWN, bytes([5, 2, 4, 0x0F])),
        (DPIFn.CYCLE_UP, bytes([7, 1, 6, 0])),
        (DPIFn.STAGE_DOWN, bytes([7, 1, 2, 0])),
        (MediaFn.PLAYER, bytes([5, 2, 1, 131])),
        (MediaFn.PLAY_PAUSE, bytes([5, 2, 0, 205])),
        (MediaFn.VOLUME_DOWN, bytes([5, 2, 0, 234])),
        (NoBinding(), bytes(4)),
    ],
)
def test_encode_binding(binding, expected):
    assert encode_binding(binding) == expected


def test_encode_key_uses_key_modifier_bit():
    key = parse_code("ControlLeft")
    assert encode_binding(KeyBinding(key)) == bytes([4, 2, 1, 0])


def test_encode_key_unknown_modifier_name_adds_nothing():
    key = parse_code("ControlLeft")
    modifier = parse_code("MetaRight")
    assert encode_binding(KeyBinding(key, modifier)) == bytes([4, 2, 1, 0])


def test_encode_key_combines_modifier_and_key_bits():
    key = parse_code("MetaLeft")
    modifier = parse_code("ShiftRight")
    encoded = encode_binding(KeyBinding(key, modifier))
    assert encoded[2] == key.modifier | modifier.modifier
    assert encoded[3] == 0


def test_encode_unsupported_binding():
    with pytest.raises(TypeError):
        encode_binding("macro")


def test_bind_report_layout():
    report = bind_report(None, Button.DPI_BTN, MediaFn.MUTE)
    assert len(report) == 65
    assert report[3:6] == bytes([0x02, 0x09, 0x03])
    assert report[7] == DEFAULT_PROFILE
    assert report[8] == 20
    assert report[10:14] == encode_binding(MediaFn.MUTE)
    assert report[14:] == bytes(51)


def test_bind_report_profile():
    assert bind_report(3, Button.LEFT, NoBinding())[7] == 3


def test_bind_sends_report_once_when_accepted():
    device = FakeDevice()
    bind(device, 2, Button.FORWARD, MouseFn.BACK)
    assert device.sent == [bind_report(2, Button.FORWARD, MouseFn.BACK)]
    assert device.reads == 1


def test_bind_resends_when_asked():
    device = FakeDevice([reply(0xA2)])
    bind(device, 1, Button.BACK, MouseFn.FORWARD)
    expected = bind_report(1, Button.BACK, MouseFn.FORWARD)
    assert device.sent == [expected, expected]
    assert device.reads == 2


def test_set_and_check_retries_without_resending():
    device = FakeDevice([reply(0xA0)])
    set_and_check(device, b"report", 0, False)
    assert device.sent == []
    assert device.reads == 2


def test_set_and_check_reports_failure_after_three_tries(capsys):
    device = FakeDevice([reply(0xA0)] * 3)
    set_and_check(device, b"report", 0, False)
    assert device.reads == 4
    assert capsys.readouterr().out.count("failed to bind key") == 1