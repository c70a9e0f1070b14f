"""Querying the mouse's connection status."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Protocol

REPORT_LENGTH = 65
_STATUS_BYTES = (0xA1, 0xA4, 0xA2, 0xA0, 0xA3)
_STATUS_REPLY = 0x83


class FeatureDevice(Protocol):
    def send_feature_report(self, data: bytes) -> int: ...

    def get_feature_report(self, length: int) -> bytes: ...


class Status(IntEnum):
    """Status reported by the mouse, in the order of its status bytes."""

    READY = 0
    ASLEEP = 1
    RETRY = 2
    WAKING_UP = 3
    OTHER = 4


class StatusError(RuntimeError):
    """The device answered with a status that is not understood."""


class DeviceSleepingError(RuntimeError):
    """The device is asleep and cannot take settings."""


def get_buffer(device: FeatureDevice) -> bytes:
    """Request the status report and return the raw reply."""
    request = bytearray(REPORT_LENGTH)
    request[3] = 0x02
    request[4] = 0x02
    request[6] = _STATUS_REPLY
    device.send_feature_report(bytes(request))
    time.sleep(0.05)
    return device.get_feature_report(REPORT_LENGTH)


def get_status(device: FeatureDevice) -> Status:
    """Return the device's current status."""
    get_buffer(device)
    response = device.get_feature_report(REPORT_LENGTH)
    if len(response) <= 6:
        raise StatusError("failed to get status")
    try:
        status = Status(_STATUS_BYTES.index(response[1]))
    except ValueError:
        raise StatusError("failed to get status") from None
    if response[6] != _STATUS_REPLY:
        return Status.RETRY
    return status


def check_sleep(device: FeatureDevice) -> None:
    """Raise DeviceSleepingError if the device is asleep."""
    if get_status(device) is Status.ASLEEP:
        raise DeviceSleepingError("device is sleeping")