"""Reading battery and firmware information from the mouse."""

from __future__ import annotations

import time

from termcolor import colored

from mxw.status import REPORT_LENGTH, FeatureDevice, Status, get_buffer, get_status


def _charging_text(percentage: int) -> str:
    if percentage < 25:
        return colored("charging", "red")
    if percentage < 75:
        return colored("charging", "yellow")
    if percentage < 100:
        return colored("charging", "light_yellow")
    return colored("fully charged", "green")


def battery_text(device: FeatureDevice, wired: bool) -> str:
    """Describe the battery level, or the device's state if it has none to give."""
    status = get_status(device)
    response = get_buffer(device)
    percentage = response[8] or 1

    if status is Status.READY:
        if wired:
            return f"{percentage}% ({_charging_text(percentage)})"
        return f"{percentage}%"
    if status is Status.ASLEEP:
        return "(asleep)"
    if status is Status.WAKING_UP:
        return "(waking up)"
    return (
        f"[1:{response[1]:02X}, 6:{response[6]:02X}, 8:{response[8]:02X}] "
        f"({colored('unknown status', 'red')})"
    )


def firmware_version(device: FeatureDevice, wired: bool) -> str:
    """Return the firmware version as four dotted numbers."""
    request = bytearray(REPORT_LENGTH)
    if wired:
        request[3] = 0x02
    request[4] = 0x03
    request[6] = 0x81
    device.send_feature_report(bytes(request))
    time.sleep(0.05)
    response = device.get_feature_report(REPORT_LENGTH)
    return ".".join(str(part) for part in response[7:11])