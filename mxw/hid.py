"""Finding the mouse and exchanging feature reports through Linux hidraw."""

from __future__ import annotations

import fcntl
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from mxw.glorious import is_supported

SYSFS_HIDRAW = "/sys/class/hidraw"
DEV_ROOT = Path("/dev")


def _ioc_read_write(number: int, size: int) -> int:
    return (3 << 30) | (size << 16) | (ord("H") << 8) | number


class NoDeviceError(RuntimeError):
    """No supported mouse is connected."""


@dataclass(frozen=True)
class DeviceInfo:
    """A hidraw node and the USB identity behind it."""

    path: str
    vendor_id: int
    product_id: int
    interface_number: int


class HidrawDevice:
    """An open hidraw node that exchanges feature reports."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self._fd: int | None = os.open(self.path, os.O_RDWR)

    def _descriptor(self) -> int:
        if self._fd is None:
            raise ValueError("device is closed")
        return self._fd

    def send_feature_report(self, data: bytes) -> int:
        """Send a feature report whose first byte is the report id."""
        buffer = bytearray(data)
        if not buffer:
            raise ValueError("report must not be empty")
        fd = self._descriptor()
        fcntl.ioctl(fd, _ioc_read_write(0x06, len(buffer)), buffer, True)
        return len(buffer)

    def get_feature_report(self, length: int) -> bytes:
        """Read a feature report of report id 0 into a buffer of ``length`` bytes."""
        if length <= 0:
            raise ValueError("length must be positive")
        fd = self._descriptor()
        buffer = bytearray(length)
        fcntl.ioctl(fd, _ioc_read_write(0x07, length), buffer, True)
        return bytes(buffer)

    def close(self) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> HidrawDevice:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _read_ids(uevent: Path) -> tuple[int, int] | None:
    try:
        lines = uevent.read_text().splitlines()
    except OSError:
        return None
    for line in lines:
        key, _, value = line.partition("=")
        if key != "HID_ID":
            continue
        parts = value.split(":")
        if len(parts) != 3:
            return None
        try:
            return int(parts[1], 16), int(parts[2], 16)
        except ValueError:
            return None
    return None


def _read_interface(node: Path) -> int:
    try:
        interface_dir = (node / "device").resolve().parent
        return int((interface_dir / "bInterfaceNumber").read_text().strip(), 16)
    except (OSError, ValueError):
        return -1


def enumerate_devices(sysfs_root: str | os.PathLike[str] = SYSFS_HIDRAW) -> Iterator[DeviceInfo]:
    """Yield every hidraw node listed under ``sysfs_root``."""
    root = Path(sysfs_root)
    if not root.is_dir():
        return
    for node in sorted(root.iterdir(), key=lambda p: p.name):
        ids = _read_ids(node / "device" / "uevent")
        if ids is None:
            continue
        vendor_id, product_id = ids
        yield DeviceInfo(
            path=str(DEV_ROOT / node.name),
            vendor_id=vendor_id,
            product_id=product_id,
            interface_number=_read_interface(node),
        )


def find_device(devices: Iterable[DeviceInfo]) -> DeviceInfo:
    """Pick the supported device with the lowest product id."""
    matching = [
        info
        for info in devices
        if is_supported(info.vendor_id, info.product_id, info.interface_number)
    ]
    if not matching:
        raise NoDeviceError("no matching device found")
    return min(matching, key=lambda info: info.product_id)


def open_device(info: DeviceInfo) -> HidrawDevice:
    """Open the hidraw node described by ``info``."""
    return HidrawDevice(info.path)