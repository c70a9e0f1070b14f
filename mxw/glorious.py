"""Identifiers of the supported mice."""

from __future__ import annotations

from enum import IntEnum

VENDOR_ID = 0x258A
INTERFACE = 0x02


class Device(IntEnum):
    """Supported product ids."""

    MODEL_O = 0x2011
    MODEL_D = 0x2012
    MODEL_O_MINUS = 0x2013
    MODEL_D_MINUS = 0x2025
    SERIES_ONE_PRO = 0x2018
    WIRED_MODEL_O = 0x2022
    WIRED_MODEL_D = 0x2023
    WIRED_MODEL_O_MINUS = 0x2024
    WIRED_SERIES_ONE_PRO = 0x2031
    MODEL_D2_PRO = 0x2034


_PRODUCT_IDS = frozenset(int(device) for device in Device)


def is_supported(vendor_id: int, product_id: int, interface: int) -> bool:
    """Tell whether a HID interface belongs to a supported mouse."""
    return vendor_id == VENDOR_ID and product_id in _PRODUCT_IDS and interface == INTERFACE


def is_wired(product_id: int) -> bool:
    """Tell whether the product id is treated as a wired connection."""
    return product_id <= 0x2013