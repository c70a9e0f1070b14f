import pytest

from mxw.glorious import INTERFACE, VENDOR_ID, Device, is_supported, is_wired


def test_vendor_and_interface():
    assert VENDOR_ID == 0x258A
    assert INTERFACE == 0x02
    assert is_supported(VENDOR_ID, 0x2011, INTERFACE)
    assert not is_supported(VENDOR_ID, 0x2011, INTERFACE + 1)
    assert not is_supported(VENDOR_ID + 1, 0x2011, INTERFACE)


def test_model_o_id():
    assert Device.MODEL_O == 0x2011
    assert Device(0x2034) is Device.MODEL_D2_PRO


@pytest.mark.parametrize("device", list(Device))
def test_every_device_is_supported(device):
    assert is_supported(0x258A, int(device), 0x02)


def test_wrong_vendor():
    assert not is_supported(0x1234, 0x2011, 0x02)


def test_wrong_interface():
    assert not is_supported(0x258A, 0x2011, 0x01)


def test_unknown_product():
    assert not is_supported(0x258A, 0x2010, 0x02)


def test_wired_ids():
    assert is_wired(0x2011)
    assert is_wired(0x2013)
    assert not is_wired(0x2018)
    assert not is_wired(0x2025)