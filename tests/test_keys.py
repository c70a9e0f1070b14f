import pytest

from mxw.keys import KEYS, Key, parse_code, parse_key_code, parse_scan_code


def test_parse_code_control_left():
    assert parse_code("ControlLeft") == Key(224, 17, "ControlLeft", 1)


def test_parse_scan_code_shift_right():
    key = parse_scan_code("225")
    assert key.code == "ShiftRight"
    assert key.modifier == 2


def test_parse_key_code_alt_right():
    key = parse_key_code("18")
    assert key.code == "AltRight"
    assert key.scan_code == 226


def test_parse_code_meta_right():
    assert parse_code("MetaRight").modifier == 128


@pytest.mark.parametrize("key", [k for k in KEYS if k.modifier is not None])
def test_modifier_keys_round_trip(key):
    assert parse_code(key.code) == key
    assert parse_scan_code(str(key.scan_code)) == key
    assert parse_key_code(str(key.key_code)) == key


def test_plain_key_is_rejected():
    with pytest.raises(ValueError, match="key code is invalid"):
        parse_code("KeyA")


def test_plain_scan_code_is_rejected():
    with pytest.raises(ValueError, match="key code is invalid"):
        parse_scan_code("4")


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError, match="key code is invalid"):
        parse_code("NoSuchKey")


@pytest.mark.parametrize("text", ["", "abc", "-1", "256", "1.5"])
def test_bad_numbers(text):
    with pytest.raises(ValueError):
        parse_scan_code(text)
    with pytest.raises(ValueError):
        parse_key_code(text)


def test_codes_and_scan_codes_are_unique():
    assert len({key.code for key in KEYS}) == len(KEYS)
    assert len({key.scan_code for key in KEYS}) == len(KEYS)
    parsed = [parse_code(key.code) for key in KEYS if key.modifier is not None]
    assert [key.code for key in parsed] == [
        "ControlLeft",
        "ShiftRight",
        "AltRight",
        "MetaLeft",
        "MetaRight",
    ]


def test_table_has_all_entries():
    assert len(KEYS) == 90
    assert KEYS[0] == Key(4, 65, "KeyA")