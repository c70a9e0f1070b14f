import pytest

from mxw.ranges import contains


@pytest.mark.parametrize("text", ["1", "2", "3"])
def test_values_inside_range(text):
    assert contains(1, 3)(text) == int(text)


@pytest.mark.parametrize("text", ["0", "4", "100"])
def test_values_outside_range(text):
    with pytest.raises(ValueError, match="not in range 1-3"):
        contains(1, 3)(text)


@pytest.mark.parametrize("text", ["", "x", "-1", " 2"])
def test_unparsable(text):
    with pytest.raises(ValueError):
        contains(0, 10)(text)


def test_bounds_are_inclusive():
    check = contains(5, 5)
    assert check("5") == 5
    with pytest.raises(ValueError, match="not in range 5-5"):
        check("6")