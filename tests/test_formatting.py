import pytest

from edhighway.formatting import (
    GROUP_SEPARATOR,
    gauss_random,
    random_bool,
    spaced_1000s,
    uniform_random,
)


def test_spaced_pinned_value():
    assert spaced_1000s(1234567, True) == "1\u00a0234\u00a0567"


@pytest.mark.parametrize("value", [0, 7, 999, 1000, 25000, 5000000, 987654321])
def test_spaced_groups_of_three(value):
    text = spaced_1000s(value, True)
    parts = text.split(GROUP_SEPARATOR)
    assert "".join(parts) == str(value)
    assert all(len(p) == 3 for p in parts[1:])
    assert 1 <= len(parts[0]) <= 3


def test_spaced_float_truncates():
    assert spaced_1000s(1234.9, True) == spaced_1000s(1234, True)
    assert spaced_1000s(-1234.9, True) == spaced_1000s(-1234, True)


def test_spaced_negative_keeps_sign():
    text = spaced_1000s(-25000, True)
    assert text.startswith("-")
    assert text.replace(GROUP_SEPARATOR, "") == str(-25000)


def test_spaced_default_keeps_digits():
    text = spaced_1000s(5000000)
    assert "".join(ch for ch in text if ch.isdigit()) == str(5000000)


def test_spaced_rejects_text():
    with pytest.raises(TypeError):
        spaced_1000s("100")


def test_uniform_random_in_range():
    values = [uniform_random(470.0, 500.0) for _ in range(500)]
    assert all(470.0 <= v < 500.0 for v in values)


def test_uniform_random_default_range():
    values = [uniform_random() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_gauss_zero_stdev_is_mean():
    assert gauss_random(3.5, 0.0) == 3.5


def test_random_bool_gives_both():
    assert {random_bool() for _ in range(300)} == {True, False}