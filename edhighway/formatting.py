"""Number formatting and small random helpers."""

from __future__ import annotations

import locale
import random

GROUP_SEPARATOR = "\u00a0"

_rng = random.SystemRandom()


def _locale_lacks_grouping() -> bool:
    return len(locale.format_string("%d", 115222, grouping=True)) == 6


def spaced_1000s(value: int | float, force_spaces: bool = False) -> str:
    """Format an integer with thousands separated by spaces.

    Floats are truncated toward zero first. The current locale's grouping is
    used unless it has none or ``force_spaces`` is set.
    """
    if not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    number = int(value)
    if force_spaces or _locale_lacks_grouping():
        return f"{number:,}".replace(",", GROUP_SEPARATOR)
    return locale.format_string("%d", number, grouping=True)


def uniform_random(low: float = 0.0, high: float = 1.0) -> float:
    """Random float in ``[low, high)``."""
    return low + (high - low) * _rng.random()


def gauss_random(mean: float = 0.0, stdev: float = 1.0) -> float:
    """Random float from a normal distribution."""
    return _rng.gauss(mean, stdev)


def random_bool() -> bool:
    return uniform_random(0.0, 1.0) < 0.5