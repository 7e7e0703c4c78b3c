"""Numeric coercion and currency rounding shared by every calculator."""

from __future__ import annotations

import math


def as_number(value: object) -> float:
    """Coerce ``value`` to a finite float; anything else (None, NaN, text, overflow) is 0."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def as_distance(value: object) -> float:
    """Distance in km, never negative."""
    return max(0.0, as_number(value))


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up (1.5 → 2, 2.5 → 3), unlike built-in ``round``.

    A product that overflowed to ±inf or NaN rounds to 0.
    """
    return int(math.floor(as_number(value) + 0.5))
