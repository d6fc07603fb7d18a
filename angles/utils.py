"""Float helpers that keep IEEE-754 semantics.

Plain Python floats raise where IEEE-754 would quietly produce ``inf`` or
``nan``: ``1.0 / 0`` raises :class:`ZeroDivisionError` and ``math.sin`` or
``math.fmod`` raise :class:`ValueError` for infinite arguments.  The helpers
below route those operations through numpy with every floating-point trap
and warning switched off so results always propagate as numbers.
"""
from __future__ import annotations

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator`` with ``inf``/``nan`` on a zero divisor."""
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def ieee_fmod(value: float, modulus: float) -> float:
    """C ``fmod``: the remainder keeps the sign of *value*."""
    with np.errstate(all="ignore"):
        return float(np.fmod(np.float64(value), np.float64(modulus)))


def ieee_sin(value: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.sin(np.float64(value)))


def ieee_cos(value: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.cos(np.float64(value)))


def ieee_tan(value: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.tan(np.float64(value)))


def format_general(value: float) -> str:
    """Shortest round-trippable text for *value* without a trailing ``.0``.

    >>> format_general(90.0)
    '90'
    >>> format_general(0.5)
    '0.5'
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text
