"""Immutable planar angle.

:class:`Angle` stores its value in radians and derives degrees on demand.
Arithmetic returns new instances, trigonometric helpers work on the raw
value, and equality is approximate: two angles compare equal when their
radians differ by less than :data:`EPSILON`.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from numbers import Real
from typing import ClassVar, Optional

from .utils import format_general, ieee_cos, ieee_divide, ieee_fmod, ieee_sin, ieee_tan

TAU = 2 * math.pi

_EPSILON_RADIANS = 1e-4


@dataclass(frozen=True, eq=False)
class Angle:
    """An angle stored in radians.

    ``==`` is tolerant (``|a - b| < EPSILON``) while ordering and hashing use
    the exact stored radians.  Consequently equality is not transitive and
    two angles that compare equal may still hash differently, e.g.
    ``Angle(0.0)`` and ``Angle(5e-5)``.  Sets and dict keys therefore only
    merge angles whose radians are identical.
    """

    radians: float

    ZERO: ClassVar["Angle"]
    EPSILON: ClassVar["Angle"]

    def __post_init__(self) -> None:
        if isinstance(self.radians, (str, bytes, bytearray)):
            raise TypeError(f"Angle needs a number, got {type(self.radians).__name__}")
        object.__setattr__(self, "radians", float(self.radians))

    # ------------------------------------------------------------------
    # Constructors / conversions
    # ------------------------------------------------------------------
    @staticmethod
    def from_degrees(degrees: float) -> "Angle":
        return Angle(math.radians(degrees))

    @staticmethod
    def from_radians(radians: float) -> "Angle":
        return Angle(radians)

    @property
    def degrees(self) -> float:
        """Return the angle in degrees."""
        return math.degrees(self.radians)

    def __float__(self) -> float:
        return self.radians

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------
    def normalize(self) -> "Angle":
        """Return the equivalent angle in ``[0, 2π)``."""
        a = ieee_fmod(self.radians, TAU)
        if a < 0:
            a += TAU
            # a tiny negative remainder rounds up to a full turn
            if a >= TAU:
                a = 0.0
        return Angle(a)

    def sin(self) -> float:
        return ieee_sin(self.radians)

    def cos(self) -> float:
        return ieee_cos(self.radians)

    def tan(self) -> float:
        return ieee_tan(self.radians)

    def haversine(self) -> float:
        """Return ``sin²(θ/2)``, the term used by great-circle distance formulas."""
        return ieee_sin(self.radians / 2) ** 2

    # ------------------------------------------------------------------
    # Operator overloads
    # ------------------------------------------------------------------
    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __mul__(self, factor: float) -> "Angle":
        if not isinstance(factor, Real):
            return NotImplemented
        return Angle(self.radians * float(factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Angle":
        if not isinstance(divisor, Real):
            return NotImplemented
        return Angle(ieee_divide(self.radians, divisor))

    # ``2 / angle`` is ``angle / 2``, mirroring ``2 * angle``
    __rtruediv__ = __truediv__

    # ------------------------------------------------------------------
    # Comparison and hashing support
    # ------------------------------------------------------------------
    def compare_to(self, other: Optional["Angle"]) -> int:
        """Order by raw radians: ``-1``, ``0`` or ``1``.

        Unlike ``==`` this ignores :data:`EPSILON`.  ``None`` sorts before
        every angle and NaN sorts before every number (NaN ties with NaN), so
        the order is total.
        """
        if other is None:
            return 1
        a, b = self.radians, other.radians
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        if math.isnan(a):
            return 0 if math.isnan(b) else -1
        return 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return abs(self.radians - other.radians) < _EPSILON_RADIANS

    def __lt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.compare_to(other) > 0

    # ``<=``/``>=`` also accept the tolerant equality, so they are not the
    # negation of ``>``/``<`` for angles within EPSILON of each other.
    def __le__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.compare_to(other) < 0 or self == other

    def __ge__(self, other: "Angle") -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.compare_to(other) > 0 or self == other

    def __hash__(self) -> int:
        return hash(self.radians)

    # ------------------------------------------------------------------
    # Representation helpers
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{format_general(self.degrees)}°"

    def __repr__(self) -> str:
        return f"Angle(radians={self.radians!r})"


ZERO = Angle(0.0)
EPSILON = Angle(_EPSILON_RADIANS)

Angle.ZERO = ZERO
Angle.EPSILON = EPSILON
