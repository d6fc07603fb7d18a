"""Immutable planar angles.

The package exposes :class:`Angle` together with the :data:`ZERO` and
:data:`EPSILON` constants.
"""

import logging

from .angle import EPSILON, TAU, ZERO, Angle

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Angle",
    "ZERO",
    "EPSILON",
    "TAU",
]
