# geometry/angle.py
"""
Plane angle value used by the vector rotations.

``Angle`` stores radians and exposes ``sin()``/``cos()`` so the rotation code
never has to know which unit the caller started from.

Examples
--------
>>> from geometry.angle import Angle
>>> a = Angle.from_degrees(90)
>>> round(a.sin(), 12)
1.0
"""

from __future__ import annotations

import math


class Angle:
    """An immutable angle.

    Parameters
    ----------
    radians : float
        The angle in radians. Coerced to ``float``.
    """

    __slots__ = ("_radians",)

    def __init__(self, radians: float) -> None:
        self._radians = float(radians)

    @staticmethod
    def from_degrees(degrees: float) -> "Angle":
        return Angle(math.radians(degrees))

    @property
    def radians(self) -> float:
        return self._radians

    @property
    def degrees(self) -> float:
        return math.degrees(self._radians)

    def sin(self) -> float:
        return math.sin(self._radians)

    def cos(self) -> float:
        return math.cos(self._radians)

    def __neg__(self) -> "Angle":
        return Angle(-self._radians)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __hash__(self) -> int:
        return hash(self._radians)

    def __float__(self) -> float:
        return self._radians

    def __repr__(self) -> str:
        return f"Angle({self._radians!r})"
