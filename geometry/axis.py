# geometry/axis.py
"""
Axis conventions for yaw, pitch and roll.

An ``Axis`` assigns the Cartesian axes to the horizontal, vertical and depth
roles of a coordinate system. Each role is one of ``"x"``, ``"y"``, ``"z"``,
optionally prefixed with ``"-"`` when the role points along the negative
Cartesian direction. The mapping is a signed permutation, so the inverse is
the transposed permutation with the same signs.

>>> from geometry.axis import Axis
>>> Axis.Z_UP.to_relative(1.0, 2.0, 3.0)
(1.0, 3.0, -2.0)
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from geometry.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_COMPONENTS = {"x": 0, "y": 1, "z": 2}


def _parse_role(role: str) -> Tuple[int, float]:
    spec = str(role).strip().lower()
    sign = 1.0
    if spec.startswith("-"):
        sign, spec = -1.0, spec[1:]
    elif spec.startswith("+"):
        spec = spec[1:]
    if spec not in _COMPONENTS:
        logger.debug("rejected axis role %r", role)
        raise InvalidArgumentError(f"Axis role must be one of x, y, z (optionally signed), got {role!r}")
    return _COMPONENTS[spec], sign


class Axis:
    """Maps ``(x, y, z)`` to ``(horizontal, vertical, depth)`` and back.

    Parameters
    ----------
    horizontal, vertical, depth : str
        Cartesian axis for each role, e.g. ``"x"`` or ``"-y"``. The three
        roles must use three different axes.
    """

    __slots__ = ("_perm", "_signs", "_roles")

    def __init__(self, horizontal: str = "x", vertical: str = "y", depth: str = "z") -> None:
        parsed = [_parse_role(r) for r in (horizontal, vertical, depth)]
        perm = [p for p, _ in parsed]
        if sorted(perm) != [0, 1, 2]:
            logger.debug("rejected axis roles %r", (horizontal, vertical, depth))
            raise InvalidArgumentError("Axis roles must use each of x, y and z exactly once")
        self._perm = np.array(perm, dtype=int)
        self._signs = np.array([s for _, s in parsed], dtype=float)
        self._roles = (str(horizontal), str(vertical), str(depth))

    @property
    def roles(self) -> Tuple[str, str, str]:
        return self._roles

    def to_relative(self, x: float, y: float, z: float) -> Tuple[float, float, float]:
        """Cartesian -> (horizontal, vertical, depth)."""
        xyz = np.array([x, y, z], dtype=float)
        h, v, d = xyz[self._perm] * self._signs
        return float(h), float(v), float(d)

    def to_cartesian(self, h: float, v: float, d: float) -> Tuple[float, float, float]:
        """(horizontal, vertical, depth) -> Cartesian."""
        xyz = np.empty(3, dtype=float)
        xyz[self._perm] = np.array([h, v, d], dtype=float) * self._signs
        return float(xyz[0]), float(xyz[1]), float(xyz[2])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Axis):
            return NotImplemented
        return (np.array_equal(self._perm, other._perm)
                and np.array_equal(self._signs, other._signs))

    def __hash__(self) -> int:
        return hash((tuple(self._perm.tolist()), tuple(self._signs.tolist())))

    def __repr__(self) -> str:
        h, v, d = self._roles
        return f"Axis(horizontal={h!r}, vertical={v!r}, depth={d!r})"


# y up, z towards the viewer
Axis.Y_UP = Axis("x", "y", "z")
# z up, y away from the viewer
Axis.Z_UP = Axis("x", "z", "-y")

AXES = {"y-up": Axis.Y_UP, "z-up": Axis.Z_UP}
