"""
Vector arithmetic.

This module defines an immutable ``Vector`` class for three-dimensional
Cartesian coordinates stored as double-precision floats. Instances support
the arithmetic operators, geometric operations (cross, dot and mixed
products, normalisation, interpolation, distance, angle), rotation about the
Cartesian axes, about offset pivots and in an axis-relative frame
(yaw/pitch/roll), component-wise transforms, exact and tolerance-based
comparison, and format-string driven rendering. Every operation returns a new
``Vector``; nothing is mutated after construction.

Ordering (``<``, ``>``, ``<=``, ``>=``) compares magnitudes, while ``==`` is
exact component equality, so ``a <= b and a >= b`` does not imply ``a == b``.

Examples
--------
>>> from geometry.vector import Vector
>>> v = Vector(1, 2, 2)
>>> v.magnitude()
3.0
>>> v + Vector(0, 0, 1)
Vector(1.0, 2.0, 3.0)
>>> format(Vector(3, 4, 0), "m")
'(3, 4, 0) |5|'
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

import config
from geometry.angle import Angle
from geometry.axis import Axis
from geometry.errors import (
    InterpolationRangeError,
    InvalidArgumentError,
    NormalizeZeroError,
    VectorIndexError,
)
from geometry.formatting import format_vector
from geometry.rounding import MidpointRounding, round_value

logger = logging.getLogger(__name__)

AngleLike = Union[Angle, float]


def _as_angle(angle: AngleLike) -> Angle:
    # plain numbers are taken as radians
    if isinstance(angle, Angle) or hasattr(angle, "sin"):
        return angle
    return Angle(angle)


def _components(values) -> Tuple[float, float, float]:
    if isinstance(values, Vector):
        return values._x, values._y, values._z
    if isinstance(values, (str, bytes)):
        raise InvalidArgumentError(config.THREE_COMPONENTS)
    try:
        n = len(values)
    except TypeError:
        logger.debug("rejected vector input of type %s", type(values).__name__)
        raise InvalidArgumentError(config.THREE_COMPONENTS) from None
    if n != 3:
        logger.debug("rejected vector input with %d components", n)
        raise InvalidArgumentError(config.THREE_COMPONENTS)
    return float(values[0]), float(values[1]), float(values[2])


class Vector:
    """An immutable three-dimensional vector.

    Parameters
    ----------
    x, y, z : float
        The Cartesian components. Values are coerced to ``float``.
        Alternatively pass a single argument: another ``Vector`` (copied) or
        an ordered sequence of exactly three numbers.

    Raises
    ------
    InvalidArgumentError
        If a sequence with other than three items is given.

    Notes
    -----
    * ``__slots__`` and read-only properties keep instances small and
      immutable, so they can be shared freely between threads.
    * No NaN/infinity checks are made; such values propagate through
      arithmetic untouched.
    """

    __slots__ = ("_x", "_y", "_z")

    # keep numpy scalars from broadcasting over the sequence protocol
    __array_ufunc__ = None

    def __init__(self, x, y: Optional[float] = None, z: Optional[float] = None) -> None:
        if y is None and z is None:
            self._x, self._y, self._z = _components(x)
        elif y is None or z is None:
            raise InvalidArgumentError(config.THREE_COMPONENTS)
        else:
            self._x = float(x)
            self._y = float(y)
            self._z = float(z)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    # ------------------------------------------------------------------
    # Indexed access
    # ------------------------------------------------------------------
    def __getitem__(self, index: Union[int, str]) -> float:
        """Component by position (0, 1, 2) or by name ('x', 'y', 'z')."""
        if isinstance(index, str):
            if index == "x":
                return self._x
            if index == "y":
                return self._y
            if index == "z":
                return self._z
            logger.debug("rejected component name %r", index)
            raise InvalidArgumentError(config.THREE_COMPONENTS)
        if not isinstance(index, numbers.Integral):
            raise InvalidArgumentError(config.THREE_COMPONENTS)
        if index == 0:
            return self._x
        if index == 1:
            return self._y
        if index == 2:
            return self._z
        raise VectorIndexError(f"{config.THREE_COMPONENTS}, index {index} is out of range")

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        """Yield the components of the vector in order x, y, z."""
        yield self._x
        yield self._y
        yield self._z

    # ------------------------------------------------------------------
    # Basic arithmetic operations
    # ------------------------------------------------------------------
    def __add__(self, other: "Vector") -> "Vector":
        """Vector addition (elementwise)."""
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other: "Vector") -> "Vector":
        """Vector subtraction (elementwise)."""
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._x - other._x, self._y - other._y, self._z - other._z)

    def __mul__(self, scalar: float) -> "Vector":
        """Scalar multiplication from the right."""
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self._x * scalar, self._y * scalar, self._z * scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        """Scalar multiplication from the left."""
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        """Scalar division; a zero divisor gives inf/nan components."""
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return Vector(np.divide(self.to_numpy(), float(scalar)))

    def __neg__(self) -> "Vector":
        """Additive inverse of the vector."""
        return Vector(-self._x, -self._y, -self._z)

    def __pos__(self) -> "Vector":
        return Vector(+self._x, +self._y, +self._z)

    def __abs__(self) -> float:
        """Magnitude, not a component-wise absolute value."""
        return self.magnitude()

    def add(self, other: "Vector") -> "Vector":
        return self + other

    def subtract(self, other: "Vector") -> "Vector":
        return self - other

    def scale(self, scalar: float) -> "Vector":
        return self * scalar

    def divide(self, scalar: float) -> "Vector":
        return self / scalar

    def negate(self) -> "Vector":
        return -self

    # ------------------------------------------------------------------
    # Geometric operations
    # ------------------------------------------------------------------
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.sum_component_sqrs())

    def abs(self) -> float:
        """Alias of :meth:`magnitude`."""
        return self.magnitude()

    def cross_product(self, other: "Vector") -> "Vector":
        """Cross product ``self x other``; ``a x b == -(b x a)``."""
        return Vector(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def dot_product(self, other: "Vector") -> float:
        """Dot product with another vector."""
        return self._x * other._x + self._y * other._y + self._z * other._z

    def mixed_product(self, other: "Vector", third: "Vector") -> float:
        """Scalar triple product ``(self x other) . third``.

        The signed volume of the parallelepiped spanned by the three vectors;
        swapping any two arguments flips the sign.
        """
        return self.cross_product(other).dot_product(third)

    def normalize(self) -> "Vector":
        """Return the unit vector pointing in the same direction.

        Raises
        ------
        NormalizeZeroError
            If the magnitude is exactly zero.
        """
        n = self.magnitude()
        if n == 0:
            logger.debug("normalize called on a zero-magnitude vector")
            raise NormalizeZeroError(config.NORMALIZE_0)
        return Vector(self._x / n, self._y / n, self._z / n)

    def interpolate(self, other: "Vector", control: float,
                    allow_extrapolation: bool = False) -> "Vector":
        """Linear interpolation ``self * (1 - control) + other * control``.

        Parameters
        ----------
        other : Vector
            End point reached when ``control == 1``.
        control : float
            Interpolation parameter, 0 gives ``self``.
        allow_extrapolation : bool
            When ``False`` a ``control`` outside ``[0, 1]`` raises
            :class:`InterpolationRangeError`.
        """
        if not allow_extrapolation and (control > 1 or control < 0):
            logger.debug("interpolation control %r outside [0, 1]", control)
            raise InterpolationRangeError(
                f"{config.INTERPOLATION_RANGE}\n{config.ARGUMENT_VALUE}{control}", control
            )
        return Vector(
            self._x * (1 - control) + other._x * control,
            self._y * (1 - control) + other._y * control,
            self._z * (1 - control) + other._z * control,
        )

    def distance(self, other: "Vector") -> float:
        """Euclidean distance between the two points."""
        dx = self._x - other._x
        dy = self._y - other._y
        dz = self._z - other._z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def angle(self, other: "Vector") -> Angle:
        """Angle between this vector and another.

        Both vectors are normalised first, so a zero vector raises
        :class:`NormalizeZeroError`.
        """
        cos_theta = self.normalize().dot_product(other.normalize())
        # Guard against slight numerical errors that might push cos_theta out of [-1,1]
        cos_theta = max(-1.0, min(1.0, cos_theta))
        return Angle(math.acos(cos_theta))

    def max(self, other: "Vector") -> "Vector":
        """The operand with the greater magnitude (``self`` on ties)."""
        return self if self >= other else other

    def min(self, other: "Vector") -> "Vector":
        """The operand with the lesser magnitude (``self`` on ties)."""
        return self if self <= other else other

    # ------------------------------------------------------------------
    # Rotation about the Cartesian axes
    # ------------------------------------------------------------------
    @staticmethod
    def _pivot(pivot: Sequence[float]) -> Tuple[float, float]:
        try:
            a, b = pivot
        except (TypeError, ValueError):
            logger.debug("rejected pivot %r", pivot)
            raise InvalidArgumentError(config.PIVOT_PAIR) from None
        return float(a), float(b)

    def rotate_x(self, angle: AngleLike, pivot: Optional[Sequence[float]] = None) -> "Vector":
        """Rotate about the x axis, or about the x-parallel line through ``pivot = (y, z)``."""
        angle = _as_angle(angle)
        c, s = angle.cos(), angle.sin()
        if pivot is None:
            return Vector(
                self._x,
                self._y * c - self._z * s,
                self._y * s + self._z * c,
            )
        yo, zo = self._pivot(pivot)
        return Vector(
            self._x,
            self._y * c - self._z * s + (yo * (1 - c) + zo * s),
            self._y * s + self._z * c + (zo * (1 - c) - yo * s),
        )

    def rotate_y(self, angle: AngleLike, pivot: Optional[Sequence[float]] = None) -> "Vector":
        """Rotate about the y axis, or about the y-parallel line through ``pivot = (x, z)``."""
        angle = _as_angle(angle)
        c, s = angle.cos(), angle.sin()
        if pivot is None:
            return Vector(
                self._z * s + self._x * c,
                self._y,
                self._z * c - self._x * s,
            )
        xo, zo = self._pivot(pivot)
        return Vector(
            self._z * s + self._x * c + (xo * (1 - c) - zo * s),
            self._y,
            self._z * c - self._x * s + (zo * (1 - c) + xo * s),
        )

    def rotate_z(self, angle: AngleLike, pivot: Optional[Sequence[float]] = None) -> "Vector":
        """Rotate about the z axis, or about the z-parallel line through ``pivot = (x, y)``."""
        angle = _as_angle(angle)
        c, s = angle.cos(), angle.sin()
        if pivot is None:
            return Vector(
                self._x * c - self._y * s,
                self._x * s + self._y * c,
                self._z,
            )
        xo, yo = self._pivot(pivot)
        return Vector(
            self._x * c - self._y * s + (xo * (1 - c) + yo * s),
            self._x * s + self._y * c + (yo * (1 - c) - xo * s),
            self._z,
        )

    def rotate(self, angle: AngleLike, x: bool = False, y: bool = False, z: bool = False) -> "Vector":
        """Rotate about the selected axes, always in the order X, Y, Z."""
        v = self
        if x:
            v = v.rotate_x(angle)
        if y:
            v = v.rotate_y(angle)
        if z:
            v = v.rotate_z(angle)
        return v

    # ------------------------------------------------------------------
    # Axis-relative rotation
    # ------------------------------------------------------------------
    # These go through the axis mapping on every call and are slower than
    # rotate_x/y/z; use those when the frame is fixed.
    def yaw(self, angle: AngleLike, axis: Axis = Axis.Y_UP) -> "Vector":
        """Rotate the horizontal/depth pair of ``axis``."""
        angle = _as_angle(angle)
        c, s = angle.cos(), angle.sin()
        h, v, d = axis.to_relative(self._x, self._y, self._z)
        h2 = d * s + h * c
        d2 = d * c - h * s
        return Vector(*axis.to_cartesian(h2, v, d2))

    def pitch(self, angle: AngleLike, axis: Axis = Axis.Y_UP) -> "Vector":
        """Rotate the vertical/depth pair of ``axis``."""
        angle = _as_angle(angle)
        c, s = angle.cos(), angle.sin()
        h, v, d = axis.to_relative(self._x, self._y, self._z)
        v2 = v * c - d * s
        d2 = v * s + d * c
        return Vector(*axis.to_cartesian(h, v2, d2))

    def roll(self, angle: AngleLike, axis: Axis = Axis.Y_UP) -> "Vector":
        """Rotate the horizontal/vertical pair of ``axis``."""
        angle = _as_angle(angle)
        c, s = angle.cos(), angle.sin()
        h, v, d = axis.to_relative(self._x, self._y, self._z)
        h2 = h * c - v * s
        v2 = h * s + v * c
        return Vector(*axis.to_cartesian(h2, v2, d))

    # ------------------------------------------------------------------
    # Component operations
    # ------------------------------------------------------------------
    def sum_components(self) -> float:
        return self._x + self._y + self._z

    def sum_component_sqrs(self) -> float:
        """Sum of the squared components (the squared magnitude)."""
        return self.sqr_components().sum_components()

    # domain errors give nan/inf components rather than raising
    def pow_components(self, power: float) -> "Vector":
        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            return Vector(np.power(self.to_numpy(), float(power)))

    def sqrt_components(self) -> "Vector":
        with np.errstate(invalid="ignore"):
            return Vector(np.sqrt(self.to_numpy()))

    def sqr_components(self) -> "Vector":
        return Vector(self._x * self._x, self._y * self._y, self._z * self._z)

    def round(self, digits: Optional[int] = None,
              mode: MidpointRounding = MidpointRounding.TO_EVEN) -> "Vector":
        """Round every component to ``digits`` decimals using ``mode`` for ties."""
        return Vector(
            round_value(self._x, digits, mode),
            round_value(self._y, digits, mode),
            round_value(self._z, digits, mode),
        )

    def __round__(self, ndigits: Optional[int] = None) -> "Vector":
        return self.round(ndigits)

    # ------------------------------------------------------------------
    # Comparison and hashing
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        # Weak on purpose: only consistent with exact ``==``, vectors that
        # are equal within a tolerance may hash differently.
        total = self._x + self._y + self._z
        if not math.isfinite(total):
            return 0
        return int(math.fmod(total, config.HASH_MODULUS))

    def equals_exact(self, other: object) -> bool:
        return isinstance(other, Vector) and self == other

    def equals(self, other: object, tolerance: Optional[float] = None) -> bool:
        """Component-wise equality, exact or within ``tolerance``.

        Anything that is not a ``Vector`` compares unequal instead of raising.
        """
        if not isinstance(other, Vector):
            return False
        if tolerance is None:
            return self == other
        return (
            abs(self._x - other._x) <= tolerance
            and abs(self._y - other._y) <= tolerance
            and abs(self._z - other._z) <= tolerance
        )

    def __lt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sum_component_sqrs() < other.sum_component_sqrs()

    def __gt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sum_component_sqrs() > other.sum_component_sqrs()

    def __le__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sum_component_sqrs() <= other.sum_component_sqrs()

    def __ge__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sum_component_sqrs() >= other.sum_component_sqrs()

    def compare_to(self, other: object) -> int:
        """-1, 0 or 1 as this vector's magnitude is less, equal or greater."""
        if not isinstance(other, Vector):
            logger.debug("compare_to called with %s", type(other).__name__)
            raise InvalidArgumentError(
                f"{config.NON_VECTOR_COMPARISON}\n{config.ARGUMENT_TYPE}{type(other).__name__}"
            )
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    compare_magnitude = compare_to

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------
    def is_unit_vector(self, tolerance: float = 0.0) -> bool:
        return abs(self.magnitude() - 1) <= tolerance

    def is_perpendicular(self, other: "Vector") -> bool:
        return self.dot_product(other) == 0

    def is_back_face(self, line_of_sight: "Vector") -> bool:
        """True when this normal faces away from ``line_of_sight``."""
        return self.dot_product(line_of_sight) < 0

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """Return a ``numpy.ndarray`` representation of this vector."""
        return np.array([self._x, self._y, self._z], dtype=float)

    @staticmethod
    def from_numpy(arr: np.ndarray) -> "Vector":
        """Construct a ``Vector`` from a 3-element array or sequence."""
        return Vector(np.asarray(arr, dtype=float).ravel())

    def to_list(self) -> List[float]:
        """Return the components as a list ``[x, y, z]``."""
        return [self._x, self._y, self._z]

    def to_tuple(self) -> Tuple[float, float, float]:
        return self._x, self._y, self._z

    def to_string(self, fmt: Optional[str] = None) -> str:
        """Render with a format string, see :mod:`geometry.formatting`."""
        return format_vector(self, fmt)

    def __format__(self, fmt: str) -> str:
        return format_vector(self, fmt)

    def __str__(self) -> str:
        return format_vector(self)

    def __repr__(self) -> str:
        return f"Vector({self._x!r}, {self._y!r}, {self._z!r})"


Vector.ORIGIN = Vector(0.0, 0.0, 0.0)
Vector.MIN_VALUE = Vector(-config.FLOAT_MAX, -config.FLOAT_MAX, -config.FLOAT_MAX)
Vector.MAX_VALUE = Vector(config.FLOAT_MAX, config.FLOAT_MAX, config.FLOAT_MAX)
Vector.EPSILON = Vector(config.DEFAULT_TOLERANCE, config.DEFAULT_TOLERANCE, config.DEFAULT_TOLERANCE)
