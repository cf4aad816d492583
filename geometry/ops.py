# geometry/ops.py
"""Free-function forms of the ``Vector`` operations.

Each function delegates to the method of the same meaning, so
``ops.cross_product(a, b)`` and ``a.cross_product(b)`` always agree.
"""

from __future__ import annotations

from typing import Optional, Sequence

from geometry.angle import Angle
from geometry.axis import Axis
from geometry.rounding import MidpointRounding
from geometry.vector import AngleLike, Vector

__all__ = [
    "add", "subtract", "scale", "divide", "negate",
    "magnitude", "cross_product", "dot_product", "mixed_product",
    "normalize", "interpolate", "distance", "angle",
    "max_by_magnitude", "min_by_magnitude",
    "rotate", "rotate_x", "rotate_y", "rotate_z", "yaw", "pitch", "roll",
    "sum_components", "sum_component_sqrs", "pow_components",
    "sqrt_components", "sqr_components", "round_components",
    "equals_exact", "equals", "compare_magnitude",
    "is_unit_vector", "is_perpendicular", "is_back_face",
]


# arithmetic
def add(v1: Vector, v2: Vector) -> Vector:
    return v1 + v2

def subtract(v1: Vector, v2: Vector) -> Vector:
    return v1 - v2

def scale(v: Vector, scalar: float) -> Vector:
    return v * scalar

def divide(v: Vector, scalar: float) -> Vector:
    return v / scalar

def negate(v: Vector) -> Vector:
    return -v


# geometry
def magnitude(v: Vector) -> float:
    return v.magnitude()

def cross_product(v1: Vector, v2: Vector) -> Vector:
    return v1.cross_product(v2)

def dot_product(v1: Vector, v2: Vector) -> float:
    return v1.dot_product(v2)

def mixed_product(v1: Vector, v2: Vector, v3: Vector) -> float:
    return v1.mixed_product(v2, v3)

def normalize(v: Vector) -> Vector:
    return v.normalize()

def interpolate(v1: Vector, v2: Vector, control: float, allow_extrapolation: bool = False) -> Vector:
    return v1.interpolate(v2, control, allow_extrapolation)

def distance(v1: Vector, v2: Vector) -> float:
    return v1.distance(v2)

def angle(v1: Vector, v2: Vector) -> Angle:
    return v1.angle(v2)

def max_by_magnitude(v1: Vector, v2: Vector) -> Vector:
    return v1.max(v2)

def min_by_magnitude(v1: Vector, v2: Vector) -> Vector:
    return v1.min(v2)


# rotation
def rotate(v: Vector, angle: AngleLike, x: bool = False, y: bool = False, z: bool = False) -> Vector:
    return v.rotate(angle, x, y, z)

def rotate_x(v: Vector, angle: AngleLike, pivot: Optional[Sequence[float]] = None) -> Vector:
    return v.rotate_x(angle, pivot)

def rotate_y(v: Vector, angle: AngleLike, pivot: Optional[Sequence[float]] = None) -> Vector:
    return v.rotate_y(angle, pivot)

def rotate_z(v: Vector, angle: AngleLike, pivot: Optional[Sequence[float]] = None) -> Vector:
    return v.rotate_z(angle, pivot)

def yaw(v: Vector, angle: AngleLike, axis: Axis = Axis.Y_UP) -> Vector:
    return v.yaw(angle, axis)

def pitch(v: Vector, angle: AngleLike, axis: Axis = Axis.Y_UP) -> Vector:
    return v.pitch(angle, axis)

def roll(v: Vector, angle: AngleLike, axis: Axis = Axis.Y_UP) -> Vector:
    return v.roll(angle, axis)


# components
def sum_components(v: Vector) -> float:
    return v.sum_components()

def sum_component_sqrs(v: Vector) -> float:
    return v.sum_component_sqrs()

def pow_components(v: Vector, power: float) -> Vector:
    return v.pow_components(power)

def sqrt_components(v: Vector) -> Vector:
    return v.sqrt_components()

def sqr_components(v: Vector) -> Vector:
    return v.sqr_components()

def round_components(v: Vector, digits: Optional[int] = None,
                     mode: MidpointRounding = MidpointRounding.TO_EVEN) -> Vector:
    return v.round(digits, mode)


# comparison
def equals_exact(v1: Vector, other: object) -> bool:
    return v1.equals_exact(other)

def equals(v1: Vector, other: object, tolerance: Optional[float] = None) -> bool:
    return v1.equals(other, tolerance)

def compare_magnitude(v1: Vector, other: object) -> int:
    return v1.compare_to(other)

def is_unit_vector(v: Vector, tolerance: float = 0.0) -> bool:
    return v.is_unit_vector(tolerance)

def is_perpendicular(v1: Vector, v2: Vector) -> bool:
    return v1.is_perpendicular(v2)

def is_back_face(normal: Vector, line_of_sight: Vector) -> bool:
    return normal.is_back_face(line_of_sight)
