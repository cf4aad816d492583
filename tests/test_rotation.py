import math
import unittest

from shared_setup import VectorTestCase
from geometry import ops
from geometry.angle import Angle
from geometry.axis import AXES, Axis
from geometry.errors import InvalidArgumentError
from geometry.vector import Vector

QUARTER = Angle.from_degrees(90)


class TestAngle(unittest.TestCase):
	def test_units(self):
		a = Angle.from_degrees(180)
		self.assertAlmostEqual(a.radians, math.pi)
		self.assertAlmostEqual(a.degrees, 180.0)
		self.assertEqual(float(Angle(0.25)), 0.25)

	def test_trigonometry(self):
		self.assertAlmostEqual(QUARTER.sin(), 1.0)
		self.assertAlmostEqual(QUARTER.cos(), 0.0)
		self.assertEqual((-QUARTER).radians, -QUARTER.radians)
		self.assertEqual(Angle(1.0), Angle(1.0))


class TestAxis(unittest.TestCase):
	def test_y_up_is_identity(self):
		self.assertEqual(Axis.Y_UP.to_relative(1.0, 2.0, 3.0), (1.0, 2.0, 3.0))
		self.assertEqual(Axis.Y_UP.to_cartesian(1.0, 2.0, 3.0), (1.0, 2.0, 3.0))

	def test_z_up_mapping(self):
		self.assertEqual(Axis.Z_UP.to_relative(1.0, 2.0, 3.0), (1.0, 3.0, -2.0))
		self.assertEqual(Axis.Z_UP.to_cartesian(1.0, 3.0, -2.0), (1.0, 2.0, 3.0))

	def test_round_trip(self):
		for axis in (Axis("z", "-x", "y"), Axis("-y", "+z", "-x"), Axis.Z_UP):
			with self.subTest(axis=axis):
				self.assertEqual(axis.to_cartesian(*axis.to_relative(0.5, -4.0, 9.0)), (0.5, -4.0, 9.0))

	def test_invalid_roles(self):
		with self.assertRaises(InvalidArgumentError):
			Axis("x", "w", "z")
		with self.assertRaises(InvalidArgumentError):
			Axis("x", "x", "z")
		with self.assertRaises(InvalidArgumentError):
			Axis("x", "-y", "--z")

	def test_equality_and_names(self):
		self.assertEqual(Axis("x", "y", "z"), Axis.Y_UP)
		self.assertNotEqual(Axis.Y_UP, Axis.Z_UP)
		self.assertIs(AXES["z-up"], Axis.Z_UP)
		self.assertEqual(Axis.Z_UP.roles, ("x", "z", "-y"))
		self.assertEqual(repr(Axis.Y_UP), "Axis(horizontal='x', vertical='y', depth='z')")


class TestFixedAxisRotation(VectorTestCase):
	def test_quarter_turns(self):
		self.assertVectorAlmostEqual(Vector(0, 1, 0).rotate_x(QUARTER), (0, 0, 1))
		self.assertVectorAlmostEqual(Vector(0, 0, 1).rotate_y(QUARTER), (1, 0, 0))
		self.assertVectorAlmostEqual(Vector(1, 0, 0).rotate_z(QUARTER), (0, 1, 0))

	def test_axis_component_unchanged(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle.from_degrees(37)
		self.assertEqual(v.rotate_x(a).x, v.x)
		self.assertEqual(v.rotate_y(a).y, v.y)
		self.assertEqual(v.rotate_z(a).z, v.z)

	def test_round_trip(self):
		v = Vector(1.5, -2, 3.25)
		for degrees in (37, -120, 90, 359.5):
			a = Angle.from_degrees(degrees)
			with self.subTest(degrees=degrees):
				self.assertVectorAlmostEqual(v.rotate_x(a).rotate_x(-a), v)
				self.assertVectorAlmostEqual(v.rotate_y(a).rotate_y(-a), v)
				self.assertVectorAlmostEqual(v.rotate_z(a).rotate_z(-a), v)

	def test_preserves_magnitude(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle(0.7)
		for r in (v.rotate_x(a), v.rotate_y(a), v.rotate_z(a), v.rotate(a, True, True, True)):
			self.assertAlmostEqual(r.magnitude(), v.magnitude(), places=12)

	def test_radians_accepted(self):
		v = Vector(1.5, -2, 3.25)
		self.assertEqual(v.rotate_z(math.pi / 3), v.rotate_z(Angle(math.pi / 3)))
		self.assertEqual(ops.rotate_x(v, 0.4), v.rotate_x(Angle(0.4)))

	def test_rotate_applies_x_then_y_then_z(self):
		v = Vector(1, 0, 0)
		self.assertEqual(v.rotate(QUARTER, x=True, y=True), v.rotate_x(QUARTER).rotate_y(QUARTER))
		self.assertVectorAlmostEqual(v.rotate(QUARTER, x=True, y=True), (0, 0, -1))
		self.assertVectorAlmostEqual(v.rotate_y(QUARTER).rotate_x(QUARTER), (0, 1, 0))
		a = Angle(0.3)
		self.assertEqual(ops.rotate(v, a, True, True, True), v.rotate_x(a).rotate_y(a).rotate_z(a))

	def test_rotate_without_axes(self):
		v = Vector(1, 2, 3)
		self.assertEqual(v.rotate(QUARTER), v)


class TestPivotRotation(VectorTestCase):
	def test_quarter_turns_about_offset_lines(self):
		self.assertVectorAlmostEqual(Vector(0, 2, 1).rotate_x(QUARTER, pivot=(1, 1)), (0, 1, 2))
		self.assertVectorAlmostEqual(Vector(2, 0, 1).rotate_y(QUARTER, pivot=(1, 1)), (1, 0, 0))
		self.assertVectorAlmostEqual(Vector(2, 1, 0).rotate_z(QUARTER, pivot=(1, 1)), (1, 2, 0))

	def test_matches_translate_rotate_translate(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle.from_degrees(53)
		cases = (
			(ops.rotate_x, (0.75, -1.0), Vector(0, 0.75, -1.0)),
			(ops.rotate_y, (0.75, -1.0), Vector(0.75, 0, -1.0)),
			(ops.rotate_z, (0.75, -1.0), Vector(0.75, -1.0, 0)),
		)
		for rotate, pivot, shift in cases:
			with self.subTest(rotate=rotate.__name__):
				expected = rotate(v - shift, a) + shift
				self.assertVectorAlmostEqual(rotate(v, a, pivot), expected)

	def test_zero_pivot_matches_origin(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle(1.1)
		self.assertVectorAlmostEqual(v.rotate_x(a, (0, 0)), v.rotate_x(a))
		self.assertVectorAlmostEqual(v.rotate_y(a, (0, 0)), v.rotate_y(a))
		self.assertVectorAlmostEqual(v.rotate_z(a, (0, 0)), v.rotate_z(a))

	def test_point_on_rotation_line_is_fixed(self):
		self.assertVectorAlmostEqual(Vector(7, 1, 2).rotate_x(Angle(2.0), (1, 2)), (7, 1, 2))

	def test_bad_pivot(self):
		v = Vector(1, 2, 3)
		with self.assertRaises(InvalidArgumentError):
			v.rotate_x(QUARTER, (1, 2, 3))
		with self.assertRaises(InvalidArgumentError):
			v.rotate_z(QUARTER, 5)


class TestAxisRelativeRotation(VectorTestCase):
	def test_y_up_matches_fixed_axes(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle(0.9)
		self.assertEqual(v.yaw(a, Axis.Y_UP), v.rotate_y(a))
		self.assertEqual(v.pitch(a, Axis.Y_UP), v.rotate_x(a))
		self.assertEqual(v.roll(a, Axis.Y_UP), v.rotate_z(a))
		self.assertEqual(v.yaw(a), v.rotate_y(a))

	def test_z_up(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle(0.9)
		self.assertVectorAlmostEqual(v.yaw(a, Axis.Z_UP), v.rotate_z(a))
		self.assertVectorAlmostEqual(v.pitch(a, Axis.Z_UP), v.rotate_x(a))
		self.assertVectorAlmostEqual(v.roll(a, Axis.Z_UP), v.rotate_y(-a))
		self.assertVectorAlmostEqual(Vector(1, 0, 0).yaw(QUARTER, Axis.Z_UP), (0, 1, 0))

	def test_round_trip(self):
		v = Vector(1.5, -2, 3.25)
		a = Angle.from_degrees(71)
		axis = Axis("z", "-x", "y")
		for name in ("yaw", "pitch", "roll"):
			rotate = getattr(ops, name)
			with self.subTest(name=name):
				self.assertVectorAlmostEqual(rotate(rotate(v, a, axis), -a, axis), v)
				self.assertAlmostEqual(rotate(v, a, axis).magnitude(), v.magnitude(), places=12)


if __name__ == "__main__":
	unittest.main()
