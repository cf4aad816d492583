import contextlib
import io
import shutil
import tempfile
import unittest
from pathlib import Path

import pandas as pd

from shared_setup import VectorTestCase
from geometry.errors import InterpolationRangeError, InvalidArgumentError, NormalizeZeroError
from geometry.vector import Vector
from main import build_parser, main, run
from sweeps.rotation import plot_sweep, save_sweep, sweep_rotation


def _run(*argv):
	return run(build_parser().parse_args(list(argv)))


class TestCommandLine(unittest.TestCase):
	def test_scalar_results(self):
		self.assertEqual(_run("magnitude", "--a", "1", "2", "2"), "3")
		self.assertEqual(_run("dot", "--a", "1", "2", "3", "--b", "4", "5", "6"), "32")
		self.assertEqual(_run("compare", "--a", "1", "0", "0", "--b", "0", "2", "0"), "-1")
		self.assertEqual(_run("angle", "--a", "1", "0", "0", "--b", "0", "1", "0"), "90 deg")

	def test_vector_results(self):
		self.assertEqual(_run("normalize", "--a", "0", "0", "2"), "(0, 0, 1) |1|")
		self.assertEqual(_run("cross", "--a", "1", "0", "0", "--b", "0", "1", "0", "--format", ""), "(0, 0, 1)")
		self.assertEqual(_run("format", "--a", "3", "4", "0", "--format", "v"),
						 "Vector composing of  ( x=3, y=4, z=0 ) of magnitude 5")

	def test_boolean_results(self):
		self.assertEqual(_run("equals", "--a", "1", "2", "3", "--b", "1", "2", "3.05", "--tolerance", "0.1"), "True")
		self.assertEqual(_run("equals", "--a", "1", "2", "3", "--b", "1", "2", "3.05"), "False")
		self.assertEqual(_run("is-unit", "--a", "0", "1", "0"), "True")
		self.assertEqual(_run("is-back-face", "--a", "0", "0", "1", "--b", "0", "0", "-1"), "True")

	def test_interpolation(self):
		with self.assertRaises(InterpolationRangeError):
			_run("interpolate", "--a", "0", "0", "0", "--b", "2", "2", "2", "--t", "1.5")
		self.assertEqual(
			_run("interpolate", "--a", "0", "0", "0", "--b", "2", "2", "2", "--t", "1.5", "--extrapolate", "--format", ""),
			"(3, 3, 3)",
		)

	def test_rounding(self):
		self.assertEqual(_run("round", "--a", "2.5", "3.5", "0", "--format", ""), "(2, 4, 0)")
		self.assertEqual(_run("round", "--a", "2.5", "3.5", "0", "--away-from-zero", "--format", ""), "(3, 4, 0)")

	def test_rotations(self):
		self.assertEqual(
			_run("yaw", "--a", "1", "0", "0", "--angle", "90", "--axis", "z-up", "--format", ".6f"),
			"(0.000000, 1.000000, 0.000000)",
		)
		self.assertEqual(
			_run("rotate-z", "--a", "2", "1", "0", "--angle", "90", "--pivot", "1", "1", "--format", ".6f"),
			"(1.000000, 2.000000, 0.000000)",
		)

	def test_missing_operand(self):
		with self.assertRaises(InvalidArgumentError):
			_run("cross", "--a", "1", "0", "0")

	def test_main_exit_codes(self):
		out, err = io.StringIO(), io.StringIO()
		with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			self.assertEqual(main(["magnitude", "--a", "3", "4", "0"]), 0)
			self.assertEqual(main(["normalize", "--a", "0", "0", "0"]), 2)
		self.assertEqual(out.getvalue().strip(), "5")
		self.assertIn("magnitude is zero", err.getvalue())

	def test_zero_vector_error_propagates_from_run(self):
		with self.assertRaises(NormalizeZeroError):
			_run("angle", "--a", "0", "0", "0", "--b", "1", "0", "0")


class TestRotationSweep(VectorTestCase):
	def setUp(self):
		super().setUp()
		self.temp_dir = Path(tempfile.mkdtemp())

	def tearDown(self):
		shutil.rmtree(self.temp_dir)

	def test_frame(self):
		df = sweep_rotation(Vector(1, 0, 0), "z", 0.0, 90.0, 45.0)
		self.assertEqual(list(df.columns), ["angle_deg", "x", "y", "z", "magnitude"])
		self.assertEqual(df["angle_deg"].tolist(), [0.0, 45.0, 90.0])
		for m in df["magnitude"]:
			self.assertAlmostEqual(m, 1.0, places=12)
		last = df.iloc[-1]
		self.assertVectorAlmostEqual(Vector(last["x"], last["y"], last["z"]), (0, 1, 0))

	def test_axis_relative_and_pivot(self):
		yaw = sweep_rotation(Vector(1, 0, 0), "yaw", 0.0, 90.0, 90.0)
		self.assertAlmostEqual(yaw.iloc[-1]["z"], -1.0)
		pivot = sweep_rotation(Vector(2, 1, 0), "z", 90.0, 90.0, 1.0, pivot=(1, 1))
		self.assertEqual(len(pivot), 1)
		self.assertAlmostEqual(pivot.iloc[0]["y"], 2.0)

	def test_invalid_arguments(self):
		with self.assertRaises(InvalidArgumentError):
			sweep_rotation(Vector(1, 0, 0), "w")
		with self.assertRaises(InvalidArgumentError):
			sweep_rotation(Vector(1, 0, 0), "x", step_deg=0)

	def test_save_and_plot(self):
		df = sweep_rotation(Vector(0, 1, 0), "x", 0.0, 180.0, 30.0)
		csv = save_sweep(df, stem="test_sweep", outdir=self.temp_dir)
		self.assertTrue(csv.exists())
		self.assertEqual(len(pd.read_csv(csv)), 7)
		png = plot_sweep(df, self.temp_dir / "sweep.png")
		self.assertTrue(Path(png).exists())


if __name__ == "__main__":
	unittest.main()
