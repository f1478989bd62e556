# ==============================================================================
# File: tests/test_noise.py
# Purpose: Public evaluator: determinism, array evaluation, non-finite input.
# ==============================================================================
import math
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from lattice_noise import OpenSimplex, new


class TestOpenSimplex(unittest.TestCase):

    def setUp(self):
        self.noise = new(42)
        rng = np.random.default_rng(7)
        self.pts = rng.uniform(-10.0, 10.0, size=(256, 4))

    def test_construction(self):
        print("\n[TEST] Running test_construction...")
        self.assertIsInstance(self.noise, OpenSimplex)
        self.assertEqual(self.noise.seed, 42)
        self.assertEqual(repr(self.noise), "OpenSimplex(seed=42)")
        self.assertEqual(new().seed, 0)
        print("[TEST] test_construction: OK")

    def test_determinism(self):
        """Two evaluators from the same seed agree bit for bit."""
        print("\n[TEST] Running test_determinism...")
        other = OpenSimplex(42)
        for x, y, z, w in self.pts:
            self.assertEqual(self.noise.eval2(x, y), other.eval2(x, y))
            self.assertEqual(self.noise.eval3(x, y, z), other.eval3(x, y, z))
            self.assertEqual(self.noise.eval4(x, y, z, w), other.eval4(x, y, z, w))
            self.assertEqual(self.noise.eval2(x, y), self.noise.eval2(x, y))
        print("[TEST] test_determinism: OK")

    def test_seeds_differ(self):
        print("\n[TEST] Running test_seeds_differ...")
        other = OpenSimplex(43)
        a = self.noise.eval2_array(self.pts[:, 0], self.pts[:, 1])
        b = other.eval2_array(self.pts[:, 0], self.pts[:, 1])
        self.assertFalse(np.array_equal(a, b))
        print("[TEST] test_seeds_differ: OK")

    def test_dimension_independence(self):
        """Higher-dimensional calls leave eval2 untouched."""
        print("\n[TEST] Running test_dimension_independence...")
        before = [self.noise.eval2(x, y) for x, y, _, _ in self.pts]
        for x, y, z, w in self.pts:
            self.noise.eval3(x, y, z)
            self.noise.eval4(x, y, z, w)
        after = [self.noise.eval2(x, y) for x, y, _, _ in self.pts]
        self.assertEqual(before, after)
        print("[TEST] test_dimension_independence: OK")

    def test_empirical_bounds(self):
        print("\n[TEST] Running test_empirical_bounds...")
        axis = np.linspace(-10.0, 10.0, 41)
        gx, gy = np.meshgrid(axis, axis)
        self.assertLess(np.abs(self.noise.eval2_array(gx, gy)).max(), 1.1)

        axis = np.linspace(-10.0, 10.0, 17)
        gx, gy, gz = np.meshgrid(axis, axis, axis)
        self.assertLess(np.abs(self.noise.eval3_array(gx, gy, gz)).max(), 1.1)

        axis = np.linspace(-10.0, 10.0, 9)
        gx, gy, gz, gw = np.meshgrid(axis, axis, axis, axis)
        self.assertLess(np.abs(self.noise.eval4_array(gx, gy, gz, gw)).max(), 1.1)
        print("[TEST] test_empirical_bounds: OK")

    def test_arrays_match_scalars(self):
        print("\n[TEST] Running test_arrays_match_scalars...")
        x, y, z, w = self.pts.T
        a2 = self.noise.eval2_array(x, y)
        a3 = self.noise.eval3_array(x, y, z)
        a4 = self.noise.eval4_array(x, y, z, w)
        self.assertEqual(a2.dtype, np.float64)
        for i in range(len(x)):
            self.assertEqual(a2[i], self.noise.eval2(x[i], y[i]))
            self.assertEqual(a3[i], self.noise.eval3(x[i], y[i], z[i]))
            self.assertEqual(a4[i], self.noise.eval4(x[i], y[i], z[i], w[i]))
        print("[TEST] test_arrays_match_scalars: OK")

    def test_array_broadcasting(self):
        print("\n[TEST] Running test_array_broadcasting...")
        xs = np.linspace(0.0, 4.0, 5)
        ys = np.linspace(0.0, 2.0, 3)[:, None]
        out = self.noise.eval3_array(xs, ys, 0.5)
        self.assertEqual(out.shape, (3, 5))
        self.assertEqual(out[2, 4], self.noise.eval3(4.0, 2.0, 0.5))
        self.assertEqual(self.noise.eval2_array(1.5, 2.5).shape, ())
        print("[TEST] test_array_broadcasting: OK")

    def test_non_finite_propagates(self):
        print("\n[TEST] Running test_non_finite_propagates...")
        nan, inf = float("nan"), float("inf")
        self.assertTrue(math.isnan(self.noise.eval2(nan, 0.0)))
        self.assertTrue(math.isnan(self.noise.eval3(0.0, nan, 1.0)))
        self.assertTrue(math.isnan(self.noise.eval4(0.0, 0.0, 0.0, nan)))
        self.assertFalse(math.isfinite(self.noise.eval2(inf, 0.0)))
        self.assertFalse(math.isfinite(self.noise.eval4(-inf, 1.0, 2.0, 3.0)))
        out = self.noise.eval2_array(np.array([0.3, nan]), np.array([0.7, 0.7]))
        self.assertTrue(np.isfinite(out[0]))
        self.assertTrue(np.isnan(out[1]))
        print("[TEST] test_non_finite_propagates: OK")


if __name__ == "__main__":
    unittest.main()
