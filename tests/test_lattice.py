# ==============================================================================
# File: tests/test_lattice.py
# Purpose: Region boundaries, vertex-selection helpers and reference parity
#          of the 2D/3D/4D lattice kernels.
# ==============================================================================
import importlib.util
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from lattice_noise.core.permutation import build_permutation
from lattice_noise.numerics import lattice_2d, lattice_3d, lattice_4d

HAS_REFERENCE = importlib.util.find_spec("opensimplex") is not None
EPS = 1e-9


class TestRegionBoundaries(unittest.TestCase):
    """
    Points whose coordinates sum to zero are not stretched, so their
    fractional parts (and the region sum) are exact binary fractions.
    The field must stay continuous across every region threshold.
    """

    def setUp(self):
        self.state = build_permutation(2024)

    def _eval2(self, p):
        return lattice_2d.noise2(p[0], p[1], self.state.perm)

    def _eval3(self, p):
        return lattice_3d.noise3(p[0], p[1], p[2], self.state.perm, self.state.perm_grad_index_3d)

    def _eval4(self, p):
        return lattice_4d.noise4(p[0], p[1], p[2], p[3], self.state.perm)

    def _assert_continuous(self, fn, point):
        base = fn(point)
        self.assertTrue(np.isfinite(base))
        for axis in range(len(point)):
            for sign in (-1.0, 1.0):
                moved = list(point)
                moved[axis] += sign * EPS
                self.assertAlmostEqual(fn(moved), base, delta=1e-6,
                                       msg=f"seam at {point} along axis {axis}")

    def test_2d_threshold(self):
        print("\n[TEST] Running test_2d_threshold...")
        # in_sum == 1
        for p in ((0.25, -0.25), (0.5, -0.5), (3.75, -3.75)):
            self._assert_continuous(self._eval2, p)
        print("[TEST] test_2d_threshold: OK")

    def test_3d_thresholds(self):
        print("\n[TEST] Running test_3d_thresholds...")
        # in_sum == 1, then in_sum == 2
        for p in ((0.25, 0.25, -0.5), (0.5, 0.75, -1.25), (0.5, 0.5, -1.0)):
            self._assert_continuous(self._eval3, p)
        print("[TEST] test_3d_thresholds: OK")

    def test_4d_thresholds(self):
        print("\n[TEST] Running test_4d_thresholds...")
        # in_sum == 1, 2 and 3
        for p in ((0.25, 0.25, 0.25, -0.75),
                  (0.5, 0.5, 0.5, -1.5),
                  (0.75, 0.75, 0.75, -2.25)):
            self._assert_continuous(self._eval4, p)
        print("[TEST] test_4d_thresholds: OK")

    def test_lattice_origin_is_zero(self):
        """At a lattice vertex the own offset is zero and every neighbour sits on the kernel radius."""
        print("\n[TEST] Running test_lattice_origin_is_zero...")
        self.assertAlmostEqual(self._eval2((0.0, 0.0)), 0.0, delta=1e-12)
        self.assertAlmostEqual(self._eval3((0.0, 0.0, 0.0)), 0.0, delta=1e-12)
        self.assertAlmostEqual(self._eval4((0.0, 0.0, 0.0, 0.0)), 0.0, delta=1e-12)
        print("[TEST] test_lattice_origin_is_zero: OK")


class TestVertexSelection(unittest.TestCase):
    """Case functions keyed by region and bitmask, checked in isolation."""

    def test_2d_extra_vertex(self):
        print("\n[TEST] Running test_2d_extra_vertex...")
        # near (0,0) with yins > xins: extra vertex at (-1, +1)
        xsv, ysv, dx, dy = lattice_2d.extra_vertex_lower(0, 0, 0.25, 0.5, 0.1, 0.2, 0.3)
        self.assertEqual((xsv, ysv), (-1, 1))
        self.assertEqual((dx, dy), (1.25, -0.5))
        # (1,0) and (0,1) closest: the other side's far corner stays the base
        self.assertEqual(lattice_2d.extra_vertex_upper(4, 5, 0.5, 0.5, 0.6, 0.6, 1.2),
                         (4, 5, 0.5, 0.5))
        print("[TEST] test_2d_extra_vertex: OK")

    def test_3d_closest_pairs(self):
        print("\n[TEST] Running test_3d_closest_pairs...")
        self.assertEqual(lattice_3d.closest_pair_lower(0.1, 0.2, 0.3), (0x04, 0.3, 0x02, 0.2))
        self.assertEqual(lattice_3d.closest_pair_upper(0.9, 0.8, 0.7), (0x03, 0.7, 0x05, 0.8))
        self.assertEqual(lattice_3d.closest_pair_octahedron(0.9, 0.9, 0.1), (0x03, True, 0x02, False))
        print("[TEST] test_3d_closest_pairs: OK")

    def test_3d_opposite_vertex(self):
        print("\n[TEST] Running test_3d_opposite_vertex...")
        # y missing from the mask -> y goes to -1
        v = lattice_3d.vertex_one_one_minus_one(0x05, 0, 0, 0, 0.0, 0.0, 0.0)
        self.assertEqual(v[:3], (1, -1, 1))
        print("[TEST] test_3d_opposite_vertex: OK")

    def test_4d_permutation_vertices(self):
        print("\n[TEST] Running test_4d_permutation_vertices...")
        v = lattice_4d.vertex_zero_zero_zero_two(0x04, 10, 20, 30, 40, 0.0, 0.0, 0.0, 0.0)
        self.assertEqual(v[:4], (10, 20, 32, 40))
        v = lattice_4d.vertex_zero_zero_zero_two(0x00, 10, 20, 30, 40, 0.0, 0.0, 0.0, 0.0)
        self.assertEqual(v[:4], (10, 20, 30, 42))
        v = lattice_4d.vertex_one_one_one_minus_one(0x0B, 0, 0, 0, 0, 0.0, 0.0, 0.0, 0.0)
        self.assertEqual(v[:4], (1, 1, -1, 1))
        print("[TEST] test_4d_permutation_vertices: OK")

    def test_4d_closest_pairs(self):
        print("\n[TEST] Running test_4d_closest_pairs...")
        self.assertEqual(lattice_4d.closest_pair_lower(0.05, 0.1, 0.2, 0.3)[::2], (0x04, 0x08))
        self.assertEqual(lattice_4d.closest_pair_upper(0.95, 0.9, 0.8, 0.7)[::2], (0x0B, 0x07))
        print("[TEST] test_4d_closest_pairs: OK")


@unittest.skipUnless(HAS_REFERENCE, "opensimplex package not installed")
class TestReferenceParity(unittest.TestCase):
    """Compares against the `opensimplex` package, a port of the same Java original."""

    SEEDS = (0, 1, -7, 123456789)
    N = 400

    def setUp(self):
        from opensimplex import OpenSimplex as Reference
        self.Reference = Reference
        self.rng = np.random.default_rng(99)

    def test_parity_2d(self):
        print("\n[TEST] Running test_parity_2d...")
        for seed in self.SEEDS:
            ref = self.Reference(seed)
            state = build_permutation(seed)
            for x, y in self.rng.uniform(-50.0, 50.0, size=(self.N, 2)):
                self.assertAlmostEqual(lattice_2d.noise2(x, y, state.perm),
                                       ref.noise2(x, y), delta=1e-12)
        print("[TEST] test_parity_2d: OK")

    def test_parity_3d(self):
        print("\n[TEST] Running test_parity_3d...")
        for seed in self.SEEDS:
            ref = self.Reference(seed)
            state = build_permutation(seed)
            for x, y, z in self.rng.uniform(-50.0, 50.0, size=(self.N, 3)):
                got = lattice_3d.noise3(x, y, z, state.perm, state.perm_grad_index_3d)
                self.assertAlmostEqual(got, ref.noise3(x, y, z), delta=1e-12)
        print("[TEST] test_parity_3d: OK")

    def test_parity_4d(self):
        print("\n[TEST] Running test_parity_4d...")
        for seed in self.SEEDS:
            ref = self.Reference(seed)
            state = build_permutation(seed)
            for x, y, z, w in self.rng.uniform(-50.0, 50.0, size=(self.N, 4)):
                got = lattice_4d.noise4(x, y, z, w, state.perm)
                self.assertAlmostEqual(got, ref.noise4(x, y, z, w), delta=1e-12)
        print("[TEST] test_parity_4d: OK")

    def test_parity_on_boundaries(self):
        print("\n[TEST] Running test_parity_on_boundaries...")
        ref = self.Reference(0)
        state = build_permutation(0)
        self.assertAlmostEqual(lattice_2d.noise2(0.25, -0.25, state.perm),
                               ref.noise2(0.25, -0.25), delta=1e-12)
        self.assertAlmostEqual(
            lattice_3d.noise3(0.5, 0.75, -1.25, state.perm, state.perm_grad_index_3d),
            ref.noise3(0.5, 0.75, -1.25), delta=1e-12)
        for p in ((0.25, 0.25, 0.25, -0.75), (0.5, 0.5, 0.5, -1.5), (0.75, 0.75, 0.75, -2.25)):
            self.assertAlmostEqual(lattice_4d.noise4(*p, state.perm), ref.noise4(*p), delta=1e-12)
        print("[TEST] test_parity_on_boundaries: OK")


if __name__ == "__main__":
    unittest.main()
