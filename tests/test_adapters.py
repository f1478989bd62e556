# ==============================================================================
# File: tests/test_adapters.py
# Purpose: 32-bit cast and [0, 1] normalising adapters.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from lattice_noise import (
    NormalizedOpenSimplex,
    NormalizedOpenSimplex32,
    OpenSimplex,
    OpenSimplex32,
    new32,
    new_normalized,
    new_normalized32,
)


class TestAdapters(unittest.TestCase):

    def setUp(self):
        self.core = OpenSimplex(9)
        rng = np.random.default_rng(3)
        self.pts = rng.uniform(-20.0, 20.0, size=(200, 4))

    def test_factories(self):
        print("\n[TEST] Running test_factories...")
        self.assertIsInstance(new32(5), OpenSimplex32)
        self.assertIsInstance(new_normalized(5), NormalizedOpenSimplex)
        self.assertIsInstance(new_normalized32(5), NormalizedOpenSimplex32)
        self.assertEqual(new_normalized32(5).seed, 5)
        print("[TEST] test_factories: OK")

    def test_cast32_matches_narrowed_core(self):
        """Inputs and result go through float32; the arithmetic stays in the core."""
        print("\n[TEST] Running test_cast32_matches_narrowed_core...")
        n32 = OpenSimplex32(self.core)
        f = np.float32
        for x, y, z, w in self.pts:
            v = n32.eval2(x, y)
            self.assertIsInstance(v, np.float32)
            self.assertEqual(v, f(self.core.eval2(float(f(x)), float(f(y)))))
            self.assertEqual(n32.eval3(x, y, z),
                             f(self.core.eval3(float(f(x)), float(f(y)), float(f(z)))))
            self.assertEqual(n32.eval4(x, y, z, w),
                             f(self.core.eval4(float(f(x)), float(f(y)), float(f(z)), float(f(w)))))
            # close to the full-precision value as well
            self.assertAlmostEqual(float(v), self.core.eval2(x, y), delta=1e-4)
        print("[TEST] test_cast32_matches_narrowed_core: OK")

    def test_cast32_arrays(self):
        print("\n[TEST] Running test_cast32_arrays...")
        n32 = OpenSimplex32(self.core)
        x, y, z, w = self.pts.T
        out = n32.eval4_array(x, y, z, w)
        self.assertEqual(out.dtype, np.float32)
        for i in range(0, len(x), 17):
            self.assertEqual(out[i], n32.eval4(x[i], y[i], z[i], w[i]))
        print("[TEST] test_cast32_arrays: OK")

    def test_normalized_range_and_mapping(self):
        print("\n[TEST] Running test_normalized_range_and_mapping...")
        norm = NormalizedOpenSimplex(self.core)
        x, y, z, w = self.pts.T
        for arr, raw in (
            (norm.eval2_array(x, y), self.core.eval2_array(x, y)),
            (norm.eval3_array(x, y, z), self.core.eval3_array(x, y, z)),
            (norm.eval4_array(x, y, z, w), self.core.eval4_array(x, y, z, w)),
        ):
            self.assertTrue(np.all(arr >= 0.0))
            self.assertTrue(np.all(arr < 1.0))
            np.testing.assert_allclose(arr, (raw + 1.0) * 0.5, rtol=0, atol=0)
        self.assertEqual(norm.eval3(1.0, 2.0, 3.0), (self.core.eval3(1.0, 2.0, 3.0) + 1.0) * 0.5)
        print("[TEST] test_normalized_range_and_mapping: OK")

    def test_normalized32(self):
        print("\n[TEST] Running test_normalized32...")
        n = NormalizedOpenSimplex32(self.core)
        x, y, _, _ = self.pts.T
        out = n.eval2_array(x, y)
        self.assertEqual(out.dtype, np.float32)
        self.assertTrue(np.all((out >= 0.0) & (out <= 1.0)))
        v = n.eval2(x[0], y[0])
        self.assertIsInstance(v, np.float32)
        self.assertEqual(v, out[0])
        print("[TEST] test_normalized32: OK")

    def test_adapters_hold_only_the_core(self):
        print("\n[TEST] Running test_adapters_hold_only_the_core...")
        for cls in (OpenSimplex32, NormalizedOpenSimplex, NormalizedOpenSimplex32):
            adapter = cls(self.core)
            self.assertIs(adapter.base, self.core)
            self.assertEqual(vars(adapter), {"base": self.core})
        print("[TEST] test_adapters_hold_only_the_core: OK")


if __name__ == "__main__":
    unittest.main()
