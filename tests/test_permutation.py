# ==============================================================================
# File: tests/test_permutation.py
# Purpose: Unit tests for the seeded permutation table builder.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from lattice_noise.core.constants import GRADIENT_LEN_OVER_3, PERM_SIZE
from lattice_noise.core.permutation import (
    build_permutation,
    i64,
    lcg_step,
    trunc_rem,
)

SEEDS = (0, 1, -1, 42, 1337, -987654321, 2**62, 2**63 - 1, -(2**63))


class TestPermutation(unittest.TestCase):
    """Checks the seed mixing helpers and the tables they produce."""

    def test_i64_wraps_two_complement(self):
        print("\n[TEST] Running test_i64_wraps_two_complement...")
        self.assertEqual(i64(0), 0)
        self.assertEqual(i64(2**63 - 1), 2**63 - 1)
        self.assertEqual(i64(2**63), -(2**63))
        self.assertEqual(i64(2**64 + 5), 5)
        self.assertEqual(i64(-(2**63) - 1), 2**63 - 1)
        print("[TEST] test_i64_wraps_two_complement: OK")

    def test_trunc_rem_keeps_dividend_sign(self):
        print("\n[TEST] Running test_trunc_rem_keeps_dividend_sign...")
        self.assertEqual(trunc_rem(7, 3), 1)
        self.assertEqual(trunc_rem(-7, 3), -1)
        self.assertEqual(trunc_rem(-6, 3), 0)
        self.assertEqual(trunc_rem(5, 1), 0)
        print("[TEST] test_trunc_rem_keeps_dividend_sign: OK")

    def test_lcg_step_stays_in_int64(self):
        print("\n[TEST] Running test_lcg_step_stays_in_int64...")
        state = 0
        for _ in range(1000):
            state = lcg_step(state)
            self.assertGreaterEqual(state, -(2**63))
            self.assertLess(state, 2**63)
        print("[TEST] test_lcg_step_stays_in_int64: OK")

    def test_perm_is_bijection(self):
        """Every seed, including extreme and negative ones, yields a true permutation."""
        print("\n[TEST] Running test_perm_is_bijection...")
        for seed in SEEDS + (2**70, -(2**70) + 3):
            state = build_permutation(seed)
            self.assertEqual(state.perm.shape, (PERM_SIZE,))
            self.assertTrue(
                np.array_equal(np.sort(state.perm), np.arange(PERM_SIZE)),
                f"perm for seed {seed} is not a permutation",
            )
        print("[TEST] test_perm_is_bijection: OK")

    def test_grad_index_matches_perm(self):
        print("\n[TEST] Running test_grad_index_matches_perm...")
        for seed in SEEDS:
            state = build_permutation(seed)
            expected = (state.perm % GRADIENT_LEN_OVER_3) * 3
            np.testing.assert_array_equal(state.perm_grad_index_3d, expected)
        print("[TEST] test_grad_index_matches_perm: OK")

    def test_deterministic_and_seed_sensitive(self):
        print("\n[TEST] Running test_deterministic_and_seed_sensitive...")
        a = build_permutation(1234)
        b = build_permutation(1234)
        c = build_permutation(1235)
        np.testing.assert_array_equal(a.perm, b.perm)
        np.testing.assert_array_equal(a.perm_grad_index_3d, b.perm_grad_index_3d)
        self.assertFalse(np.array_equal(a.perm, c.perm))
        print("[TEST] test_deterministic_and_seed_sensitive: OK")

    def test_seed_wraps_like_int64(self):
        """Seeds differing by 2**64 describe the same 64-bit state."""
        print("\n[TEST] Running test_seed_wraps_like_int64...")
        a = build_permutation(7)
        b = build_permutation(7 + 2**64)
        np.testing.assert_array_equal(a.perm, b.perm)
        print("[TEST] test_seed_wraps_like_int64: OK")

    def test_tables_are_read_only(self):
        print("\n[TEST] Running test_tables_are_read_only...")
        state = build_permutation(0)
        with self.assertRaises(ValueError):
            state.perm[0] = 1
        with self.assertRaises(ValueError):
            state.perm_grad_index_3d[0] = 1
        print("[TEST] test_tables_are_read_only: OK")


if __name__ == "__main__":
    unittest.main()
