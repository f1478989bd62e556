# ==============================================================================
# File: lattice_noise/core/constants.py
# Purpose: Skew constants, normalisers and gradient sets of the lattice.
# ==============================================================================
from __future__ import annotations
import numpy as np

STRETCH_CONSTANT_2D = -0.211324865405187    # (1/sqrt(2+1)-1)/2
SQUISH_CONSTANT_2D = 0.366025403784439      # (sqrt(2+1)-1)/2
STRETCH_CONSTANT_3D = -1.0 / 6              # (1/sqrt(3+1)-1)/3
SQUISH_CONSTANT_3D = 1.0 / 3                # (sqrt(3+1)-1)/3
STRETCH_CONSTANT_4D = -0.138196601125011    # (1/sqrt(4+1)-1)/4
SQUISH_CONSTANT_4D = 0.309016994374947      # (sqrt(4+1)-1)/4

NORM_CONSTANT_2D = 47.0
NORM_CONSTANT_3D = 103.0
NORM_CONSTANT_4D = 30.0

DEFAULT_SEED = 0

PERM_SIZE = 256

# LCG used only to shuffle the permutation table.
LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.flags.writeable = False
    return arr


# Directions to the vertices of an octagon.
GRADIENTS_2D = _frozen((
     5,  2,    2,  5,
    -5,  2,   -2,  5,
     5, -2,    2, -5,
    -5, -2,   -2, -5,
))

# Vertices of a rhombicuboctahedron, skewed so the triangular and square
# facets fit circles of the same radius.
GRADIENTS_3D = _frozen((
    -11,  4,  4,     -4,  11,  4,    -4,  4,  11,
     11,  4,  4,      4,  11,  4,     4,  4,  11,
    -11, -4,  4,     -4, -11,  4,    -4, -4,  11,
     11, -4,  4,      4, -11,  4,     4, -4,  11,
    -11,  4, -4,     -4,  11, -4,    -4,  4, -11,
     11,  4, -4,      4,  11, -4,     4,  4, -11,
    -11, -4, -4,     -4, -11, -4,    -4, -4, -11,
     11, -4, -4,      4, -11, -4,     4, -4, -11,
))

# Vertices of a disprismatotesseractihexadecachoron, skewed so the
# tetrahedral and cubic facets fit spheres of the same radius.
GRADIENTS_4D = _frozen((
     3,  1,  1,  1,      1,  3,  1,  1,      1,  1,  3,  1,      1,  1,  1,  3,
    -3,  1,  1,  1,     -1,  3,  1,  1,     -1,  1,  3,  1,     -1,  1,  1,  3,
     3, -1,  1,  1,      1, -3,  1,  1,      1, -1,  3,  1,      1, -1,  1,  3,
    -3, -1,  1,  1,     -1, -3,  1,  1,     -1, -1,  3,  1,     -1, -1,  1,  3,
     3,  1, -1,  1,      1,  3, -1,  1,      1,  1, -3,  1,      1,  1, -1,  3,
    -3,  1, -1,  1,     -1,  3, -1,  1,     -1,  1, -3,  1,     -1,  1, -1,  3,
     3, -1, -1,  1,      1, -3, -1,  1,      1, -1, -3,  1,      1, -1, -1,  3,
    -3, -1, -1,  1,     -1, -3, -1,  1,     -1, -1, -3,  1,     -1, -1, -1,  3,
     3,  1,  1, -1,      1,  3,  1, -1,      1,  1,  3, -1,      1,  1,  1, -3,
    -3,  1,  1, -1,     -1,  3,  1, -1,     -1,  1,  3, -1,     -1,  1,  1, -3,
     3, -1,  1, -1,      1, -3,  1, -1,      1, -1,  3, -1,      1, -1,  1, -3,
    -3, -1,  1, -1,     -1, -3,  1, -1,     -1, -1,  3, -1,     -1, -1,  1, -3,
     3,  1, -1, -1,      1,  3, -1, -1,      1,  1, -3, -1,      1,  1, -1, -3,
    -3,  1, -1, -1,     -1,  3, -1, -1,     -1,  1, -3, -1,     -1,  1, -1, -3,
     3, -1, -1, -1,      1, -3, -1, -1,      1, -1, -3, -1,      1, -1, -1, -3,
    -3, -1, -1, -1,     -1, -3, -1, -1,     -1, -1, -3, -1,     -1, -1, -1, -3,
))

GRADIENT_LEN_OVER_3 = len(GRADIENTS_3D) // 3

# Affine remap used by the normalising adapters: (r + offset) * scale.
NORMALIZE_OFFSET = 1.0
NORMALIZE_SCALE = 0.5
