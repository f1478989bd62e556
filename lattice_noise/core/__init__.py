from .permutation import PermutationState, build_permutation

__all__ = [
    "PermutationState",
    "build_permutation",
]
