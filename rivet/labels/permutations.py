from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

__all__ = ["Permutations"]


@dataclass(frozen=True, eq=False)
class Permutations:
    """A pair of mutually inverse index tables of length `size`.

    `left` is applied for positive permutation counts, `right` for negative
    ones. Inverse-ness is the caller's contract and is not verified.
    """

    left: np.ndarray
    right: np.ndarray

    def __post_init__(self) -> None:
        left = np.asarray(self.left, dtype=np.int64)
        right = np.asarray(self.right, dtype=np.int64)
        if left.ndim != 1 or right.ndim != 1:
            raise ValueError("permutation tables must be 1-D")
        if left.size != right.size:
            raise ValueError(
                f"permutation tables differ in length ({left.size} vs {right.size})"
            )
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    @property
    def size(self) -> int:
        return int(self.left.size)

    @classmethod
    def from_forward(cls, forward: Sequence[int] | np.ndarray) -> "Permutations":
        """Build the pair from a forward table; the backward table is its inverse."""
        fwd = np.asarray(forward, dtype=np.int64)
        return cls(fwd, np.argsort(fwd, kind="stable"))
