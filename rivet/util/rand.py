"""Seeded pseudorandom primitives used by label generation.

rand_ints(bound, length, seed):
  • Draws integers in [0, bound) from numpy's PCG64 seeded with `seed`.
  • Repeats are rejected in draw order; stops after `length` distinct values.
  • Same (bound, length, seed) always yields the same sequence.
  • length > bound cannot be satisfied and raises ValueError up front.

shuffle_array / shuffle_list index their input through rand_ints(n, n, seed),
i.e. through a seed-determined permutation of range(n).
"""
from __future__ import annotations

from typing import List, Sequence, TypeVar

import numpy as np

__all__ = ["as_seed", "rand_ints", "shuffle_array", "shuffle_list"]

T = TypeVar("T")

_U64_MASK = (1 << 64) - 1
# Draw at least this many candidates per block; small k rarely needs a second block.
_MIN_BLOCK = 64


def as_seed(seed: int) -> int:
    """Map a signed 64-bit seed onto the unsigned range numpy accepts."""
    return int(seed) & _U64_MASK


def rand_ints(bound: int, length: int, seed: int) -> np.ndarray:
    """Return `length` distinct ints from [0, bound) in seeded draw order (int64)."""
    bound = int(bound)
    length = int(length)
    if length < 0:
        raise ValueError("length must be >= 0")
    if length == 0:
        return np.zeros(0, dtype=np.int64)
    if bound <= 0:
        raise ValueError("bound must be >= 1")
    if length > bound:
        raise ValueError(f"cannot draw {length} distinct values from [0, {bound})")

    rng = np.random.default_rng(as_seed(seed))
    out: List[int] = []
    seen: set[int] = set()
    block = max(_MIN_BLOCK, 2 * length)
    while len(out) < length:
        for x in rng.integers(0, bound, size=block, dtype=np.int64).tolist():
            if x in seen:
                continue
            seen.add(x)
            out.append(x)
            if len(out) == length:
                break
    return np.asarray(out, dtype=np.int64)


def shuffle_array(arr: Sequence[float] | np.ndarray, seed: int) -> np.ndarray:
    """Return a seeded permutation of `arr` as a new float64 array."""
    a = np.asarray(arr, dtype=np.float64)
    n = int(a.size)
    return a[rand_ints(n, n, seed)] if n else a.copy()


def shuffle_list(lis: Sequence[T], seed: int) -> List[T]:
    n = len(lis)
    return [lis[i] for i in rand_ints(n, n, seed).tolist()]
