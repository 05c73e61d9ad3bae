"""Seeded label generation: token -> (indices, values).

A token's seed is a positional fold over its characters:

    seed = Σ ord(c_p) * 10^(p+1)      p = 0, 1, 2, ...

evaluated in signed 64-bit arithmetic so the result is reproducible across
implementations:

  • the weight 10^(p+1) saturates at 2^63 - 1 once it no longer fits
    (p >= 18), matching a double -> int64 cast;
  • each product and the running sum wrap modulo 2^64 into [-2^63, 2^63).

For long tokens the seed is therefore not meaningful as a number; it is only
a deterministic key for the pseudorandom stream.

Characters are Unicode code points, so a character outside the Basic
Multilingual Plane counts as one position. A fold over UTF-16 code units
would see two positions (a surrogate pair) and give a different seed.
"""
from __future__ import annotations

import logging
import threading
from typing import Sequence, Tuple

import numpy as np

from ..util.rand import rand_ints, shuffle_array

__all__ = [
    "make_seed",
    "normalize_k",
    "make_indices",
    "make_values",
    "make_label_arrays",
    "safe_sub_sequence",
]

_logger = logging.getLogger(__name__)
_LOG_ONCE_KEYS = set()
_LOG_ONCE_LOCK = threading.Lock()

_I64_MAX = (1 << 63) - 1
_U64 = 1 << 64


def _log_once(key: str, level: int, msg: str) -> None:
    with _LOG_ONCE_LOCK:
        if key in _LOG_ONCE_KEYS:
            return
        _LOG_ONCE_KEYS.add(key)
    _logger.log(level, msg)


def _wrap_i64(x: int) -> int:
    x %= _U64
    return x - _U64 if x > _I64_MAX else x


def make_seed(word: Sequence[str]) -> int:
    """Fold the characters of `word` into a signed 64-bit seed."""
    total = 0
    wrapped = False
    for p, ch in enumerate(word):
        weight = min(10 ** (p + 1), _I64_MAX)
        step = _wrap_i64(ord(ch) * weight)
        nxt = _wrap_i64(total + step)
        if not wrapped and (step != ord(ch) * weight or nxt != total + step):
            wrapped = True
        total = nxt
    if wrapped:
        _log_once(
            "seed_wrap",
            logging.WARNING,
            "seed derivation wrapped around the signed 64-bit range; "
            "long tokens share seed arithmetic modulo 2^64",
        )
    return total


def normalize_k(k: int) -> int:
    """Round `k` up to the next even number so values can be balanced."""
    k = int(k)
    if k < 0:
        raise ValueError("k must be >= 0")
    return k if k % 2 == 0 else k + 1


def make_indices(size: int, count: int, seed: int) -> np.ndarray:
    """`count` distinct indices in [0, size), in seeded draw order."""
    if int(size) <= 0:
        raise ValueError("size must be >= 1")
    if count > size:
        raise ValueError(f"k ({count}) must not exceed size ({size})")
    return rand_ints(size, count, seed)


def make_values(count: int, seed: int) -> np.ndarray:
    """`count/2` values of +1 followed by `count/2` of -1, shuffled by `seed`."""
    count = int(count)
    if count % 2:
        raise ValueError("count must be even")
    half = count // 2
    vals = np.concatenate([np.ones(half), -np.ones(half)])
    return shuffle_array(vals, seed)


def make_label_arrays(size: int, k: int, word: Sequence[str]) -> Tuple[np.ndarray, np.ndarray, int]:
    """Return (indices, values, seed) for `word`; indices and values pair positionally."""
    seed = make_seed(word)
    j = normalize_k(k)
    indices = make_indices(size, j, seed)
    values = make_values(j, seed)
    _logger.debug("label word_len=%d size=%d k=%d seed=%d", len(word), size, j, seed)
    return indices, values, seed


def safe_sub_sequence(source: Sequence[str], start: int, end: int) -> Sequence[str]:
    """Slice `source[start:end]` with both bounds clamped into [0, len(source)]."""
    n = len(source)
    start = min(max(0, int(start)), n)
    end = min(max(start, int(end)), n)
    return source[start:end]
