"""ArrayRIV: a sparse random index vector backed by a sorted entry list.

Representation:
  • `size` (dimensionality) is fixed at construction and never mutated.
  • Entries are VectorElements kept sorted by index, strictly increasing.
  • Every entry index lies in [0, size).
  • No stored entry has value 0; every construction path and every algebra
    operation strips zero-valued entries.

Lookups and upserts binary-search the entry list (bisect); a combine costs
O(|other| · log|self|) plus list shifts on insertion.

Mutation:
  • destructive_add / destructive_sub mutate the receiver in place and return it.
  • Every other operation returns a new vector; the receiver is left untouched.
  • No two vectors share an entry list; copy() clones it.
  • Not safe for concurrent use of the *same* instance across threads.

Degenerate arithmetic (normalizing the zero vector, dividing by 0) is not
guarded: values follow IEEE float64 semantics and become nan/inf.
"""
from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from ..errors import IndexOutOfBoundsError, MalformedInputError, SizeMismatchError
from .element import VectorElement, parse_index
from .generator import make_label_arrays, safe_sub_sequence
from .permutations import Permutations

__all__ = [
    "ArrayRIV",
    "generate_label",
    "generate_label_at",
    "label_generator",
    "label_generator_for_source",
]


def _check_size(size: int) -> int:
    size = int(size)
    if size <= 0:
        raise ValueError("size must be >= 1")
    return size


def _canonical_points(points: Iterable[VectorElement], size: int) -> List[VectorElement]:
    """Sort by index, sum duplicate indices, drop zeros, and bounds-check."""
    out: List[VectorElement] = []
    for elt in sorted(points):
        if not 0 <= elt.index < size:
            raise IndexOutOfBoundsError(
                f"Index {elt.index} is outside the bounds of this vector."
            )
        if out and out[-1].index == elt.index:
            out[-1] = out[-1].add(elt.value)
        else:
            out.append(elt)
    return [e for e in out if not e.is_zero()]


class ArrayRIV:
    def __init__(self, size: int) -> None:
        """Empty vector of the given dimensionality."""
        self._size = _check_size(size)
        self._points: List[VectorElement] = []

    # -- construction -------------------------------------------------------

    @classmethod
    def _wrap(cls, points: List[VectorElement], size: int) -> "ArrayRIV":
        # `points` must already be canonical and owned by the new vector.
        riv = cls(size)
        riv._points = points
        return riv

    @classmethod
    def empty(cls, size: int, k: int = 0) -> "ArrayRIV":
        return cls(size)

    @classmethod
    def from_arrays(
        cls,
        keys: Sequence[int] | np.ndarray,
        vals: Sequence[float] | np.ndarray,
        size: int,
    ) -> "ArrayRIV":
        """Build from parallel index/value arrays (any order)."""
        size = _check_size(size)
        keys = np.asarray(keys, dtype=np.int64).ravel()
        vals = np.asarray(vals, dtype=np.float64).ravel()
        if keys.size != vals.size:
            raise IndexOutOfBoundsError("Different quantity keys than values!")
        elts = (VectorElement.elt(k, v) for k, v in zip(keys.tolist(), vals.tolist()))
        return cls._wrap(_canonical_points(elts, size), size)

    @classmethod
    def from_points(cls, points: Iterable[VectorElement], size: int) -> "ArrayRIV":
        size = _check_size(size)
        return cls._wrap(_canonical_points(points, size), size)

    @classmethod
    def from_string(cls, text: str) -> "ArrayRIV":
        """Parse `"<idx>|<val> <idx>|<val> ... <size>"`."""
        tokens = str(text).strip().split(" ")
        try:
            size = parse_index(tokens[-1])
            elts = [VectorElement.from_string(t) for t in tokens[:-1]]
        except ValueError as e:
            raise MalformedInputError(f"cannot parse vector text {text!r}: {e}") from e
        if size <= 0:
            raise MalformedInputError(f"size must be >= 1 in vector text {text!r}")
        try:
            return cls.from_points(elts, size)
        except IndexOutOfBoundsError as e:
            raise MalformedInputError(f"{e} ({text!r})") from e

    @classmethod
    def generate_label(cls, size: int, k: int, word: Sequence[str]) -> "ArrayRIV":
        """Deterministic label for `word`: k (rounded up to even) entries, half +1, half -1."""
        indices, values, _seed = make_label_arrays(size, k, word)
        return cls.from_arrays(indices, values, size)

    def copy(self) -> "ArrayRIV":
        return self._wrap(list(self._points), self._size)

    __copy__ = copy

    # -- introspection ------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    dimensionality = size

    def count(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[VectorElement]:
        return iter(list(self._points))

    def points(self) -> Tuple[VectorElement, ...]:
        return tuple(self._points)

    def keys(self) -> np.ndarray:
        return np.fromiter((e.index for e in self._points), dtype=np.int64, count=len(self._points))

    def values(self) -> np.ndarray:
        return np.fromiter((e.value for e in self._points), dtype=np.float64, count=len(self._points))

    # -- lookup -------------------------------------------------------------

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < self._size

    def _check_index(self, index: int) -> None:
        if not self._valid_index(index):
            raise IndexOutOfBoundsError(
                f"Index {index} is outside the bounds of this vector."
            )

    def _binary_search(self, index: int) -> Tuple[int, bool]:
        """Return (position, found) for `index` in the sorted entry list."""
        i = bisect_left(self._points, VectorElement.from_index(index))
        return i, i < len(self._points) and self._points[i].index == index

    def _get_point(self, index: int) -> VectorElement:
        self._check_index(index)
        i, found = self._binary_search(index)
        return self._points[i] if found else VectorElement.from_index(index)

    def get(self, index: int) -> float:
        """Value at `index`; 0.0 when absent. Raises IndexOutOfBoundsError outside [0, size)."""
        return self._get_point(int(index)).value

    def contains(self, index: int) -> bool:
        """True iff an entry is stored at `index`. Raises IndexOutOfBoundsError outside [0, size)."""
        index = int(index)
        self._check_index(index)
        return self._binary_search(index)[1]

    def __contains__(self, index: object) -> bool:
        # Membership test: out-of-range or non-integer keys are simply absent.
        if not isinstance(index, (int, np.integer)) or not self._valid_index(int(index)):
            return False
        return self._binary_search(int(index))[1]

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    # -- in-place mutation --------------------------------------------------

    def _destructive_set(self, elt: VectorElement) -> None:
        self._check_index(elt.index)
        i, found = self._binary_search(elt.index)
        if found:
            self._points[i] = elt
        else:
            self._points.insert(i, elt)

    def _remove_zeros(self) -> "ArrayRIV":
        if any(e.is_zero() for e in self._points):
            self._points = [e for e in self._points if not e.is_zero()]
        return self

    def _check_same_size(self, other: "ArrayRIV") -> None:
        if self._size != other.size:
            raise SizeMismatchError(
                f"Target RIV is the wrong size! ({self._size} vs {other.size})"
            )

    def destructive_add(self, other: "ArrayRIV") -> "ArrayRIV":
        """Add `other` into this vector in place; returns self."""
        self._check_same_size(other)
        for elt in other.points():
            self._destructive_set(self._get_point(elt.index).add(elt.value))
        return self._remove_zeros()

    def destructive_sub(self, other: "ArrayRIV") -> "ArrayRIV":
        """Subtract `other` from this vector in place; returns self."""
        self._check_same_size(other)
        for elt in other.points():
            self._destructive_set(self._get_point(elt.index).subtract(elt.value))
        return self._remove_zeros()

    # -- algebra ------------------------------------------------------------

    def add(self, other: "ArrayRIV") -> "ArrayRIV":
        return self.copy().destructive_add(other)

    def subtract(self, other: "ArrayRIV") -> "ArrayRIV":
        return self.copy().destructive_sub(other)

    def _map_vals(self, fun: Callable[[np.ndarray], np.ndarray]) -> "ArrayRIV":
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            vals = fun(self.values())
        return self.from_arrays(self.keys(), vals, self._size)

    def multiply(self, scalar: float) -> "ArrayRIV":
        s = np.float64(scalar)
        return self._map_vals(lambda v: v * s)

    def divide(self, scalar: float) -> "ArrayRIV":
        s = np.float64(scalar)
        return self._map_vals(lambda v: v / s)

    def magnitude(self) -> float:
        v = self.values()
        return float(np.sqrt(np.dot(v, v)))

    def normalize(self) -> "ArrayRIV":
        """Divide by magnitude(). The zero vector has no direction; callers check first."""
        return self.divide(self.magnitude())

    def permute(self, permutations: Permutations, times: int) -> "ArrayRIV":
        """Move every index through `permutations.left` (times > 0) or `.right` (times < 0), |times| times."""
        times = int(times)
        if times == 0:
            return self.copy()
        if permutations.size != self._size:
            raise SizeMismatchError(
                f"Permutation tables have size {permutations.size}, vector has {self._size}"
            )
        table = permutations.left if times > 0 else permutations.right
        keys = self.keys()
        for _ in range(abs(times)):
            keys = table[keys]
        return self.from_arrays(keys, self.values(), self._size)

    def __add__(self, other: object) -> "ArrayRIV":
        if not isinstance(other, ArrayRIV):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ArrayRIV":
        if not isinstance(other, ArrayRIV):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "ArrayRIV":
        if isinstance(scalar, ArrayRIV):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "ArrayRIV":
        return self.divide(scalar)

    # -- comparison / text --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ArrayRIV):
            return NotImplemented
        return self._size == other.size and self._points == list(other.points())

    __hash__ = None  # type: ignore[assignment]

    def to_string(self) -> str:
        # "0|1 1|3 4|2 5" -> "I|V I|V I|V Size"
        return " ".join([*(str(e) for e in self._points), str(self._size)])

    __str__ = to_string

    def __repr__(self) -> str:
        return f"ArrayRIV.from_string({self.to_string()!r})"


# ---- label generation -------------------------------------------------------

def generate_label(size: int, k: int, word: Sequence[str]) -> ArrayRIV:
    return ArrayRIV.generate_label(size, k, word)


def generate_label_at(size: int, k: int, source: Sequence[str], start: int, length: int) -> ArrayRIV:
    """Label for the token `source[start:start+length]` (bounds clamped to the source)."""
    return ArrayRIV.generate_label(size, k, safe_sub_sequence(source, start, start + length))


def label_generator(size: int, k: int) -> Callable[[Sequence[str]], ArrayRIV]:
    return lambda word: generate_label(size, k, word)


def label_generator_for_source(
    source: Sequence[str], size: int, k: int, token_length: int
) -> Callable[[int], ArrayRIV]:
    return lambda index: generate_label_at(size, k, source, index, token_length)
