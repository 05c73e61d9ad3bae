from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["VectorElement", "format_value", "parse_index", "parse_value"]

# ASCII-only numeric grammar; int()/float() alone also accept "1_0" and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def parse_index(text: str) -> int:
    """Parse a decimal integer token. Raises ValueError otherwise."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def parse_value(text: str) -> float:
    """Parse a decimal, exponent, inf or nan token. Raises ValueError otherwise."""
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return float(text)


@dataclass(frozen=True, eq=True)
class VectorElement:
    """One (index, value) entry of a sparse vector.

    Ordering is by `index` only (so bisect can locate an index regardless of
    value); equality is exact on both fields.
    """

    index: int
    value: float = 0.0

    @classmethod
    def elt(cls, index: int, value: float) -> "VectorElement":
        return cls(int(index), float(value))

    @classmethod
    def from_index(cls, index: int) -> "VectorElement":
        """Zero-valued element used as a bisect key."""
        return cls(int(index), 0.0)

    @classmethod
    def from_string(cls, text: str) -> "VectorElement":
        """Parse `"<index>|<value>"`. Raises ValueError on malformed text."""
        parts = text.split("|")
        if len(parts) != 2:
            raise ValueError(f"expected '<index>|<value>', got {text!r}")
        return cls(parse_index(parts[0]), parse_value(parts[1]))

    # -- ordering -----------------------------------------------------------

    def __lt__(self, other: "VectorElement") -> bool:
        return self.index < other.index

    def __le__(self, other: "VectorElement") -> bool:
        return self.index <= other.index

    def __gt__(self, other: "VectorElement") -> bool:
        return self.index > other.index

    def __ge__(self, other: "VectorElement") -> bool:
        return self.index >= other.index

    # -- arithmetic ---------------------------------------------------------

    def add(self, value: float) -> "VectorElement":
        return VectorElement(self.index, self.value + value)

    def subtract(self, value: float) -> "VectorElement":
        return VectorElement(self.index, self.value - value)

    def is_zero(self) -> bool:
        return self.value == 0

    def contains(self, value: float) -> bool:
        return self.value == value

    def __str__(self) -> str:
        return f"{self.index}|{format_value(self.value)}"


def format_value(v: float) -> str:
    """Integral values print without a fractional part; the rest use repr()."""
    v = float(v)
    if v.is_integer() and abs(v) < 2**53:
        return str(int(v))
    return repr(v)
