"""Sparse label vectors and their seeded generation."""
from __future__ import annotations

from .array_riv import (
    ArrayRIV,
    generate_label,
    generate_label_at,
    label_generator,
    label_generator_for_source,
)
from .element import VectorElement
from .permutations import Permutations

__all__ = [
    "ArrayRIV",
    "Permutations",
    "VectorElement",
    "generate_label",
    "generate_label_at",
    "label_generator",
    "label_generator_for_source",
]
