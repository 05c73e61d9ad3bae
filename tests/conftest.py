# tests/conftest.py
from __future__ import annotations

import os

import numpy as np
import pytest

from rivet.labels.permutations import Permutations


@pytest.fixture(autouse=True)
def _clear_rivet_env(monkeypatch: pytest.MonkeyPatch):
    """Keep RIVET_* variables from the developer shell out of every test."""
    for key in list(os.environ):
        if key.startswith("RIVET_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def shift_perms() -> Permutations:
    """Size-10 pair where left maps i -> i+1 (mod 10) and right undoes it."""
    return Permutations.from_forward([(i + 1) % 10 for i in range(10)])


@pytest.fixture
def random_perms():
    """Factory for a seeded random permutation pair of the requested size."""

    def _make(size: int, seed: int = 7) -> Permutations:
        rng = np.random.default_rng(seed)
        return Permutations.from_forward(rng.permutation(size))

    return _make
