from __future__ import annotations

"""Typed error taxonomy (public).

Only `rivet` and `rivet.errors` are public import roots for error classes.
This module exposes the caller-facing error classes and a small helper `format_error`.
"""

__all__ = [
    "RivetError",
    "SizeMismatchError",
    "IndexOutOfBoundsError",
    "MalformedInputError",
    "ConfigError",
    "format_error",
]


class RivetError(Exception):
    """Base class for all typed, caller-facing errors in rivet."""
    pass


# Typed errors do not inherit from ValueError/IndexError; callers should catch the specific subclasses.
class SizeMismatchError(RivetError):
    """Two vectors of different dimensionality were combined."""
    pass


class IndexOutOfBoundsError(RivetError):
    """An index outside [0, size) was read or written, or keys/values lengths disagree."""
    pass


class MalformedInputError(RivetError):
    """Serialized vector text does not match the `idx|val ... size` grammar."""
    pass


class ConfigError(RivetError):
    """Configuration invalid, unknown keys, wrong version, etc."""
    pass


def format_error(e: BaseException) -> str:
    """Return a short, uniform caller-facing message like 'SizeMismatchError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name


# Keep star-export order deterministic for tests and tooling
__all__ = sorted(__all__)
