"""rivet: random index vectors.

Public import roots are `rivet` and `rivet.errors`; submodules are internal.
This module also resolves `__version__` deterministically across installs.
"""
from __future__ import annotations

from typing import Any as _Any
from . import errors as errors  # re-export for star-import; noqa: F401
from .labels import (
    ArrayRIV,
    Permutations,
    VectorElement,
    generate_label,
    generate_label_at,
    label_generator,
    label_generator_for_source,
)

from importlib.metadata import version as _pkg_version, PackageNotFoundError


def _version_from_fallback_module() -> str | None:
    try:
        from ._version import __version__ as v

        return v
    except ImportError:
        return None


def _version_from_metadata() -> str | None:
    try:
        return _pkg_version("rivet")
    except PackageNotFoundError:
        return None


__version__ = (
    _version_from_fallback_module()
    or _version_from_metadata()
    or "0+unknown"
)


def __getattr__(name: str) -> _Any:  # PEP 562 lazy exports to avoid import-time cycles
    if name in ("validate_config", "CONFIG_VERSION"):
        # `configs` is a top-level package, not `rivet.configs`
        from configs.validate import (
            validate_config as _validate_config,
            CONFIG_VERSION as _CONFIG_VERSION,
        )
        _g = globals()
        _g.update({"validate_config": _validate_config, "CONFIG_VERSION": _CONFIG_VERSION})
        return _g[name]
    if name in ("load_config", "RivetConfig"):
        from .io import config as _config

        globals().update({"load_config": _config.load_config, "RivetConfig": _config.RivetConfig})
        return globals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return list(__all__)


# Star-export surface (deterministic ordering).
__all__ = sorted([
    "ArrayRIV",
    "CONFIG_VERSION",
    "Permutations",
    "RivetConfig",
    "VectorElement",
    "__version__",
    "errors",
    "generate_label",
    "generate_label_at",
    "label_generator",
    "label_generator_for_source",
    "load_config",
    "validate_config",
])
