"""
"Lightweight" configuration validation and normalization for rivet.

Public API:
    validate_config(cfg: dict) -> dict
    validate_config_verbose(cfg: dict) -> (dict, warnings)

- Raises ConfigError with clear messages (field paths + constraints) on invalid input.
- Returns a **new** normalized dict; the input is not mutated.
"""
from __future__ import annotations
from typing import Any, Dict, List, Tuple

from rivet.errors import ConfigError

__all__ = ["validate_config", "validate_config_verbose", "CONFIG_VERSION", "DEFAULTS"]

CONFIG_VERSION = "v1"


# ------------------------------
# Utilities
# ------------------------------

def _ensure_dict(x: Any) -> Dict[str, Any]:
    if isinstance(x, dict):
        return dict(x)
    return {}


def _deep_merge(dst: Dict[str, Any], src: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay src onto dst (deep for dicts) without mutating inputs."""
    out = dict(dst)
    for k, v in (src or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


# ------------------------------
# Defaults
# ------------------------------

DEFAULTS: Dict[str, Any] = {
    "version": CONFIG_VERSION,
    "labels": {
        "size": 16000,   # dimensionality of every label
        "k": 48,         # nonzero entries per label (rounded up to even)
    },
    "logging": {
        "level": "WARNING",
    },
}

ALLOWED_TOP = {"version", "labels", "logging"}
ALLOWED_LABELS = {"size", "k"}
ALLOWED_LOGGING = {"level"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _lev(a: str, b: str) -> int:
    """Tiny Levenshtein distance (edit distance) for did-you-mean suggestions."""
    la, lb = len(a), len(b)
    dp = list(range(lb + 1))
    for i, ca in enumerate(a, 1):
        prev = dp[0]
        dp[0] = i
        for j, cb in enumerate(b, 1):
            ins = dp[j] + 1
            dele = dp[j - 1] + 1
            sub = prev + (0 if ca == cb else 1)
            prev, dp[j] = dp[j], min(ins, dele, sub)
    return dp[-1]


def _suggest_key(bad: str, allowed: set[str]) -> str | None:
    """Return closest allowed key within distance ≤2, else None."""
    best_key, best_dist = None, 99
    for k in sorted(allowed):
        d = _lev(bad, k)
        if d < best_dist:
            best_key, best_dist = k, d
    return best_key if best_dist <= 2 else None


# ------------------------------
# Validation helpers
# ------------------------------

def _err(errors: List[str], path: str, msg: str) -> None:
    errors.append(f"{path} {msg}")


def _unknown_keys(errors: List[str], section: Dict[str, Any], allowed: set[str], prefix: str) -> None:
    for k in section.keys():
        if k in allowed:
            continue
        path = f"{prefix}.{k}" if prefix else str(k)
        sug = _suggest_key(str(k), allowed)
        hint = f" (did you mean '{sug}')" if sug else ""
        _err(errors, path, f"unknown key{hint}")


def _strict_int(errors: List[str], path: str, v: Any) -> int | None:
    # bool is an int subclass; reject it along with floats like 1.5
    if isinstance(v, bool):
        _err(errors, path, "must be an integer")
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    if isinstance(v, str):
        try:
            return int(v.strip())
        except ValueError:
            pass
    _err(errors, path, "must be an integer")
    return None


# ------------------------------
# Main validator
# ------------------------------

def _validate_config_normalize_impl(cfg: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    cfg_in = _ensure_dict(cfg)
    errors: List[str] = []
    warnings: List[str] = []

    raw_labels = _ensure_dict(cfg_in.get("labels"))
    raw_logging = _ensure_dict(cfg_in.get("logging"))

    _unknown_keys(errors, cfg_in, ALLOWED_TOP, "")
    _unknown_keys(errors, raw_labels, ALLOWED_LABELS, "labels")
    _unknown_keys(errors, raw_logging, ALLOWED_LOGGING, "logging")
    for name in ("labels", "logging"):
        if name in cfg_in and not isinstance(cfg_in[name], dict):
            _err(errors, name, "must be a mapping")

    out = _deep_merge(DEFAULTS, {k: v for k, v in cfg_in.items() if k in ALLOWED_TOP})

    version = out.get("version")
    if version != CONFIG_VERSION:
        _err(errors, "version", f"must be '{CONFIG_VERSION}' (got {version!r})")

    labels = _ensure_dict(out.get("labels"))
    size = _strict_int(errors, "labels.size", labels.get("size"))
    k = _strict_int(errors, "labels.k", labels.get("k"))
    if size is not None and size < 1:
        _err(errors, "labels.size", "must be >= 1")
        size = None
    if k is not None and k < 0:
        _err(errors, "labels.k", "must be >= 0")
        k = None
    if k is not None and k % 2:
        warnings.append(f"labels.k {k} is odd; labels use {k + 1} entries")
    if size is not None and k is not None and k + (k % 2) > size:
        _err(errors, "labels.k", f"must not exceed labels.size ({size}) once rounded up to even")
    labels["size"], labels["k"] = size, k
    out["labels"] = labels

    log_cfg = _ensure_dict(out.get("logging"))
    level = str(log_cfg.get("level", "WARNING")).strip().upper()
    if level not in LOG_LEVELS:
        _err(errors, "logging.level", f"must be one of {sorted(LOG_LEVELS)}")
    log_cfg["level"] = level
    out["logging"] = log_cfg

    if errors:
        raise ConfigError("\n".join(errors))
    return out, warnings


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return a normalized copy of `cfg` or raise ConfigError listing every problem."""
    normalized, _ = _validate_config_normalize_impl(cfg)
    return normalized


def validate_config_verbose(cfg: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """Like validate_config, but also returns non-fatal warnings."""
    return _validate_config_normalize_impl(cfg)
