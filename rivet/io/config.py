from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import logging
import os

import yaml

from configs.validate import CONFIG_VERSION, DEFAULTS, validate_config
from ..errors import ConfigError

_logger = logging.getLogger(__name__)

__all__ = ["RivetConfig", "load_config", "config_from_dict"]


@dataclass(frozen=True)
class RivetConfig:
    version: str = CONFIG_VERSION
    size: int = DEFAULTS["labels"]["size"]
    k: int = DEFAULTS["labels"]["k"]
    log_level: str = DEFAULTS["logging"]["level"]


# ---- small helpers --------------------------------------------------------

def _dict(obj: Any) -> Dict[str, Any]:
    return obj if isinstance(obj, dict) else {}


def _apply_env_overrides(data: Dict[str, Any], env: Mapping[str, str]) -> Dict[str, Any]:
    """
    Merge env overrides into the raw config mapping (no effect if env vars absent).
    Supported:
      - RIVET_SIZE=<int>       -> labels.size
      - RIVET_K=<int>          -> labels.k
      - RIVET_LOG_LEVEL=<name> -> logging.level
    Values are validated together with the file contents afterwards.
    """
    out = dict(data)
    labels = dict(_dict(out.get("labels")))
    logging_cfg = dict(_dict(out.get("logging")))
    for var, section, key in (
        ("RIVET_SIZE", labels, "size"),
        ("RIVET_K", labels, "k"),
        ("RIVET_LOG_LEVEL", logging_cfg, "level"),
    ):
        v = env.get(var)
        if v is None or not str(v).strip():
            continue
        section[key] = str(v).strip()
        _logger.debug("config override from %s=%s", var, section[key])
    if labels:
        out["labels"] = labels
    if logging_cfg:
        out["logging"] = logging_cfg
    return out


def _apply_label_overrides(data: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay explicit labels.size / labels.k values (e.g. CLI flags); None means unset."""
    picked = {k: v for k, v in overrides.items() if k in ("size", "k") and v is not None}
    if not picked:
        return data
    out = dict(data)
    out["labels"] = {**_dict(out.get("labels")), **picked}
    return out


def config_from_dict(data: Mapping[str, Any]) -> RivetConfig:
    """Validate a raw mapping and project it onto RivetConfig."""
    norm = validate_config(dict(data))
    return RivetConfig(
        version=norm["version"],
        size=int(norm["labels"]["size"]),
        k=int(norm["labels"]["k"]),
        log_level=norm["logging"]["level"],
    )


# ---- loader ---------------------------------------------------------------

def load_config(
    path: str | os.PathLike[str] | None = None,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> RivetConfig:
    """
    Load YAML config if available; otherwise return defaults.
    Behavior:
      * No path, or a path that does not exist -> defaults (plus env overrides).
      * The YAML document must be a mapping; anything else is a ConfigError.
      * Env overrides (RIVET_SIZE, RIVET_K, RIVET_LOG_LEVEL) apply on top of the file.
      * `overrides` (labels size/k) apply last, so the k <= size check sees
        the values a command will actually use.
      * The merged result is validated; errors raise ConfigError.
    """
    env = os.environ if env is None else env
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            _logger.debug("config file %s not found; using defaults", path)
            loaded = None
        except yaml.YAMLError as e:
            raise ConfigError(f"cannot parse {path}: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        data = loaded or {}
        _logger.debug("loaded config from %s", path)
    data = _apply_env_overrides(data, env)
    return config_from_dict(_apply_label_overrides(data, overrides or {}))
