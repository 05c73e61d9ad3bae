"""Locate the YAML config a CLI run should load."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator, Mapping, Optional, TextIO, Tuple

__all__ = ["CWD_CONFIG", "XDG_CONFIG", "discover_config_path", "maybe_log_selected"]

CWD_CONFIG = Path("configs") / "config.yaml"
XDG_CONFIG = Path("rivet") / "config.yaml"


def _expand(raw: str) -> Path:
    return Path(os.path.expandvars(raw)).expanduser()


def _existing(p: Path) -> Optional[Path]:
    """`p` itself, or `p/config.yaml` when `p` is a directory, if that file exists."""
    target = p / "config.yaml" if p.is_dir() else p
    return target.resolve() if target.is_file() else None


def _search_order(cwd: Path, env: Mapping[str, str]) -> Iterator[Tuple[Path, str]]:
    if env.get("RIVET_CONFIG"):
        yield _expand(env["RIVET_CONFIG"]), "env:RIVET_CONFIG"
    yield cwd / CWD_CONFIG, f"cwd:{CWD_CONFIG.as_posix()}"
    xdg_home = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    yield _expand(xdg_home) / XDG_CONFIG, "xdg"


def discover_config_path(
    explicit: Optional[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[Optional[Path], str]:
    """Return `(path or None, source)` for the config to load.

    An explicit `--config` always wins and is reported as 'explicit-missing'
    when it does not exist. Otherwise the first existing file among
    $RIVET_CONFIG, ./configs/config.yaml and the XDG location is chosen
    ('env:RIVET_CONFIG', 'cwd:configs/config.yaml', 'xdg'), else (None, 'none').
    """
    if explicit:
        wanted = _expand(explicit)
        found = _existing(wanted)
        return (found, "explicit") if found is not None else (wanted, "explicit-missing")

    for candidate, source in _search_order(cwd or Path.cwd(), env or {}):
        found = _existing(candidate)
        if found is not None:
            return found, source
    return None, "none"


def maybe_log_selected(
    path: Optional[Path], source: str, *, verbose: bool = False, stream: Optional[TextIO] = None
) -> None:
    if verbose:
        out = stream or sys.stderr
        out.write(f"[rivet] config: selected={path or 'none'} (source={source})\n")
        out.flush()
