from __future__ import annotations

import io
from pathlib import Path
from typing import Dict

from rivet.cli._config import discover_config_path, maybe_log_selected


def _touch(p: Path) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("# yaml\n", encoding="utf-8")
    return p


def test_explicit_wins_even_if_others_exist(tmp_path):
    cwd_cfg = _touch(tmp_path / "configs" / "config.yaml")
    other = _touch(tmp_path / "other.yaml")
    xdg = tmp_path / "xdg"
    _touch(xdg / "rivet" / "config.yaml")
    env: Dict[str, str] = {"XDG_CONFIG_HOME": str(xdg), "RIVET_CONFIG": str(cwd_cfg)}
    p, src = discover_config_path(str(other), tmp_path, env)
    assert p == other.resolve()
    assert src == "explicit"


def test_explicit_missing_is_reported(tmp_path):
    missing = tmp_path / "nope.yaml"
    p, src = discover_config_path(str(missing), tmp_path, {})
    assert Path(p) == missing
    assert src == "explicit-missing"


def test_env_points_to_file_or_dir(tmp_path):
    cfg = _touch(tmp_path / "e.yaml")
    assert discover_config_path(None, tmp_path, {"RIVET_CONFIG": str(cfg)}) == (
        cfg.resolve(),
        "env:RIVET_CONFIG",
    )
    d_cfg = _touch(tmp_path / "dir" / "config.yaml")
    p, src = discover_config_path(None, tmp_path, {"RIVET_CONFIG": str(tmp_path / "dir")})
    assert p == d_cfg.resolve() and src == "env:RIVET_CONFIG"


def test_cwd_then_xdg_then_none(tmp_path):
    xdg = tmp_path / "xdg"
    env = {"XDG_CONFIG_HOME": str(xdg)}
    assert discover_config_path(None, tmp_path, env) == (None, "none")

    x_cfg = _touch(xdg / "rivet" / "config.yaml")
    assert discover_config_path(None, tmp_path, env) == (x_cfg.resolve(), "xdg")

    c_cfg = _touch(tmp_path / "configs" / "config.yaml")
    assert discover_config_path(None, tmp_path, env) == (c_cfg.resolve(), "cwd:configs/config.yaml")


def test_maybe_log_selected_only_when_verbose():
    buf = io.StringIO()
    maybe_log_selected(None, "none", verbose=False, stream=buf)
    assert buf.getvalue() == ""
    maybe_log_selected(Path("/x/config.yaml"), "xdg", verbose=True, stream=buf)
    assert buf.getvalue().startswith("[rivet] config: selected=")
    assert "(source=xdg)" in buf.getvalue()
