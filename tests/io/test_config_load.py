from __future__ import annotations

import pytest

from rivet.errors import ConfigError
from rivet.io.config import RivetConfig, config_from_dict, load_config


def _write(p, text):
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults_without_path():
    assert load_config(None, env={}) == RivetConfig()
    cfg = RivetConfig()
    assert (cfg.size, cfg.k, cfg.log_level, cfg.version) == (16000, 48, "WARNING", "v1")


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml", env={}) == RivetConfig()


def test_reads_yaml(tmp_path):
    p = _write(tmp_path / "c.yaml", "labels:\n  size: 128\n  k: 6\nlogging:\n  level: info\n")
    cfg = load_config(p, env={})
    assert cfg == RivetConfig(size=128, k=6, log_level="INFO")


def test_empty_file_is_defaults(tmp_path):
    p = _write(tmp_path / "c.yaml", "")
    assert load_config(p, env={}) == RivetConfig()


def test_env_overrides_file(tmp_path):
    p = _write(tmp_path / "c.yaml", "labels:\n  size: 128\n  k: 6\n")
    cfg = load_config(p, env={"RIVET_K": "8", "RIVET_LOG_LEVEL": "error"})
    assert cfg.size == 128 and cfg.k == 8 and cfg.log_level == "ERROR"


def test_env_overrides_default_from_process_env(monkeypatch):
    monkeypatch.setenv("RIVET_SIZE", "64")
    assert load_config().size == 64


def test_env_override_is_validated():
    with pytest.raises(ConfigError):
        load_config(None, env={"RIVET_SIZE": "zero"})


@pytest.mark.parametrize("text", ["labels: [\n", "- 1\n- 2\n", "labels:\n  size: 0\n"])
def test_bad_files_raise_config_error(tmp_path, text):
    p = _write(tmp_path / "c.yaml", text)
    with pytest.raises(ConfigError):
        load_config(p, env={})


def test_config_from_dict():
    assert config_from_dict({"labels": {"k": 2}}).k == 2


def test_label_overrides_apply_after_env(tmp_path):
    p = _write(tmp_path / "c.yaml", "labels:\n  size: 128\n  k: 48\n")
    cfg = load_config(p, env={"RIVET_SIZE": "32"}, overrides={"k": 2, "size": None})
    assert (cfg.size, cfg.k) == (32, 2)
    with pytest.raises(ConfigError, match="labels.k"):
        load_config(p, env={"RIVET_SIZE": "32"})
