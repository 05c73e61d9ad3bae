from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def run_cli(args, cwd=ROOT, env_overrides=None):
    env = {k: v for k, v in os.environ.items() if not k.startswith("RIVET_")}
    if env_overrides:
        env.update(env_overrides)
    env.setdefault("PYTHONUTF8", "1")
    p = subprocess.run(
        [sys.executable, "-m", "rivet", *args],
        cwd=cwd,
        env=env,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    return p.returncode, p.stdout, p.stderr


def test_version_flag():
    code, out, _ = run_cli(["--version"])
    assert code == 0
    assert out.startswith("rivet ")


def test_label_with_repo_config():
    # ./configs/config.yaml in the repo sets size 16000
    code, out, _ = run_cli(["label", "--k", "4", "word"])
    assert code == 0
    assert out.strip().split(" ")[-1] == "16000"
    assert len(out.strip().split(" ")) == 5


def test_env_override_reaches_cli():
    code, out, _ = run_cli(["label", "--k", "2", "word"], env_overrides={"RIVET_SIZE": "32"})
    assert code == 0
    assert out.strip().endswith(" 32")


def test_debug_logs_to_stderr_only():
    code, out, err = run_cli(["--debug", "label", "--size", "20", "--k", "2", "word"])
    assert code == 0
    assert "[rivet] DEBUG" in err
    assert "[rivet]" not in out
