# rivet/cli/main.py
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from ..errors import ConfigError, RivetError, format_error
from ..io.config import load_config
from . import combine, inspect_riv, label
from ._config import discover_config_path, maybe_log_selected
from ._exit import IO_ERR, USER_ERR
from ._io import eprint

_LOG_FORMAT = "[rivet] %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rivet",
        description="Random index vector tools",
        allow_abbrev=False,
    )
    try:
        from rivet import __version__ as _VER  # lazy import to avoid side effects
    except ImportError:
        _VER = "unknown"
    parser.add_argument(
        "--version",
        action="version",
        version=f"rivet {_VER}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="log at DEBUG level on stderr",
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        help="config file (default: discovered, see docs)",
    )
    subparsers = parser.add_subparsers(dest="command")

    label.register(subparsers)
    inspect_riv.register(subparsers)
    combine.register(subparsers)

    return parser


def _configure_logging(level: str, ns: argparse.Namespace) -> None:
    if ns.debug:
        lvl = logging.DEBUG
    elif getattr(ns, "quiet", False):
        lvl = logging.ERROR
    elif getattr(ns, "verbose", False):
        lvl = min(logging.INFO, getattr(logging, level, logging.WARNING))
    else:
        lvl = getattr(logging, level, logging.WARNING)
    # No-op when the host application already configured the root logger.
    logging.basicConfig(stream=sys.stderr, format=_LOG_FORMAT)
    logging.getLogger("rivet").setLevel(lvl)


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    ns = parser.parse_args(argv)
    if not hasattr(ns, "func"):
        parser.print_help(sys.stderr)
        return USER_ERR

    selected, source = discover_config_path(ns.config, Path.cwd(), os.environ)
    maybe_log_selected(selected, source, verbose=getattr(ns, "verbose", False))
    if source == "explicit-missing":
        eprint(f"ConfigError: config file not found: {selected}")
        return USER_ERR
    try:
        # --size/--k (label) take part in validation alongside file and env values.
        cfg = load_config(
            selected,
            overrides={"size": getattr(ns, "size", None), "k": getattr(ns, "k", None)},
        )
    except ConfigError as e:
        eprint(format_error(e))
        return USER_ERR
    _configure_logging(cfg.log_level, ns)

    try:
        return ns.func(ns, cfg)
    except RivetError as e:
        eprint(format_error(e))
        return USER_ERR
    except OSError as e:
        eprint(f"I/O error: {e}")
        return IO_ERR


if __name__ == "__main__":
    raise SystemExit(main())
