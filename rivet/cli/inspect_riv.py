"""CLI subcommand `inspect`: parse serialized vectors and report their shape."""
from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List

from ..io.config import RivetConfig
from ..labels.array_riv import ArrayRIV
from ._exit import OK
from ._io import print_json, print_table
from ._util import add_command_subparser

_HELP = "Inspect serialized vectors"
_DESC = "Parse TEXT ('idx|val ... size', or '-' to read one vector per stdin line) and report size, count and magnitude."


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_command_subparser(subparsers, name="inspect", help_text=_HELP, description=_DESC)
    sp.add_argument("text", nargs="+", metavar="TEXT")
    sp.set_defaults(command="inspect", func=_run)


def _read_texts(ns: argparse.Namespace) -> List[str]:
    if ns.text == ["-"]:
        return [line.strip() for line in sys.stdin if line.strip()]
    # Unquoted tokens are rejoined into a single vector.
    return [" ".join(ns.text)]


def _summary(riv: ArrayRIV) -> Dict[str, Any]:
    return {
        "size": riv.size,
        "count": riv.count(),
        "magnitude": riv.magnitude(),
        "entries": [[e.index, e.value] for e in riv],
        "text": str(riv),
    }


def _run(ns: argparse.Namespace, cfg: RivetConfig) -> int:
    # MalformedInputError propagates to the umbrella, which maps it to USER_ERR.
    rivs = [ArrayRIV.from_string(t) for t in _read_texts(ns)]
    for riv in rivs:
        if ns.json:
            print_json(_summary(riv))
        elif ns.table:
            print(f"size={riv.size} count={riv.count()} magnitude={riv.magnitude():.6g}")
            print_table([(e.index, e.value) for e in riv], headers=["index", "value"])
        else:
            print(f"size={riv.size} count={riv.count()} magnitude={riv.magnitude():.6g}")
            print(riv)
    return OK
