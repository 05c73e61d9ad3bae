"""CLI subcommand `combine`: add or subtract two serialized vectors."""
from __future__ import annotations

import argparse

from ..io.config import RivetConfig
from ..labels.array_riv import ArrayRIV
from ._exit import OK
from ._io import print_json
from ._util import add_command_subparser

_HELP = "Add or subtract two serialized vectors"
_DESC = "Parse vectors A and B ('idx|val ... size', quoted) and print A+B or A-B."


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_command_subparser(
        subparsers, name="combine", help_text=_HELP, description=_DESC, table=False
    )
    sp.add_argument("a", metavar="A")
    sp.add_argument("b", metavar="B")
    sp.add_argument("--op", choices=("add", "sub"), default="add")
    sp.set_defaults(command="combine", func=_run)


def _run(ns: argparse.Namespace, cfg: RivetConfig) -> int:
    a = ArrayRIV.from_string(ns.a)
    b = ArrayRIV.from_string(ns.b)
    out = a.add(b) if ns.op == "add" else a.subtract(b)
    if ns.json:
        print_json({"op": ns.op, "size": out.size, "count": out.count(), "riv": str(out)})
    else:
        print(out)
    return OK
