"""CLI subcommand `label`: print the deterministic label vector for each word."""
from __future__ import annotations

import argparse

from ..io.config import RivetConfig
from ..labels.array_riv import generate_label
from ..labels.generator import make_seed, normalize_k
from ._exit import OK
from ._io import print_json, print_table
from ._util import add_command_subparser

_HELP = "Generate label vectors for words"
_DESC = "Print the serialized label vector (idx|val ... size) for each WORD."


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_command_subparser(subparsers, name="label", help_text=_HELP, description=_DESC)
    sp.add_argument("words", nargs="+", metavar="WORD")
    sp.add_argument("--size", type=int, default=None, help="dimensionality (default: config labels.size)")
    sp.add_argument("--k", type=int, default=None, help="nonzero entries, rounded up to even (default: config labels.k)")
    sp.set_defaults(command="label", func=_run)


def _run(ns: argparse.Namespace, cfg: RivetConfig) -> int:
    # cfg already carries --size/--k, validated together with file and env values.
    size, k = cfg.size, cfg.k
    rivs = [(w, generate_label(size, k, w)) for w in ns.words]

    if ns.json:
        for w, riv in rivs:
            print_json({"word": w, "size": size, "k": normalize_k(k), "seed": make_seed(w), "riv": str(riv)})
    elif getattr(ns, "table", False):
        print_table(
            [(w, make_seed(w), riv.count(), str(riv)) for w, riv in rivs],
            headers=["word", "seed", "count", "riv"],
        )
    else:
        for _, riv in rivs:
            print(riv)
    return OK
