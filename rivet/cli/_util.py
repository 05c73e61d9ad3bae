from __future__ import annotations

import argparse

__all__ = ["add_command_subparser"]


def add_command_subparser(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str,
    description: str,
    *,
    table: bool = True,
) -> argparse.ArgumentParser:
    """
    Create a subcommand parser with the flags every command shares.

    - --json / --table (mutually exclusive): machine-readable JSON or plain ASCII table output
    - --quiet / --verbose: stderr logging level; stdout remains reserved for command output

    Returns the created subparser.
    """
    sp = subparsers.add_parser(name, help=help_text, description=description)
    fmt = sp.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="JSON output (stable, machine-readable)")
    if table:
        fmt.add_argument("--table", action="store_true", help="Plain table output (no color)")
    sp.add_argument("--quiet", action="store_true", help="log only errors on stderr")
    sp.add_argument("--verbose", action="store_true", help="report the selected config and log at INFO on stderr")
    return sp
