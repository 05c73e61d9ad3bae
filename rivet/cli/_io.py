"""Output helpers for rivet subcommands: results go to stdout, diagnostics to stderr."""
from __future__ import annotations

import json
import math
import sys
from typing import Any, Sequence

from ..labels.element import format_value

__all__ = ["eprint", "print_json", "print_table"]


def eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _json_safe(obj: Any) -> Any:
    # JSON has no nan/inf literals; use the tokens of the vector text form.
    if isinstance(obj, float) and not math.isfinite(obj):
        return format_value(obj)
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(v) for v in obj]
    return obj


def print_json(obj: Any) -> None:
    """One compact JSON document per line; non-finite floats become "inf", "-inf" or "nan"."""
    sys.stdout.write(json.dumps(_json_safe(obj), separators=(",", ":"), allow_nan=False) + "\n")


def print_table(rows: Sequence[Sequence[Any]], headers: Sequence[str]) -> None:
    """Left-aligned columns under a header line and a dashed rule."""
    cells = [[str(h) for h in headers]]
    cells += [[format_value(c) if isinstance(c, float) else str(c) for c in row] for row in rows]
    widths = [max(len(r[i]) for r in cells) for i in range(len(headers))]
    lines = ["  ".join(c.ljust(w) for c, w in zip(r, widths)).rstrip() for r in cells]
    lines.insert(1, "  ".join("-" * w for w in widths))
    print("\n".join(lines))
