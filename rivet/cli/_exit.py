from __future__ import annotations

__all__ = ["OK", "USER_ERR", "IO_ERR"]

OK = 0
USER_ERR = 2
IO_ERR = 3
