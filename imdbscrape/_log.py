"""
imdbscrape._log
===============
Debug output and terminal colouring.

`dbg()` writes to stderr only while debug mode is on, so stdout stays
clean for ``imdbscrape --json`` pipelines.  Toggle it with `set_debug()`.
"""

from __future__ import annotations

import sys

_DEBUG: bool = False


def set_debug(enabled: bool) -> None:
    """Turn verbose request / extraction output on or off for the whole package."""
    global _DEBUG
    _DEBUG = enabled


def dbg(*args, **kwargs) -> None:
    """Print to stderr, but only in debug mode."""
    if _DEBUG:
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)


# ─── ANSI colour helpers ──────────────────────────────────────────────────────

class C:
    """ANSI escape codes used by the CLI and the pretty-printers."""
    RESET   = "\033[0m"
    BOLD    = "\033[1m"
    DIM     = "\033[2m"
    RED     = "\033[31m"
    YELLOW  = "\033[33m"
    BRED    = "\033[91m"
    BGREEN  = "\033[92m"
    BYELLOW = "\033[93m"
    BCYAN   = "\033[96m"
    BWHITE  = "\033[97m"


def c(text, *codes: str) -> str:
    """Wrap *text* in ANSI colour codes."""
    return "".join(codes) + str(text) + C.RESET
