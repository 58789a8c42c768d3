"""Coloured stderr logging helpers and small process utilities."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import TextIO

SET_CLEAR = "\033[0m"

SET_WHITE = "\033[37m"
SET_RED = "\033[1;31m"
SET_GREEN = "\033[1;32m"
SET_BLUE = "\033[0;34m"
SET_PURPLE = "\033[0;35m"
SET_ORANGE = "\033[48:2:255:165:1m"

SET_BGWHITE = "\033[51m"
SET_BGRED = "\033[41m"
SET_BGGREEN = "\033[42m"
SET_BGBLUE = "\033[44m"
SET_BGPURPLE = "\033[45m"

SET_REV = "\033[7m"
SET_BOLD = "\033[1m"
SET_UNDERLINE = "\033[4m"
SET_UNDERBOLD = "\033[1;4m"

SET_NOREV = "\033[27m"
SET_NOUNDERLINE = "\033[24m"
SET_NOBOLD = "\033[22m"


class FatalError(Exception):
    """An unrecoverable error, optionally tagged with the function that hit it."""

    def __init__(self, message: str, fn_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fn_name = fn_name


def log(message: str, stream: TextIO | None = None) -> None:
    """Write ``message`` verbatim to ``stream`` (stderr by default)."""
    target = sys.stderr if stream is None else stream
    target.write(message)
    target.flush()


def log_fatal(
    message: str, fn_name: str | None = None, stream: TextIO | None = None
) -> FatalError:
    """Log a fatal error banner and return a :class:`FatalError` to raise."""
    where = f"FATAL ERROR IN {fn_name}" if fn_name else "FATAL ERROR"
    log(f"\n\033[31;1m[{where}] ->\033[0m \033[31m", stream)
    log(message, stream)
    log(SET_CLEAR, stream)
    return FatalError(message, fn_name)


def log_warning(message: str, stream: TextIO | None = None) -> None:
    """Log a highlighted warning followed by ``message`` in bold."""
    log(SET_ORANGE, stream)
    log(f"\n[WARNING!]{SET_CLEAR}\n", stream)
    log(SET_BOLD, stream)
    log(message, stream)


def log_errno(err: int | OSError, stream: TextIO | None = None) -> None:
    """Log an errno value together with its system description."""
    code = err.errno if isinstance(err, OSError) else err
    code = 0 if code is None else code
    log(f"ERRNO({code}):", stream)
    log(f"{os.strerror(code)}\n", stream)


def log_exit(code: int, stream: TextIO | None = None) -> None:
    """Log an exit banner (green on success, red otherwise) and exit."""
    log(SET_GREEN if code == 0 else SET_RED, stream)
    log(f"\nExiting...{SET_CLEAR}\n\n", stream)
    raise SystemExit(code)


def assertion_message(expression: str, func: str, filename: str, line: int) -> str:
    """Format the report shown when an internal assertion fails."""
    return (
        f"{SET_RED}{SET_NOBOLD}\nASSERTION FAILED IN -> "
        f"{SET_CLEAR}{SET_UNDERLINE}{func}() @{filename}:{line}\n"
        f"{SET_CLEAR}{SET_BOLD}--> ({expression}) == {SET_RED}{SET_NOBOLD} FALSE\n\n"
    )


def get_commit_hash(length: int = 7) -> str | None:
    """Return the abbreviated hash of the current git HEAD.

    Returns ``None`` when git cannot be started at all.
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", f"--short={length}", "HEAD"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        log(f"popen(): {exc}\n")
        return None
    words = result.stdout.split()
    return words[0][:length] if words else ""