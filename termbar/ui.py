"""
ui.py

Console messages and logging setup for the termbar CLI.
Built on Rich, it provides:
  - log_info (verbose only), log_warning, log_error, log_success.
  - A section context manager that prints a header and an elapsed-time footer.
  - configure_logging() to send library debug logs to a file.

The library itself never prints through this module; it only logs.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Optional

from rich.console import Console
from rich.theme import Theme

_THEME = Theme(
    {
        "ui.info": "cyan",
        "ui.success": "green bold",
        "ui.warn": "yellow bold",
        "ui.error": "red bold",
        "ui.header": "bold blue",
        "ui.dim": "dim",
        "ui.elapsed": "magenta",
    }
)

console = Console(theme=_THEME, highlight=False)

VERBOSE = False

LOG_FORMAT = "%(asctime)s - %(threadName)s - %(levelname)s - %(message)s"


def set_verbose(verbose: bool) -> None:
    """Set global verbosity. If False, log_info is suppressed."""
    global VERBOSE
    VERBOSE = bool(verbose)


def log_info(message: str) -> None:
    if VERBOSE:
        console.print(f"[ui.info]ℹ  {message}[/]")


def log_warning(message: str) -> None:
    console.print(f"[ui.warn]⚠️  {message}[/]")


def log_error(message: str) -> None:
    console.print(f"[ui.error]❌ {message}[/]")


def log_success(message: str) -> None:
    console.print(f"[ui.success]✅ {message}[/]")


@contextmanager
def section(title: str):
    start = time.time()
    console.rule(f"[ui.header]{title} - START[/]")
    try:
        yield
    finally:
        elapsed = time.time() - start
        console.rule(
            f"[ui.header]{title} - END [ui.dim](Elapsed: [ui.elapsed]{elapsed:.2f}s[/ui.elapsed])[/]"
        )


def configure_logging(log_file: Optional[str] = None, debug: bool = False) -> logging.Logger:
    """Attach a file handler to the `termbar` logger (no-op without a file)."""
    logger = logging.getLogger("termbar")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if log_file:
        # one log file per run; drop the handler of a previous run
        for h in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            logger.removeHandler(h)
            h.close()
        fh = logging.FileHandler(log_file, mode="w")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)
    return logger
