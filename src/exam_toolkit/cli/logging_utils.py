"""
Logging setup for the terminal front end.

Log records go to stderr through rich so they never interleave with the
progress lines printed on stdout.
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> RichHandler:
    """
    Configure the root logger for a CLI run.

    Args:
        verbose: Log DEBUG and above instead of WARNING and above.
        console: Console to render into (default: a stderr console).

    Returns:
        The attached handler (for later removal).
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        show_time=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
