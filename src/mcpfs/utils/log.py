"""Diagnostic logging — always to stderr, never to the protocol stream."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

stderr_console = Console(stderr=True)


def configure_logging(level: str = "INFO") -> None:
    """Route the ``mcpfs`` logger tree to a rich handler on stderr."""
    handler = RichHandler(console=stderr_console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("mcpfs")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
