"""Logging setup for the CLI and the MCP server.

Records go to stderr through ``rich``; stdout carries the MCP stdio stream
and command output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "global_rules"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    handlers = [item for item in root.handlers if isinstance(item, RichHandler)]
    if not handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        handlers = [handler]

    for handler in handlers:
        handler.setLevel(level)
    return root
