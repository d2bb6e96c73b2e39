"""Logging setup for row-spreader."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: Union[int, str] = logging.WARNING, stderr: bool = True) -> None:
    """Route log records through a rich handler.

    Args:
        level: Log level, as a number or a name such as ``"INFO"``
        stderr: Write to stderr so converted rows on stdout stay clean
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    console = Console(stderr=stderr)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )

