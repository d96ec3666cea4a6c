"""Shared logging setup for kg_dgi."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: int | str = logging.INFO, *, force: bool = False) -> None:
    """Initialise the root logger once with a rich handler.

    Log output goes to stderr so JSON printed by the CLI stays clean.
    Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=force,
    )
