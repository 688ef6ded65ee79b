"""Rich consoles and logging setup for the CLI layer.

Lookup results go to stdout through :data:`output`; errors, usage text
and log records go to stderr through :data:`console`.  Both consoles
resolve ``sys.stdout``/``sys.stderr`` at write time, so pytest's
``capsys`` sees their output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)
output = Console()


def configure_logging(level: str = "WARNING") -> None:
    """Route the standard ``logging`` tree through a Rich handler on stderr."""
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
