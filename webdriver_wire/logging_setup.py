"""
Logging setup using Rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import WireConfig


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging with Rich.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
            WireConfig.LOG_LEVEL (WEBDRIVER_LOG_LEVEL).
    """
    level = level or WireConfig.LOG_LEVEL
    console = Console(stderr=True)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                show_time=True,
                show_path=False,
                rich_tracebacks=True,
                markup=False,
            )
        ],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("selenium").setLevel(logging.WARNING)
