# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from calgrid.configuration import APP_NAME

_handler: Optional[RichHandler] = None


def configure_logging(level: str | int = logging.WARNING) -> None:
    """
    Send calgrid log records to stderr through rich.

    Safe to call more than once; later calls only change the level.

    Args:
        level: A logging level number or name such as "DEBUG"
    """
    global _handler

    logger = logging.getLogger(APP_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(_handler)
        logger.propagate = False
