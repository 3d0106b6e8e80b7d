"""Root logger setup for the CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by the ``miniserver`` entry point.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from miniserver.models import LoggingConfig

_PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: LoggingConfig, no_color: bool = False) -> None:
    """Configure the root logger from *config*, writing to stderr."""
    level = getattr(logging, config.level, logging.INFO)

    handler: logging.Handler
    if config.format == "rich":
        handler = RichHandler(
            console=Console(stderr=True, no_color=no_color),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=_PLAIN_FORMAT, datefmt="%H:%M:%S"))
    handler.setLevel(level)

    logging.basicConfig(level=level, handlers=[handler], force=True)
