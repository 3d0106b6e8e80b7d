"""Logger plugin -- a service plugin other plugins depend on.

The published service is a plain :class:`logging.Logger`, so consumers get
``info``/``warning``/``error``/``debug`` and handler configuration stays
with whoever set up logging for the process (the CLI does this in
:func:`~miniserver.logging_config.setup_logging`).
"""

from __future__ import annotations

import logging

from miniserver.core.plugin import create_service_plugin
from miniserver.core.server import Server

APP_LOGGER_NAME = "miniserver.app"
"""Name of the logger published under the ``logger`` context key."""


def _make_logger(server: Server) -> logging.Logger:
    return logging.getLogger(APP_LOGGER_NAME)


logger_plugin = create_service_plugin("logger", "logger", _make_logger)
