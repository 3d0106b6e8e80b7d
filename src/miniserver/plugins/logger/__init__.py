"""Logger plugin -- publishes the application logger under ``logger``."""

from miniserver.plugins.logger.plugin import APP_LOGGER_NAME, logger_plugin

__all__ = ["APP_LOGGER_NAME", "logger_plugin"]
