"""Greeter plugin -- consumes ``logger`` and publishes ``greet``."""

from miniserver.plugins.greeter.plugin import greeter_plugin

__all__ = ["greeter_plugin"]
