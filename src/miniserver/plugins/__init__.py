"""Sample plugins and entry-point discovery.

The three sample plugins only use the public server API (``get``, ``set``,
``has``) and show the intended patterns:

* :data:`logger_plugin` -- publishes a service via
  :func:`~miniserver.core.plugin.create_service_plugin`.
* :data:`greeter_plugin` -- consumes ``logger`` and fails setup without it.
* :data:`diagnostics_plugin` -- publishes a stateful service.

:class:`PluginManager` adds third-party plugins declared under the
``miniserver.plugins`` entry-point group.
"""

from miniserver.plugins.diagnostics import Diagnostics, diagnostics_plugin
from miniserver.plugins.greeter import greeter_plugin
from miniserver.plugins.logger import logger_plugin
from miniserver.plugins.manager import BUILTIN_PLUGINS, ENTRY_POINT_GROUP, PluginManager

__all__ = [
    "BUILTIN_PLUGINS",
    "Diagnostics",
    "ENTRY_POINT_GROUP",
    "PluginManager",
    "diagnostics_plugin",
    "greeter_plugin",
    "logger_plugin",
]
