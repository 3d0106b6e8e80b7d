"""Lifecycle core -- context store, hooks, plugin records, and the orchestrator.

Key classes:

* :class:`Server` -- Owns the registries and drives ``initialize()``.
* :class:`Context` -- The shared key/value store plugins publish into.
* :class:`HookRegistry` -- Ordered before-init/after-init callbacks.
* :class:`Plugin` -- A named setup callback, built with
  :func:`create_plugin` or :func:`create_service_plugin`.
"""

from miniserver.core.context import Context
from miniserver.core.hooks import Hook, HookRegistry
from miniserver.core.plugin import (
    Plugin,
    PluginSetup,
    create_plugin,
    create_service_plugin,
)
from miniserver.core.server import Server

__all__ = [
    "Context",
    "Hook",
    "HookRegistry",
    "Plugin",
    "PluginSetup",
    "Server",
    "create_plugin",
    "create_service_plugin",
]
