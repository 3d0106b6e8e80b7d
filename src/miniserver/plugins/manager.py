"""Plugin manager -- entry-point discovery and ordered installation.

Third-party packages contribute plugins by declaring an entry point in the
``miniserver.plugins`` group whose target is either a
:class:`~miniserver.core.plugin.Plugin` record or a zero-argument callable
returning one::

    [project.entry-points."miniserver.plugins"]
    metrics = "my_package.metrics:metrics_plugin"

Discovery never reorders anything beyond the order entry points are
reported in, and never resolves dependencies: a discovered plugin that
needs ``logger`` still relies on the built-ins being installed first.
"""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Iterable
from typing import Any

from miniserver.core.plugin import Plugin
from miniserver.core.server import Server
from miniserver.exceptions import PluginError
from miniserver.models import GlobalConfig
from miniserver.plugins.diagnostics import diagnostics_plugin
from miniserver.plugins.greeter import greeter_plugin
from miniserver.plugins.logger import logger_plugin

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "miniserver.plugins"
"""The entry-point group name used for plugin discovery."""

BUILTIN_PLUGINS: tuple[Plugin, ...] = (logger_plugin, greeter_plugin, diagnostics_plugin)
"""Sample plugins, in dependency order."""


class PluginManager:
    """Collects the plugins a server should run, in the order it should run them.

    The *enabled* and *disabled* lists in
    :class:`~miniserver.models.PluginsConfig` act as an allowlist/blocklist
    on entry-point names. When *enabled* is non-empty only those plugins are
    loaded; otherwise every discovered plugin not in *disabled* is loaded.
    Built-in plugins are filtered by *disabled* only.

    Example:
        Typical usage::

            manager = PluginManager()
            plugins = manager.collect(config)
            manager.install(server, plugins)
    """

    def __init__(self, group: str = ENTRY_POINT_GROUP) -> None:
        self._group = group

    def discover(self, config: GlobalConfig) -> list[Plugin]:
        """Load plugins registered under the entry-point group.

        Entry points that fail to import, or that do not resolve to a
        :class:`Plugin`, are logged as warnings and skipped.

        Args:
            config: Configuration whose ``plugins.enabled`` and
                ``plugins.disabled`` lists control which plugins are loaded.

        Returns:
            The loaded plugins in entry-point order.
        """
        plugins: list[Plugin] = []
        enabled_set = set(config.plugins.enabled)
        disabled_set = set(config.plugins.disabled)

        for ep in importlib.metadata.entry_points().select(group=self._group):
            name = ep.name

            if enabled_set and name not in enabled_set:
                logger.debug("Plugin '%s' not in enabled list, skipping", name)
                continue
            if name in disabled_set:
                logger.debug("Plugin '%s' is disabled, skipping", name)
                continue

            try:
                plugins.append(_as_plugin(name, ep.load()))
            except Exception as exc:
                logger.warning("Failed to load plugin '%s': %s", name, exc)
                continue
            logger.info("Discovered plugin '%s' from %s", name, ep.value)

        return plugins

    def collect(self, config: GlobalConfig) -> list[Plugin]:
        """Return built-ins (when enabled) followed by discovered plugins."""
        disabled_set = set(config.plugins.disabled)
        plugins: list[Plugin] = []
        if config.plugins.builtins:
            plugins.extend(p for p in BUILTIN_PLUGINS if p.name not in disabled_set)
        plugins.extend(self.discover(config))
        return plugins

    def install(self, server: Server, plugins: Iterable[Plugin]) -> Server:
        """Register *plugins* on *server* in the given order."""
        for plugin in plugins:
            server.use(plugin)
        return server


def _as_plugin(name: str, target: Any) -> Plugin:
    if isinstance(target, Plugin):
        return target
    if callable(target):
        produced = target()
        if isinstance(produced, Plugin):
            return produced
        raise PluginError(
            f"Entry point '{name}' returned {type(produced).__name__}, expected a Plugin"
        )
    raise PluginError(f"Entry point '{name}' is not a Plugin or a plugin factory")
