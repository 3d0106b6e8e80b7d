"""The lifecycle orchestrator.

:class:`Server` owns the shared :class:`~miniserver.core.context.Context`,
the :class:`~miniserver.core.hooks.HookRegistry`, and the ordered plugin
registry, and drives the single :meth:`Server.initialize` pass:

1. before-init hooks, in registration order
2. each plugin's setup, in registration order
3. after-init hooks, in registration order

Every step is awaited before the next one starts, so a plugin that needs a
service must simply be registered after the plugin that publishes it. The
first failure aborts the pass and leaves the server uninitialized; steps
that already ran keep their side effects.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any, Optional

from miniserver.core.context import Context
from miniserver.core.hooks import Hook, HookRegistry, maybe_await
from miniserver.core.plugin import Plugin
from miniserver.exceptions import (
    AlreadyInitializedError,
    PluginSetupError,
    RegistrationClosedError,
)
from miniserver.models import LifecycleState

logger = logging.getLogger(__name__)


class Server:
    """Compose plugins into one process through a shared context.

    Registration methods are synchronous and chainable::

        server = (
            Server({"env": "dev"})
            .use(logger_plugin)
            .use(greeter_plugin)
            .on_after_init(announce_ready)
        )
        await server.initialize()

    The plugin registry is sealed as soon as :meth:`initialize` starts and
    stays sealed once it succeeds. A failed :meth:`initialize` reopens it.

    Args:
        initial_context: Optional mapping copied shallowly into the context.
    """

    def __init__(self, initial_context: Optional[Mapping[str, Any]] = None) -> None:
        self._context = Context(initial_context)
        self._hooks = HookRegistry()
        self._plugins: list[Plugin] = []
        self._state = LifecycleState.UNINITIALIZED
        self._initializing = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def use(self, plugin: Plugin) -> Server:
        """Append *plugin* to the registry.

        Raises:
            RegistrationClosedError: If the server is initialized or
                currently initializing.
            TypeError: If *plugin* is not a :class:`Plugin`.
        """
        if self._state is LifecycleState.INITIALIZED:
            raise RegistrationClosedError("Cannot add plugins after initialization")
        if self._initializing:
            raise RegistrationClosedError("Cannot add plugins during initialization")
        if not isinstance(plugin, Plugin):
            raise TypeError(f"Expected a Plugin, got {type(plugin).__name__}")
        self._plugins.append(plugin)
        return self

    def on_before_init(self, hook: Hook) -> Server:
        """Register a hook that runs before any plugin setup."""
        self._hooks.add_before(hook)
        return self

    def on_after_init(self, hook: Hook) -> Server:
        """Register a hook that runs after every plugin setup has completed."""
        self._hooks.add_after(hook)
        return self

    # ------------------------------------------------------------------
    # Context access
    # ------------------------------------------------------------------

    @property
    def context(self) -> Context:
        return self._context

    def set(self, key: str, value: Any) -> None:
        self._context.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        return self._context.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._context

    def require(self, key: str, plugin_name: Optional[str] = None) -> Any:
        """Shortcut for :meth:`Context.require <miniserver.core.context.Context.require>`."""
        return self._context.require(key, plugin_name)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Run before-hooks, plugin setups, then after-hooks, strictly in order.

        Raises:
            AlreadyInitializedError: If the server is already initialized or
                another ``initialize()`` call is in progress. Nothing runs.
            PluginSetupError: If a plugin's setup raised. The original
                exception is chained; later plugins and after-hooks do not run.
            Exception: Whatever a failing hook raised, unwrapped.
        """
        if self._state is LifecycleState.INITIALIZED:
            raise AlreadyInitializedError("Server already initialized")
        if self._initializing:
            raise AlreadyInitializedError("Server initialization already in progress")

        self._initializing = True
        self._hooks.close_before()
        logger.info(
            "Starting server initialization with %d plugin(s)", len(self._plugins)
        )
        started = time.perf_counter()
        try:
            await self._hooks.run_before()
            for plugin in tuple(self._plugins):
                await self._setup_plugin(plugin)
            await self._hooks.run_after()
        except BaseException:
            self._hooks.reopen()
            raise
        finally:
            self._initializing = False

        self._state = LifecycleState.INITIALIZED
        self._hooks.close()
        logger.info(
            "Server initialization complete in %.1f ms",
            (time.perf_counter() - started) * 1000,
        )

    async def _setup_plugin(self, plugin: Plugin) -> None:
        logger.debug("Setting up plugin: %s", plugin.name)
        started = time.perf_counter()
        try:
            await maybe_await(plugin.setup(self))
        except Exception as exc:
            logger.error("Plugin '%s' failed during setup: %s", plugin.name, exc)
            raise PluginSetupError(plugin.name, exc) from exc
        logger.debug(
            "Plugin %s setup complete (%.1f ms)",
            plugin.name,
            (time.perf_counter() - started) * 1000,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_plugin_names(self) -> list[str]:
        """Return registered plugin names in registration order."""
        return [plugin.name for plugin in self._plugins]

    @property
    def is_initialized(self) -> bool:
        return self._state is LifecycleState.INITIALIZED

    @property
    def state(self) -> LifecycleState:
        return self._state

    def __repr__(self) -> str:
        return (
            f"Server(state={self._state.value!r}, "
            f"plugins={self.get_plugin_names()!r})"
        )
