"""Plugin records and the factory helpers that build them.

A :class:`Plugin` is nothing more than a name and a setup callback. The
callback receives the :class:`~miniserver.core.server.Server` when the
server initializes and may read or write the shared context, register
after-init hooks, and return an awaitable for asynchronous work.

Example:
    A plugin that publishes a service and one that consumes it::

        clock = create_service_plugin("clock", "now", lambda server: time.time)

        def _setup_report(server):
            now = server.require("now", plugin_name="report")
            server.set("started_at", now())

        report = create_plugin("report", _setup_report)

        await Server().use(clock).use(report).initialize()

Registration order is the only dependency mechanism: ``clock`` must be
registered before ``report``.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

from miniserver.core.hooks import maybe_await

if TYPE_CHECKING:
    from miniserver.core.server import Server

PluginSetup = Callable[["Server"], Union[None, Awaitable[None]]]
"""Setup callback signature: receives the server, may return an awaitable."""

ServiceFactory = Callable[["Server"], Any]
"""Produces a service value (or an awaitable of one) from the server."""


@dataclass(frozen=True)
class Plugin:
    """A named unit of setup logic.

    Attributes:
        name: Non-empty plugin name, used in logs and setup errors.
        setup: Callback invoked once with the server during initialization.
    """

    name: str
    setup: PluginSetup

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Plugin name must be a non-empty string")
        if not callable(self.setup):
            raise TypeError(
                f"Plugin '{self.name}' setup must be callable, "
                f"got {type(self.setup).__name__}"
            )


def create_plugin(name: str, setup: PluginSetup) -> Plugin:
    """Build a :class:`Plugin` from *name* and *setup*.

    Nothing runs at construction time; *setup* is only invoked by
    :meth:`~miniserver.core.server.Server.initialize`.
    """
    return Plugin(name=name, setup=setup)


def create_service_plugin(
    name: str, service_key: str, factory: ServiceFactory
) -> Plugin:
    """Build a plugin that publishes a single service into the context.

    At initialization the generated setup calls ``factory(server)``, awaits
    the result if it is awaitable, and stores it under *service_key*.

    Args:
        name: Plugin name.
        service_key: Context key the service is published under.
        factory: Callable producing the service from the server.

    Returns:
        The plugin record.
    """

    async def _setup(server: Server) -> None:
        service = await maybe_await(factory(server))
        server.set(service_key, service)

    return create_plugin(name, _setup)
