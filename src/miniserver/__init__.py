"""miniserver -- an application bootstrap core that composes plugins.

A :class:`Server` holds a shared context, a list of before/after hooks, and
an ordered list of plugins. ``await server.initialize()`` runs the hooks and
plugin setups once, strictly in registration order; that order is the only
way plugins express dependencies on each other.

Typical usage::

    from miniserver import Server, create_plugin
    from miniserver.plugins import greeter_plugin, logger_plugin

    server = Server().use(logger_plugin).use(greeter_plugin)
    await server.initialize()
    server.get("greet")("World")

Modules:
    core: Context store, hooks, plugin records, and the orchestrator.
    plugins: Sample plugins and entry-point discovery.
    app: Typer application and CLI entry point.
    models: Pydantic models for config and lifecycle values.
    config: XDG-aware configuration loading and precedence.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"

from miniserver.core import (  # noqa: E402
    Context,
    Plugin,
    Server,
    create_plugin,
    create_service_plugin,
)
from miniserver.models import LifecycleState  # noqa: E402

__all__ = [
    "__version__",
    "Context",
    "LifecycleState",
    "Plugin",
    "Server",
    "create_plugin",
    "create_service_plugin",
]
