"""Run command -- build a server from config and initialize it once.

``miniserver run`` wires the configured plugins into a
:class:`~miniserver.core.server.Server`, registers a before-init hook that
announces startup and an after-init hook that exercises the published
services (``greet``, ``diagnostics``), then runs
:meth:`~miniserver.core.server.Server.initialize` to completion.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional

import typer

from miniserver.config import resolve_config
from miniserver.core.server import Server
from miniserver.exceptions import (
    DependencyMissingError,
    InvalidUsageError,
    MiniServerError,
    PluginSetupError,
)
from miniserver.logging_config import setup_logging
from miniserver.models import GlobalConfig
from miniserver.output import debug, error, format_response, print_data, success, suggest
from miniserver.plugins.manager import PluginManager


def parse_assignments(pairs: list[str]) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` pairs into a dict.

    Values are decoded as JSON when possible (``port=8080`` gives an int,
    ``debug=true`` a bool) and kept as strings otherwise.

    Raises:
        InvalidUsageError: If a pair has no ``=`` or an empty key.
    """
    result: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise InvalidUsageError(f"Expected KEY=VALUE, got: {pair!r}")
        try:
            result[key] = json.loads(raw)
        except json.JSONDecodeError:
            result[key] = raw
    return result


def build_server(config: GlobalConfig, manager: Optional[PluginManager] = None) -> Server:
    """Create a server seeded with ``config.context`` and its plugins registered."""
    manager = manager or PluginManager()
    server = Server(config.context)
    return manager.install(server, manager.collect(config))


def run_command(
    ctx: typer.Context,
    greet: list[str] = typer.Option(
        [], "--greet", "-g", help="Name to greet once initialized (repeatable)."
    ),
    assignments: list[str] = typer.Option(
        [], "--set", "-s", help="Seed a context value as KEY=VALUE (repeatable)."
    ),
    report: bool = typer.Option(
        True, "--report/--no-report", help="Log a diagnostics report after startup."
    ),
) -> None:
    """Initialize the server with all configured plugins.

    Example::

        miniserver run --greet World
        miniserver run --set env=staging --no-report
    """
    obj = ctx.obj or {}
    greetings: list[str] = []

    try:
        config = resolve_config(
            cli_log_level=obj.get("log_level"),
            cli_context=parse_assignments(assignments),
        )
        setup_logging(config.logging, no_color=obj.get("no_color", False))
        server = build_server(config)
    except MiniServerError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    def _before() -> None:
        debug(f"Beginning initialization of {len(server.get_plugin_names())} plugin(s)")

    async def _after() -> None:
        greeter = server.get("greet")
        if greet and greeter is None:
            raise DependencyMissingError(
                "greet", message="Cannot greet: no plugin published 'greet'"
            )
        for name in greet:
            greetings.append(greeter(name))

        diagnostics = server.get("diagnostics")
        if diagnostics is not None:
            diagnostics.record("system", "ok", "Server started successfully")
            if report:
                diagnostics.report()

    server.on_before_init(_before).on_after_init(_after)

    try:
        asyncio.run(server.initialize())
    except PluginSetupError as exc:
        error(str(exc))
        if isinstance(exc.cause, DependencyMissingError):
            suggest("Register the plugin that provides the missing service earlier.")
        raise typer.Exit(code=exc.exit_code) from None
    except MiniServerError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    for message in greetings:
        print_data(message)
    success(f"Server initialized with plugins: {', '.join(server.get_plugin_names())}")
    if obj.get("verbose"):
        format_response(sorted(server.context))
