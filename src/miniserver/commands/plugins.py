"""Plugins command -- list what ``run`` would register, in order."""

from __future__ import annotations

import typer

from miniserver.exceptions import MiniServerError
from miniserver.output import error, print_table


def plugins_command() -> None:
    """List plugins in the order they would be initialized.

    Example::

        miniserver plugins
        miniserver --json plugins
    """
    from miniserver.commands.run import build_server
    from miniserver.config import resolve_config

    try:
        server = build_server(resolve_config())
    except MiniServerError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows = [[str(i), name] for i, name in enumerate(server.get_plugin_names(), start=1)]
    print_table(["order", "name"], rows, title="Plugins")
