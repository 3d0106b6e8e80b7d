"""Config commands -- view and reset the global configuration.

Provides the ``miniserver config`` sub-command group. Settings are stored
in the miniserver config directory and control logging, output format,
plugin selection, and the seed context.
"""

from __future__ import annotations

import typer

from miniserver.exceptions import MiniServerError
from miniserver.output import error, format_response, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration (all precedence layers applied).

    Example::

        miniserver config show
        miniserver --json config show
    """
    from miniserver.config import global_config_path, resolve_config

    try:
        config = resolve_config()
    except MiniServerError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    info(f"Config file: {global_config_path()}")
    format_response(config.model_dump(mode="json"))


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset the global configuration file to defaults.

    Example::

        miniserver config reset --force
    """
    from miniserver.config import save_global_config
    from miniserver.models import GlobalConfig

    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    path = save_global_config(GlobalConfig())
    success(f"Configuration reset to defaults ({path}).")
