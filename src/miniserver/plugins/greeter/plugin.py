"""Greeter plugin -- depends on the logger plugin being registered first.

Publishes ``greet(name) -> str`` under the ``greet`` context key. Each call
logs the greeting through the ``logger`` service and returns it.
"""

from __future__ import annotations

from miniserver.core.plugin import create_plugin
from miniserver.core.server import Server
from miniserver.exceptions import DependencyMissingError


def _setup(server: Server) -> None:
    if not server.has("logger"):
        raise DependencyMissingError(
            "logger",
            "greeter",
            "Greeter plugin requires logger plugin to be registered first!",
        )
    logger = server.get("logger")

    def greet(name: str) -> str:
        message = f"Hello, {name}!"
        logger.info(message)
        return message

    server.set("greet", greet)
    logger.info("Greeter plugin initialized, ready to greet users")


greeter_plugin = create_plugin("greeter", _setup)
