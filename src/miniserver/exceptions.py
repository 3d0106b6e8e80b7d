"""Exception hierarchy for miniserver.

All exceptions inherit from :class:`MiniServerError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`miniserver.exit_codes`.
The CLI entry point in :func:`miniserver.app.main` catches
``MiniServerError`` and exits with the appropriate code.

Subclass hierarchy::

    MiniServerError (exit 1)
    +-- InvalidUsageError          (exit 2)
    +-- ConfigError                (exit 1)
    +-- LifecycleError             (exit 11)
    |   +-- AlreadyInitializedError
    |   +-- RegistrationClosedError
    +-- PluginError                (exit 10)
        +-- PluginSetupError
        +-- DependencyMissingError

Hook failures are never wrapped: whatever a hook raises reaches the caller
of :meth:`~miniserver.core.server.Server.initialize` as-is.
"""

from __future__ import annotations

from typing import Optional

from miniserver.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_LIFECYCLE_ERROR,
    EXIT_PLUGIN_ERROR,
)


class MiniServerError(Exception):
    """Base exception for all miniserver errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`miniserver.exit_codes`.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(MiniServerError):
    """Raised for invalid CLI arguments (e.g. a malformed ``--set`` pair)."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(MiniServerError):
    """Raised for configuration problems (invalid JSON, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE


class LifecycleError(MiniServerError):
    """Raised when the server lifecycle protocol is misused."""

    exit_code = EXIT_LIFECYCLE_ERROR


class AlreadyInitializedError(LifecycleError):
    """Raised by a second ``initialize()`` call, or one made while another is running."""


class RegistrationClosedError(LifecycleError):
    """Raised when a plugin or hook is registered after the registry was sealed."""


class PluginError(MiniServerError):
    """Raised when a plugin fails to load or fails during setup."""

    exit_code = EXIT_PLUGIN_ERROR


class PluginSetupError(PluginError):
    """A plugin's setup callback raised.

    The original exception is chained as ``__cause__`` and also kept on
    :attr:`cause` so callers can inspect it without walking the chain.

    Args:
        plugin_name: Name of the plugin whose setup failed.
        cause: The exception raised by the setup callback.
    """

    def __init__(self, plugin_name: str, cause: BaseException):
        super().__init__(f'Plugin "{plugin_name}" failed during setup: {cause}')
        self.plugin_name = plugin_name
        self.cause = cause


class DependencyMissingError(PluginError):
    """A required context key was absent when a plugin looked it up.

    Args:
        key: The context key that was required.
        plugin_name: The plugin that required it, if known.
        message: Optional message overriding the generated one.
    """

    def __init__(
        self,
        key: str,
        plugin_name: Optional[str] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            if plugin_name:
                message = f"Plugin '{plugin_name}' requires '{key}' in the context"
            else:
                message = f"Required context key '{key}' is not set"
        super().__init__(message)
        self.key = key
        self.plugin_name = plugin_name
