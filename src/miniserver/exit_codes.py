"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~miniserver.exceptions.MiniServerError` subclass.
Shell wrappers and supervisors can inspect the exit code to tell a bad
config apart from a plugin that failed during startup.

Example::

    $ miniserver run
    $ echo $?
    10   # EXIT_PLUGIN_ERROR -- a plugin's setup raised
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_PLUGIN_ERROR = 10
"""A plugin failed to load or failed during setup."""

EXIT_LIFECYCLE_ERROR = 11
"""The server lifecycle was misused (double initialization, late registration)."""
