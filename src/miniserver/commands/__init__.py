"""Built-in CLI commands (``run``, ``plugins``, ``config``)."""
