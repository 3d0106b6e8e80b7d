"""Diagnostics plugin -- a stateful service with several operations.

The plugin publishes a :class:`Diagnostics` instance under the
``diagnostics`` context key and records its own initialization as the first
entry. The ``logger`` service is optional: without it :meth:`Diagnostics.report`
still returns the summary, it just logs nothing.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from miniserver.core.plugin import create_plugin
from miniserver.core.server import Server
from miniserver.models import DiagnosticEntry, DiagnosticStatus


class Diagnostics:
    """In-memory collector of per-component health records.

    Args:
        logger: Logger used by :meth:`report`. ``None`` disables logging.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger
        self._entries: list[DiagnosticEntry] = []

    @property
    def entries(self) -> list[DiagnosticEntry]:
        return list(self._entries)

    def record(
        self,
        plugin_name: str,
        status: Union[str, DiagnosticStatus],
        message: Optional[str] = None,
    ) -> DiagnosticEntry:
        """Append a health record.

        Args:
            plugin_name: Component the record is about.
            status: ``"ok"`` or ``"error"``.
            message: Optional free-text detail.

        Raises:
            ValueError: If *status* is not a known status.
        """
        entry = DiagnosticEntry(
            plugin_name=plugin_name,
            status=DiagnosticStatus(status),
            message=message,
        )
        self._entries.append(entry)
        return entry

    def summary(self) -> dict[str, Any]:
        """Return ``total``, ``errors`` and ``health`` (percent of ok records)."""
        total = len(self._entries)
        errors = sum(1 for e in self._entries if e.status is DiagnosticStatus.ERROR)
        health = 0.0 if total == 0 else (total - errors) / total * 100
        return {"total": total, "errors": errors, "health": round(health, 1)}

    def report(self) -> dict[str, Any]:
        """Log the summary and every record, then return the summary."""
        summary = self.summary()
        if self._logger is not None:
            self._logger.info("Diagnostics report:")
            self._logger.info("  Total checks: %d", summary["total"])
            self._logger.info("  Errors: %d", summary["errors"])
            self._logger.info("  Health: %.1f%%", summary["health"])
            for entry in self._entries:
                detail = f" - {entry.message}" if entry.message else ""
                self._logger.info(
                    "  [%s] %s%s", entry.status.value, entry.plugin_name, detail
                )
        return summary


def _setup(server: Server) -> None:
    logger = server.get("logger")
    diagnostics = Diagnostics(logger)
    server.set("diagnostics", diagnostics)
    diagnostics.record("diagnostics", DiagnosticStatus.OK, "Diagnostics system ready")
    if logger is not None:
        logger.info("Diagnostics plugin initialized, ready to collect health data")


diagnostics_plugin = create_plugin("diagnostics", _setup)
