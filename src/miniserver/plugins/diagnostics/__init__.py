"""Diagnostics plugin -- collects health records and reports on them."""

from miniserver.plugins.diagnostics.plugin import Diagnostics, diagnostics_plugin

__all__ = ["Diagnostics", "diagnostics_plugin"]
