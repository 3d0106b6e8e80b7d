"""Shared key/value context for plugins and hooks.

The :class:`Context` is the only shared mutable state in a server. Values
are untyped: a plugin that publishes a service and a plugin that consumes
it agree on the key and the shape between themselves. No locking is done
because the orchestrator never runs two steps at once.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from miniserver.exceptions import DependencyMissingError


class Context:
    """A flat mapping from string keys to arbitrary values.

    Writes always succeed and the last write wins. Lookups of unknown keys
    never raise from :meth:`get`; use ``key in context`` to tell an absent
    key apart from a stored ``None``/falsy value, or :meth:`require` to
    fail with :class:`~miniserver.exceptions.DependencyMissingError`.

    Args:
        initial: Optional mapping copied shallowly into the new context.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._values: dict[str, Any] = dict(initial) if initial else {}

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def require(self, key: str, plugin_name: Optional[str] = None) -> Any:
        """Return the value for *key*, raising if it has never been set.

        Args:
            key: Context key to look up.
            plugin_name: Name of the requiring plugin, used in the error.

        Raises:
            DependencyMissingError: If *key* is absent.
        """
        try:
            return self._values[key]
        except KeyError:
            raise DependencyMissingError(key, plugin_name) from None

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of the current values."""
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context(keys={sorted(self._values)!r})"
