"""Before/after initialization hooks.

:class:`HookRegistry` keeps two ordered, append-only lists of zero-argument
callbacks. Each callback may be a plain function or return an awaitable
(e.g. a coroutine function); the runner awaits it before moving on to the
next one. There is no error isolation: the first failing hook aborts the
run and its exception propagates unchanged.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable
from typing import Any, Callable, Union

from miniserver.exceptions import RegistrationClosedError

logger = logging.getLogger(__name__)

Hook = Callable[[], Union[None, Awaitable[None]]]
"""A zero-argument lifecycle callback, sync or async."""


async def maybe_await(result: Any) -> Any:
    """Await *result* if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(result):
        return await result
    return result


class HookRegistry:
    """Ordered before-init and after-init hook lists.

    The before list closes as soon as the before phase starts, since a hook
    added later could never run. The after list stays open until
    :meth:`close` so that plugin setups can still schedule after-hooks;
    hooks appended while :meth:`run_after` is iterating are run in the
    same pass.
    """

    def __init__(self) -> None:
        self._before: list[Hook] = []
        self._after: list[Hook] = []
        self._before_closed = False
        self._closed = False
        self._after_mark = 0

    @property
    def before(self) -> list[Hook]:
        return list(self._before)

    @property
    def after(self) -> list[Hook]:
        return list(self._after)

    def add_before(self, hook: Hook) -> None:
        _check_callable(hook)
        if self._closed:
            raise RegistrationClosedError("Cannot add hooks after initialization")
        if self._before_closed:
            raise RegistrationClosedError(
                "Cannot add before-init hooks once initialization has started"
            )
        self._before.append(hook)

    def add_after(self, hook: Hook) -> None:
        _check_callable(hook)
        if self._closed:
            raise RegistrationClosedError("Cannot add hooks after initialization")
        self._after.append(hook)

    def close_before(self) -> None:
        self._before_closed = True
        self._after_mark = len(self._after)

    def reopen(self) -> None:
        """Undo :meth:`close_before` after a failed initialization.

        After-hooks added since :meth:`close_before` are dropped, so a retry
        that registers them again runs each one once.
        """
        if not self._closed:
            self._before_closed = False
            del self._after[self._after_mark :]

    def close(self) -> None:
        self._before_closed = True
        self._closed = True

    async def run_before(self) -> None:
        logger.debug("Running %d before-init hook(s)", len(self._before))
        for hook in self._before:
            await maybe_await(hook())

    async def run_after(self) -> None:
        logger.debug("Running %d after-init hook(s)", len(self._after))
        # Index loop: the list may grow while it is being run.
        i = 0
        while i < len(self._after):
            await maybe_await(self._after[i]())
            i += 1

    def __len__(self) -> int:
        return len(self._before) + len(self._after)


def _check_callable(hook: Any) -> None:
    if not callable(hook):
        raise TypeError(f"Hook must be callable, got {type(hook).__name__}")
