"""Tests for the shared context store."""

from __future__ import annotations

import pytest

from miniserver.core.context import Context
from miniserver.exceptions import DependencyMissingError, PluginError


class TestContext:
    def test_empty_by_default(self) -> None:
        ctx = Context()
        assert len(ctx) == 0
        assert list(ctx) == []

    def test_last_write_wins(self) -> None:
        ctx = Context()
        ctx.set("k", 1)
        ctx.set("k", 2)
        assert ctx.get("k") == 2
        assert len(ctx) == 1

    def test_get_missing_never_raises(self) -> None:
        ctx = Context()
        assert ctx.get("nope") is None
        assert ctx.get("nope", "fallback") == "fallback"

    @pytest.mark.parametrize("value", [None, 0, "", False, [], {}])
    def test_falsy_values_are_present(self, value: object) -> None:
        ctx = Context()
        ctx.set("k", value)
        assert "k" in ctx
        assert ctx.require("k") == value

    def test_initial_mapping_copied_shallowly(self) -> None:
        shared = {"items": []}
        seed = {"cfg": shared}
        ctx = Context(seed)
        seed["other"] = 1
        assert "other" not in ctx
        assert ctx.get("cfg") is shared

    def test_require_missing_raises(self) -> None:
        ctx = Context()
        with pytest.raises(DependencyMissingError) as exc_info:
            ctx.require("logger", plugin_name="greeter")
        err = exc_info.value
        assert err.key == "logger"
        assert err.plugin_name == "greeter"
        assert "greeter" in str(err) and "logger" in str(err)
        assert isinstance(err, PluginError)

    def test_require_missing_without_plugin_name(self) -> None:
        with pytest.raises(DependencyMissingError, match="'db' is not set"):
            Context().require("db")

    def test_snapshot_is_a_copy(self) -> None:
        ctx = Context({"a": 1})
        snap = ctx.snapshot()
        snap["b"] = 2
        assert "b" not in ctx
        assert snap == {"a": 1, "b": 2}

    def test_iteration_tolerates_writes(self) -> None:
        ctx = Context({"a": 1, "b": 2})
        for key in ctx:
            ctx.set(f"{key}-copy", True)
        assert len(ctx) == 4

    def test_repr_lists_keys(self) -> None:
        assert repr(Context({"b": 1, "a": 2})) == "Context(keys=['a', 'b'])"
