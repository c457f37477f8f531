# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for InitializerRegistry ordering and snapshots."""

import pytest

from robject.core import InitializerRegistry, default_registry
from robject.core.initializers import (
    extends_initializer,
    init_core,
    mixins_initializer,
)


def _noop(rtype, definition):
    pass


def _other(rtype, definition):
    pass


class TestRegister:
    """Registration preserves insertion order."""

    def test_empty(self):
        """Test a new registry has no names."""
        reg = InitializerRegistry()
        assert reg.names() == ()
        assert len(reg) == 0

    def test_insertion_order(self):
        """Test names come back in registration order."""
        reg = InitializerRegistry()
        reg.register("b", _noop)
        reg.register("a", _noop)
        reg.register("c", _noop)
        assert reg.names() == ("b", "a", "c")

    def test_replace_keeps_position(self):
        """Test re-registering a name swaps the function in place."""
        reg = InitializerRegistry()
        reg.register("first", _noop)
        reg.register("second", _noop)
        reg.register("first", _other)
        assert reg.names() == ("first", "second")
        assert reg.get("first") is _other

    def test_rejects_non_callable(self):
        """Test a non-callable initializer is refused."""
        reg = InitializerRegistry()
        with pytest.raises(TypeError):
            reg.register("bad", 42)
        assert "bad" not in reg

    def test_get_missing(self):
        """Test get() returns None for an unknown name."""
        assert InitializerRegistry().get("nope") is None


class TestSnapshot:
    """Snapshots are isolated from later registrations."""

    def test_snapshot_pairs(self):
        """Test a snapshot holds (name, fn) pairs."""
        reg = InitializerRegistry()
        reg.register("x", _noop)
        assert reg.snapshot() == (("x", _noop),)

    def test_snapshot_unaffected_by_later_register(self):
        """Test a snapshot does not see registrations made after it."""
        reg = InitializerRegistry()
        reg.register("x", _noop)
        snap = reg.snapshot()
        reg.register("y", _other)
        assert snap == (("x", _noop),)
        assert reg.names() == ("x", "y")


class TestInitCore:
    """Core initializers are registered extends-first."""

    def test_order(self, registry):
        """Test extends is registered before mixins."""
        assert registry.names() == ("extends", "mixins")
        assert registry.get("extends") is extends_initializer
        assert registry.get("mixins") is mixins_initializer

    def test_idempotent(self, registry):
        """Test calling init_core twice keeps a single ordered pair."""
        init_core(registry)
        assert registry.names() == ("extends", "mixins")

    def test_default_registry_populated(self):
        """Test importing the package populates the default registry."""
        import robject  # noqa: F401

        names = default_registry.names()
        assert names[:2] == ("extends", "mixins")
