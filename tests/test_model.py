"""
Tests for the binding model objects.

These tests verify:
    - BindingRecord defaults and state properties
    - Scope chaining through create_child
    - Local vs chained resolution
    - Weak parent links
"""

import copy
import pickle

import pytest
from blockscope.model import (
    UNDEFINED,
    BindingKind,
    BindingRecord,
    BindingState,
    Scope,
)


class TestUndefined:
    """Test the UNDEFINED sentinel."""

    def test_is_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == "undefined"

    def test_is_singleton(self):
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED
        assert type(UNDEFINED)() is UNDEFINED

    def test_distinct_from_none(self):
        assert UNDEFINED is not None


class TestBindingRecord:
    """Test BindingRecord objects."""

    def test_new_record_is_in_dead_zone(self):
        """A record starts uninitialized with no value."""
        record = BindingRecord(identifier="x", kind=BindingKind.MUTABLE)
        assert record.state is BindingState.UNINITIALIZED
        assert record.value is UNDEFINED
        assert record.in_dead_zone
        assert not record.initialized

    def test_initialized_record(self):
        record = BindingRecord(
            identifier="PI",
            kind=BindingKind.FROZEN,
            state=BindingState.INITIALIZED,
            value=3.14,
        )
        assert record.initialized
        assert not record.in_dead_zone
        assert record.value == 3.14


class TestScope:
    """Test Scope objects."""

    def test_root_scope(self):
        scope = Scope(name="program")
        assert scope.parent is None
        assert scope.depth == 0
        assert len(scope) == 0
        assert list(scope.ancestors()) == []

    def test_create_child(self):
        """A child points at the scope that created it."""
        root = Scope(name="program")
        child = root.create_child(name="block")
        assert child.parent is root
        assert child.name == "block"
        assert child.depth == 1

    def test_nested_depth_and_ancestors(self):
        root = Scope(name="a")
        mid = root.create_child(name="b")
        leaf = mid.create_child(name="c")
        assert leaf.depth == 2
        assert list(leaf.ancestors()) == [mid, root]

    def test_resolve_local_not_found(self):
        """Missing identifiers resolve to None, not an error."""
        scope = Scope()
        assert scope.resolve_local("missing") is None

    def test_resolve_local_ignores_parent(self):
        root = Scope()
        root.bindings["x"] = BindingRecord(identifier="x", kind=BindingKind.MUTABLE)
        child = root.create_child()
        assert child.resolve_local("x") is None
        assert "x" not in child

    def test_resolve_walks_parents(self):
        root = Scope()
        record = BindingRecord(identifier="x", kind=BindingKind.MUTABLE)
        root.bindings["x"] = record
        mid = root.create_child()
        leaf = mid.create_child()
        assert leaf.resolve("x") is record

    def test_resolve_finds_nearest(self):
        root = Scope()
        outer = BindingRecord(identifier="x", kind=BindingKind.MUTABLE)
        inner = BindingRecord(identifier="x", kind=BindingKind.FROZEN)
        root.bindings["x"] = outer
        child = root.create_child()
        child.bindings["x"] = inner
        assert child.resolve("x") is inner
        assert root.resolve("x") is outer

    def test_resolve_missing_everywhere(self):
        root = Scope()
        child = root.create_child()
        assert child.resolve("nope") is None

    def test_iteration_preserves_declaration_order(self):
        scope = Scope()
        for name in ["b", "a", "c"]:
            scope.bindings[name] = BindingRecord(identifier=name, kind=BindingKind.MUTABLE)
        assert list(scope) == ["b", "a", "c"]
        assert scope.declares("a")
        assert "c" in scope

    def test_parent_is_weak(self):
        """A child does not keep its parent alive."""
        root = Scope(name="program")
        child = root.create_child()
        del root
        assert child.parent is None
        assert child.depth == 0

    def test_repr_mentions_name(self):
        scope = Scope(name="program")
        assert "program" in repr(scope)
        assert "<anonymous>" in repr(Scope())
