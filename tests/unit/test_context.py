"""Unit tests for resolution contexts."""

import logging

import pytest

from quill.core.context import Context
from quill.core.names import ClassName

FOO = ClassName.from_parts("p", "Foo")
OTHER_FOO = ClassName.from_parts("q", "Foo")
BAR = ClassName.from_parts("p", "Bar")


class TestRootContext:
    """Tests for the empty root context."""

    def test_binds_nothing(self) -> None:
        root = Context.root()
        assert root.depth == 0
        assert root.parent is None
        assert dict(root.bindings()) == {}
        assert root.source_reference(FOO) == "p.Foo"

    def test_root_is_shared(self) -> None:
        assert Context.root() is Context.root()


class TestSubcontext:
    """Tests for deriving and resolving in child contexts."""

    def test_binds_new_names(self) -> None:
        child = Context.root().create_subcontext([FOO, BAR])
        assert child.depth == 1
        assert child.source_reference(FOO) == "Foo"
        assert child.source_reference(BAR) == "Bar"
        assert child.is_bound(FOO)

    def test_other_class_with_bound_simple_name_is_qualified(self) -> None:
        child = Context.root().create_subcontext([FOO])
        assert child.source_reference(OTHER_FOO) == "q.Foo"
        assert not child.is_bound(OTHER_FOO)

    def test_parent_is_not_modified(self) -> None:
        root = Context.root()
        child = root.create_subcontext([FOO])
        assert child.parent is root
        assert root.source_reference(FOO) == "p.Foo"
        assert dict(root.bindings()) == {}

    def test_bindings_are_read_only(self) -> None:
        child = Context.root().create_subcontext([FOO])
        with pytest.raises(TypeError):
            child.bindings()["Bar"] = BAR  # type: ignore[index]

    def test_bindings_visible_from_deeper_levels(self) -> None:
        grandchild = Context.root().create_subcontext([FOO]).create_subcontext([BAR])
        assert grandchild.depth == 2
        assert grandchild.source_reference(FOO) == "Foo"
        assert grandchild.source_reference(BAR) == "Bar"

    def test_ancestor_binding_wins_over_colliding_new_name(self) -> None:
        child = Context.root().create_subcontext([FOO])
        grandchild = child.create_subcontext([OTHER_FOO])
        assert "Foo" not in grandchild.bindings()
        assert grandchild.source_reference(FOO) == "Foo"
        assert grandchild.source_reference(OTHER_FOO) == "q.Foo"

    def test_rebinding_same_name_keeps_short_form(self) -> None:
        child = Context.root().create_subcontext([FOO])
        grandchild = child.create_subcontext([FOO])
        assert grandchild.source_reference(FOO) == "Foo"

    def test_same_step_collision_binds_neither(self) -> None:
        child = Context.root().create_subcontext([FOO, OTHER_FOO, BAR])
        assert child.source_reference(FOO) == "p.Foo"
        assert child.source_reference(OTHER_FOO) == "q.Foo"
        assert child.source_reference(BAR) == "Bar"

    def test_duplicates_in_one_step_are_not_a_collision(self) -> None:
        same = ClassName(package_name="p", simple_name="Foo")
        child = Context.root().create_subcontext([FOO, same])
        assert child.source_reference(FOO) == "Foo"

    def test_collision_logged_at_debug_only(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="quill.core.context"):
            Context.root().create_subcontext([FOO, OTHER_FOO])
        assert caplog.records
        assert all(r.levelno == logging.DEBUG for r in caplog.records)
        assert "Foo" in caplog.text

    def test_accepts_generator(self) -> None:
        child = Context.root().create_subcontext(n for n in [FOO])
        assert child.is_bound(FOO)

    def test_lookup(self) -> None:
        child = Context.root().create_subcontext([FOO])
        assert child.lookup("Foo") == FOO
        assert child.lookup("Bar") is None
