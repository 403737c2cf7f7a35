"""Property tests for resolution contexts.

**Feature: quill-writer, Property 1: Scope monotonicity**
**Feature: quill-writer, Property 2: Collision safety**

Binding additional, non-colliding names never changes how an already
shortened name is written, and two classes that share a simple name and are
bound together are both written fully qualified.
"""

from __future__ import annotations

from hypothesis import assume, given, strategies as st

from quill.core.context import Context
from quill.core.names import ClassName

# Strategies for generating names
package_names = st.from_regex(r"[a-z]{1,4}(\.[a-z]{1,4}){0,2}", fullmatch=True)
simple_names = st.from_regex(r"[A-Z][a-z]{0,3}", fullmatch=True)


@st.composite
def class_names(draw: st.DrawFn) -> ClassName:
    """Generate a class name, sometimes nested."""
    package = draw(package_names)
    parts = draw(st.lists(simple_names, min_size=1, max_size=3))
    return ClassName.from_parts(package, *parts)


@given(
    first=st.lists(class_names(), max_size=6),
    second=st.lists(class_names(), max_size=6),
)
def test_scope_monotonicity(first: list[ClassName], second: list[ClassName]) -> None:
    """
    **Feature: quill-writer, Property 1: Scope monotonicity**

    Every name written short in S is written identically in any scope derived
    from S by binding only names whose simple names are not yet visible.
    """
    scope = Context.root().create_subcontext(first)
    visible = {n.simple_name for n in first}
    additional = [n for n in second if n.simple_name not in visible]
    derived = scope.create_subcontext(additional)

    for name in first:
        if scope.is_bound(name):
            assert derived.source_reference(name) == name.simple_name


@given(names=st.lists(class_names(), max_size=8), extra=st.lists(class_names(), max_size=4))
def test_scope_never_unbinds_ancestor(names: list[ClassName], extra: list[ClassName]) -> None:
    """A child scope's visible bindings extend the parent's, never remove them."""
    parent = Context.root().create_subcontext(names)
    child = parent.create_subcontext(extra)
    for name in names:
        if parent.is_bound(name):
            assert child.is_bound(name)


@given(
    package_a=package_names,
    package_b=package_names,
    simple=simple_names,
    others=st.lists(class_names(), max_size=4),
)
def test_collision_safety(
    package_a: str, package_b: str, simple: str, others: list[ClassName]
) -> None:
    """
    **Feature: quill-writer, Property 2: Collision safety**

    Two distinct classes sharing a simple name bound in the same step are
    both written fully qualified.
    """
    assume(package_a != package_b)
    a = ClassName.from_parts(package_a, simple)
    b = ClassName.from_parts(package_b, simple)
    scope = Context.root().create_subcontext([a, *others, b])

    assert scope.source_reference(a) == a.canonical_name
    assert scope.source_reference(b) == b.canonical_name


@given(names=st.lists(class_names(), max_size=8), probe=class_names())
def test_short_form_always_unambiguous(names: list[ClassName], probe: ClassName) -> None:
    """A short form is only ever produced for the one class its simple name denotes."""
    scope = Context.root().create_subcontext(names[:4]).create_subcontext(names[4:])
    reference = scope.source_reference(probe)
    if reference == probe.simple_name and probe.canonical_name != probe.simple_name:
        assert scope.lookup(probe.simple_name) == probe
        for name in names:
            if name.simple_name == probe.simple_name and name != probe:
                assert scope.source_reference(name) == name.canonical_name


@given(names=st.lists(class_names(), max_size=8))
def test_resolution_does_not_mutate(names: list[ClassName]) -> None:
    """Resolving names leaves every level's bindings unchanged."""
    scope = Context.root().create_subcontext(names)
    before = dict(scope.bindings())
    for name in names:
        scope.source_reference(name)
    assert dict(scope.bindings()) == before
    assert dict(Context.root().bindings()) == {}
