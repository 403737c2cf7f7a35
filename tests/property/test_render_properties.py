"""Property tests for class rendering.

**Feature: quill-writer, Property 3: Render idempotence**
**Feature: quill-writer, Property 4: Reference/render consistency**
**Feature: quill-writer, Property 5: Default-constructor elision**

Rendering an unchanged tree twice yields identical text; every class written
fully qualified belongs to the tree's referenced classes; and a constructor
is omitted exactly when it is empty and matches its class's visibility.
"""

from __future__ import annotations

import re

from hypothesis import given, strategies as st

from quill.core.context import Context
from quill.core.names import ClassName
from quill.writer import ClassWriter, Modifier, StringSink, render
from quill.writer.modifiers import VISIBILITY_MODIFIERS

# Strategies for generating names
package_names = st.from_regex(r"[a-z]{1,4}(\.[a-z]{1,4}){0,2}", fullmatch=True)
simple_names = st.from_regex(r"[A-Z][a-z]{0,3}", fullmatch=True)
visibility_sets = st.sets(st.sampled_from(sorted(VISIBILITY_MODIFIERS)), max_size=1)

_QUALIFIED_PATTERN = re.compile(r"[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)+")


@st.composite
def external_names(draw: st.DrawFn) -> ClassName:
    """Generate a class name declared somewhere else."""
    return ClassName.from_parts(draw(package_names), draw(simple_names))


@st.composite
def class_trees(draw: st.DrawFn, max_depth: int = 2) -> ClassWriter:
    """Generate a class with nested classes and fields of mixed origin."""
    root = ClassWriter(ClassName.from_parts(draw(package_names), draw(simple_names)))
    writers = [root]
    frontier = [(root, 0)]
    while frontier:
        writer, depth = frontier.pop()
        if depth >= max_depth:
            continue
        for simple in draw(st.lists(simple_names, max_size=3, unique=True)):
            nested = writer.add_nested_class(simple)
            writers.append(nested)
            frontier.append((nested, depth + 1))

    pool = [w.name for w in writers] + draw(st.lists(external_names(), max_size=4))
    for writer in writers:
        for index, type_name in enumerate(draw(st.lists(st.sampled_from(pool), max_size=3))):
            writer.add_field(type_name, f"f{index}")
        if draw(st.booleans()):
            writer.add_implemented_type(draw(st.sampled_from(pool)))
    return root


@given(tree=class_trees())
def test_render_idempotent(tree: ClassWriter) -> None:
    """
    **Feature: quill-writer, Property 3: Render idempotence**

    Rendering the same unmutated tree into two fresh sinks yields identical text.
    """
    first = StringSink()
    second = StringSink()
    tree.write(first, Context.root())
    tree.write(second, Context.root())
    assert first.getvalue() == second.getvalue()


@given(tree=class_trees())
def test_qualified_references_are_collected(tree: ClassWriter) -> None:
    """
    **Feature: quill-writer, Property 4: Reference/render consistency**

    Every name written fully qualified appears in the aggregated references.
    """
    referenced = {n.canonical_name for n in tree.referenced_classes()}
    for qualified in _QUALIFIED_PATTERN.findall(render(tree)):
        assert qualified in referenced


def _check_short_forms(writer: ClassWriter, enclosing: Context) -> None:
    context = enclosing.create_subcontext(n.name for n in writer.nested_types)
    for field in writer.fields:
        written = str(field.type.write(StringSink(), context))
        if written == field.type.simple_name:
            assert context.lookup(field.type.simple_name) == field.type
        else:
            assert written == field.type.canonical_name
    for nested in writer.nested_types:
        _check_short_forms(nested, context)


@given(tree=class_trees())
def test_short_forms_only_when_bound(tree: ClassWriter) -> None:
    """
    **Feature: quill-writer, Property 4: Reference/render consistency**

    A field type is written short only when its simple name is bound to it in
    the scope active where the field is written.
    """
    _check_short_forms(tree, Context.root())


@given(
    class_visibility=visibility_sets,
    constructor_visibility=visibility_sets,
    extra=st.sets(st.sampled_from([Modifier.STATIC, Modifier.FINAL]), max_size=2),
    has_body=st.booleans(),
)
def test_default_constructor_elision(
    class_visibility: set[Modifier],
    constructor_visibility: set[Modifier],
    extra: set[Modifier],
    has_body: bool,
) -> None:
    """
    **Feature: quill-writer, Property 5: Default-constructor elision**

    A constructor appears in the output unless it is empty and its visibility
    modifiers equal the class's.
    """
    writer = ClassWriter(ClassName.from_parts("p", "Widget"))
    writer.add_modifiers(*class_visibility, *extra)
    constructor = writer.add_constructor()
    constructor.add_modifiers(*constructor_visibility)
    if has_body:
        constructor.body().add_snippet("init();")

    rendered = render(writer)
    redundant = class_visibility == constructor_visibility and not has_body
    assert ("Widget() {" in rendered) is not redundant
