"""Shared protocols and the modifier/annotation mixin for writers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from quill.core.names import ClassName, TypeVariableName
from quill.writer.annotations import AnnotationWriter
from quill.writer.modifiers import Modifier, in_declaration_order

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable


@runtime_checkable
class HasClassReferences(Protocol):
    """Reports every class it mentions, recursively."""

    def referenced_classes(self) -> set[ClassName]: ...


@runtime_checkable
class Writable(HasClassReferences, Protocol):
    """Writes itself as source under a resolution context."""

    def write(self, sink: Appendable, context: Context) -> Appendable: ...


def collect_references(items: Iterable[HasClassReferences]) -> set[ClassName]:
    """Union of the references of ``items``."""
    referenced: set[ClassName] = set()
    for item in items:
        referenced |= item.referenced_classes()
    return referenced


def write_type_parameters(
    sink: Appendable, context: Context, type_variables: Iterable[TypeVariableName]
) -> Appendable:
    """Write ``<T, U extends Bound>``, or nothing when there are no variables."""
    type_variables = list(type_variables)
    if not type_variables:
        return sink
    sink.append("<")
    for index, type_variable in enumerate(type_variables):
        if index:
            sink.append(", ")
        type_variable.write_declaration(sink, context)
    return sink.append(">")


class Modifiable:
    """Modifiers and annotations shared by every declaration writer."""

    annotation_separator = "\n"

    def __init__(self) -> None:
        self.modifiers: set[Modifier] = set()
        self.annotations: list[AnnotationWriter] = []

    def add_modifiers(self, *modifiers: Modifier | str) -> None:
        """Add modifiers, given as ``Modifier`` members or keywords."""
        self.modifiers.update(Modifier(m) for m in modifiers)

    def add_annotation(self, annotation_type: ClassName) -> AnnotationWriter:
        annotation = AnnotationWriter(annotation_type)
        self.annotations.append(annotation)
        return annotation

    def write_annotations(self, sink: Appendable, context: Context) -> Appendable:
        for annotation in self.annotations:
            annotation.write(sink, context).append(self.annotation_separator)
        return sink

    def write_modifiers(self, sink: Appendable) -> Appendable:
        for modifier in in_declaration_order(self.modifiers):
            sink.append(modifier.value).append(" ")
        return sink
