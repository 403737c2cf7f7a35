"""Class declaration writer.

Writing a class first derives a narrower context that binds the simple names
of its directly nested classes. The header, every member and every nested
class are then written against that context, so a nested class can be
referred to by its simple name anywhere inside its enclosing class unless
the name would be ambiguous there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quill.core.config import get_config
from quill.core.errors import DuplicateDeclarationError
from quill.core.names import ClassName, TypeName, TypeVariableName, write_joined
from quill.writer.base import collect_references, write_type_parameters
from quill.writer.methods import ConstructorWriter
from quill.writer.modifiers import visibility_of
from quill.writer.sink import IndentingSink
from quill.writer.types import TypeWriter
from quill.writer.variables import FieldWriter

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable

logger = logging.getLogger(__name__)


class ClassWriter(TypeWriter):
    """Builds and writes a ``class`` declaration.

    Members are written in insertion order: fields, constructors, methods,
    then nested classes.
    """

    def __init__(self, name: ClassName) -> None:
        """Initialize an empty class.

        Args:
            name: The class identity. Nested classes derive their names
                from it.
        """
        super().__init__(name)
        self._nested_types: list[ClassWriter] = []
        self._fields: list[FieldWriter] = []
        self._constructors: list[ConstructorWriter] = []
        self._type_variables: list[TypeVariableName] = []

    @property
    def fields(self) -> tuple[FieldWriter, ...]:
        return tuple(self._fields)

    @property
    def constructors(self) -> tuple[ConstructorWriter, ...]:
        return tuple(self._constructors)

    @property
    def nested_types(self) -> tuple[ClassWriter, ...]:
        return tuple(self._nested_types)

    @property
    def type_variables(self) -> tuple[TypeVariableName, ...]:
        return tuple(self._type_variables)

    def add_type_variable(self, type_variable: TypeVariableName) -> None:
        self._type_variables.append(type_variable)

    def add_field(self, type_name: TypeName, name: str) -> FieldWriter:
        field = FieldWriter(type_name, name)
        self._fields.append(field)
        return field

    def add_constructor(self) -> ConstructorWriter:
        constructor = ConstructorWriter(self._name.simple_name)
        self._constructors.append(constructor)
        return constructor

    def add_nested_class(self, simple_name: str) -> ClassWriter:
        """Declare a class inside this one and return its writer.

        Raises:
            DuplicateDeclarationError: If a nested class with this simple
                name was already added.
        """
        if any(n.name.simple_name == simple_name for n in self._nested_types):
            raise DuplicateDeclarationError("nested class", simple_name, self._name.canonical_name)
        nested = ClassWriter(self._name.nested_class_named(simple_name))
        self._nested_types.append(nested)
        return nested

    def is_default_constructor(self, constructor: ConstructorWriter) -> bool:
        """Whether ``constructor`` is the one the compiler would synthesize.

        True when it has an empty body and the same visibility modifiers as
        this class.
        """
        return (
            visibility_of(self.modifiers) == visibility_of(constructor.modifiers)
            and constructor.body().is_empty()
        )

    def write(self, sink: Appendable, context: Context) -> Appendable:
        context = context.create_subcontext(n.name for n in self._nested_types)
        elide_default_constructors = get_config().elide_default_constructors

        self.write_annotations(sink, context)
        self.write_modifiers(sink)
        sink.append("class ").append(self._name.simple_name)
        write_type_parameters(sink, context, self._type_variables)
        if self._supertype is not None:
            sink.append(" extends ")
            self._supertype.write(sink, context)
        if self._implemented_types:
            sink.append(" implements ")
            write_joined(sink, context, self._implemented_types)
        sink.append(" {")

        if self._fields:
            sink.append("\n")
        for field in self._fields:
            field.write(IndentingSink(sink), context).append("\n")
        for constructor in self._constructors:
            sink.append("\n")
            if elide_default_constructors and self.is_default_constructor(constructor):
                logger.debug(f"Eliding default constructor of {self._name.canonical_name}")
                continue
            constructor.write(IndentingSink(sink), context)
        for method in self._methods:
            sink.append("\n")
            method.write(IndentingSink(sink), context)
        for nested in self._nested_types:
            sink.append("\n")
            nested.write(IndentingSink(sink), context)
        return sink.append("}\n")

    def referenced_classes(self) -> set[ClassName]:
        items = [
            *self._nested_types,
            *self._fields,
            *self._constructors,
            *self._methods,
            *self._implemented_types,
            *self.annotations,
            *self._type_variables,
        ]
        if self._supertype is not None:
            items.append(self._supertype)
        return collect_references(items)
