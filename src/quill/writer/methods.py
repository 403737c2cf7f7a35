"""Constructor and method writers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quill.core.errors import DuplicateDeclarationError
from quill.core.names import ClassName, TypeName, TypeVariableName
from quill.writer.base import Modifiable, collect_references, write_type_parameters
from quill.writer.block import BlockWriter
from quill.writer.sink import IndentingSink
from quill.writer.variables import ParameterWriter

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable


class _ExecutableWriter(Modifiable):
    """Name and ordered parameters shared by constructors and methods."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name
        self._parameters: dict[str, ParameterWriter] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> tuple[ParameterWriter, ...]:
        return tuple(self._parameters.values())

    def add_parameter(self, type_name: TypeName, name: str) -> ParameterWriter:
        """Append a parameter.

        Raises:
            DuplicateDeclarationError: If a parameter with this name exists.
        """
        if name in self._parameters:
            raise DuplicateDeclarationError("parameter", name, self._name)
        parameter = ParameterWriter(type_name, name)
        self._parameters[name] = parameter
        return parameter

    def _write_parameters(self, sink: Appendable, context: Context) -> Appendable:
        sink.append("(")
        first = True
        for parameter in self._parameters.values():
            if not first:
                sink.append(", ")
            parameter.write(sink, context)
            first = False
        return sink.append(")")


class ConstructorWriter(_ExecutableWriter):
    """A constructor; its body is always written, even when empty."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._body = BlockWriter()

    def body(self) -> BlockWriter:
        return self._body

    def write(self, sink: Appendable, context: Context) -> Appendable:
        self.write_annotations(sink, context)
        self.write_modifiers(sink)
        sink.append(self._name)
        self._write_parameters(sink, context)
        sink.append(" {")
        self._body.write(IndentingSink(sink), context)
        return sink.append("}\n")

    def referenced_classes(self) -> set[ClassName]:
        return collect_references([*self.annotations, *self._parameters.values(), self._body])


class MethodWriter(_ExecutableWriter):
    """A method with a return type and an optional body.

    A method without a body (``abstract`` or ``native``) is written with a
    terminating ``;``. Calling ``body()`` creates the body.
    """

    def __init__(self, return_type: TypeName, name: str) -> None:
        super().__init__(name)
        self._return_type = return_type
        self._type_variables: list[TypeVariableName] = []
        self._body: BlockWriter | None = None

    @property
    def return_type(self) -> TypeName:
        return self._return_type

    @property
    def type_variables(self) -> tuple[TypeVariableName, ...]:
        return tuple(self._type_variables)

    def add_type_variable(self, type_variable: TypeVariableName) -> None:
        self._type_variables.append(type_variable)

    def body(self) -> BlockWriter:
        if self._body is None:
            self._body = BlockWriter()
        return self._body

    def has_body(self) -> bool:
        return self._body is not None

    def write(self, sink: Appendable, context: Context) -> Appendable:
        self.write_annotations(sink, context)
        self.write_modifiers(sink)
        if self._type_variables:
            write_type_parameters(sink, context, self._type_variables).append(" ")
        self._return_type.write(sink, context)
        sink.append(" ").append(self._name)
        self._write_parameters(sink, context)
        if self._body is None:
            return sink.append(";\n")
        sink.append(" {")
        self._body.write(IndentingSink(sink), context)
        return sink.append("}\n")

    def referenced_classes(self) -> set[ClassName]:
        items = [
            *self.annotations,
            *self._type_variables,
            self._return_type,
            *self._parameters.values(),
        ]
        if self._body is not None:
            items.append(self._body)
        return collect_references(items)
