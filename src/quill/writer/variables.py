"""Field and parameter writers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quill.core.names import ClassName, TypeName
from quill.writer.base import Modifiable, collect_references
from quill.writer.snippet import Snippet

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable


class VariableWriter(Modifiable):
    """A typed, named variable: ``[annotations] [modifiers] Type name``."""

    annotation_separator = " "

    def __init__(self, type_name: TypeName, name: str) -> None:
        super().__init__()
        self._type = type_name
        self._name = name

    @property
    def type(self) -> TypeName:
        return self._type

    @property
    def name(self) -> str:
        return self._name

    def write(self, sink: Appendable, context: Context) -> Appendable:
        self.write_annotations(sink, context)
        self.write_modifiers(sink)
        self._type.write(sink, context)
        return sink.append(" ").append(self._name)

    def referenced_classes(self) -> set[ClassName]:
        return collect_references([*self.annotations, self._type])


class ParameterWriter(VariableWriter):
    """A constructor or method parameter."""


class FieldWriter(VariableWriter):
    """A field declaration, terminated by ``;``.

    The enclosing class writer ends the line.
    """

    annotation_separator = "\n"

    def __init__(self, type_name: TypeName, name: str) -> None:
        super().__init__(type_name, name)
        self._initializer: Snippet | None = None

    @property
    def initializer(self) -> Snippet | None:
        return self._initializer

    def set_initializer(self, format_string: str, *args: Any) -> FieldWriter:
        self._initializer = Snippet.format(format_string, *args)
        return self

    def write(self, sink: Appendable, context: Context) -> Appendable:
        super().write(sink, context)
        if self._initializer is not None:
            sink.append(" = ")
            self._initializer.write(sink, context)
        return sink.append(";")

    def referenced_classes(self) -> set[ClassName]:
        referenced = super().referenced_classes()
        if self._initializer is not None:
            referenced |= self._initializer.referenced_classes()
        return referenced
