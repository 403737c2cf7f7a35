"""Annotation writer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quill.core.names import ClassName
from quill.writer.snippet import Snippet

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable


class AnnotationWriter:
    """Writes ``@Type``, ``@Type(value)`` or ``@Type(a = x, b = y)``."""

    def __init__(self, annotation_type: ClassName) -> None:
        self._annotation_type = annotation_type
        self._members: dict[str, Snippet] = {}

    @property
    def annotation_type(self) -> ClassName:
        return self._annotation_type

    def set_value(self, format_string: str, *args: Any) -> AnnotationWriter:
        """Set the single ``value`` member."""
        return self.set_member("value", format_string, *args)

    def set_member(self, name: str, format_string: str, *args: Any) -> AnnotationWriter:
        """Set a named member; members are written in the order first set."""
        self._members[name] = Snippet.format(format_string, *args)
        return self

    def write(self, sink: Appendable, context: Context) -> Appendable:
        sink.append("@")
        self._annotation_type.write(sink, context)
        if not self._members:
            return sink
        sink.append("(")
        if list(self._members) == ["value"]:
            self._members["value"].write(sink, context)
        else:
            first = True
            for name, snippet in self._members.items():
                if not first:
                    sink.append(", ")
                sink.append(name).append(" = ")
                snippet.write(sink, context)
                first = False
        return sink.append(")")

    def referenced_classes(self) -> set[ClassName]:
        referenced = {self._annotation_type}
        for snippet in self._members.values():
            referenced |= snippet.referenced_classes()
        return referenced
