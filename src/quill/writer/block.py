"""Statement blocks for constructor and method bodies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from quill.core.names import ClassName
from quill.writer.base import collect_references
from quill.writer.snippet import Snippet

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable


class BlockWriter:
    """An ordered list of statements, each starting on a new line."""

    def __init__(self) -> None:
        self._snippets: list[Snippet] = []

    def add_snippet(self, format_string: str, *args: Any) -> BlockWriter:
        self._snippets.append(Snippet.format(format_string, *args))
        return self

    @property
    def snippets(self) -> tuple[Snippet, ...]:
        return tuple(self._snippets)

    def is_empty(self) -> bool:
        return not self._snippets

    def write(self, sink: Appendable, context: Context) -> Appendable:
        for snippet in self._snippets:
            sink.append("\n")
            snippet.write(sink, context)
        return sink.append("\n")

    def referenced_classes(self) -> set[ClassName]:
        return collect_references(self._snippets)
