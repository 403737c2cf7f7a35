"""Free-form source fragments with embedded type references."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from quill.core.names import ClassName, TypeName
from quill.writer.sink import StringSink

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable

_PLACEHOLDER_PATTERN = re.compile(r"%(.?)")


class Snippet:
    """A format string whose ``%s`` arguments are written on demand.

    Type name arguments are resolved against the context the snippet is
    written in; any other argument is written with ``str()``.
    """

    def __init__(self, format_string: str, args: tuple[Any, ...]) -> None:
        self._format = format_string
        self._args = args

    @classmethod
    def format(cls, format_string: str, *args: Any) -> Snippet:
        """Create a snippet, checking placeholders against arguments.

        Raises:
            ValueError: If the format uses anything but ``%s`` and ``%%``, or
                the number of ``%s`` placeholders differs from ``len(args)``.
        """
        placeholders = 0
        for match in _PLACEHOLDER_PATTERN.finditer(format_string):
            kind = match.group(1)
            if kind == "s":
                placeholders += 1
            elif kind != "%":
                raise ValueError(f"Unsupported placeholder %{kind} in {format_string!r}")
        if placeholders != len(args):
            raise ValueError(
                f"{format_string!r} has {placeholders} placeholders but {len(args)} arguments"
            )
        return cls(format_string, tuple(args))

    @property
    def format_string(self) -> str:
        return self._format

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    def write(self, sink: Appendable, context: Context) -> Appendable:
        values = tuple(_source_form(arg, context) for arg in self._args)
        return sink.append(self._format % values)

    def referenced_classes(self) -> set[ClassName]:
        referenced: set[ClassName] = set()
        for arg in self._args:
            if isinstance(arg, TypeName):
                referenced |= arg.referenced_classes()
        return referenced

    def __repr__(self) -> str:
        return f"Snippet({self._format!r}, {self._args!r})"


def _source_form(arg: Any, context: Context) -> str:
    if isinstance(arg, TypeName):
        return str(arg.write(StringSink(), context))
    return str(arg)
