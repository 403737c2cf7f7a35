"""Output sinks that rendered source is appended to.

A sink is anything with an ``append(text)`` method that returns the sink.
Errors raised while appending are never caught here: a failing sink stops
rendering at the point of failure and keeps whatever was already written.
"""

from __future__ import annotations

import re
from typing import Protocol, TextIO, runtime_checkable

from quill.core.config import get_config

_LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")


@runtime_checkable
class Appendable(Protocol):
    """Sequential text output."""

    def append(self, text: str) -> Appendable: ...


class StringSink:
    """Collects appended text in memory."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> StringSink:
        self._parts.append(text)
        return self

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()


class StreamSink:
    """Appends to a text stream such as an open file."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def append(self, text: str) -> StreamSink:
        self._stream.write(text)
        return self


class IndentingSink:
    """Indents every non-empty line written through it.

    Indentation is written lazily, just before the first character of a
    line, so a sink can be wrapped around a member before knowing whether
    the member writes anything. Lines consisting only of a newline are
    passed through without indentation.
    """

    def __init__(self, delegate: Appendable, indentation: str | None = None) -> None:
        """Wrap a sink.

        Args:
            delegate: The sink that receives the indented text.
            indentation: Text prepended to each line; defaults to the
                configured indent.
        """
        self._delegate = delegate
        self._indentation = get_config().indent if indentation is None else indentation
        self._requires_indent = True

    def append(self, text: str) -> IndentingSink:
        for line in _LINE_PATTERN.findall(text):
            if self._requires_indent and line != "\n":
                self._delegate.append(self._indentation)
            self._delegate.append(line)
            self._requires_indent = line.endswith("\n")
        return self
