"""Entry points for turning a writer tree into source text."""

from __future__ import annotations

from typing import TextIO

from quill.core.context import Context
from quill.writer.base import Writable
from quill.writer.sink import StreamSink, StringSink


def render(writer: Writable, context: Context | None = None) -> str:
    """Render ``writer`` to a string.

    Args:
        writer: The declaration to render.
        context: Enclosing context; the empty root context by default.

    Returns:
        The rendered source.
    """
    sink = StringSink()
    writer.write(sink, context or Context.root())
    return sink.getvalue()


def render_to(writer: Writable, stream: TextIO, context: Context | None = None) -> None:
    """Render ``writer`` directly into a text stream.

    Output is streamed as it is produced. If the stream fails, the error is
    raised unchanged and the stream keeps whatever was already written.
    """
    writer.write(StreamSink(stream), context or Context.root())
