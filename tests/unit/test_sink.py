"""Unit tests for output sinks."""

import io

from quill.writer.sink import Appendable, IndentingSink, StreamSink, StringSink


class TestStringSink:
    """Tests for the in-memory sink."""

    def test_collects_text(self) -> None:
        sink = StringSink()
        assert sink.append("a").append("b") is sink
        assert sink.getvalue() == "ab"
        assert str(sink) == "ab"

    def test_is_appendable(self) -> None:
        assert isinstance(StringSink(), Appendable)


class TestStreamSink:
    """Tests for the stream adapter."""

    def test_writes_through(self) -> None:
        stream = io.StringIO()
        StreamSink(stream).append("x").append("y")
        assert stream.getvalue() == "xy"


class TestIndentingSink:
    """Tests for lazy line indentation."""

    def test_indents_each_line(self) -> None:
        out = StringSink()
        IndentingSink(out, "  ").append("a\nb\n")
        assert out.getvalue() == "  a\n  b\n"

    def test_indent_is_lazy(self) -> None:
        out = StringSink()
        sink = IndentingSink(out, "  ")
        sink.append("a\n")
        assert out.getvalue() == "  a\n"
        sink.append("b")
        assert out.getvalue() == "  a\n  b"

    def test_partial_lines_indented_once(self) -> None:
        out = StringSink()
        IndentingSink(out, "  ").append("int").append(" x").append(";")
        assert out.getvalue() == "  int x;"

    def test_blank_lines_not_indented(self) -> None:
        out = StringSink()
        IndentingSink(out, "  ").append("a\n\nb")
        assert out.getvalue() == "  a\n\n  b"

    def test_leading_newline_ends_current_line(self) -> None:
        out = StringSink()
        out.append("x {")
        IndentingSink(out, "  ").append("\nbody\n")
        assert out.getvalue() == "x {\n  body\n"

    def test_nesting_compounds(self) -> None:
        out = StringSink()
        IndentingSink(IndentingSink(out, "  "), "  ").append("a\n\nb\n")
        assert out.getvalue() == "    a\n\n    b\n"

    def test_empty_text(self) -> None:
        out = StringSink()
        IndentingSink(out, "  ").append("")
        assert out.getvalue() == ""

    def test_default_indent_from_config(self, monkeypatch) -> None:
        from quill.core.config import reload_config

        monkeypatch.setenv("QUILL_INDENT", "\t")
        reload_config()
        out = StringSink()
        IndentingSink(out).append("a")
        assert out.getvalue() == "\ta"
