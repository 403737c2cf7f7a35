"""Writers that build and emit Java declarations."""

from quill.writer.annotations import AnnotationWriter
from quill.writer.base import HasClassReferences, Modifiable, Writable
from quill.writer.block import BlockWriter
from quill.writer.class_writer import ClassWriter
from quill.writer.methods import ConstructorWriter, MethodWriter
from quill.writer.modifiers import VISIBILITY_MODIFIERS, Modifier
from quill.writer.render import render, render_to
from quill.writer.sink import Appendable, IndentingSink, StreamSink, StringSink
from quill.writer.snippet import Snippet
from quill.writer.types import TypeWriter
from quill.writer.variables import FieldWriter, ParameterWriter, VariableWriter

__all__ = [
    "Appendable",
    "AnnotationWriter",
    "BlockWriter",
    "ClassWriter",
    "ConstructorWriter",
    "FieldWriter",
    "HasClassReferences",
    "IndentingSink",
    "MethodWriter",
    "Modifiable",
    "Modifier",
    "ParameterWriter",
    "Snippet",
    "StreamSink",
    "StringSink",
    "TypeWriter",
    "VISIBILITY_MODIFIERS",
    "VariableWriter",
    "Writable",
    "render",
    "render_to",
]
