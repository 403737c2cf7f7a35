"""Declarative description of a class declaration.

These models let a class be described as data (for example a JSON file)
instead of through writer calls. Type references are type expression
strings such as ``java.util.List<T>``.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field


class SnippetSpec(BaseModel):
    """A source fragment with ``%s`` placeholders filled from ``args``.

    Each argument is read as a type expression and written against the
    context of the enclosing declaration.
    """

    format: str = Field(..., description="Format string using %s placeholders")
    args: list[str] = Field(default_factory=list, description="Type expressions for %s")


SnippetLike = Union[str, SnippetSpec]


class AnnotationSpec(BaseModel):
    """An annotation on a declaration."""

    type: str = Field(..., description="Annotation type expression")
    value: SnippetLike | None = Field(None, description="Single 'value' member")
    members: dict[str, SnippetLike] = Field(
        default_factory=dict, description="Named members, in order"
    )


class ParameterSpec(BaseModel):
    """Constructor or method parameter."""

    type: str
    name: str
    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSpec] = Field(default_factory=list)


class FieldSpec(BaseModel):
    """Field declaration."""

    type: str
    name: str
    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSpec] = Field(default_factory=list)
    initializer: SnippetLike | None = None


class ConstructorSpec(BaseModel):
    """Constructor declaration."""

    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSpec] = Field(default_factory=list)
    parameters: list[ParameterSpec] = Field(default_factory=list)
    body: list[SnippetLike] = Field(default_factory=list, description="Statements")


class MethodSpec(BaseModel):
    """Method declaration. A null body writes a body-less method."""

    name: str
    return_type: str = "void"
    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSpec] = Field(default_factory=list)
    type_parameters: list[str] = Field(default_factory=list)
    parameters: list[ParameterSpec] = Field(default_factory=list)
    body: list[SnippetLike] | None = Field(default_factory=list, description="Statements")


class ClassSpec(BaseModel):
    """Class declaration.

    ``name`` is fully qualified for a top-level class and a simple name for
    a nested one.
    """

    name: str
    modifiers: list[str] = Field(default_factory=list)
    annotations: list[AnnotationSpec] = Field(default_factory=list)
    type_parameters: list[str] = Field(
        default_factory=list, description="e.g. 'T' or 'T extends java.lang.Number'"
    )
    supertype: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    fields: list[FieldSpec] = Field(default_factory=list)
    constructors: list[ConstructorSpec] = Field(default_factory=list)
    methods: list[MethodSpec] = Field(default_factory=list)
    nested: list[ClassSpec] = Field(default_factory=list)


ClassSpec.model_rebuild()
