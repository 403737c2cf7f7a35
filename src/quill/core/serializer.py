"""Loading class descriptions and building writers from them.

This module parses JSON class descriptions into ``ClassSpec`` models and
turns a ``ClassSpec`` into a ``ClassWriter`` tree using only the writer's
public building operations.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from quill.core.models import AnnotationSpec, ClassSpec, SnippetLike
from quill.core.names import ClassName, TypeVariableName, parse_type_name
from quill.writer.base import Modifiable
from quill.writer.class_writer import ClassWriter


class SerializationError(Exception):
    """Error while loading a class description or building its writer."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


def _validation_details(error: ValidationError) -> str:
    error_details = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def load_class_spec(json_str: str) -> ClassSpec:
    """Deserialize a JSON string to a class description.

    Args:
        json_str: JSON representation of a ClassSpec.

    Returns:
        The validated class description.

    Raises:
        SerializationError: If the JSON is malformed or fails validation.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return load_class_spec_from_dict(data)


def load_class_spec_from_dict(data: dict[str, Any]) -> ClassSpec:
    """Deserialize a dictionary to a class description.

    Raises:
        SerializationError: If validation fails.
    """
    try:
        return ClassSpec.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Class description validation failed",
            details=_validation_details(e),
        ) from e


def dump_class_spec(spec: ClassSpec) -> str:
    """Serialize a class description to a JSON string."""
    return json.dumps(spec.model_dump(mode="json", exclude_defaults=True), indent=2)


def build_class_writer(spec: ClassSpec) -> ClassWriter:
    """Build the writer tree described by ``spec``.

    Args:
        spec: A top-level class description; its name must be qualified.

    Returns:
        The populated class writer.

    Raises:
        SerializationError: If a name, type expression or modifier is invalid,
            or two nested classes share a name.
    """
    try:
        writer = ClassWriter(ClassName.best_guess(spec.name))
        _populate_class(writer, spec, ())
    except ValidationError as e:
        raise SerializationError(
            message=f"Invalid class description for {spec.name}",
            details=_validation_details(e),
        ) from e
    except ValueError as e:
        raise SerializationError(
            message=f"Invalid class description for {spec.name}",
            details=str(e),
        ) from e
    return writer


def _type_variable_names(declarations: list[str]) -> tuple[str, ...]:
    return tuple(d.partition(" extends ")[0].strip() for d in declarations)


def _type_variable(declaration: str, type_variables: tuple[str, ...]) -> TypeVariableName:
    name, _, bounds = declaration.partition(" extends ")
    name = name.strip()
    if not bounds.strip():
        return TypeVariableName(name)
    return TypeVariableName(
        name,
        tuple(parse_type_name(b, type_variables) for b in bounds.split("&")),
    )


def _add_annotations(
    target: Modifiable, annotations: list[AnnotationSpec], type_variables: tuple[str, ...]
) -> None:
    for spec in annotations:
        annotation = target.add_annotation(ClassName.best_guess(spec.type))
        if spec.value is not None:
            annotation.set_value(*_format_args(spec.value, type_variables))
        for member, value in spec.members.items():
            annotation.set_member(member, *_format_args(value, type_variables))


def _format_args(snippet: SnippetLike, type_variables: tuple[str, ...]) -> tuple[Any, ...]:
    # Plain strings are literal text
    if isinstance(snippet, str):
        return (snippet.replace("%", "%%"),)
    return (snippet.format, *(parse_type_name(a, type_variables) for a in snippet.args))


def _populate_class(writer: ClassWriter, spec: ClassSpec, type_variables: tuple[str, ...]) -> None:
    type_variables = type_variables + _type_variable_names(spec.type_parameters)
    for declaration in spec.type_parameters:
        writer.add_type_variable(_type_variable(declaration, type_variables))

    writer.add_modifiers(*spec.modifiers)
    _add_annotations(writer, spec.annotations, type_variables)
    if spec.supertype is not None:
        writer.set_supertype(parse_type_name(spec.supertype, type_variables))
    for interface in spec.interfaces:
        writer.add_implemented_type(parse_type_name(interface, type_variables))

    for field_spec in spec.fields:
        field = writer.add_field(parse_type_name(field_spec.type, type_variables), field_spec.name)
        field.add_modifiers(*field_spec.modifiers)
        _add_annotations(field, field_spec.annotations, type_variables)
        if field_spec.initializer is not None:
            field.set_initializer(*_format_args(field_spec.initializer, type_variables))

    for constructor_spec in spec.constructors:
        constructor = writer.add_constructor()
        constructor.add_modifiers(*constructor_spec.modifiers)
        _add_annotations(constructor, constructor_spec.annotations, type_variables)
        for parameter_spec in constructor_spec.parameters:
            parameter = constructor.add_parameter(
                parse_type_name(parameter_spec.type, type_variables), parameter_spec.name
            )
            parameter.add_modifiers(*parameter_spec.modifiers)
            _add_annotations(parameter, parameter_spec.annotations, type_variables)
        for statement in constructor_spec.body:
            constructor.body().add_snippet(*_format_args(statement, type_variables))

    for method_spec in spec.methods:
        method_variables = type_variables + _type_variable_names(method_spec.type_parameters)
        method = writer.add_method(
            parse_type_name(method_spec.return_type, method_variables), method_spec.name
        )
        for declaration in method_spec.type_parameters:
            method.add_type_variable(_type_variable(declaration, method_variables))
        method.add_modifiers(*method_spec.modifiers)
        _add_annotations(method, method_spec.annotations, method_variables)
        for parameter_spec in method_spec.parameters:
            parameter = method.add_parameter(
                parse_type_name(parameter_spec.type, method_variables), parameter_spec.name
            )
            parameter.add_modifiers(*parameter_spec.modifiers)
            _add_annotations(parameter, parameter_spec.annotations, method_variables)
        if method_spec.body is not None:
            body = method.body()
            for statement in method_spec.body:
                body.add_snippet(*_format_args(statement, method_variables))

    for nested_spec in spec.nested:
        nested = writer.add_nested_class(nested_spec.name)
        _populate_class(nested, nested_spec, type_variables)
