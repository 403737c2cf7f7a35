"""Core module containing names, resolution contexts, and configuration."""

from quill.core.config import QuillConfig, get_config, reload_config
from quill.core.context import Context
from quill.core.errors import DuplicateDeclarationError, QuillError, TypeNameSyntaxError
from quill.core.names import (
    ArrayTypeName,
    ClassName,
    ParameterizedTypeName,
    PrimitiveName,
    TypeName,
    TypeVariableName,
    WildcardName,
    parse_type_name,
)

__all__ = [
    "ArrayTypeName",
    "ClassName",
    "Context",
    "DuplicateDeclarationError",
    "ParameterizedTypeName",
    "PrimitiveName",
    "QuillConfig",
    "QuillError",
    "TypeName",
    "TypeNameSyntaxError",
    "TypeVariableName",
    "WildcardName",
    "get_config",
    "parse_type_name",
    "reload_config",
]
