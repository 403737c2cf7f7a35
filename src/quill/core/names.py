"""Type names that can be written as Java source.

Every type name knows how to write itself against a resolution context and
which declared classes it mentions. ``ClassName`` is the only name that is
ever shortened; all other names delegate to the class names they contain.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from quill.core.errors import TypeNameSyntaxError

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _check_identifier(value: str, what: str) -> str:
    if not _IDENTIFIER_PATTERN.match(value):
        raise ValueError(f"{what} must be a Java identifier, got {value!r}")
    return value


@runtime_checkable
class TypeName(Protocol):
    """Anything that can appear where Java expects a type."""

    def write(self, sink: Appendable, context: Context) -> Appendable: ...

    def referenced_classes(self) -> set[ClassName]: ...


def write_joined(
    sink: Appendable,
    context: Context,
    items: Iterable[TypeName],
    separator: str = ", ",
) -> Appendable:
    """Write each item against ``context``, separated by ``separator``."""
    first = True
    for item in items:
        if not first:
            sink.append(separator)
        item.write(sink, context)
        first = False
    return sink


class ClassName(BaseModel):
    """Identity of a declared class.

    Two class names are equal when their canonical (fully-qualified) names
    are equal, however they were constructed.
    """

    model_config = ConfigDict(frozen=True)

    package_name: str = ""
    enclosing_simple_names: tuple[str, ...] = ()
    simple_name: str

    @field_validator("package_name")
    @classmethod
    def _validate_package(cls, value: str) -> str:
        if value:
            for segment in value.split("."):
                _check_identifier(segment, "Package segment")
        return value

    @field_validator("enclosing_simple_names")
    @classmethod
    def _validate_enclosing(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for segment in value:
            _check_identifier(segment, "Enclosing class name")
        return value

    @field_validator("simple_name")
    @classmethod
    def _validate_simple_name(cls, value: str) -> str:
        return _check_identifier(value, "Simple name")

    @classmethod
    def from_parts(cls, package_name: str, *simple_names: str) -> ClassName:
        """Build a class name from a package and outermost-first class names."""
        if not simple_names:
            raise ValueError("At least one simple name is required")
        return cls(
            package_name=package_name,
            enclosing_simple_names=tuple(simple_names[:-1]),
            simple_name=simple_names[-1],
        )

    @classmethod
    def best_guess(cls, text: str) -> ClassName:
        """Split a dotted name into package and class segments.

        Leading segments with a lower-case initial are the package; the first
        segment with an upper-case initial starts the class names, e.g.
        ``java.util.Map.Entry``.
        """
        parts = text.split(".")
        for index, part in enumerate(parts):
            if part[:1].isupper():
                break
        else:
            raise TypeNameSyntaxError(text, "no segment starts with an upper-case letter")
        try:
            return cls.from_parts(".".join(parts[:index]), *parts[index:])
        except ValidationError as e:
            raise TypeNameSyntaxError(text, e.errors()[0]["msg"]) from e

    @property
    def canonical_name(self) -> str:
        """Fully-qualified dotted name."""
        segments = [*self.enclosing_simple_names, self.simple_name]
        if self.package_name:
            segments.insert(0, self.package_name)
        return ".".join(segments)

    def nested_class_named(self, name: str) -> ClassName:
        """Name of a class declared directly inside this one."""
        return ClassName(
            package_name=self.package_name,
            enclosing_simple_names=(*self.enclosing_simple_names, self.simple_name),
            simple_name=name,
        )

    def peer_named(self, name: str) -> ClassName:
        """Name of a class declared next to this one."""
        return ClassName(
            package_name=self.package_name,
            enclosing_simple_names=self.enclosing_simple_names,
            simple_name=name,
        )

    def enclosing_class_name(self) -> ClassName | None:
        """Name of the directly enclosing class, or None for a top-level class."""
        if not self.enclosing_simple_names:
            return None
        return ClassName.from_parts(self.package_name, *self.enclosing_simple_names)

    def top_level(self) -> ClassName:
        if not self.enclosing_simple_names:
            return self
        return ClassName(package_name=self.package_name, simple_name=self.enclosing_simple_names[0])

    def write(self, sink: Appendable, context: Context) -> Appendable:
        return sink.append(context.source_reference(self))

    def referenced_classes(self) -> set[ClassName]:
        return {self}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassName):
            return NotImplemented
        return self.canonical_name == other.canonical_name

    def __hash__(self) -> int:
        return hash(self.canonical_name)

    def __str__(self) -> str:
        return self.canonical_name


class PrimitiveName(str, Enum):
    """Java primitive types and ``void``."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    CHAR = "char"
    FLOAT = "float"
    DOUBLE = "double"
    VOID = "void"

    def write(self, sink: Appendable, context: Context) -> Appendable:
        return sink.append(self.value)

    def referenced_classes(self) -> set[ClassName]:
        return set()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TypeVariableName:
    """A type variable such as ``T`` or ``T extends Comparable<T>``."""

    name: str
    bounds: tuple[TypeName, ...] = ()

    def __post_init__(self) -> None:
        _check_identifier(self.name, "Type variable name")

    def write(self, sink: Appendable, context: Context) -> Appendable:
        return sink.append(self.name)

    def write_declaration(self, sink: Appendable, context: Context) -> Appendable:
        """Write the variable as it appears in a type parameter list."""
        sink.append(self.name)
        if self.bounds:
            sink.append(" extends ")
            write_joined(sink, context, self.bounds, " & ")
        return sink

    def referenced_classes(self) -> set[ClassName]:
        referenced: set[ClassName] = set()
        for bound in self.bounds:
            referenced |= bound.referenced_classes()
        return referenced

    def __str__(self) -> str:
        if not self.bounds:
            return self.name
        return f"{self.name} extends {' & '.join(str(b) for b in self.bounds)}"


@dataclass(frozen=True)
class ParameterizedTypeName:
    """A generic class applied to type arguments, e.g. ``List<String>``."""

    raw_type: ClassName
    type_arguments: tuple[TypeName, ...]

    def write(self, sink: Appendable, context: Context) -> Appendable:
        self.raw_type.write(sink, context)
        sink.append("<")
        write_joined(sink, context, self.type_arguments)
        return sink.append(">")

    def referenced_classes(self) -> set[ClassName]:
        referenced = {self.raw_type}
        for argument in self.type_arguments:
            referenced |= argument.referenced_classes()
        return referenced

    def __str__(self) -> str:
        return f"{self.raw_type}<{', '.join(str(a) for a in self.type_arguments)}>"


@dataclass(frozen=True)
class ArrayTypeName:
    """An array of some component type."""

    component_type: TypeName

    def write(self, sink: Appendable, context: Context) -> Appendable:
        self.component_type.write(sink, context)
        return sink.append("[]")

    def referenced_classes(self) -> set[ClassName]:
        return self.component_type.referenced_classes()

    def __str__(self) -> str:
        return f"{self.component_type}[]"


@dataclass(frozen=True)
class WildcardName:
    """A wildcard type argument: ``?``, ``? extends X`` or ``? super X``."""

    extends_bound: TypeName | None = None
    super_bound: TypeName | None = None

    def __post_init__(self) -> None:
        if self.extends_bound is not None and self.super_bound is not None:
            raise ValueError("A wildcard cannot have both an upper and a lower bound")

    def write(self, sink: Appendable, context: Context) -> Appendable:
        sink.append("?")
        if self.extends_bound is not None:
            sink.append(" extends ")
            self.extends_bound.write(sink, context)
        elif self.super_bound is not None:
            sink.append(" super ")
            self.super_bound.write(sink, context)
        return sink

    def referenced_classes(self) -> set[ClassName]:
        bound = self.extends_bound or self.super_bound
        return bound.referenced_classes() if bound is not None else set()

    def __str__(self) -> str:
        if self.extends_bound is not None:
            return f"? extends {self.extends_bound}"
        if self.super_bound is not None:
            return f"? super {self.super_bound}"
        return "?"


_PRIMITIVES = {p.value: p for p in PrimitiveName}

# Array brackets, dotted identifiers, or single punctuation characters
_TOKEN_PATTERN = re.compile(
    r"\s*(?:(\[\s*\])|([A-Za-z_$][A-Za-z0-9_$]*(?:\s*\.\s*[A-Za-z_$][A-Za-z0-9_$]*)*)|([<>,?&]))"
)


class _TypeNameParser:
    """Recursive-descent reader for type expression strings."""

    def __init__(self, text: str, type_variables: Iterable[str]) -> None:
        self._text = text
        self._type_variables = set(type_variables)
        self._tokens = self._tokenize(text)
        self._position = 0

    def _tokenize(self, text: str) -> list[str]:
        tokens: list[str] = []
        position = 0
        while position < len(text):
            if text[position:].strip() == "":
                break
            match = _TOKEN_PATTERN.match(text, position)
            if match is None:
                raise TypeNameSyntaxError(text, f"unexpected character at offset {position}")
            if match.group(1):
                tokens.append("[]")
            elif match.group(2):
                tokens.append(re.sub(r"\s+", "", match.group(2)))
            else:
                tokens.append(match.group(3))
            position = match.end()
        return tokens

    def _peek(self) -> str | None:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise TypeNameSyntaxError(self._text, "unexpected end of input")
        self._position += 1
        return token

    def _expect(self, expected: str) -> None:
        token = self._next()
        if token != expected:
            raise TypeNameSyntaxError(self._text, f"expected '{expected}' but found '{token}'")

    def parse(self) -> TypeName:
        type_name = self._type()
        if self._peek() is not None:
            raise TypeNameSyntaxError(self._text, f"unexpected '{self._peek()}'")
        return type_name

    def _type(self, allow_wildcard: bool = False) -> TypeName:
        token = self._next()
        if token == "?":
            if not allow_wildcard:
                raise TypeNameSyntaxError(self._text, "wildcard outside type arguments")
            return self._wildcard()
        if not _IDENTIFIER_PATTERN.match(token.split(".")[0]):
            raise TypeNameSyntaxError(self._text, f"unexpected '{token}'")

        type_name: TypeName
        if token in _PRIMITIVES:
            type_name = _PRIMITIVES[token]
        elif token in self._type_variables:
            type_name = TypeVariableName(token)
        else:
            raw_type = ClassName.best_guess(token)
            if self._peek() == "<":
                self._next()
                arguments = [self._type(allow_wildcard=True)]
                while self._peek() == ",":
                    self._next()
                    arguments.append(self._type(allow_wildcard=True))
                self._expect(">")
                type_name = ParameterizedTypeName(raw_type, tuple(arguments))
            else:
                type_name = raw_type

        while self._peek() == "[]":
            self._next()
            type_name = ArrayTypeName(type_name)
        return type_name

    def _wildcard(self) -> WildcardName:
        keyword = self._peek()
        if keyword == "extends":
            self._next()
            return WildcardName(extends_bound=self._type())
        if keyword == "super":
            self._next()
            return WildcardName(super_bound=self._type())
        return WildcardName()


def parse_type_name(text: str, type_variables: Iterable[str] = ()) -> TypeName:
    """Read a type expression such as ``java.util.Map<java.lang.String, T>[]``.

    Args:
        text: The type expression.
        type_variables: Names to read as type variables rather than classes.

    Returns:
        The corresponding type name.

    Raises:
        TypeNameSyntaxError: If the text is not a type expression.
    """
    return _TypeNameParser(text, type_variables).parse()
