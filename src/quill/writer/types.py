"""Base class for writers of type declarations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from quill.core.names import ClassName, TypeName
from quill.writer.base import Modifiable
from quill.writer.methods import MethodWriter

if TYPE_CHECKING:
    from quill.core.context import Context
    from quill.writer.sink import Appendable


class TypeWriter(Modifiable, ABC):
    """Name, supertypes and methods common to all type declarations."""

    def __init__(self, name: ClassName) -> None:
        super().__init__()
        self._name = name
        self._supertype: TypeName | None = None
        self._implemented_types: list[TypeName] = []
        self._methods: list[MethodWriter] = []

    @property
    def name(self) -> ClassName:
        return self._name

    @property
    def supertype(self) -> TypeName | None:
        return self._supertype

    @property
    def implemented_types(self) -> tuple[TypeName, ...]:
        return tuple(self._implemented_types)

    @property
    def methods(self) -> tuple[MethodWriter, ...]:
        return tuple(self._methods)

    def set_supertype(self, supertype: TypeName) -> None:
        """Set the extended type, replacing any previous one."""
        self._supertype = supertype

    def add_implemented_type(self, type_name: TypeName) -> None:
        """Append an implemented interface; duplicates are not detected."""
        self._implemented_types.append(type_name)

    def add_method(self, return_type: TypeName, name: str) -> MethodWriter:
        method = MethodWriter(return_type, name)
        self._methods.append(method)
        return method

    @abstractmethod
    def write(self, sink: Appendable, context: Context) -> Appendable:
        """Write the declaration, resolving names against ``context``."""

    @abstractmethod
    def referenced_classes(self) -> set[ClassName]:
        """Every class mentioned anywhere in the declaration."""
