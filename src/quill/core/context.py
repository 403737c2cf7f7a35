"""Lexical scopes used to decide how a class reference is written.

A context binds simple names to the class names they denote at one nesting
depth and points at the context of the enclosing depth. Contexts are never
modified: deriving a narrower scope produces a new context that shares its
parent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from quill.core.names import ClassName

logger = logging.getLogger(__name__)


class Context:
    """Immutable chain of simple-name bindings.

    A class name is written in its simple form only when the nearest binding
    of its simple name is that exact class; anything else is written fully
    qualified.
    """

    def __init__(
        self,
        parent: Context | None = None,
        bindings: Mapping[str, ClassName] | None = None,
    ) -> None:
        """Create a context level.

        Args:
            parent: The enclosing context, or None for a root context.
            bindings: Simple names bound at this level.
        """
        self._parent = parent
        self._bindings: Mapping[str, ClassName] = MappingProxyType(dict(bindings or {}))
        self._depth = 0 if parent is None else parent.depth + 1

    @staticmethod
    def root() -> Context:
        """Return the shared context that binds nothing."""
        return _ROOT

    @property
    def parent(self) -> Context | None:
        return self._parent

    @property
    def depth(self) -> int:
        """Number of derivations between this context and its root."""
        return self._depth

    def bindings(self) -> Mapping[str, ClassName]:
        """Read-only view of the names bound at this level only."""
        return self._bindings

    def lookup(self, simple_name: str) -> ClassName | None:
        """Find the nearest binding of ``simple_name``, searching outward."""
        context: Context | None = self
        while context is not None:
            bound = context._bindings.get(simple_name)
            if bound is not None:
                return bound
            context = context._parent
        return None

    def is_bound(self, class_name: ClassName) -> bool:
        """Whether ``class_name`` may be written with its simple name here."""
        return self.lookup(class_name.simple_name) == class_name

    def source_reference(self, class_name: ClassName) -> str:
        """Return the text to emit for ``class_name`` under this context."""
        if self.is_bound(class_name):
            return class_name.simple_name
        return class_name.canonical_name

    def create_subcontext(self, new_types: Iterable[ClassName]) -> Context:
        """Derive a context that additionally binds ``new_types``.

        A simple name is left unbound when it is already bound further out
        to a different class, or when several of ``new_types`` share it.
        Such classes are always written fully qualified.

        Args:
            new_types: Class names to bring into scope.

        Returns:
            A new child context. This context is unchanged.
        """
        candidates: dict[str, set[ClassName]] = {}
        for class_name in new_types:
            candidates.setdefault(class_name.simple_name, set()).add(class_name)

        bindings: dict[str, ClassName] = {}
        for simple_name, names in candidates.items():
            if len(names) > 1:
                logger.debug(
                    f"Not binding '{simple_name}': ambiguous between "
                    f"{sorted(n.canonical_name for n in names)}"
                )
                continue
            (class_name,) = names
            existing = self.lookup(simple_name)
            if existing is None:
                bindings[simple_name] = class_name
            elif existing != class_name:
                logger.debug(
                    f"Not binding '{simple_name}' to {class_name.canonical_name}: "
                    f"already bound to {existing.canonical_name}"
                )

        return Context(self, bindings)

    def __repr__(self) -> str:
        names = ", ".join(n.canonical_name for n in self._bindings.values())
        return f"Context(depth={self._depth}, bindings=[{names}])"


_ROOT = Context()
