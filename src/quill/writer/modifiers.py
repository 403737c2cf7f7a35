"""Java declaration modifiers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Modifier(str, Enum):
    """Java modifiers, declared in the order they are written."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    DEFAULT = "default"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    STRICTFP = "strictfp"

    def __str__(self) -> str:
        return self.value


VISIBILITY_MODIFIERS = frozenset({Modifier.PUBLIC, Modifier.PROTECTED, Modifier.PRIVATE})


def in_declaration_order(modifiers: Iterable[Modifier]) -> list[Modifier]:
    """Sort modifiers into conventional Java order."""
    present = set(modifiers)
    return [m for m in Modifier if m in present]


def visibility_of(modifiers: Iterable[Modifier]) -> frozenset[Modifier]:
    """Restrict a modifier set to its visibility modifiers."""
    return VISIBILITY_MODIFIERS.intersection(modifiers)
