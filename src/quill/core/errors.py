"""Exception types raised by Quill."""

from __future__ import annotations


class QuillError(Exception):
    """Base class for Quill errors."""


class DuplicateDeclarationError(QuillError, ValueError):
    """A declaration with the same simple name already exists at this level."""

    def __init__(self, kind: str, name: str, owner: str) -> None:
        super().__init__(f"{owner} already declares a {kind} named '{name}'")
        self.kind = kind
        self.name = name
        self.owner = owner


class TypeNameSyntaxError(QuillError, ValueError):
    """A type expression string could not be read."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid type name {text!r}: {reason}")
        self.text = text
        self.reason = reason
