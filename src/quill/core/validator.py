"""Syntax check for rendered Java source.

This module parses source text with tree-sitter-java and reports every
error or missing node, so rendered output can be checked for well-formedness
before it is written anywhere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

import tree_sitter_java as tsjava
from tree_sitter import Language, Node, Parser

logger = logging.getLogger(__name__)

_JAVA_LANGUAGE = Language(tsjava.language())


class SyntaxIssueKind(str, Enum):
    """Kinds of syntax issues."""

    ERROR = "error"
    MISSING = "missing"


@dataclass
class SyntaxIssue:
    """A single syntax issue, with 1-based line and character column."""

    kind: SyntaxIssueKind
    line: int
    column: int
    message: str


@dataclass
class ValidationResult:
    """Result of a syntax check."""

    is_valid: bool
    issues: list[SyntaxIssue] = field(default_factory=list)

    def add_issue(
        self, kind: SyntaxIssueKind, node: Node, message: str, content: bytes
    ) -> None:
        """Record an issue located at ``node``.

        tree-sitter reports columns in bytes; ``content`` is the parsed source,
        used to turn that into a character column.
        """
        row, byte_column = node.start_point
        line_prefix = content[node.start_byte - byte_column:node.start_byte]
        column = len(line_prefix.decode("utf-8", errors="replace"))
        self.issues.append(
            SyntaxIssue(kind=kind, line=row + 1, column=column + 1, message=message)
        )
        self.is_valid = False


def check_java_source(source: str) -> ValidationResult:
    """Check that ``source`` parses as a Java compilation unit.

    Args:
        source: Java source text.

    Returns:
        ValidationResult listing every error and missing node found.
    """
    parser = Parser(_JAVA_LANGUAGE)
    content = source.encode("utf-8")
    tree = parser.parse(content)
    result = ValidationResult(is_valid=True)

    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.is_missing:
            result.add_issue(SyntaxIssueKind.MISSING, node, f"Missing '{node.type}'", content)
        elif node.is_error:
            text = content[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
            snippet = text.splitlines()[0] if text else ""
            message = f"Unexpected input: {snippet!r}"
            result.add_issue(SyntaxIssueKind.ERROR, node, message, content)
        elif node.has_error:
            stack.extend(reversed(node.children))

    result.issues.sort(key=lambda issue: (issue.line, issue.column))
    if not result.is_valid:
        logger.debug(f"Syntax check found {len(result.issues)} issue(s)")
    return result
