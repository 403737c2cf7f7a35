"""Rich table builders used by the CLI."""

from __future__ import annotations

from rich.table import Table

from quill.core.context import Context


def build_references_table(class_names, context: Context) -> Table:
    """Build the (Simple Name, Qualified Name, Written As) table for `refs`."""
    table = Table(show_header=True, title="Referenced Classes")
    table.add_column("Simple Name", style="cyan")
    table.add_column("Qualified Name")
    table.add_column("Written As")
    for class_name in sorted(class_names, key=lambda n: n.canonical_name):
        table.add_row(
            class_name.simple_name,
            class_name.canonical_name,
            context.source_reference(class_name),
        )
    return table


def build_issues_table(issues) -> Table:
    """Build the syntax issue table for `check` and `render --check`."""
    table = Table(show_header=True, title="Syntax Issues")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    table.add_column("Kind")
    table.add_column("Message")
    for issue in issues:
        table.add_row(str(issue.line), str(issue.column), issue.kind.value, issue.message)
    return table
