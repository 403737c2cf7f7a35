"""Quill CLI - Java class source emitter.

This module provides the command-line interface for Quill, rendering class
descriptions to Java source, listing the classes they reference, and
syntax-checking Java files.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="quill",
    help="Render Java class declarations with scope-aware name resolution",
    no_args_is_help=True,
)

# Rich consoles for formatted output
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


def configure_logging(verbose: bool) -> None:
    """Configure root logging from the config, or DEBUG in verbose mode."""
    from quill.core.config import get_config

    level = "DEBUG" if verbose else get_config().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """Quill CLI - Java class source emitter."""
    set_verbose(verbose)
    configure_logging(verbose)


def load_writer(spec_path: Path):
    """Load a class description and build its writer, exiting on failure."""
    from quill.core.serializer import SerializationError, build_class_writer, load_class_spec

    try:
        text = spec_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] Failed to read {spec_path}: {e}")
        print_exception(e)
        raise typer.Exit(1)

    try:
        spec = load_class_spec(text)
        return build_class_writer(spec)
    except SerializationError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            err_console.print(f"  {e.details}")
        print_exception(e)
        raise typer.Exit(1)


def report_issues(result) -> None:
    """Print syntax issues and exit with status 1 if there are any."""
    from quill.cli._tables import build_issues_table

    if result.is_valid:
        return
    err_console.print(build_issues_table(result.issues))
    raise typer.Exit(1)


@app.command()
def render(
    spec_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON class description",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the source to this file instead of stdout"),
    ] = None,
    check: Annotated[
        bool,
        typer.Option("--check", help="Syntax-check the rendered source"),
    ] = False,
) -> None:
    """Render a class description as Java source.

    Example:
        quill render Outer.json
        quill render Outer.json -o src/p/Outer.java --check
    """
    from quill.core.validator import check_java_source
    from quill.writer.render import render as render_source

    writer = load_writer(spec_path)
    source = render_source(writer)

    if check:
        report_issues(check_java_source(source))

    if output is None:
        typer.echo(source, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(source, encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Error:[/red] Failed to write {output}: {e}")
        print_exception(e)
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Wrote {writer.name.canonical_name} to {output}")


@app.command()
def refs(
    spec_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON class description",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """List every class a description references.

    The last column shows how each class is written directly inside the
    top-level class.

    Example:
        quill refs Outer.json
    """
    from quill.cli._tables import build_references_table
    from quill.core.context import Context

    writer = load_writer(spec_path)
    referenced = writer.referenced_classes()
    if not referenced:
        console.print("[yellow]No referenced classes[/yellow]")
        return
    context = Context.root().create_subcontext(n.name for n in writer.nested_types)
    console.print(build_references_table(referenced, context))


@app.command()
def check(
    java_path: Annotated[
        Path,
        typer.Argument(
            help="Path to a Java source file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """Syntax-check a Java source file.

    Example:
        quill check src/p/Outer.java
    """
    from quill.core.validator import check_java_source

    try:
        source = java_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] Failed to read {java_path}: {e}")
        print_exception(e)
        raise typer.Exit(1)

    report_issues(check_java_source(source))
    console.print(f"[green]✓[/green] {java_path.name} is syntactically valid")


if __name__ == "__main__":
    app()
