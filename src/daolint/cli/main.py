"""daolint CLI - DAO naming convention checker.

This module provides the command-line interface for daolint,
enabling conformance checks and knowledge base inspection.
"""

from __future__ import annotations

import json
import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="daolint",
    help="Check that DAO methods operate on the entity their class is named after",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    root = logging.getLogger("daolint")
    root.handlers = [RichHandler(console=err_console, show_path=False)]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """daolint CLI - DAO naming convention checker."""
    set_verbose(verbose)
    configure_logging(verbose)


@app.command()
def check(
    path: Annotated[
        Path,
        typer.Argument(help="Source directory or file to check"),
    ],
    suffix: Annotated[
        Optional[str],
        typer.Option("--suffix", "-s", help="Class name suffix marking a DAO (default: DAO)"),
    ] = None,
    knowledge_path: Annotated[
        Optional[list[Path]],
        typer.Option(
            "--knowledge-path", "-k",
            help="Extra source root scanned for enums and supertypes (repeatable)",
        ),
    ] = None,
    transitive: Annotated[
        bool,
        typer.Option("--transitive", help="Follow registered supertypes beyond one level"),
    ] = False,
    all_classes: Annotated[
        bool,
        typer.Option("--all-classes", help="Classify every top-level type, not only DAOs"),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the JSON report to a file"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with code 1 if any method is non-conforming"),
    ] = False,
) -> None:
    """Classify the public methods of every DAO class under PATH."""
    from daolint.cli._tables import build_report_table
    from daolint.core.config import get_config
    from daolint.core.serializer import SerializationError, serialize
    from daolint.services import AnalyzerService

    if not path.exists():
        err_console.print(f"[red]Error:[/red] Path not found: {path}")
        raise typer.Exit(1)

    updates: dict[str, object] = {}
    if suffix is not None:
        updates["entity_suffix"] = suffix
    if transitive:
        updates["transitive_supertypes"] = True
    if all_classes:
        updates["dao_only"] = False
    config = get_config().model_copy(update=updates)

    service = AnalyzerService(config)
    try:
        if json_output:
            result = service.check(path, knowledge_path or [])
        else:
            with console.status("[bold blue]Checking..."):
                result = service.check(path, knowledge_path or [])
        report = result.to_report(config.entity_suffix)
        report_json = serialize(report)
    except SerializationError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            err_console.print(f"  {e.details}")
        print_exception(e)
        raise typer.Exit(1)

    if output is not None:
        try:
            output.write_text(report_json, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]Error:[/red] Failed to write report: {e}")
            print_exception(e)
            raise typer.Exit(1)

    if json_output:
        typer.echo(report_json)
    else:
        for dao_report in result.reports:
            console.print(build_report_table(dao_report))
        console.print(f"[green]✓[/green] Checked {result.classes_checked} class(es) in {result.files_scanned} file(s)")
        console.print(f"  Conforming methods: {result.conforming_count}")
        if result.violation_count:
            console.print(f"  [yellow]Non-conforming methods: {result.violation_count}[/yellow]")
        else:
            console.print("  Non-conforming methods: 0")
        if output is not None:
            console.print(f"  Report written to {output}")

    if not result.success:
        err_console.print("[red]Error:[/red] Some files could not be analyzed")
        for error in result.errors:
            err_console.print(f"  - {error}")
        raise typer.Exit(1)

    if strict and result.violation_count:
        raise typer.Exit(1)


@app.command()
def knowledge(
    path: Annotated[
        Path,
        typer.Argument(help="Source directory or file to scan"),
    ],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Show the enumerators and supertypes found under PATH."""
    from daolint.cli._tables import build_enumerators_table, build_supertypes_table
    from daolint.services import AnalyzerService

    if not path.exists():
        err_console.print(f"[red]Error:[/red] Path not found: {path}")
        raise typer.Exit(1)

    kb = AnalyzerService().build_knowledge_base(path)

    if json_output:
        data = {
            "enumerators": sorted(kb.enumerators),
            "supertypes": {k: sorted(v) for k, v in sorted(kb.supertypes.items())},
        }
        typer.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    console.print(build_enumerators_table(kb.enumerators))
    console.print(build_supertypes_table(kb.supertypes))


if __name__ == "__main__":
    app()
