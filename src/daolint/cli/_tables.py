"""Rich table builders used by the CLI.

Kept separate to keep the command module smaller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.markup import escape
from rich.table import Table

from daolint.core.models import DaoReport
from daolint.engine.signature import KeyFormatError, parse_key


def _split_key(key: str) -> tuple[str, str, str]:
    try:
        name, arity, types = parse_key(key)
    except KeyFormatError:
        return key, "?", ""
    return name, str(arity), ", ".join(types)


def build_report_table(report: DaoReport) -> Table:
    """Build a (Method, Arity, Parameters, Verdict) table for one DAO class."""
    title = f"{report.class_name} (entity: {report.entity_name})"
    if report.file_path:
        title += f" [dim]{escape(report.file_path)}[/dim]"
    table = Table(show_header=True, title=title)
    table.add_column("Method")
    table.add_column("Arity", justify="right")
    table.add_column("Parameters")
    table.add_column("Verdict")

    rows = [(key, "[green]conforming[/green]") for key in report.conforming]
    rows += [(key, "[red]non-conforming[/red]") for key in report.non_conforming]
    for key, verdict in sorted(rows):
        name, arity, types = _split_key(key)
        table.add_row(name, arity, types, verdict)
    return table


def build_enumerators_table(enumerators: Iterable[str]) -> Table:
    """Build the enumerators listing table."""
    table = Table(show_header=True, title="Enumerators")
    table.add_column("Name", style="cyan")
    for name in sorted(enumerators):
        table.add_row(name)
    return table


def build_supertypes_table(supertypes: Mapping[str, set[str]]) -> Table:
    """Build the type -> supertypes listing table."""
    table = Table(show_header=True, title="Supertypes")
    table.add_column("Type", style="cyan")
    table.add_column("Direct Supertypes")
    for type_name in sorted(supertypes):
        table.add_row(type_name, ", ".join(sorted(supertypes[type_name])))
    return table
