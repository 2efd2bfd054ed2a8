# pyright: reportUnusedCallResult=false
# ruff: noqa: D415, A002
"""Read-only commands: list, status, search, and validate."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter
from rich.markup import escape

from chatmate.security import sanitize_input

from ._context import OutputFormat
from ._manager import build_manager, command_errors
from ._shared import ExitCode, exit_with_error, format_json, format_table, get_console

if TYPE_CHECKING:
    from rich.console import Console

    from chatmate.artifacts import ValidationReport
    from chatmate.manager import InstallationReport, ListingEntry


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def _print_section(
    console: Console, title: str, entries: tuple[ListingEntry, ...]
) -> None:
    console.print(f"[bold]{title}[/bold] ({len(entries)})")
    if not entries:
        console.print("  (none)")
        return
    rows = [
        [e.name, _yes_no(e.installed), _yes_no(e.in_catalog)] for e in entries
    ]
    print(format_table(["Name", "Installed", "In catalog"], rows))


def _print_report(console: Console, report: ValidationReport) -> None:
    if report.valid:
        console.print(f"[green]valid[/green]   {escape(str(report.path))}", soft_wrap=True)
    else:
        console.print(f"[red]invalid[/red] {escape(str(report.path))}", soft_wrap=True)
    for issue in report.issues:
        style = "red" if issue.level == "error" else "yellow"
        code = f" ({issue.code})" if issue.code else ""
        console.print(
            f"  [{style}]{issue.level}[/{style}]: {escape(issue.message)}{code}",
            soft_wrap=True,
        )


def _print_installation(console: Console, report: InstallationReport) -> None:
    console.print(f"Destination: {escape(str(report.destination))}", soft_wrap=True)
    console.print(
        f"  exists: {_yes_no(report.destination_exists)}, "
        f"writable: {_yes_no(report.destination_writable)}"
    )
    for filename, reason in report.invalid_catalog_names:
        console.print(
            f"[red]invalid catalog name[/red] {escape(filename)}: {escape(reason)}",
            soft_wrap=True,
        )
    for artifact in report.artifacts:
        _print_report(console, artifact)
    if report.orphans:
        console.print(
            f"[yellow]{len(report.orphans)} installed chatmate(s) not in the "
            f"catalog:[/yellow] {escape(', '.join(report.orphans))}",
            soft_wrap=True,
        )
    console.print("Healthy." if report.healthy else "Problems found.")


def list_(
    *,
    available: Annotated[
        bool,
        Parameter(name=["--available", "-a"], help="Show chatmates in the catalog"),
    ] = False,
    installed: Annotated[
        bool,
        Parameter(name=["--installed", "-i"], help="Show installed chatmates"),
    ] = False,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """List available and installed chatmates

    With neither --available nor --installed, both sections are shown.

    Args:
        available: Show the catalog section.
        installed: Show the installed section.
        format: Output format.
    """
    console = get_console()

    with command_errors("list"):
        view = build_manager("list", stream=False).list_chatmates(
            show_available=available, show_installed=installed
        )

    if format == OutputFormat.JSON:
        print(format_json(view.to_dict()))
        raise SystemExit(ExitCode.SUCCESS)

    if view.show_available:
        _print_section(console, "Available", view.available)
    if view.show_installed:
        _print_section(console, "Installed", view.installed)
    raise SystemExit(ExitCode.SUCCESS)


def status(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Show installation status

    Args:
        format: Output format.
    """
    with command_errors("status"):
        report = build_manager("status", stream=False).show_status()

    data = report.to_dict()
    if format == OutputFormat.JSON:
        print(format_json(data))
        raise SystemExit(ExitCode.SUCCESS)

    rows = [[key.replace("_", " "), _format_value(value)] for key, value in data.items()]
    print(format_table(["Field", "Value"], rows))
    raise SystemExit(ExitCode.SUCCESS)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return _yes_no(value)
    if isinstance(value, float):
        return f"{value}%"
    return str(value)


def search(
    term: str,
    /,
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Search the catalog by name

    Matching is a case-insensitive substring match on display names.

    Args:
        term: Text to look for.
        format: Output format.
    """
    console = get_console()
    needle = sanitize_input(term)

    with command_errors("search"):
        try:
            hits = build_manager("search", stream=False).search(needle)
        except ValueError as e:
            exit_with_error(str(e), ExitCode.VALIDATION_ERROR)

    if format == OutputFormat.JSON:
        print(format_json({"term": needle, "matches": [h.to_dict() for h in hits]}))
        raise SystemExit(ExitCode.SUCCESS)

    if not hits:
        console.print(f"No chatmates match '{escape(needle)}'.")
        raise SystemExit(ExitCode.SUCCESS)

    for hit in hits:
        marker = " [green](installed)[/green]" if hit.installed else ""
        console.print(f"{escape(hit.name)}{marker}", soft_wrap=True)
    raise SystemExit(ExitCode.SUCCESS)


def validate(
    *paths: Annotated[Path, Parameter(help="Artifact files to check")],
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json)"),
    ] = OutputFormat.TABLE,
) -> None:
    """Validate chatmate files

    With no paths, checks the destination directory and every installed
    chatmate instead. Exits with code 2 if any file is invalid.

    Args:
        paths: Artifact files to check.
        format: Output format.
    """
    console = get_console()

    with command_errors("validate"):
        manager = build_manager("validate", stream=False)
        if not paths:
            installation = manager.validate_installation()
        else:
            reports = [manager.validate_artifact(path) for path in paths]

    if not paths:
        if format == OutputFormat.JSON:
            print(format_json(installation.to_dict()))
        else:
            _print_installation(console, installation)
        code = ExitCode.SUCCESS if installation.healthy else ExitCode.VALIDATION_ERROR
        raise SystemExit(code)

    if format == OutputFormat.JSON:
        print(format_json({"artifacts": [r.to_dict() for r in reports]}))
    else:
        for report in reports:
            _print_report(console, report)

    valid = all(r.valid for r in reports)
    raise SystemExit(ExitCode.SUCCESS if valid else ExitCode.VALIDATION_ERROR)
