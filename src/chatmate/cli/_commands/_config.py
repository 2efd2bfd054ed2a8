# pyright: reportUnusedCallResult=false
# ruff: noqa: D415, A002
"""Command for viewing the effective chatmate configuration."""

from typing import Annotated, Any

from cyclopts import Parameter

from chatmate.config import validate_config

from ._context import CLIContext, OutputFormat
from ._manager import build_manager, command_errors
from ._shared import ExitCode, FormattableData, format_json, format_table


def _flatten(data: FormattableData, prefix: str = "") -> list[list[str]]:
    """Flatten nested sections into dot-notation key/value rows."""
    rows: list[list[str]] = []
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            rows.extend(_flatten(value, full_key))  # pyright: ignore[reportUnknownArgumentType]
        else:
            rows.append([full_key, _stringify(value)])
    return rows


def _stringify(value: Any) -> str:  # pyright: ignore[reportExplicitAny, reportAny]
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)  # pyright: ignore[reportUnknownVariableType]
    if value is None or value == "":
        return "(unset)"
    return str(value)


def config(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json, toml)"),
    ] = OutputFormat.TABLE,
    sources: Annotated[
        bool,
        Parameter(name="--sources", help="List the configuration files consulted"),
    ] = False,
    no_defaults: Annotated[
        bool,
        Parameter(name="--no-defaults", help="Exclude default values (toml only)"),
    ] = False,
) -> None:
    """Display the effective configuration

    Shows the merged configuration, followed by the settings the commands
    actually use, including the selected source.

    Args:
        format: Output format.
        sources: List configuration sources in precedence order instead.
        no_defaults: Only show values that differ from the defaults.
    """
    ctx = CLIContext.get_current()

    if sources:
        rows = [
            [
                source.name.value,
                str(source.path) if source.path else "-",
                "yes" if source.exists else "no",
            ]
            for source in ctx.config.sources
        ]
        if format == OutputFormat.JSON:
            data = [
                {"name": r[0], "path": r[1], "exists": r[2] == "yes"} for r in rows
            ]
            print(format_json({"sources": data}))
        else:
            print(format_table(["Source", "Path", "Exists"], rows))
        raise SystemExit(ExitCode.SUCCESS)

    if format == OutputFormat.TOML:
        print(ctx.config.to_toml(include_defaults=not no_defaults).rstrip())
        raise SystemExit(ExitCode.SUCCESS)

    with command_errors("config"):
        effective = build_manager("config", stream=False).describe_config()

    merged = ctx.config.to_dict()
    issues = [
        {"key": i.key, "message": i.message} for i in validate_config(merged)
    ]

    if format == OutputFormat.JSON:
        print(
            format_json(
                {
                    "config": merged,
                    "effective": effective,
                    "issues": issues,
                    "error": ctx.config_error,
                }
            )
        )
        raise SystemExit(ExitCode.SUCCESS)

    print(format_table(["Key", "Value"], _flatten(effective)))
    if ctx.config_error:
        print(f"\nWarning: configuration could not be loaded: {ctx.config_error}")
    for issue in issues:
        print(f"Warning: {issue['key']}: {issue['message']}")
    raise SystemExit(ExitCode.SUCCESS)
