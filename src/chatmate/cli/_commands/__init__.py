"""chatmate CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._config import config
from ._context import CLIContext, OutputFormat
from ._install import cleanup, hire, uninstall
from ._manager import build_manager, command_errors, print_outcome
from ._report import list_, search, status, validate
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    exit_with_success,
    format_json,
    format_table,
    get_console,
    get_error_console,
)

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "build_manager",
    "command_errors",
    "exit_with_error",
    "exit_with_success",
    "format_json",
    "format_table",
    "get_console",
    "get_error_console",
    "print_outcome",
    "register_commands",
]


def register_commands(app: App) -> None:
    app.command(hire, name="hire")
    app.command(uninstall, name="uninstall")
    app.command(cleanup, name="cleanup")
    app.command(list_, name="list")
    app.command(status, name="status")
    app.command(search, name="search")
    app.command(validate, name="validate")
    app.command(config, name="config")
