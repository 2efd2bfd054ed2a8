"""Building the manager for a command and mapping its errors to exit codes."""

from contextlib import contextmanager
from functools import partial
from typing import TYPE_CHECKING

from rich.markup import escape

from chatmate.enums import OperationOutcome
from chatmate.exceptions import (
    ArtifactFormatError,
    ArtifactNotFoundError,
    CatalogCollisionError,
    ConfigError,
    DestinationNotConfiguredError,
    SecurityValidationError,
)
from chatmate.manager import ChatmateManager, RichConfirmer
from chatmate.sources import create_source

from ._context import CLIContext
from ._shared import ExitCode, exit_with_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console
    from structlog.typing import FilteringBoundLogger

    from chatmate.manager import BatchResult, OutcomeRecord

_DESTINATION_HINT = (
    "Pass --destination, set install.destination in chatmate.toml, "
    "or export CHATMATE_INSTALL__DESTINATION."
)

_OUTCOME_STYLES: dict[OperationOutcome, str] = {
    OperationOutcome.INSTALLED: "green",
    OperationOutcome.REINSTALLED: "cyan",
    OperationOutcome.SKIPPED: "dim",
    OperationOutcome.REMOVED: "yellow",
    OperationOutcome.NOT_FOUND: "red",
    OperationOutcome.VALIDATION_FAILED: "red",
}


def print_outcome(record: OutcomeRecord, *, console: Console, verbose: bool) -> None:
    """Print one outcome line as soon as the manager reports it."""
    style = _OUTCOME_STYLES[record.outcome]
    label = record.outcome.value.replace("_", " ")
    line = f"[{style}]{label:<17}[/{style}] {escape(record.name)}"
    if record.already_absent:
        line += " [dim](not installed)[/dim]"
    if verbose and record.path is not None:
        line += f" [dim]{escape(str(record.path))}[/dim]"
    console.print(line, soft_wrap=True)


def print_summary(result: BatchResult, *, console: Console) -> None:
    """Print per-outcome counts after a batch."""
    if not result.records:
        console.print("Nothing to do.")
        return
    counts = ", ".join(
        f"{len(names)} {outcome.value.replace('_', ' ')}"
        for outcome, names in result.by_outcome().items()
    )
    console.print(f"Done: {counts}.", soft_wrap=True)


def command_logger(command: str) -> FilteringBoundLogger | None:
    ctx = CLIContext.get_current()
    if ctx.logger is None:
        return None
    return ctx.logger.bind(command=command)


def build_manager(
    command: str,
    *,
    console: Console | None = None,
    stream: bool = True,
) -> ChatmateManager:
    """Create a manager for the current CLI context.

    Args:
        command: Command name bound to every log entry.
        console: Console for outcome lines and confirmation prompts.
        stream: Print each outcome as it happens.

    Raises:
        FileNotFoundError: If the configured external source directory
            does not exist.
    """
    ctx = CLIContext.get_current()
    out = console if console is not None else get_console()
    on_outcome = (
        partial(print_outcome, console=out, verbose=ctx.verbose) if stream else None
    )
    return ChatmateManager(
        ctx.settings,
        create_source(ctx.settings),
        confirmer=RichConfirmer(out),
        logger=command_logger(command),
        on_outcome=on_outcome,
    )


@contextmanager
def command_errors(command: str) -> Iterator[None]:
    """Translate library errors raised inside the block into exit codes.

    Raises:
        SystemExit: With the exit code matching the error.
    """
    try:
        yield
    except DestinationNotConfiguredError as e:
        exit_with_error(str(e), ExitCode.LOAD_ERROR, hint=_DESTINATION_HINT)
    except ConfigError as e:
        exit_with_error(str(e), ExitCode.LOAD_ERROR)
    except ArtifactNotFoundError as e:
        exit_with_error(str(e), ExitCode.NOT_FOUND)
    except (SecurityValidationError, ArtifactFormatError, CatalogCollisionError) as e:
        exit_with_error(str(e), ExitCode.VALIDATION_ERROR)
    except OSError as e:
        logger = command_logger(command)
        if logger is not None:
            logger.error("command_io_error", error=str(e))
        exit_with_error(str(e), ExitCode.IO_ERROR)
