"""The command-line interface for chatmate."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from chatmate.config import Settings, safe_load_config
from chatmate.utils import create_cli_logger

from ._commands import register_commands
from ._commands._context import CLIContext

_HELP = "Install and manage chatmates for your editor's chat panel."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="chatmate",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        destination: Annotated[
            Path | None,
            Parameter(name="--destination", help="Directory to install chatmates into"),
        ] = None,
    ) -> None:
        """Launch the chatmate CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable verbose output and debug logging.
            config: Explicit path to config file.
            destination: Destination directory, overriding configuration.
        """
        cli_overrides: dict[str, object] | None = None
        if verbose or destination is not None:
            cli_overrides = {}
            if verbose:
                cli_overrides["logging"] = {"level": "debug"}
            if destination is not None:
                cli_overrides["install"] = {"destination": str(destination)}

        loaded_config, config_error = safe_load_config(
            config_path=config,
            cli_overrides=cli_overrides,
        )

        cli_logger = create_cli_logger(
            level=loaded_config.logging.level.value,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.logging.file,
        )

        ctx = CLIContext(
            config=loaded_config,
            settings=Settings.from_config(loaded_config),
            verbose=verbose,
            config_error=config_error,
            logger=cli_logger,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `chatmate` CLI."""
    app = create_app()
    app.meta()
