import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from rich.console import Console

from chatmate.cli import create_app
from chatmate.cli._commands._context import CLIContext


@pytest.fixture(autouse=True)
def cli_env(
    tmp_path: Path,
    mates_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path]:
    """Run every command from ``tmp_path`` with no user configuration.

    Creates:
        tmp_path/
            mates/          # picked up by the auto source mode
            logs/cli.log    # CLI log file
    """
    for key in list(os.environ):
        if key.startswith("CHATMATE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "chatmate.config._discovery.get_user_config_path",
        lambda: tmp_path / "user" / "config.toml",
    )
    monkeypatch.setenv("CHATMATE_LOGGING__FILE", str(tmp_path / "logs" / "cli.log"))

    yield mates_dir

    CLIContext.reset()


@pytest.fixture
def chatmate_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Returns a callable that runs the CLI, global options included, and
    suppresses SystemExit. Use chatmate_cli_with_exit_code when you need
    to check the exit code.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> None:
        try:
            app.meta(list(args))
        except SystemExit:
            pass

    return _run


@pytest.fixture
def chatmate_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(list(args))
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
