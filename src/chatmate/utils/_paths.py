from pathlib import Path

from platformdirs import user_log_path


def get_log_dir() -> Path:
    """Get the per-user chatmate log directory."""
    return user_log_path("chatmate")


def get_cli_log_file() -> Path:
    """Get the path to the CLI log file.

    Returns:
        Path to the CLI log file (<user log dir>/cli.log).
    """
    return get_log_dir() / "cli.log"
