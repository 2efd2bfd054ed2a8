"""Configuration file discovery.

This module locates the project config file by searching upward from the
working directory for ``chatmate.toml``, and the per-user config file in
the platform-specific config directory.
"""

from pathlib import Path
from typing import Any

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._models._common import ConfigSource, ConfigSourceName

PROJECT_CONFIG_FILENAME = "chatmate.toml"


def find_project_config(start: Path | None = None) -> Path | None:
    """Find the nearest chatmate.toml by searching upward.

    Args:
        start: Directory to start searching from. Defaults to current
            working directory if not specified.

    Returns:
        Path to the config file, or None if the filesystem root is reached
        without finding one.
    """
    current = (start or Path.cwd()).resolve()

    while True:
        candidate = current / PROJECT_CONFIG_FILENAME
        if _file_exists(candidate):
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/chatmate/config.toml``
    - macOS: ``~/Library/Application Support/chatmate/config.toml``
    - Windows: ``%LOCALAPPDATA%\chatmate\config.toml``

    The path is returned regardless of whether the file exists.
    """
    return platformdirs.user_config_path("chatmate") / "config.toml"


def _file_exists(path: Path) -> bool:
    """Check if a file exists, treating permission errors as absent."""
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    start: Path | None = None,
    *,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover all configuration sources.

    Args:
        start: Directory the project config search starts from.
        include_env: Include environment variables as a source.
        include_cli: Include CLI overrides as a source.
        cli_overrides: Dictionary of CLI argument overrides. Only used
            if include_cli is True.

    Returns:
        List of ConfigSource objects in precedence order (highest first).
        File sources that don't exist are still included with exists=False.
    """
    sources: list[ConfigSource] = []

    if include_cli:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides or {},
            )
        )

    if include_env:
        # Values are parsed during loading
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    project_path = find_project_config(start)
    if project_path is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.PROJECT,
                path=project_path,
                exists=True,
                values={},
            )
        )

    user_path = get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources
