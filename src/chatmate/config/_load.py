import os
import sys
from typing import TYPE_CHECKING

from chatmate.exceptions import ConfigError

from ._models import Config

if TYPE_CHECKING:
    from pathlib import Path


def _fail_or_warn(message: str, *, strict: bool) -> Config:
    if strict:
        print(f"Error: {message}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"Warning: {message}", file=sys.stderr)  # noqa: T201
    return Config.from_dict({})


def safe_load_config(
    *,
    config_path: Path | None = None,
    start: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Attempts to load configuration and handles errors based on the
    CHATMATE_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return default config
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request).

    Args:
        config_path: Explicit path to config file (--config flag).
        start: Directory the chatmate.toml search starts from.
        cli_overrides: CLI argument overrides applied over every other source.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns default Config with error message.
    """
    strict_mode = os.environ.get("CHATMATE_STRICT_CONFIG", "0") == "1"

    if config_path is not None and not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    try:
        if config_path is not None:
            config = Config.from_file(config_path, overrides=cli_overrides)
        else:
            config = Config.load(
                start=start,
                include_env=True,
                include_cli=cli_overrides is not None,
                cli_overrides=cli_overrides,
            )
    except ConfigError as e:
        error_msg = str(e)
        fallback = _fail_or_warn(
            f"Failed to load config: {error_msg}", strict=strict_mode
        )
        return fallback, error_msg
    except OSError as e:
        error_msg = f"Failed to load config: {e}"
        return _fail_or_warn(error_msg, strict=strict_mode), error_msg
    else:
        return config, None
