"""Shared utilities for chatmate."""

from ._logging import LogFormatType, create_cli_logger, create_null_logger
from ._paths import get_cli_log_file, get_log_dir

__all__ = [
    "LogFormatType",
    "create_cli_logger",
    "create_null_logger",
    "get_cli_log_file",
    "get_log_dir",
]
