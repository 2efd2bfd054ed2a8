"""Configuration models.

This module provides Pydantic models for chatmate configuration sections
and the main Config container class.
"""

from chatmate.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from chatmate.config._models._config import Config
from chatmate.config._models._install import InstallConfig, SourceConfig
from chatmate.config._models._logging import LoggingConfig
from chatmate.config._models._security import SecurityConfig, ValidationConfig

__all__ = [
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "InstallConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SecurityConfig",
    "SourceConfig",
    "ValidationConfig",
]
