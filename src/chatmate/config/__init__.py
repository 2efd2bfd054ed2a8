"""chatmate configuration.

This module provides the public API for chatmate configuration management,
including loading, validation, and typed access to configuration values.

Example:
    >>> from chatmate.config import Config, Settings
    >>> config = Config.load()
    >>> settings = Settings.from_config(config)
    >>> config.source.mode
    <SourceModeSetting.AUTO: 'auto'>
"""

from chatmate.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    DestinationNotConfiguredError,
)

from ._defaults import DEFAULT_CONFIG
from ._discovery import (
    PROJECT_CONFIG_FILENAME,
    discover_sources,
    find_project_config,
    get_user_config_path,
)
from ._load import safe_load_config
from ._loader import (
    ENV_PREFIX,
    deep_merge,
    parse_env_vars,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    InstallConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SecurityConfig,
    SourceConfig,
    ValidationConfig,
)
from ._settings import Settings
from ._validation import (
    ValidationIssue,
    raise_if_validation_errors,
    validate_config,
    validate_source,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "DestinationNotConfiguredError",
    "InstallConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SecurityConfig",
    "Settings",
    "SourceConfig",
    "ValidationConfig",
    "ValidationIssue",
    "deep_merge",
    "discover_sources",
    "find_project_config",
    "get_user_config_path",
    "parse_env_vars",
    "raise_if_validation_errors",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
    "validate_source",
]
