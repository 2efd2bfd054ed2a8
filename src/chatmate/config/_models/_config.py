# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration container with typed access.

This module provides the main Config class that serves as the primary
interface for accessing chatmate configuration values.
"""

from typing import TYPE_CHECKING, Any, ClassVar, TypeVar, overload

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from chatmate.config._defaults import DEFAULT_CONFIG
from chatmate.config._loader import (
    copy_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
)
from chatmate.config._models._common import ConfigSource, ConfigSourceName
from chatmate.config._models._install import InstallConfig, SourceConfig
from chatmate.config._models._logging import LoggingConfig
from chatmate.config._models._security import SecurityConfig, ValidationConfig

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Self

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def _parse_section(model: type[M], data: Any) -> M:
    """Parse a section dictionary, falling back to defaults on bad values.

    Only reached with invalid values when validation was skipped.
    """
    try:
        return model.model_validate(data if isinstance(data, dict) else {})
    except ValidationError:
        return model()


class Config(BaseModel):
    """Configuration container with typed access.

    This class provides immutable, type-safe access to chatmate
    configuration. Use factory methods to create instances rather than
    the constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _install: InstallConfig = PrivateAttr(default_factory=InstallConfig)
    _source: SourceConfig = PrivateAttr(default_factory=SourceConfig)
    _security: SecurityConfig = PrivateAttr(default_factory=SecurityConfig)
    _validation: ValidationConfig = PrivateAttr(default_factory=ValidationConfig)

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _sources: tuple[ConfigSource, ...] = (),
    ) -> None:
        """Initialize configuration container.

        This constructor is intended for internal use. Use factory methods
        like from_dict(), from_file(), or load() to create Config instances.

        Args:
            _data: The complete merged configuration dictionary.
            _sources: Sources that contributed to this configuration.
        """
        super().__init__()
        data = _data if _data is not None else copy_value(DEFAULT_CONFIG)
        self._data = data
        self._sources = _sources
        self._logging = _parse_section(LoggingConfig, data.get("logging"))
        self._install = _parse_section(InstallConfig, data.get("install"))
        self._source = _parse_section(SourceConfig, data.get("source"))
        self._security = _parse_section(SecurityConfig, data.get("security"))
        self._validation = _parse_section(ValidationConfig, data.get("validation"))

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        validate: bool = True,
    ) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values.
            validate: Whether to validate the configuration.

        Returns:
            Configuration object from the dictionary merged over defaults.

        Raises:
            ConfigValidationError: If validation fails (when validate=True).
        """
        # Deferred import to avoid circular dependency
        from chatmate.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)

        if validate:
            raise_if_validation_errors(validate_config(merged))

        return cls(_data=merged)

    @classmethod
    def from_file(
        cls,
        path: Path,
        *,
        validate: bool = True,
        overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to the TOML config file.
            validate: Whether to validate the loaded config.
            overrides: CLI overrides applied on top of the file.

        Returns:
            Configuration object from the specified file only.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        from chatmate.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        data = read_toml_file(path)
        sources = [
            ConfigSource(
                name=ConfigSourceName.PROJECT,
                path=path,
                exists=True,
                values=data,
            )
        ]

        merged = deep_merge(DEFAULT_CONFIG, data)
        if overrides:
            merged = deep_merge(merged, overrides)
            sources.insert(
                0,
                ConfigSource(
                    name=ConfigSourceName.CLI,
                    path=None,
                    exists=True,
                    values=overrides,
                ),
            )

        if validate:
            raise_if_validation_errors(validate_config(merged), source=str(path))

        return cls(_data=merged, _sources=tuple(sources))

    @classmethod
    def load(
        cls,
        *,
        start: Path | None = None,
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Discovers all configuration sources and merges them in precedence
        order (defaults -> user -> project -> env -> cli).

        Args:
            start: Directory the chatmate.toml search starts from. Defaults
                to the current working directory.
            include_env: Include environment variables as a source.
            include_cli: Include CLI overrides.
            cli_overrides: Dict of CLI argument overrides. Only used if
                include_cli is True.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If config files cannot be loaded.
            ConfigValidationError: If merged config fails validation.
        """
        from chatmate.config._discovery import discover_sources  # noqa: PLC0415
        from chatmate.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        sources = discover_sources(
            start,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        # Sources are discovered highest-to-lowest, so reverse for merging
        merged: dict[str, Any] = {}
        loaded_sources: list[ConfigSource] = []

        for source in reversed(sources):
            values: dict[str, Any] = {}

            if source.name in (ConfigSourceName.DEFAULT, ConfigSourceName.CLI):
                values = source.values
            elif source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.path and source.exists:
                values = read_toml_file(source.path)

            loaded_sources.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )

            if values:
                merged = deep_merge(merged, values)

        raise_if_validation_errors(validate_config(merged))

        return cls(_data=merged, _sources=tuple(reversed(loaded_sources)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the sources that contributed to this configuration."""
        return list(self._sources)

    @property
    def logging(self) -> LoggingConfig:
        """Return the logging configuration section."""
        return self._logging

    @property
    def install(self) -> InstallConfig:
        """Return the install configuration section."""
        return self._install

    @property
    def source(self) -> SourceConfig:
        """Return the source configuration section."""
        return self._source

    @property
    def security(self) -> SecurityConfig:
        """Return the security configuration section."""
        return self._security

    @property
    def validation(self) -> ValidationConfig:
        """Return the validation configuration section."""
        return self._validation

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, default: T) -> T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Examples:
            >>> config.get("source.mode")
            'auto'
            >>> config.get("nonexistent", "fallback")
            'fallback'
        """
        current: Any = self._data

        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        return current

    def to_dict(self, *, include_defaults: bool = True) -> dict[str, Any]:
        """Convert configuration to a dictionary.

        Args:
            include_defaults: Whether to include default values. If False,
                only values that differ from defaults are included.
        """
        if include_defaults:
            return copy_value(self._data)
        return _diff_from_defaults(self._data, DEFAULT_CONFIG)

    def to_toml(self, *, include_defaults: bool = False) -> str:
        """Convert configuration to a TOML string.

        Args:
            include_defaults: Whether to include default values. If False,
                only values that differ from defaults are included.
        """
        return tomli_w.dumps(self.to_dict(include_defaults=include_defaults))


def _diff_from_defaults(
    data: dict[str, Any],
    defaults: dict[str, Any],
) -> dict[str, Any]:
    """Extract values that differ from defaults."""
    result: dict[str, Any] = {}

    for key, value in data.items():
        if key not in defaults:
            result[key] = copy_value(value)
        elif isinstance(value, dict) and isinstance(defaults[key], dict):
            nested_diff = _diff_from_defaults(value, defaults[key])
            if nested_diff:
                result[key] = nested_diff
        elif value != defaults[key]:
            result[key] = copy_value(value)

    return result
