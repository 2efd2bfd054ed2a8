"""Effective settings passed to core components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Self

from chatmate.artifacts import MIN_CONTENT_LENGTH
from chatmate.enums import SourceModeSetting
from chatmate.exceptions import DestinationNotConfiguredError
from chatmate.security import DEFAULT_POLICY, SecurityPolicy

if TYPE_CHECKING:
    from chatmate.config._models import Config


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable settings built once per invocation.

    Every core component receives this value through its constructor
    instead of reading module-level state.

    Attributes:
        destination: Directory artifacts are installed into, or None if
            not configured.
        create_destination: Create the destination on install if missing.
        source_mode: Configured source mode (``auto`` is resolved by
            ``create_source``).
        source_directory: External source directory.
        policy: Security policy for every mutating operation.
        min_content_length: Minimum artifact length for file validation.
    """

    destination: Path | None = None
    create_destination: bool = True
    source_mode: SourceModeSetting = SourceModeSetting.AUTO
    source_directory: Path = field(default_factory=lambda: Path("mates"))
    policy: SecurityPolicy = DEFAULT_POLICY
    min_content_length: int = MIN_CONTENT_LENGTH

    @classmethod
    def from_config(cls, config: Config) -> Self:
        """Build settings from a loaded configuration."""
        destination = config.install.destination.strip()
        return cls(
            destination=Path(destination).expanduser() if destination else None,
            create_destination=config.install.create_destination,
            source_mode=config.source.mode,
            source_directory=Path(config.source.directory).expanduser(),
            policy=SecurityPolicy(max_content_bytes=config.security.max_content_bytes),
            min_content_length=config.validation.min_content_length,
        )

    def require_destination(self) -> Path:
        """Return the destination directory.

        Raises:
            DestinationNotConfiguredError: If no destination is configured.
        """
        if self.destination is None:
            msg = (
                "No destination directory configured; set install.destination "
                "or CHATMATE_INSTALL__DESTINATION"
            )
            raise DestinationNotConfiguredError(msg)
        return self.destination
