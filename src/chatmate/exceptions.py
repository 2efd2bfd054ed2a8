"""Chatmate exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ChatmateError(Exception):
    """Base exception for chatmate errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(ChatmateError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


class DestinationNotConfiguredError(ConfigError):
    """Raised when an operation needs a destination directory but none is set."""


# =============================================================================
# Security Exceptions
# =============================================================================


class SecurityValidationError(ChatmateError, ValueError):
    """Base exception for security validation failures.

    Security failures are detected before any filesystem mutation and are
    never retried.

    Attributes:
        field: The input that failed validation ("filename", "path", "content").
        value: A printable rendering of the rejected value.
        reason: Human-readable reason for the rejection.
        code: Stable machine-readable rejection code.
    """

    def __init__(
        self,
        reason: str,
        *,
        field: str,
        value: str,
        code: str,
    ) -> None:
        """Initialize with the rejection reason and validation context.

        Args:
            reason: Human-readable reason for the rejection.
            field: The input that failed validation.
            value: A printable rendering of the rejected value.
            code: Stable machine-readable rejection code.
        """
        super().__init__(
            f"security validation failed for {field}: {reason} (code: {code})"
        )
        self.field: str = field
        self.value: str = value
        self.reason: str = reason
        self.code: str = code


class InvalidNameError(SecurityValidationError):
    """Raised when a filename contains disallowed characters or is empty."""


class PathEscapeError(SecurityValidationError):
    """Raised when a destination path resolves outside the destination root."""


class SizeExceededError(SecurityValidationError):
    """Raised when content is larger than the configured ceiling."""


class BadExtensionError(SecurityValidationError):
    """Raised when a filename does not end in an allowed extension."""


# =============================================================================
# Artifact Exceptions
# =============================================================================


class ArtifactError(ChatmateError):
    """Base exception for artifact operations."""


class ArtifactNotFoundError(ArtifactError, KeyError):
    """Raised when one or more artifacts cannot be found.

    Attributes:
        names: The display names or filenames that were not found.
    """

    def __init__(self, message: str, *, names: tuple[str, ...] = ()) -> None:
        """Initialize with error message and lookup context.

        Args:
            message: Human-readable error message.
            names: The display names or filenames that were not found.
        """
        super().__init__(message)
        self.names: tuple[str, ...] = names

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class CatalogCollisionError(ArtifactError, ValueError):
    """Raised when two source filenames derive the same display name.

    Attributes:
        name: The colliding display name.
        filenames: The source filenames that collide.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str,
        filenames: tuple[str, ...],
    ) -> None:
        """Initialize with error message and collision context.

        Args:
            message: Human-readable error message.
            name: The colliding display name.
            filenames: The source filenames that collide.
        """
        super().__init__(message)
        self.name: str = name
        self.filenames: tuple[str, ...] = filenames


class ArtifactFormatError(ArtifactError, ValueError):
    """Raised when artifact content does not match the artifact file format.

    Attributes:
        path: Path to the artifact file, when validating a file on disk.
        field: The header field that failed validation, if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize with error message and format context.

        Args:
            message: Human-readable error message.
            path: Path to the artifact file, when validating a file on disk.
            field: The header field that failed validation, if applicable.
        """
        super().__init__(message)
        self.path: Path | None = path
        self.field: str | None = field
