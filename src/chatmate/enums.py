"""Enumeration types for chatmate."""

from enum import StrEnum


class SourceMode(StrEnum):
    """Where the artifact catalog is read from."""

    EMBEDDED = "embedded"
    EXTERNAL = "external"


class SourceModeSetting(StrEnum):
    """Configured source mode; ``auto`` is resolved once at construction."""

    AUTO = "auto"
    EMBEDDED = "embedded"
    EXTERNAL = "external"


class OperationOutcome(StrEnum):
    """Per-artifact result of an install or uninstall step."""

    INSTALLED = "installed"
    REINSTALLED = "reinstalled"
    SKIPPED = "skipped"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
