"""Data classes for the artifact system.

This module defines the core data structures shared by sources, the
installer, and the reporter:
- CatalogEntry and Artifact for resolvable artifacts
- ArtifactHeader for the validated metadata header
- ArtifactIssue and ValidationReport for file validation results
"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """An artifact resolvable from a source, without its content.

    Attributes:
        name: Display name (filename with the artifact suffix removed).
        source_filename: Raw filename as stored at the source.
    """

    name: str
    source_filename: str


@dataclass(frozen=True, slots=True)
class Artifact:
    """An artifact with its content.

    Attributes:
        name: Display name (filename with the artifact suffix removed).
        source_filename: Raw filename as stored at the source.
        content: Raw bytes: metadata header followed by the body.
    """

    name: str
    source_filename: str
    content: bytes

    @property
    def size(self) -> int:
        """Content length in bytes."""
        return len(self.content)


class ArtifactHeader(BaseModel):
    """Schema for the metadata header at the top of an artifact file.

    Unknown keys are kept so that host-application specific fields
    survive parsing.

    Attributes:
        description: What the chatmate does. Required, non-empty.
        author: Who wrote the chatmate. Required, non-empty.
        name: Optional display name override.
        model: Optional model identifier for the host application.
        tools: Optional list of tool identifiers.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="allow")

    description: str
    author: str
    name: str | None = None
    model: str | None = None
    tools: tuple[str, ...] = ()

    @field_validator("description", "author", mode="before")
    @classmethod
    def _require_text(cls, value: object) -> str:
        if value is None:
            msg = "must not be empty"
            raise ValueError(msg)
        text = str(value).strip()
        if not text:
            msg = "must not be empty"
            raise ValueError(msg)
        return text


@dataclass(frozen=True, slots=True)
class ArtifactIssue:
    """Validation error or warning for a single artifact file.

    Attributes:
        level: Severity level ("error" or "warning").
        message: Human-readable description of the problem.
        field: Header field or input with the problem (if applicable).
        code: Stable machine-readable code (if applicable).
    """

    level: Literal["error", "warning"]
    message: str
    field: str | None = None
    code: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Result of validating one artifact file on disk.

    Attributes:
        path: Validated file.
        name: Display name derived from the filename.
        header: Parsed header, or None if it could not be parsed.
        issues: Problems found, in the order they were detected.
    """

    path: Path
    name: str
    header: ArtifactHeader | None = None
    issues: tuple[ArtifactIssue, ...] = ()

    @property
    def errors(self) -> tuple[ArtifactIssue, ...]:
        """Issues with level "error"."""
        return tuple(i for i in self.issues if i.level == "error")

    @property
    def warnings(self) -> tuple[ArtifactIssue, ...]:
        """Issues with level "warning"."""
        return tuple(i for i in self.issues if i.level == "warning")

    @property
    def valid(self) -> bool:
        """Whether the artifact has no errors. Warnings are allowed."""
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "path": str(self.path),
            "name": self.name,
            "valid": self.valid,
            "header": self.header.model_dump() if self.header else None,
            "issues": [
                {
                    "level": i.level,
                    "message": i.message,
                    "field": i.field,
                    "code": i.code,
                }
                for i in self.issues
            ],
        }
