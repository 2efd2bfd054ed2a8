"""Artifact model for chatmate.

An artifact is a ``<Display Name>.chatmode.md`` file: a ``---`` delimited
YAML header carrying at least ``description`` and ``author``, followed by
an instructional body.

Example:
    >>> from chatmate.artifacts import build_catalog, parse_header
    >>> catalog = build_catalog(["Code Reviewer.chatmode.md", "README.md"])
    >>> catalog.names()
    ('Code Reviewer',)
"""

from chatmate.artifacts._catalog import Catalog, build_catalog
from chatmate.artifacts._header import HEADER_MARKER, parse_header, split_header
from chatmate.artifacts._naming import (
    artifact_filename,
    display_name,
    is_artifact_file,
)
from chatmate.artifacts._types import (
    Artifact,
    ArtifactHeader,
    ArtifactIssue,
    CatalogEntry,
    ValidationReport,
)
from chatmate.artifacts._validator import MIN_CONTENT_LENGTH, validate_artifact

__all__ = [
    "HEADER_MARKER",
    "MIN_CONTENT_LENGTH",
    "Artifact",
    "ArtifactHeader",
    "ArtifactIssue",
    "Catalog",
    "CatalogEntry",
    "ValidationReport",
    "artifact_filename",
    "build_catalog",
    "display_name",
    "is_artifact_file",
    "parse_header",
    "split_header",
    "validate_artifact",
]
