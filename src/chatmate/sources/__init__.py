"""Artifact sources.

A source provides the catalog and artifact bytes. Two backends exist:

Classes:
    EmbeddedSource: Read-only table loaded from package data.
    DirectorySource: Live directory on disk.
    SourceProvider: Runtime-checkable protocol both satisfy.

Example:
    >>> from chatmate.sources import EmbeddedSource
    >>> source = EmbeddedSource.from_package()
    >>> for entry in source.catalog():
    ...     print(entry.name)
"""

from chatmate.sources._directory import DirectorySource
from chatmate.sources._embedded import EMBEDDED_DIRECTORY, EmbeddedSource
from chatmate.sources._factory import create_source
from chatmate.sources._protocol import SourceProvider

__all__ = [
    "EMBEDDED_DIRECTORY",
    "DirectorySource",
    "EmbeddedSource",
    "SourceProvider",
    "create_source",
]
