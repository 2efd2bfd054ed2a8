"""Artifacts shipped inside the chatmate package."""

from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING

from chatmate.artifacts import Artifact, Catalog, build_catalog, display_name
from chatmate.enums import SourceMode
from chatmate.exceptions import ArtifactNotFoundError
from chatmate.security import ARTIFACT_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Mapping

EMBEDDED_PACKAGE = "chatmate"
EMBEDDED_DIRECTORY = "mates"


class EmbeddedSource:
    """Read-only in-memory table of artifacts.

    The table is filled once at construction and never changes, so every
    catalog built from it is identical.

    Example:
        >>> source = EmbeddedSource({"A.chatmode.md": b"---\\n..."})
        >>> source.catalog().names()
        ('A',)
    """

    __slots__: tuple[str, ...] = ("_location", "_suffix", "_table")

    def __init__(
        self,
        table: Mapping[str, bytes],
        *,
        location: str = "embedded",
        suffix: str = ARTIFACT_SUFFIX,
    ) -> None:
        self._table: Mapping[str, bytes] = MappingProxyType(dict(table))
        self._location: str = location
        self._suffix: str = suffix

    @classmethod
    def from_package(
        cls,
        package: str = EMBEDDED_PACKAGE,
        directory: str = EMBEDDED_DIRECTORY,
        *,
        suffix: str = ARTIFACT_SUFFIX,
    ) -> EmbeddedSource:
        """Load the artifacts bundled as package data.

        Args:
            package: Package that contains the artifact directory.
            directory: Directory inside the package holding artifact files.
            suffix: Artifact suffix; other files are not loaded.

        Returns:
            Source backed by the bundled artifacts.
        """
        root = files(package) / directory
        table = {
            entry.name: entry.read_bytes()
            for entry in root.iterdir()
            if entry.is_file() and entry.name.endswith(suffix)
        }
        return cls(table, location=f"embedded ({package}/{directory})", suffix=suffix)

    @property
    def mode(self) -> SourceMode:
        return SourceMode.EMBEDDED

    @property
    def location(self) -> str:
        return self._location

    def list_filenames(self) -> tuple[str, ...]:
        return tuple(sorted(self._table))

    def catalog(self) -> Catalog:
        return build_catalog(self._table, self._suffix)

    def fetch(self, filename: str) -> Artifact:
        try:
            content = self._table[filename]
        except KeyError:
            msg = f"Embedded artifact not found: {filename}"
            raise ArtifactNotFoundError(msg, names=(filename,)) from None

        return Artifact(
            name=display_name(filename, self._suffix),
            source_filename=filename,
            content=content,
        )
