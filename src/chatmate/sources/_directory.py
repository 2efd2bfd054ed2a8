"""Artifacts read live from a directory on disk."""

from pathlib import PurePath
from typing import TYPE_CHECKING

from chatmate.artifacts import Artifact, Catalog, build_catalog, display_name
from chatmate.enums import SourceMode
from chatmate.exceptions import ArtifactNotFoundError, PathEscapeError
from chatmate.security import ARTIFACT_SUFFIX

if TYPE_CHECKING:
    from pathlib import Path


class DirectorySource:
    """Artifacts stored as files in a flat directory.

    The directory is re-read on every call, so edits made between
    operations are picked up. Read errors are not caught.

    Example:
        >>> source = DirectorySource(Path("mates"))
        >>> artifact = source.fetch("Code Reviewer.chatmode.md")
    """

    __slots__: tuple[str, ...] = ("_directory", "_suffix")

    def __init__(self, directory: Path, *, suffix: str = ARTIFACT_SUFFIX) -> None:
        """Initialize the source.

        Args:
            directory: Directory containing artifact files.
            suffix: Artifact suffix; other files are ignored.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If the path is not a directory.
        """
        if not directory.exists():
            msg = f"Chatmate source directory not found: {directory}"
            raise FileNotFoundError(msg)
        if not directory.is_dir():
            msg = f"Chatmate source is not a directory: {directory}"
            raise NotADirectoryError(msg)

        self._directory: Path = directory.resolve()
        self._suffix: str = suffix

    @property
    def mode(self) -> SourceMode:
        return SourceMode.EXTERNAL

    @property
    def location(self) -> str:
        return str(self._directory)

    @property
    def directory(self) -> Path:
        """Resolved source directory."""
        return self._directory

    def list_filenames(self) -> tuple[str, ...]:
        return tuple(
            sorted(
                p.name
                for p in self._directory.iterdir()
                if p.is_file() and p.name.endswith(self._suffix)
            )
        )

    def catalog(self) -> Catalog:
        return build_catalog(self.list_filenames(), self._suffix)

    def fetch(self, filename: str) -> Artifact:
        # Bare names only; links inside the directory are followed like any read
        bare = PurePath(filename).name == filename and "\\" not in filename
        if not bare or filename in (".", ".."):
            raise PathEscapeError(
                "source filename must be a bare name",
                field="path",
                value=filename,
                code="NOT_A_BARE_NAME",
            )

        path = self._directory / filename

        if not path.is_file():
            msg = f"Artifact not found in {self._directory}: {filename}"
            raise ArtifactNotFoundError(msg, names=(filename,))

        return Artifact(
            name=display_name(filename, self._suffix),
            source_filename=filename,
            content=path.read_bytes(),
        )
