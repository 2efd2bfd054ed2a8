"""Source provider protocol for type-safe dependency injection.

Both EmbeddedSource and DirectorySource satisfy this protocol, so the
manager never needs to know where artifacts come from.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chatmate.artifacts import Artifact, Catalog
    from chatmate.enums import SourceMode


@runtime_checkable
class SourceProvider(Protocol):
    """Protocol for resolving and fetching artifacts.

    Example:
        >>> def describe(source: SourceProvider) -> str:
        ...     return f"{len(source.catalog())} chatmates from {source.location}"
    """

    @property
    def mode(self) -> SourceMode:
        """Backend kind, fixed at construction."""
        ...

    @property
    def location(self) -> str:
        """Human-readable description of where artifacts are read from."""
        ...

    def list_filenames(self) -> tuple[str, ...]:
        """Return raw artifact filenames available at the source, sorted.

        Raises:
            OSError: If the source cannot be listed.
        """
        ...

    def catalog(self) -> Catalog:
        """Build a fresh catalog from the current source contents.

        Raises:
            CatalogCollisionError: If two filenames derive colliding names.
            OSError: If the source cannot be listed.
        """
        ...

    def fetch(self, filename: str) -> Artifact:
        """Fetch an artifact by its source filename.

        Raises:
            ArtifactNotFoundError: If no such artifact exists at the source.
            OSError: If the artifact cannot be read.
        """
        ...
