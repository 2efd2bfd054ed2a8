"""Catalog of artifacts resolvable from a source.

A catalog is recomputed on every operation and never persisted. Entries
are ordered by display name so that listings and batch operations are
reproducible across runs.
"""

from collections import defaultdict
from typing import TYPE_CHECKING

from chatmate.artifacts._naming import display_name, is_artifact_file
from chatmate.artifacts._types import CatalogEntry
from chatmate.exceptions import CatalogCollisionError
from chatmate.security import ARTIFACT_SUFFIX

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Catalog:
    """Immutable, name-ordered collection of catalog entries.

    Example:
        >>> catalog = build_catalog(["B.chatmode.md", "A.chatmode.md", "notes.txt"])
        >>> catalog.names()
        ('A', 'B')
        >>> catalog.lookup("A").source_filename
        'A.chatmode.md'
    """

    __slots__: tuple[str, ...] = ("_by_name", "_entries")

    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        ordered = tuple(sorted(entries, key=lambda entry: entry.name))
        self._entries: tuple[CatalogEntry, ...] = ordered
        self._by_name: dict[str, CatalogEntry] = {e.name: e for e in ordered}

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"Catalog({list(self.names())!r})"

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        """Entries in display-name order."""
        return self._entries

    def names(self) -> tuple[str, ...]:
        """Return display names in catalog order."""
        return tuple(entry.name for entry in self._entries)

    def filenames(self) -> tuple[str, ...]:
        """Return source filenames in catalog order."""
        return tuple(entry.source_filename for entry in self._entries)

    def lookup(self, name: str) -> CatalogEntry | None:
        """Find an entry by exact, case-sensitive display name."""
        return self._by_name.get(name)


def build_catalog(
    filenames: Iterable[str],
    suffix: str = ARTIFACT_SUFFIX,
) -> Catalog:
    """Build a catalog from source filenames.

    Filenames without the artifact suffix are ignored. Display names that
    differ only by case are rejected, since installing both into a
    case-insensitive destination would make one overwrite the other.

    Args:
        filenames: Raw filenames available at the source.
        suffix: Artifact suffix to strip when deriving display names.

    Returns:
        Catalog ordered by display name.

    Raises:
        CatalogCollisionError: If two filenames derive colliding display names.
    """
    entries = [
        CatalogEntry(name=display_name(f, suffix), source_filename=f)
        for f in sorted(set(filenames))
        if is_artifact_file(f, suffix)
    ]

    groups: defaultdict[str, list[CatalogEntry]] = defaultdict(list)
    for entry in entries:
        groups[entry.name.casefold()].append(entry)

    for group in groups.values():
        if len(group) > 1:
            colliding = tuple(e.source_filename for e in group)
            msg = (
                f"Display name '{group[0].name}' is derived from more than one "
                f"source file: {', '.join(colliding)}"
            )
            raise CatalogCollisionError(msg, name=group[0].name, filenames=colliding)

    return Catalog(entries)
