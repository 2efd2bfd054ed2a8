"""Result types for manager operations.

Every type here is a frozen value with a ``to_dict`` method so that the
CLI can render it as a table or as JSON without knowing its internals.
"""

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chatmate.enums import OperationOutcome

if TYPE_CHECKING:
    from pathlib import Path

    from chatmate.artifacts import ValidationReport
    from chatmate.enums import SourceMode

_FAILED_OUTCOMES: frozenset[OperationOutcome] = frozenset(
    {OperationOutcome.NOT_FOUND, OperationOutcome.VALIDATION_FAILED}
)


@dataclass(frozen=True, slots=True)
class OutcomeRecord:
    """Result of one install or uninstall step.

    Attributes:
        name: Display name of the artifact.
        filename: Artifact filename at the destination.
        outcome: What happened.
        path: Resolved destination path, if validation got that far.
        already_absent: For removals, True if there was nothing to delete.
        error: Error message for failed outcomes.
    """

    name: str
    filename: str
    outcome: OperationOutcome
    path: Path | None = None
    already_absent: bool = False
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the step completed without a validation or lookup error."""
        return self.outcome not in _FAILED_OUTCOMES

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "filename": self.filename,
            "outcome": self.outcome.value,
            "path": str(self.path) if self.path else None,
            "already_absent": self.already_absent,
            "error": self.error,
        }


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Ordered records from a batch operation.

    Attributes:
        records: One record per processed artifact, in processing order.
        cancelled: True if the batch was declined at confirmation and
            nothing was processed.
    """

    records: tuple[OutcomeRecord, ...] = ()
    cancelled: bool = False

    def __len__(self) -> int:
        return len(self.records)

    def count(self, outcome: OperationOutcome) -> int:
        """Count records with the given outcome."""
        return sum(1 for r in self.records if r.outcome == outcome)

    def by_outcome(self) -> dict[OperationOutcome, tuple[str, ...]]:
        """Group display names by outcome, omitting outcomes with no records."""
        grouped: dict[OperationOutcome, list[str]] = {}
        for record in self.records:
            grouped.setdefault(record.outcome, []).append(record.name)
        return {outcome: tuple(names) for outcome, names in grouped.items()}

    @property
    def succeeded(self) -> bool:
        return all(r.succeeded for r in self.records)

    def to_dict(self) -> dict[str, object]:
        counts = Counter(r.outcome.value for r in self.records)
        return {
            "cancelled": self.cancelled,
            "counts": dict(sorted(counts.items())),
            "records": [r.to_dict() for r in self.records],
        }


@dataclass(frozen=True, slots=True)
class InstallPlan:
    """What ``install_all`` would do, computed before asking for confirmation.

    Attributes:
        destination: Destination directory.
        force: Whether existing artifacts would be overwritten.
        to_install: Catalog names not yet installed.
        to_reinstall: Installed catalog names that would be overwritten.
        to_skip: Installed catalog names left alone.
        user_created: Installed names not in the catalog; never touched.
    """

    destination: Path
    force: bool
    to_install: tuple[str, ...] = ()
    to_reinstall: tuple[str, ...] = ()
    to_skip: tuple[str, ...] = ()
    user_created: tuple[str, ...] = ()

    @property
    def has_writes(self) -> bool:
        return bool(self.to_install or self.to_reinstall)


@dataclass(frozen=True, slots=True)
class Partition:
    """Disjoint split of catalog and installed names.

    Attributes:
        catalog_only: Available but not installed.
        installed_only: Installed but not in the current catalog.
        both: Available and installed.
    """

    catalog_only: tuple[str, ...] = ()
    installed_only: tuple[str, ...] = ()
    both: tuple[str, ...] = ()

    @property
    def available(self) -> tuple[str, ...]:
        """All catalog names."""
        return tuple(sorted((*self.catalog_only, *self.both)))

    @property
    def installed(self) -> tuple[str, ...]:
        """All installed names."""
        return tuple(sorted((*self.installed_only, *self.both)))


@dataclass(frozen=True, slots=True)
class ListingEntry:
    """One row of a listing.

    Attributes:
        name: Display name.
        installed: Present in the destination.
        in_catalog: Resolvable from the current source.
    """

    name: str
    installed: bool
    in_catalog: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "installed": self.installed,
            "in_catalog": self.in_catalog,
        }


@dataclass(frozen=True, slots=True)
class ListingView:
    """Filtered view over a partition.

    Attributes:
        show_available: Whether the available section is included.
        show_installed: Whether the installed section is included.
        available: Catalog entries (empty when not shown).
        installed: Installed entries (empty when not shown).
    """

    show_available: bool
    show_installed: bool
    available: tuple[ListingEntry, ...] = ()
    installed: tuple[ListingEntry, ...] = ()

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {}
        if self.show_available:
            result["available"] = [e.to_dict() for e in self.available]
        if self.show_installed:
            result["installed"] = [e.to_dict() for e in self.installed]
        return result


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Counts per partition plus destination and source details.

    Attributes:
        destination: Destination directory.
        destination_exists: Whether the destination exists.
        destination_writable: Whether the destination can be written.
        source_mode: Active source backend.
        source_location: Where the source reads from.
        available: Number of catalog artifacts.
        installed: Number of installed artifacts.
        pending: Catalog artifacts not yet installed.
        user_created: Installed artifacts not in the catalog.
    """

    destination: Path
    destination_exists: bool
    destination_writable: bool
    source_mode: SourceMode
    source_location: str
    available: int
    installed: int
    pending: int
    user_created: int

    @property
    def coverage(self) -> float:
        """Percentage of catalog artifacts that are installed."""
        if self.available == 0:
            return 0.0
        return round((self.available - self.pending) * 100 / self.available, 1)

    def to_dict(self) -> dict[str, object]:
        return {
            "destination": str(self.destination),
            "destination_exists": self.destination_exists,
            "destination_writable": self.destination_writable,
            "source_mode": self.source_mode.value,
            "source_location": self.source_location,
            "available": self.available,
            "installed": self.installed,
            "pending": self.pending,
            "user_created": self.user_created,
            "coverage": self.coverage,
        }


@dataclass(frozen=True, slots=True)
class SearchHit:
    """A catalog name matching a search term."""

    name: str
    installed: bool

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "installed": self.installed}


@dataclass(frozen=True, slots=True)
class InstallationReport:
    """Health check of the destination directory.

    Attributes:
        destination: Destination directory.
        destination_exists: Whether the destination exists.
        destination_writable: Whether the destination can be written.
        invalid_catalog_names: (filename, reason) for catalog filenames
            that would be rejected at install time.
        artifacts: Validation report per installed artifact.
        orphans: Installed names not in the catalog.
    """

    destination: Path
    destination_exists: bool
    destination_writable: bool
    invalid_catalog_names: tuple[tuple[str, str], ...] = ()
    artifacts: tuple[ValidationReport, ...] = ()
    orphans: tuple[str, ...] = ()

    @property
    def healthy(self) -> bool:
        """No invalid names and every installed artifact is valid."""
        return (
            self.destination_exists
            and not self.invalid_catalog_names
            and all(r.valid for r in self.artifacts)
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "destination": str(self.destination),
            "destination_exists": self.destination_exists,
            "destination_writable": self.destination_writable,
            "healthy": self.healthy,
            "invalid_catalog_names": [
                {"filename": f, "reason": r} for f, r in self.invalid_catalog_names
            ],
            "artifacts": [r.to_dict() for r in self.artifacts],
            "orphans": list(self.orphans),
        }
