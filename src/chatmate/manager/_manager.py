"""Chatmate manager: the operation surface over sources and the destination."""

from typing import TYPE_CHECKING, Final

from chatmate.artifacts import (
    ArtifactIssue,
    ValidationReport,
    artifact_filename,
    display_name,
    validate_artifact,
)
from chatmate.exceptions import ArtifactNotFoundError, SecurityValidationError
from chatmate.manager._confirm import StaticConfirmer
from chatmate.manager._installed import installed_names, list_installed
from chatmate.manager._installer import Installer
from chatmate.manager._reporter import (
    build_listing,
    build_status,
    destination_state,
    partition,
)
from chatmate.manager._types import (
    BatchResult,
    InstallationReport,
    InstallPlan,
    SearchHit,
)
from chatmate.manager._uninstaller import Uninstaller
from chatmate.security import validate_name
from chatmate.utils import create_null_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from chatmate.artifacts import Catalog
    from chatmate.config import Settings
    from chatmate.manager._confirm import Confirmer
    from chatmate.manager._installer import OutcomeCallback
    from chatmate.manager._types import (
        ListingView,
        OutcomeRecord,
        Partition,
        StatusReport,
    )
    from chatmate.sources import SourceProvider

__all__ = ["ChatmateManager"]


def _ignore(_record: OutcomeRecord) -> None:
    return None


def _unique(names: Iterable[str]) -> list[str]:
    """Drop repeated names, keeping first-seen order."""
    return list(dict.fromkeys(names))


class ChatmateManager:
    """Install, remove, and report on chatmates in a destination directory.

    The catalog and the installed set are re-read at the start of every
    operation and never cached.

    Example:
        >>> from chatmate.config import Config, Settings
        >>> from chatmate.enums import OperationOutcome
        >>> from chatmate.sources import create_source
        >>> settings = Settings.from_config(Config.load())
        >>> manager = ChatmateManager(settings, create_source(settings))
        >>> result = manager.install_all(assume_yes=True)
        >>> result.count(OperationOutcome.INSTALLED)
        2
    """

    __slots__: Final = ("_confirmer", "_logger", "_on_outcome", "_settings", "_source")

    _settings: Settings
    _source: SourceProvider
    _confirmer: Confirmer
    _logger: FilteringBoundLogger
    _on_outcome: OutcomeCallback

    def __init__(
        self,
        settings: Settings,
        source: SourceProvider,
        *,
        confirmer: Confirmer | None = None,
        logger: FilteringBoundLogger | None = None,
        on_outcome: OutcomeCallback | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            settings: Effective settings.
            source: Source the catalog and artifact content come from.
            confirmer: Asked before batch writes and deletes. Defaults to
                one that always declines, so unattended callers must pass
                ``assume_yes``.
            logger: Structured logger. Defaults to one that drops events.
            on_outcome: Called with each record as soon as it is produced.
        """
        self._settings = settings
        self._source = source
        self._confirmer = confirmer if confirmer is not None else StaticConfirmer()
        self._logger = logger if logger is not None else create_null_logger()
        self._on_outcome = on_outcome if on_outcome is not None else _ignore

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def source(self) -> SourceProvider:
        return self._source

    @property
    def destination(self) -> Path:
        """Configured destination directory.

        Raises:
            DestinationNotConfiguredError: If no destination is configured.
        """
        return self._settings.require_destination()

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _installer(self, destination: Path) -> Installer:
        return Installer(
            destination=destination,
            source=self._source,
            policy=self._settings.policy,
            logger=self._logger,
            on_outcome=self._on_outcome,
        )

    def _uninstaller(self, destination: Path) -> Uninstaller:
        return Uninstaller(
            destination=destination,
            policy=self._settings.policy,
            logger=self._logger,
            on_outcome=self._on_outcome,
        )

    def _prepare_destination(self, destination: Path) -> None:
        if destination.is_dir():
            return
        if not self._settings.create_destination:
            msg = f"Destination directory does not exist: {destination}"
            raise FileNotFoundError(msg)
        destination.mkdir(parents=True, exist_ok=True)
        self._logger.info("destination_created", path=str(destination))

    def _installed_names(self, destination: Path) -> tuple[str, ...]:
        return installed_names(destination, self._settings.policy.required_suffix)

    # -------------------------------------------------------------------------
    # Catalog and installed state
    # -------------------------------------------------------------------------

    def catalog(self) -> Catalog:
        """Build a fresh catalog from the source.

        Raises:
            CatalogCollisionError: If two source files derive colliding names.
        """
        catalog = self._source.catalog()
        self._logger.debug(
            "catalog_built",
            mode=self._source.mode.value,
            location=self._source.location,
            count=len(catalog),
        )
        return catalog

    def installed_filenames(self) -> tuple[str, ...]:
        """List artifact filenames present in the destination, sorted."""
        return list_installed(self.destination, self._settings.policy.required_suffix)

    def partition(self) -> Partition:
        """Split catalog and installed names into disjoint sets."""
        return partition(self.catalog().names(), self._installed_names(self.destination))

    # -------------------------------------------------------------------------
    # Install
    # -------------------------------------------------------------------------

    def plan_install(self, *, force: bool = False) -> InstallPlan:
        """Compute what ``install_all`` would do without touching anything."""
        return self._plan(self.catalog(), self.destination, force=force)

    def _plan(self, catalog: Catalog, destination: Path, *, force: bool) -> InstallPlan:
        parts = partition(catalog.names(), self._installed_names(destination))
        return InstallPlan(
            destination=destination,
            force=force,
            to_install=parts.catalog_only,
            to_reinstall=parts.both if force else (),
            to_skip=() if force else parts.both,
            user_created=parts.installed_only,
        )

    def install_all(self, force: bool = False, *, assume_yes: bool = False) -> BatchResult:
        """Install every catalog artifact in catalog order.

        When the plan would write anything, the confirmer is asked first
        unless ``assume_yes`` is set. Declining returns a cancelled result
        and nothing is written.

        Args:
            force: Overwrite artifacts already present at the destination.
            assume_yes: Skip the confirmation prompt.

        Returns:
            One record per catalog artifact.

        Raises:
            SecurityValidationError: If an artifact fails validation. The
                batch stops there; artifacts installed before it remain.
            ArtifactNotFoundError: If the source loses an artifact mid-batch.
            OSError: If a read or write fails.
        """
        catalog = self.catalog()
        plan = self._plan(catalog, self.destination, force=force)

        if plan.has_writes and not assume_yes:
            count = len(plan.to_install) + len(plan.to_reinstall)
            prompt = f"Install {count} chatmate(s) into {plan.destination}?"
            if not self._confirmer.confirm(prompt):
                self._logger.info("install_cancelled", pending=count)
                return BatchResult(cancelled=True)

        if plan.has_writes:
            self._prepare_destination(plan.destination)
        records = self._installer(plan.destination).install_many(catalog, force=force)
        return BatchResult(records=records)

    def install_one(self, name: str, force: bool = False) -> OutcomeRecord:
        """Install one artifact by exact display name.

        Raises:
            ArtifactNotFoundError: If the name is not in the catalog.
            SecurityValidationError: If the artifact fails validation.
            OSError: If a read or write fails.
        """
        return self.install_specific([name], force=force).records[0]

    def install_specific(self, names: Iterable[str], force: bool = False) -> BatchResult:
        """Install artifacts by exact, case-sensitive display name.

        Every name is looked up before anything is written. If any name is
        missing from the catalog, nothing is installed.

        Args:
            names: Display names to install. Repeats are ignored.
            force: Overwrite artifacts already present at the destination.

        Returns:
            One record per distinct requested name, in request order.

        Raises:
            ArtifactNotFoundError: If any name is not in the catalog.
            SecurityValidationError: If an artifact fails validation.
            OSError: If a read or write fails.
        """
        requested = _unique(names)
        destination = self.destination
        catalog = self.catalog()

        missing = tuple(n for n in requested if n not in catalog)
        if missing:
            self._logger.warning("artifacts_not_found", names=list(missing))
            msg = f"Chatmate(s) not found: {', '.join(missing)}"
            raise ArtifactNotFoundError(msg, names=missing)

        entries = [entry for n in requested if (entry := catalog.lookup(n)) is not None]

        self._prepare_destination(destination)
        records = self._installer(destination).install_many(entries, force=force)
        return BatchResult(records=records)

    # -------------------------------------------------------------------------
    # Uninstall
    # -------------------------------------------------------------------------

    def uninstall_all(self, *, assume_yes: bool = False) -> BatchResult:
        """Remove every artifact file present in the destination.

        This includes user-created artifacts that are not in the catalog.

        Raises:
            SecurityValidationError: If an installed filename is rejected.
            OSError: If a delete fails.
        """
        destination = self.destination
        names = self._installed_names(destination)
        if not names:
            return BatchResult()

        if not assume_yes:
            prompt = f"Remove {len(names)} chatmate(s) from {destination}?"
            if not self._confirmer.confirm(prompt):
                self._logger.info("uninstall_cancelled", pending=len(names))
                return BatchResult(cancelled=True)

        return BatchResult(records=self._uninstaller(destination).uninstall_many(names))

    def uninstall_one(self, name: str) -> OutcomeRecord:
        """Remove one artifact by display name; absent artifacts succeed."""
        return self._uninstaller(self.destination).uninstall_one(name)

    def uninstall_specific(self, names: Iterable[str]) -> BatchResult:
        """Remove artifacts by display name; absent artifacts succeed."""
        uninstaller = self._uninstaller(self.destination)
        return BatchResult(records=uninstaller.uninstall_many(_unique(names)))

    def cleanup_orphans(self, *, assume_yes: bool = False) -> BatchResult:
        """Remove installed artifacts that are not in the current catalog."""
        destination = self.destination
        orphans = partition(
            self.catalog().names(), self._installed_names(destination)
        ).installed_only
        if not orphans:
            return BatchResult()

        if not assume_yes:
            prompt = (
                f"Remove {len(orphans)} chatmate(s) not in the catalog "
                f"from {destination}?"
            )
            if not self._confirmer.confirm(prompt):
                self._logger.info("cleanup_cancelled", pending=len(orphans))
                return BatchResult(cancelled=True)

        return BatchResult(records=self._uninstaller(destination).uninstall_many(orphans))

    # -------------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------------

    def list_chatmates(
        self,
        show_available: bool = False,
        show_installed: bool = False,
    ) -> ListingView:
        """List available and/or installed chatmates; neither flag means both."""
        return build_listing(
            self.partition(),
            show_available=show_available,
            show_installed=show_installed,
        )

    def show_status(self) -> StatusReport:
        """Summarize partition counts and destination accessibility."""
        return build_status(
            self.partition(),
            destination=self.destination,
            source=self._source,
        )

    def search(self, term: str) -> tuple[SearchHit, ...]:
        """Find catalog names containing ``term``, case-insensitively.

        Raises:
            ValueError: If the term is empty or whitespace.
        """
        needle = term.strip().casefold()
        if not needle:
            msg = "Search term must not be empty"
            raise ValueError(msg)

        parts = self.partition()
        installed = set(parts.both)
        return tuple(
            SearchHit(name=name, installed=name in installed)
            for name in parts.available
            if needle in name.casefold()
        )

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_artifact(self, path: Path) -> ValidationReport:
        """Validate an artifact file against the configured rules.

        Raises:
            OSError: If the file cannot be read.
        """
        return validate_artifact(
            path,
            policy=self._settings.policy,
            min_content_length=self._settings.min_content_length,
        )

    def validate_installation(self) -> InstallationReport:
        """Check the destination and every installed artifact.

        Problems are collected in the report rather than raised.
        """
        destination = self.destination
        catalog = self.catalog()
        exists, writable = destination_state(destination)
        suffix = self._settings.policy.required_suffix

        invalid: list[tuple[str, str]] = []
        for entry in catalog:
            try:
                validate_name(artifact_filename(entry.name, suffix), self._settings.policy)
            except SecurityValidationError as e:
                invalid.append((entry.source_filename, e.reason))

        reports: list[ValidationReport] = []
        installed = list_installed(destination, suffix)
        for filename in installed:
            path = destination / filename
            try:
                reports.append(self.validate_artifact(path))
            except OSError as e:
                reports.append(
                    ValidationReport(
                        path=path,
                        name=display_name(filename, suffix),
                        issues=(
                            ArtifactIssue(level="error", message=str(e), code="IO_ERROR"),
                        ),
                    )
                )

        orphans = partition(
            catalog.names(), (display_name(f, suffix) for f in installed)
        ).installed_only

        return InstallationReport(
            destination=destination,
            destination_exists=exists,
            destination_writable=writable,
            invalid_catalog_names=tuple(invalid),
            artifacts=tuple(reports),
            orphans=orphans,
        )

    def describe_config(self) -> dict[str, object]:
        """Return the effective settings and source for display."""
        policy = self._settings.policy
        destination = self._settings.destination
        return {
            "destination": str(destination) if destination else None,
            "create_destination": self._settings.create_destination,
            "source": {
                "mode": self._source.mode.value,
                "configured_mode": self._settings.source_mode.value,
                "location": self._source.location,
            },
            "security": {
                "required_suffix": policy.required_suffix,
                "allowed_extensions": list(policy.allowed_extensions),
                "max_content_bytes": policy.max_content_bytes,
                "max_filename_length": policy.max_filename_length,
            },
            "validation": {
                "min_content_length": self._settings.min_content_length,
            },
        }
