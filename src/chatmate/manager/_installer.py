"""Copying artifacts from a source into the destination directory."""

from typing import TYPE_CHECKING

from chatmate.artifacts import artifact_filename
from chatmate.enums import OperationOutcome
from chatmate.exceptions import ArtifactNotFoundError, SecurityValidationError
from chatmate.manager._types import OutcomeRecord
from chatmate.security import (
    validate_content,
    validate_destination_path,
    validate_extension,
    validate_name,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from chatmate.artifacts import CatalogEntry
    from chatmate.security import SecurityPolicy
    from chatmate.sources import SourceProvider

type OutcomeCallback = Callable[[OutcomeRecord], None]


class Installer:
    """Validates, fetches, and writes artifacts one at a time.

    Every record is passed to ``on_outcome`` as soon as it is produced.
    A validation or lookup failure is reported as a failed record and the
    original error is then raised, which stops any batch in progress.
    Artifacts written earlier in the batch stay installed.
    """

    __slots__: tuple[str, ...] = (
        "_destination",
        "_logger",
        "_on_outcome",
        "_policy",
        "_source",
    )

    def __init__(
        self,
        *,
        destination: Path,
        source: SourceProvider,
        policy: SecurityPolicy,
        logger: FilteringBoundLogger,
        on_outcome: OutcomeCallback,
    ) -> None:
        self._destination: Path = destination
        self._source: SourceProvider = source
        self._policy: SecurityPolicy = policy
        self._logger: FilteringBoundLogger = logger
        self._on_outcome: OutcomeCallback = on_outcome

    def _emit(self, record: OutcomeRecord) -> OutcomeRecord:
        self._on_outcome(record)
        return record

    def install_one(self, entry: CatalogEntry, *, force: bool = False) -> OutcomeRecord:
        """Install a single catalog entry.

        Steps:
        1. Validate the destination filename and path.
        2. If the file exists and ``force`` is False, skip without fetching.
        3. Fetch the content, then validate its size and extension.
        4. Write the content, replacing any existing file.

        Args:
            entry: Catalog entry to install.
            force: Overwrite an artifact already present at the destination.

        Returns:
            Record with outcome installed, reinstalled, or skipped.

        Raises:
            SecurityValidationError: If a security check fails. Nothing is
                written for this artifact.
            ArtifactNotFoundError: If the source no longer has the artifact.
            OSError: If reading or writing fails. The destination file may
                be partially written.
        """
        filename = artifact_filename(entry.name, self._policy.required_suffix)
        log = self._logger.bind(name=entry.name, filename=filename)

        try:
            validate_name(filename, self._policy)
            path = validate_destination_path(self._destination, filename)

            existed = path.exists()
            if existed and not force:
                log.debug("artifact_skipped", path=str(path))
                return self._emit(
                    OutcomeRecord(
                        name=entry.name,
                        filename=filename,
                        outcome=OperationOutcome.SKIPPED,
                        path=path,
                    )
                )

            artifact = self._source.fetch(entry.source_filename)
            validate_content(artifact.content, self._policy.max_content_bytes)
            validate_extension(filename, self._policy.allowed_extensions)
        except SecurityValidationError as e:
            log.warning("artifact_validation_failed", code=e.code, reason=e.reason)
            _ = self._emit(
                OutcomeRecord(
                    name=entry.name,
                    filename=filename,
                    outcome=OperationOutcome.VALIDATION_FAILED,
                    error=str(e),
                )
            )
            raise
        except ArtifactNotFoundError as e:
            log.warning("artifact_not_found", error=str(e))
            _ = self._emit(
                OutcomeRecord(
                    name=entry.name,
                    filename=filename,
                    outcome=OperationOutcome.NOT_FOUND,
                    error=str(e),
                )
            )
            raise

        # Not atomic: a failed write can leave a partial file behind
        _ = path.write_bytes(artifact.content)

        outcome = OperationOutcome.REINSTALLED if existed else OperationOutcome.INSTALLED
        log.info("artifact_installed", path=str(path), outcome=outcome.value)
        return self._emit(
            OutcomeRecord(
                name=entry.name,
                filename=filename,
                outcome=outcome,
                path=path,
            )
        )

    def install_many(
        self,
        entries: Iterable[CatalogEntry],
        *,
        force: bool = False,
    ) -> tuple[OutcomeRecord, ...]:
        """Install entries in order, stopping at the first error.

        Raises:
            SecurityValidationError: See ``install_one``.
            ArtifactNotFoundError: See ``install_one``.
            OSError: See ``install_one``.
        """
        records: list[OutcomeRecord] = []
        for entry in entries:
            try:
                records.append(self.install_one(entry, force=force))
            except (SecurityValidationError, ArtifactNotFoundError, OSError) as e:
                self._logger.error(
                    "batch_aborted",
                    name=entry.name,
                    completed=len(records),
                    error=str(e),
                )
                raise
        return tuple(records)
