"""Removing artifacts from the destination directory."""

from typing import TYPE_CHECKING

from chatmate.artifacts import artifact_filename
from chatmate.enums import OperationOutcome
from chatmate.exceptions import SecurityValidationError
from chatmate.manager._types import OutcomeRecord
from chatmate.security import validate_destination_path, validate_name

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from structlog.typing import FilteringBoundLogger

    from chatmate.manager._installer import OutcomeCallback
    from chatmate.security import SecurityPolicy


class Uninstaller:
    """Idempotent deletion of installed artifacts.

    Removing an artifact that is not installed succeeds with
    ``already_absent`` set, so repeated uninstalls never fail.
    """

    __slots__: tuple[str, ...] = ("_destination", "_logger", "_on_outcome", "_policy")

    def __init__(
        self,
        *,
        destination: Path,
        policy: SecurityPolicy,
        logger: FilteringBoundLogger,
        on_outcome: OutcomeCallback,
    ) -> None:
        self._destination: Path = destination
        self._policy: SecurityPolicy = policy
        self._logger: FilteringBoundLogger = logger
        self._on_outcome: OutcomeCallback = on_outcome

    def uninstall_one(self, name: str) -> OutcomeRecord:
        """Remove an installed artifact by display name.

        Returns:
            Record with outcome removed.

        Raises:
            SecurityValidationError: If the filename or path is rejected.
                Nothing is deleted.
            OSError: If the file exists but cannot be deleted.
        """
        filename = artifact_filename(name, self._policy.required_suffix)
        log = self._logger.bind(name=name, filename=filename)

        try:
            validate_name(filename, self._policy)
            path = validate_destination_path(self._destination, filename)
        except SecurityValidationError as e:
            log.warning("artifact_validation_failed", code=e.code, reason=e.reason)
            self._on_outcome(
                OutcomeRecord(
                    name=name,
                    filename=filename,
                    outcome=OperationOutcome.VALIDATION_FAILED,
                    error=str(e),
                )
            )
            raise

        try:
            path.unlink()
        except FileNotFoundError:
            already_absent = True
        else:
            already_absent = False

        log.info("artifact_removed", path=str(path), already_absent=already_absent)
        record = OutcomeRecord(
            name=name,
            filename=filename,
            outcome=OperationOutcome.REMOVED,
            path=path,
            already_absent=already_absent,
        )
        self._on_outcome(record)
        return record

    def uninstall_many(self, names: Iterable[str]) -> tuple[OutcomeRecord, ...]:
        """Remove artifacts in order, stopping at the first error."""
        records: list[OutcomeRecord] = []
        for name in names:
            try:
                records.append(self.uninstall_one(name))
            except (SecurityValidationError, OSError) as e:
                self._logger.error(
                    "batch_aborted",
                    name=name,
                    completed=len(records),
                    error=str(e),
                )
                raise
        return tuple(records)
