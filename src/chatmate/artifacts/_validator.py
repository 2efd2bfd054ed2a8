"""Validation of artifact files on disk.

Unlike the install path, which stops at the first failure, file
validation collects every problem it can find so that authors see them
all at once.

Example:
    >>> from pathlib import Path
    >>> from chatmate.artifacts import validate_artifact
    >>> report = validate_artifact(Path("mates/Code Reviewer.chatmode.md"))
    >>> if not report.valid:
    ...     for issue in report.errors:
    ...         print(issue.message)
"""

from typing import TYPE_CHECKING

from chatmate.artifacts._header import parse_header
from chatmate.artifacts._naming import display_name
from chatmate.artifacts._types import ArtifactIssue, ValidationReport
from chatmate.exceptions import ArtifactFormatError, SecurityValidationError
from chatmate.security import (
    DEFAULT_POLICY,
    validate_content,
    validate_extension,
    validate_name,
)

if TYPE_CHECKING:
    from pathlib import Path

    from chatmate.artifacts._types import ArtifactHeader
    from chatmate.security import SecurityPolicy

MIN_CONTENT_LENGTH = 500
"""Default minimum artifact length, in characters."""


def _security_issue(error: SecurityValidationError) -> ArtifactIssue:
    return ArtifactIssue(
        level="error",
        message=error.reason,
        field=error.field,
        code=error.code,
    )


def validate_artifact(
    path: Path,
    *,
    policy: SecurityPolicy = DEFAULT_POLICY,
    min_content_length: int = MIN_CONTENT_LENGTH,
) -> ValidationReport:
    """Validate an artifact file against the naming, size, and format rules.

    Checks that:
    - The filename passes the security allow-list and carries the suffix
    - The extension is allowed
    - The content is within the size ceiling
    - The header is well-formed with non-empty description and author
    - The body after the header is non-empty
    - The whole document is at least ``min_content_length`` characters

    Args:
        path: Artifact file to validate.
        policy: Security policy for name, extension, and size checks.
        min_content_length: Minimum document length, in characters.

    Returns:
        Report with all issues found. ``report.valid`` is True when no
        error-level issues were found.

    Raises:
        OSError: If the file cannot be read.
    """
    issues: list[ArtifactIssue] = []

    try:
        validate_name(path.name, policy)
    except SecurityValidationError as e:
        issues.append(_security_issue(e))

    try:
        validate_extension(path.name, policy.allowed_extensions)
    except SecurityValidationError as e:
        issues.append(_security_issue(e))

    content = path.read_bytes()

    try:
        validate_content(content, policy.max_content_bytes)
    except SecurityValidationError as e:
        issues.append(_security_issue(e))
        # Oversized content is not parsed further
        return ValidationReport(
            path=path,
            name=display_name(path.name, policy.required_suffix),
            issues=tuple(issues),
        )

    header: ArtifactHeader | None = None
    try:
        header, _ = parse_header(content, path=path)
    except ArtifactFormatError as e:
        issues.append(
            ArtifactIssue(
                level="error",
                message=str(e),
                field=e.field,
                code="INVALID_FORMAT",
            )
        )

    length = len(content.decode("utf-8", errors="replace"))
    if length < min_content_length:
        issues.append(
            ArtifactIssue(
                level="error",
                message=(
                    f"Artifact content too short: {length} characters "
                    f"(minimum {min_content_length})"
                ),
                field="body",
                code="CONTENT_TOO_SHORT",
            )
        )

    if header is not None and header.name is None:
        issues.append(
            ArtifactIssue(
                level="warning",
                message="Header has no 'name' field; the filename is used instead",
                field="name",
            )
        )

    return ValidationReport(
        path=path,
        name=display_name(path.name, policy.required_suffix),
        header=header,
        issues=tuple(issues),
    )
