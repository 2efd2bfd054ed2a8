"""Pure validation functions over names, paths, and content.

None of these functions touch the filesystem beyond path resolution.
Each raises a subclass of SecurityValidationError on failure and must
run to completion before an artifact is written or deleted.

Example:
    >>> from pathlib import Path
    >>> from chatmate.security import validate_destination_path, validate_name
    >>> validate_name("Code Reviewer.chatmode.md")
    >>> validate_destination_path(Path("/prompts"), "Code Reviewer.chatmode.md")
    PosixPath('/prompts/Code Reviewer.chatmode.md')
"""

from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from chatmate.exceptions import (
    BadExtensionError,
    InvalidNameError,
    PathEscapeError,
    SizeExceededError,
)
from chatmate.security._policy import DEFAULT_POLICY, RESERVED_NAMES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chatmate.security._policy import SecurityPolicy


def validate_name(filename: str, policy: SecurityPolicy = DEFAULT_POLICY) -> None:
    """Validate that a filename is a safe artifact filename.

    Args:
        filename: Bare filename, including the artifact suffix.
        policy: Policy supplying the allow-list and required suffix.

    Raises:
        InvalidNameError: If the filename is empty, too long, contains
            characters outside the allow-list, uses a reserved device
            name, or has an empty base name.
    """
    if not filename:
        raise InvalidNameError(
            "filename cannot be empty",
            field="filename",
            value=filename,
            code="EMPTY_FILENAME",
        )

    if "\x00" in filename:
        raise InvalidNameError(
            "filename contains null bytes",
            field="filename",
            value=repr(filename),
            code="NULL_BYTES",
        )

    if len(filename) > policy.max_filename_length:
        raise InvalidNameError(
            f"filename too long (max {policy.max_filename_length} characters)",
            field="filename",
            value=filename,
            code="FILENAME_TOO_LONG",
        )

    if not policy.filename_pattern.fullmatch(filename):
        raise InvalidNameError(
            "filename contains invalid characters",
            field="filename",
            value=repr(filename),
            code="INVALID_CHARACTERS",
        )

    if not filename.endswith(policy.required_suffix):
        raise InvalidNameError(
            f"not an artifact filename (must end with {policy.required_suffix})",
            field="filename",
            value=filename,
            code="INVALID_ARTIFACT_FILENAME",
        )

    base = filename.removesuffix(policy.required_suffix)
    if not base.strip():
        raise InvalidNameError(
            "filename has an empty base name",
            field="filename",
            value=filename,
            code="EMPTY_BASE_NAME",
        )

    if base.strip().upper() in RESERVED_NAMES:
        raise InvalidNameError(
            "filename uses reserved system name",
            field="filename",
            value=filename,
            code="RESERVED_NAME",
        )


def validate_destination_path(root: Path, filename: str) -> Path:
    """Resolve a filename under the destination root and check containment.

    Filenames that are absolute or contain a ``..`` segment are rejected
    outright, even if they would resolve back inside the root. Symlinks
    are followed, so a link pointing outside the root is rejected too.

    Args:
        root: Destination directory.
        filename: Bare filename to place inside the root.

    Returns:
        The absolute resolved destination path.

    Raises:
        PathEscapeError: If the resolved path is not a strict descendant
            of the resolved root.
    """
    candidate = PurePath(filename)

    if candidate.is_absolute() or filename.startswith(("/", "\\")):
        raise PathEscapeError(
            "absolute paths not allowed",
            field="path",
            value=filename,
            code="ABSOLUTE_PATH",
        )

    segments = filename.replace("\\", "/").split("/")
    if ".." in segments:
        raise PathEscapeError(
            "path contains directory traversal segments",
            field="path",
            value=filename,
            code="DIRECTORY_TRAVERSAL",
        )

    resolved_root = root.resolve()
    resolved = (resolved_root / filename).resolve()

    if resolved == resolved_root or not resolved.is_relative_to(resolved_root):
        raise PathEscapeError(
            f"path escapes destination root {resolved_root}",
            field="path",
            value=filename,
            code="PATH_ESCAPE",
        )

    return resolved


def validate_content(content: bytes, max_size: int) -> None:
    """Validate that content does not exceed the size ceiling.

    Raises:
        SizeExceededError: If ``len(content)`` is greater than ``max_size``.
    """
    if len(content) > max_size:
        raise SizeExceededError(
            f"content too large (max {max_size} bytes)",
            field="content",
            value=f"{len(content)} bytes",
            code="CONTENT_TOO_LARGE",
        )


def validate_extension(filename: str, allowed_extensions: Sequence[str]) -> None:
    """Validate that a filename ends in one of the allowed extensions.

    The comparison is case-insensitive and uses the final extension only.

    Raises:
        BadExtensionError: If the extension is not in ``allowed_extensions``.
    """
    extension = PurePath(filename).suffix.lower()

    if extension and extension in {e.lower() for e in allowed_extensions}:
        return

    raise BadExtensionError(
        f"file extension not allowed (allowed: {', '.join(allowed_extensions)})",
        field="filename",
        value=filename,
        code="INVALID_EXTENSION",
    )


def sanitize_input(value: str) -> str:
    """Strip NUL bytes, surrounding whitespace, and control characters.

    Newlines and tabs are preserved.

    Example:
        >>> sanitize_input("  Code\\x00 Reviewer\\x07 ")
        'Code Reviewer'
    """
    value = value.replace("\x00", "").strip()
    return "".join(ch for ch in value if ch >= " " or ch in "\n\t")
