"""Artifact header parsing.

An artifact file starts with a ``---`` marker line, followed by one
``key: value`` pair per line, a closing ``---`` marker line, and a
non-empty instructional body.
"""

from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from chatmate.artifacts._types import ArtifactHeader
from chatmate.exceptions import ArtifactFormatError

if TYPE_CHECKING:
    from pathlib import Path

HEADER_MARKER = "---"
"""Line that opens and closes the metadata header."""


def split_header(text: str, *, path: Path | None = None) -> tuple[str, str]:
    """Split artifact text into raw header and body.

    Args:
        text: Decoded artifact content.
        path: Artifact path, for error context only.

    Returns:
        Tuple of (header text between the markers, body after the closing marker).

    Raises:
        ArtifactFormatError: If the opening or closing marker is missing.
    """
    lines = text.splitlines(keepends=True)

    if not lines or lines[0].strip() != HEADER_MARKER:
        msg = f"Artifact must start with a '{HEADER_MARKER}' header line"
        raise ArtifactFormatError(msg, path=path)

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == HEADER_MARKER:
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    msg = f"Artifact header closing '{HEADER_MARKER}' line not found"
    raise ArtifactFormatError(msg, path=path)


def parse_header(
    content: bytes,
    *,
    path: Path | None = None,
) -> tuple[ArtifactHeader, str]:
    """Parse and validate the metadata header of an artifact.

    Args:
        content: Raw artifact bytes.
        path: Artifact path, for error context only.

    Returns:
        Tuple of (validated header, body text).

    Raises:
        ArtifactFormatError: If the content is not UTF-8, the header is
            malformed or missing required fields, or the body is empty.

    Example:
        >>> header, body = parse_header(
        ...     b"---\\ndescription: Reviews code\\nauthor: jane\\n---\\n# Review\\n"
        ... )
        >>> header.author
        'jane'
    """
    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        msg = f"Artifact is not valid UTF-8: {e}"
        raise ArtifactFormatError(msg, path=path) from e

    header_text, body = split_header(text, path=path)

    try:
        data: Any = yaml.safe_load(header_text)  # pyright: ignore[reportExplicitAny]
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in artifact header: {e}"
        raise ArtifactFormatError(msg, path=path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "Artifact header must be a set of 'key: value' lines"
        raise ArtifactFormatError(msg, path=path)

    try:
        header = ArtifactHeader.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        msg = f"Invalid artifact header field '{field}': {first.get('msg')}"
        raise ArtifactFormatError(msg, path=path, field=field) from e

    if not body.strip():
        msg = "Artifact body after the header must not be empty"
        raise ArtifactFormatError(msg, path=path, field="body")

    return header, body
