"""Security policy for artifact filenames, paths, and content."""

import re
from dataclasses import dataclass

ARTIFACT_SUFFIX = ".chatmode.md"
"""Filename suffix reserved for chatmate artifacts."""

MAX_CONTENT_BYTES = 10 * 1024 * 1024
"""Default ceiling for artifact content size (10 MiB)."""

MAX_FILENAME_LENGTH = 255
"""Maximum filename length accepted by the validator."""

SAFE_FILENAME_PATTERN = re.compile(r"^[a-zA-Z0-9 .\-_]+$")
"""Allowed filename characters: ASCII letters and digits, spaces, dots, hyphens, underscores."""

RESERVED_NAMES: frozenset[str] = frozenset(
    {
        "CON",
        "PRN",
        "AUX",
        "NUL",
        *(f"COM{i}" for i in range(1, 10)),
        *(f"LPT{i}" for i in range(1, 10)),
    }
)
"""Device names that cannot be used as a base filename on Windows."""


@dataclass(frozen=True, slots=True)
class SecurityPolicy:
    """Immutable rules consulted by every mutating operation.

    Attributes:
        required_suffix: Suffix every artifact filename must carry.
        allowed_extensions: Final extensions accepted for artifact files.
        max_content_bytes: Largest accepted artifact content, in bytes.
        max_filename_length: Longest accepted filename, in characters.
        filename_pattern: Allow-list pattern for filename characters.
    """

    required_suffix: str = ARTIFACT_SUFFIX
    allowed_extensions: tuple[str, ...] = (".md",)
    max_content_bytes: int = MAX_CONTENT_BYTES
    max_filename_length: int = MAX_FILENAME_LENGTH
    filename_pattern: re.Pattern[str] = SAFE_FILENAME_PATTERN


DEFAULT_POLICY = SecurityPolicy()
