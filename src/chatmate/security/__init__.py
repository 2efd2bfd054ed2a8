"""Security validation for chatmate artifacts.

Every write or delete in the destination directory goes through these
checks first:

- ``validate_name`` - filename allow-list, suffix, and base name rules
- ``validate_destination_path`` - containment inside the destination root
- ``validate_content`` - content size ceiling
- ``validate_extension`` - allowed file extensions
"""

from chatmate.security._policy import (
    ARTIFACT_SUFFIX,
    DEFAULT_POLICY,
    MAX_CONTENT_BYTES,
    MAX_FILENAME_LENGTH,
    RESERVED_NAMES,
    SAFE_FILENAME_PATTERN,
    SecurityPolicy,
)
from chatmate.security._validation import (
    sanitize_input,
    validate_content,
    validate_destination_path,
    validate_extension,
    validate_name,
)

__all__ = [
    "ARTIFACT_SUFFIX",
    "DEFAULT_POLICY",
    "MAX_CONTENT_BYTES",
    "MAX_FILENAME_LENGTH",
    "RESERVED_NAMES",
    "SAFE_FILENAME_PATTERN",
    "SecurityPolicy",
    "sanitize_input",
    "validate_content",
    "validate_destination_path",
    "validate_extension",
    "validate_name",
]
