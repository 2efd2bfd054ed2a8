"""Default configuration values.

This module defines the built-in default configuration values that are used
when no other configuration sources provide values.
"""

from typing import Any

from chatmate.artifacts import MIN_CONTENT_LENGTH
from chatmate.security import MAX_CONTENT_BYTES

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "install": {
        "destination": "",
        "create_destination": True,
    },
    "source": {
        "mode": "auto",
        "directory": "mates",
    },
    "security": {
        "max_content_bytes": MAX_CONTENT_BYTES,
    },
    "validation": {
        "min_content_length": MIN_CONTENT_LENGTH,
    },
}
