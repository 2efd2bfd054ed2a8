"""Display name and filename conversions."""

from chatmate.security import ARTIFACT_SUFFIX


def is_artifact_file(filename: str, suffix: str = ARTIFACT_SUFFIX) -> bool:
    """Check whether a filename follows the artifact naming convention.

    Example:
        >>> is_artifact_file("Code Reviewer.chatmode.md")
        True
        >>> is_artifact_file("README.md")
        False
    """
    return filename.endswith(suffix) and len(filename) > len(suffix)


def display_name(filename: str, suffix: str = ARTIFACT_SUFFIX) -> str:
    """Derive the display name from a filename by removing the suffix.

    Filenames without the suffix are returned unchanged.

    Example:
        >>> display_name("Code Reviewer.chatmode.md")
        'Code Reviewer'
    """
    return filename.removesuffix(suffix)


def artifact_filename(name: str, suffix: str = ARTIFACT_SUFFIX) -> str:
    """Build the artifact filename for a display name.

    Example:
        >>> artifact_filename("Code Reviewer")
        'Code Reviewer.chatmode.md'
    """
    return f"{name}{suffix}"
