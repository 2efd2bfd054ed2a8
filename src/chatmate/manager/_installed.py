"""Inspection of the destination directory."""

from typing import TYPE_CHECKING

from chatmate.artifacts import display_name, is_artifact_file
from chatmate.security import ARTIFACT_SUFFIX

if TYPE_CHECKING:
    from pathlib import Path


def list_installed(destination: Path, suffix: str = ARTIFACT_SUFFIX) -> tuple[str, ...]:
    """List artifact filenames physically present in the destination.

    The directory is read on every call. Subdirectories and files without
    the artifact suffix are ignored. A missing destination has nothing
    installed.

    Returns:
        Sorted artifact filenames.

    Raises:
        OSError: If the destination exists but cannot be listed.
    """
    if not destination.is_dir():
        return ()

    return tuple(
        sorted(
            p.name
            for p in destination.iterdir()
            if p.is_file() and is_artifact_file(p.name, suffix)
        )
    )


def installed_names(destination: Path, suffix: str = ARTIFACT_SUFFIX) -> tuple[str, ...]:
    """List display names of installed artifacts, sorted."""
    return tuple(display_name(f, suffix) for f in list_installed(destination, suffix))
