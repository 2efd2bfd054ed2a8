"""Source selection."""

from pathlib import Path
from typing import TYPE_CHECKING

from chatmate.enums import SourceModeSetting
from chatmate.sources._directory import DirectorySource
from chatmate.sources._embedded import EmbeddedSource

if TYPE_CHECKING:
    from chatmate.config import Settings
    from chatmate.sources._protocol import SourceProvider


def create_source(settings: Settings, cwd: Path | None = None) -> SourceProvider:
    """Create the source provider selected by the settings.

    In ``auto`` mode the external directory is used when it exists under
    the working directory, otherwise the embedded artifacts. The decision
    is made here, once, and the returned provider never switches.

    Args:
        settings: Effective settings.
        cwd: Directory that relative source directories resolve against.
            Defaults to the current working directory.

    Returns:
        The selected source provider.

    Raises:
        FileNotFoundError: If ``external`` mode is configured and the
            source directory does not exist.
    """
    base = cwd if cwd is not None else Path.cwd()
    directory = base / settings.source_directory
    suffix = settings.policy.required_suffix

    match settings.source_mode:
        case SourceModeSetting.EMBEDDED:
            return EmbeddedSource.from_package(suffix=suffix)
        case SourceModeSetting.EXTERNAL:
            return DirectorySource(directory, suffix=suffix)
        case SourceModeSetting.AUTO:
            if directory.is_dir():
                return DirectorySource(directory, suffix=suffix)
            return EmbeddedSource.from_package(suffix=suffix)
