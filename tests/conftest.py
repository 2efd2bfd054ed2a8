"""Shared test fixtures for chatmate tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from chatmate.config import Settings
from chatmate.enums import SourceModeSetting
from chatmate.manager import ChatmateManager, OutcomeRecord, StaticConfirmer
from chatmate.sources import DirectorySource

SUFFIX = ".chatmode.md"
CATALOG_NAMES = ("Alpha", "Beta", "Gamma")

_BODY_PARAGRAPH = (
    "You are a focused assistant. Read the request carefully, ask a "
    "clarifying question when the goal is ambiguous, and keep answers short. "
    "Prefer concrete examples over general advice.\n\n"
)

MakeArtifact = Callable[..., bytes]


def _artifact(
    *,
    description: str = "Helps with a task",
    author: str = "tester",
    name: str | None = None,
    body: str | None = None,
    min_length: int = 600,
) -> bytes:
    lines = ["---", f"description: {description}", f"author: {author}"]
    if name is not None:
        lines.append(f"name: {name}")
    lines.append("---")
    header = "\n".join(lines) + "\n"

    if body is None:
        body = "# Instructions\n\n"
        while len(header) + len(body) < min_length:
            body += _BODY_PARAGRAPH
    return (header + body).encode("utf-8")


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def make_artifact() -> MakeArtifact:
    """Return a factory for valid artifact bytes with optional overrides."""
    return _artifact


@pytest.fixture
def mates_dir(tmp_path: Path) -> Path:
    """Create a source directory holding the Alpha, Beta, and Gamma artifacts."""
    directory = tmp_path / "mates"
    directory.mkdir()
    for name in CATALOG_NAMES:
        _ = (directory / f"{name}{SUFFIX}").write_bytes(
            _artifact(description=f"{name} helper", name=name)
        )
    _ = (directory / "README.md").write_text("not an artifact")
    return directory


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Return a destination directory path that does not exist yet."""
    return tmp_path / "prompts"


@pytest.fixture
def settings(mates_dir: Path, destination: Path) -> Settings:
    return Settings(
        destination=destination,
        source_mode=SourceModeSetting.EXTERNAL,
        source_directory=mates_dir,
    )


@pytest.fixture
def source(mates_dir: Path) -> DirectorySource:
    return DirectorySource(mates_dir)


@pytest.fixture
def outcomes() -> list[OutcomeRecord]:
    """Collect records passed to a manager's outcome callback."""
    return []


@pytest.fixture
def manager(
    settings: Settings,
    source: DirectorySource,
    outcomes: list[OutcomeRecord],
) -> ChatmateManager:
    return ChatmateManager(
        settings,
        source,
        confirmer=StaticConfirmer(answer=True),
        on_outcome=outcomes.append,
    )
