from pathlib import Path

import pytest

from chatmate.config import Settings
from chatmate.enums import SourceMode, SourceModeSetting
from chatmate.exceptions import ArtifactNotFoundError, PathEscapeError
from chatmate.sources import (
    DirectorySource,
    EmbeddedSource,
    SourceProvider,
    create_source,
)


class TestEmbeddedSource:
    def test_catalog_from_table(self) -> None:
        source = EmbeddedSource({"B.chatmode.md": b"b", "A.chatmode.md": b"a"})

        assert source.mode == SourceMode.EMBEDDED
        assert source.catalog().names() == ("A", "B")
        assert source.list_filenames() == ("A.chatmode.md", "B.chatmode.md")

    def test_fetch_returns_content(self) -> None:
        source = EmbeddedSource({"A.chatmode.md": b"content"})

        artifact = source.fetch("A.chatmode.md")

        assert artifact.name == "A"
        assert artifact.content == b"content"
        assert artifact.size == 7

    def test_fetch_missing(self) -> None:
        source = EmbeddedSource({})

        with pytest.raises(ArtifactNotFoundError) as exc_info:
            _ = source.fetch("A.chatmode.md")

        assert exc_info.value.names == ("A.chatmode.md",)
        assert str(exc_info.value) == "Embedded artifact not found: A.chatmode.md"

    def test_table_is_copied(self) -> None:
        table = {"A.chatmode.md": b"a"}
        source = EmbeddedSource(table)
        table["B.chatmode.md"] = b"b"

        assert source.catalog().names() == ("A",)

    def test_bundled_artifacts_load(self) -> None:
        source = EmbeddedSource.from_package()

        names = source.catalog().names()

        assert len(names) >= 3
        assert "Code Reviewer" in names

    def test_is_a_source_provider(self) -> None:
        assert isinstance(EmbeddedSource({}), SourceProvider)


class TestDirectorySource:
    def test_lists_only_artifact_files(self, mates_dir: Path) -> None:
        (mates_dir / "nested.chatmode.md").mkdir()

        source = DirectorySource(mates_dir)

        assert source.mode == SourceMode.EXTERNAL
        assert source.catalog().names() == ("Alpha", "Beta", "Gamma")
        assert source.location == str(mates_dir.resolve())

    def test_rereads_directory(self, mates_dir: Path) -> None:
        source = DirectorySource(mates_dir)
        _ = (mates_dir / "Delta.chatmode.md").write_text("d")

        assert "Delta" in source.catalog()

    def test_fetch(self, mates_dir: Path) -> None:
        artifact = DirectorySource(mates_dir).fetch("Alpha.chatmode.md")

        assert artifact.name == "Alpha"
        assert artifact.content == (mates_dir / "Alpha.chatmode.md").read_bytes()

    def test_fetch_missing(self, mates_dir: Path) -> None:
        with pytest.raises(ArtifactNotFoundError):
            _ = DirectorySource(mates_dir).fetch("Missing.chatmode.md")

    def test_fetch_rejects_traversal(self, mates_dir: Path) -> None:
        with pytest.raises(PathEscapeError):
            _ = DirectorySource(mates_dir).fetch("../secret.chatmode.md")

    def test_fetch_rejects_nested_names(self, mates_dir: Path) -> None:
        with pytest.raises(PathEscapeError, match="bare name"):
            _ = DirectorySource(mates_dir).fetch("sub/Alpha.chatmode.md")

    def test_symlinked_files_are_listed_and_fetched(self, tmp_path: Path) -> None:
        shared = tmp_path / "shared"
        shared.mkdir()
        target = shared / "Alpha.chatmode.md"
        _ = target.write_text("shared alpha")
        linked = tmp_path / "linked"
        linked.mkdir()
        (linked / "Alpha.chatmode.md").symlink_to(target)

        source = DirectorySource(linked)

        assert source.catalog().names() == ("Alpha",)
        assert source.fetch("Alpha.chatmode.md").content == b"shared alpha"

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _ = DirectorySource(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "file"
        _ = path.write_text("x")

        with pytest.raises(NotADirectoryError):
            _ = DirectorySource(path)


class TestCreateSource:
    def test_auto_prefers_existing_directory(self, tmp_path: Path, mates_dir: Path) -> None:
        settings = Settings(source_directory=Path("mates"))

        source = create_source(settings, cwd=tmp_path)

        assert source.mode == SourceMode.EXTERNAL

    def test_auto_falls_back_to_embedded(self, tmp_path: Path) -> None:
        settings = Settings(source_directory=Path("mates"))

        source = create_source(settings, cwd=tmp_path)

        assert source.mode == SourceMode.EMBEDDED

    def test_embedded_ignores_directory(self, tmp_path: Path, mates_dir: Path) -> None:
        settings = Settings(source_mode=SourceModeSetting.EMBEDDED)

        source = create_source(settings, cwd=tmp_path)

        assert source.mode == SourceMode.EMBEDDED

    def test_external_requires_directory(self, tmp_path: Path) -> None:
        settings = Settings(source_mode=SourceModeSetting.EXTERNAL)

        with pytest.raises(FileNotFoundError):
            _ = create_source(settings, cwd=tmp_path)

    def test_absolute_directory_ignores_cwd(self, tmp_path: Path, mates_dir: Path) -> None:
        settings = Settings(
            source_mode=SourceModeSetting.EXTERNAL, source_directory=mates_dir
        )

        source = create_source(settings, cwd=tmp_path / "elsewhere")

        assert source.location == str(mates_dir.resolve())
