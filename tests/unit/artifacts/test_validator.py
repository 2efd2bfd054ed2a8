from collections.abc import Callable
from pathlib import Path

import pytest

from chatmate.artifacts import validate_artifact
from chatmate.security import SecurityPolicy


def _codes(report_issues: tuple[object, ...]) -> list[str | None]:
    return [getattr(issue, "code", None) for issue in report_issues]


class TestValidateArtifact:
    def test_valid_artifact(
        self, tmp_path: Path, make_artifact: Callable[..., bytes]
    ) -> None:
        path = tmp_path / "Alpha.chatmode.md"
        _ = path.write_bytes(make_artifact(name="Alpha"))

        report = validate_artifact(path)

        assert report.valid
        assert report.issues == ()
        assert report.name == "Alpha"
        assert report.header is not None
        assert report.header.author == "tester"

    def test_missing_name_is_only_a_warning(
        self, tmp_path: Path, make_artifact: Callable[..., bytes]
    ) -> None:
        path = tmp_path / "Alpha.chatmode.md"
        _ = path.write_bytes(make_artifact())

        report = validate_artifact(path)

        assert report.valid
        assert len(report.warnings) == 1
        assert report.warnings[0].field == "name"

    def test_short_content(
        self, tmp_path: Path, make_artifact: Callable[..., bytes]
    ) -> None:
        path = tmp_path / "Alpha.chatmode.md"
        _ = path.write_bytes(make_artifact(name="Alpha", body="Too short.\n"))

        report = validate_artifact(path)

        assert not report.valid
        assert _codes(report.errors) == ["CONTENT_TOO_SHORT"]

    def test_minimum_length_is_configurable(
        self, tmp_path: Path, make_artifact: Callable[..., bytes]
    ) -> None:
        path = tmp_path / "Alpha.chatmode.md"
        _ = path.write_bytes(make_artifact(name="Alpha", body="Short.\n"))

        report = validate_artifact(path, min_content_length=0)

        assert report.valid

    def test_collects_every_problem(self, tmp_path: Path) -> None:
        path = tmp_path / "bad;name.chatmode.md"
        _ = path.write_bytes(b"no header at all")

        report = validate_artifact(path)

        assert _codes(report.errors) == [
            "INVALID_CHARACTERS",
            "INVALID_FORMAT",
            "CONTENT_TOO_SHORT",
        ]

    def test_wrong_extension(
        self, tmp_path: Path, make_artifact: Callable[..., bytes]
    ) -> None:
        path = tmp_path / "Alpha.txt"
        _ = path.write_bytes(make_artifact(name="Alpha"))

        report = validate_artifact(path)

        assert "INVALID_EXTENSION" in _codes(report.errors)
        assert "INVALID_ARTIFACT_FILENAME" in _codes(report.errors)

    def test_oversized_content_is_not_parsed(
        self, tmp_path: Path, make_artifact: Callable[..., bytes]
    ) -> None:
        path = tmp_path / "Alpha.chatmode.md"
        _ = path.write_bytes(make_artifact(name="Alpha"))

        report = validate_artifact(path, policy=SecurityPolicy(max_content_bytes=10))

        assert _codes(report.errors) == ["CONTENT_TOO_LARGE"]
        assert report.header is None

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            _ = validate_artifact(tmp_path / "Missing.chatmode.md")

    def test_to_dict(self, tmp_path: Path, make_artifact: Callable[..., bytes]) -> None:
        path = tmp_path / "Alpha.chatmode.md"
        _ = path.write_bytes(make_artifact(name="Alpha"))

        data = validate_artifact(path).to_dict()

        assert data["valid"] is True
        assert data["name"] == "Alpha"
        assert data["issues"] == []
