"""Integration tests for the list, status, search, and validate commands."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest


SUFFIX = ".chatmode.md"

MakeArtifact = Callable[..., bytes]


@pytest.fixture
def destination(chatmate_cli: Callable[..., None], tmp_path: Path) -> Path:
    """Install Alpha plus one user-created chatmate."""
    destination = tmp_path / "prompts"
    chatmate_cli("--destination", str(destination), "hire", "Alpha")
    _ = (destination / f"Mine{SUFFIX}").write_text("my own chatmate")
    return destination


class TestList:
    def test_shows_both_sections(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "list"
        )

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Available (3)" in out
        assert "Installed (2)" in out
        assert "Gamma" in out
        assert "Mine" in out

    def test_available_only(
        self,
        chatmate_cli: Callable[..., None],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        chatmate_cli("--destination", str(destination), "list", "--available")

        out = capsys.readouterr().out
        assert "Available (3)" in out
        assert "Installed (" not in out

    def test_json(
        self,
        chatmate_cli: Callable[..., None],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        chatmate_cli(
            "--destination", str(destination), "list", "--installed", "--format", "json"
        )

        data = json.loads(capsys.readouterr().out)
        assert data == {
            "installed": [
                {"name": "Alpha", "installed": True, "in_catalog": True},
                {"name": "Mine", "installed": True, "in_catalog": False},
            ]
        }

    def test_empty_destination(
        self,
        chatmate_cli: Callable[..., None],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        chatmate_cli("--destination", str(tmp_path / "nowhere"), "list", "-i")

        out = capsys.readouterr().out
        assert "Installed (0)" in out
        assert "(none)" in out


class TestStatus:
    def test_json_counts(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "status", "--format", "json"
        )

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["available"] == 3
        assert data["installed"] == 2
        assert data["pending"] == 2
        assert data["user_created"] == 1
        assert data["coverage"] == 33.3
        assert data["destination_exists"] is True
        assert data["source_mode"] == "external"

    def test_table(
        self,
        chatmate_cli: Callable[..., None],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        chatmate_cli("--destination", str(destination), "status")

        out = capsys.readouterr().out
        assert "33.3%" in out
        assert "user created" in out

    def test_requires_destination(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
    ) -> None:
        assert chatmate_cli_with_exit_code("status") == 1


class TestSearch:
    def test_case_insensitive_substring(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "search", "ALP"
        )

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Alpha (installed)" in out
        assert "Beta" not in out

    def test_json(
        self,
        chatmate_cli: Callable[..., None],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        chatmate_cli("--destination", str(destination), "search", "a", "-f", "json")

        data = json.loads(capsys.readouterr().out)
        assert data["term"] == "a"
        assert [m["name"] for m in data["matches"]] == ["Alpha", "Beta", "Gamma"]

    def test_no_matches(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "search", "zzz"
        )

        assert exit_code == 0
        assert "No chatmates match 'zzz'." in capsys.readouterr().out

    def test_blank_term_is_rejected(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "search", "  "
        )

        assert exit_code == 2


class TestValidate:
    def test_valid_file(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        make_artifact: MakeArtifact,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / f"Helper{SUFFIX}"
        _ = path.write_bytes(make_artifact())

        exit_code = chatmate_cli_with_exit_code("validate", str(path))

        assert exit_code == 0
        assert "valid" in capsys.readouterr().out

    def test_short_file_is_invalid(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / f"Short{SUFFIX}"
        _ = path.write_text("---\ndescription: d\nauthor: a\n---\nhi\n")

        exit_code = chatmate_cli_with_exit_code("validate", str(path))

        assert exit_code == 2
        assert "CONTENT_TOO_SHORT" in capsys.readouterr().out

    def test_json_report(
        self,
        chatmate_cli: Callable[..., None],
        tmp_path: Path,
        make_artifact: MakeArtifact,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        good = tmp_path / f"Good{SUFFIX}"
        bad = tmp_path / f"Bad{SUFFIX}"
        _ = good.write_bytes(make_artifact())
        _ = bad.write_text("no header at all")

        chatmate_cli("validate", str(good), str(bad), "--format", "json")

        data = json.loads(capsys.readouterr().out)
        assert [a["valid"] for a in data["artifacts"]] == [True, False]

    def test_missing_file_exits_io_error(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "validate", str(tmp_path / f"Absent{SUFFIX}")
        )

        assert exit_code == 4

    def test_healthy_installation(
        self,
        chatmate_cli: Callable[..., None],
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = tmp_path / "prompts"
        chatmate_cli("--destination", str(destination), "hire", "--yes")
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "validate"
        )

        assert exit_code == 0
        assert "Healthy." in capsys.readouterr().out

    def test_invalid_installed_artifact(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "validate", "-f", "json"
        )

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 2
        assert data["healthy"] is False
        assert data["orphans"] == ["Mine"]

    def test_missing_destination_is_unhealthy(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(tmp_path / "nowhere"), "validate"
        )

        assert exit_code == 2
