"""Integration tests for the hire, uninstall, and cleanup commands."""

import io
from collections.abc import Callable
from pathlib import Path

import pytest

SUFFIX = ".chatmode.md"


def _installed(destination: Path) -> list[str]:
    return sorted(p.name for p in destination.glob(f"*{SUFFIX}"))


class TestHire:
    def test_installs_whole_catalog(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = tmp_path / "prompts"

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "hire", "--yes"
        )

        assert exit_code == 0
        assert _installed(destination) == [
            f"Alpha{SUFFIX}",
            f"Beta{SUFFIX}",
            f"Gamma{SUFFIX}",
        ]
        assert "Done: 3 installed." in capsys.readouterr().out

    def test_second_run_skips(
        self,
        chatmate_cli: Callable[..., None],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = str(tmp_path / "prompts")
        chatmate_cli("--destination", destination, "hire", "--yes")
        _ = capsys.readouterr()

        chatmate_cli("--destination", destination, "hire", "--yes")

        assert "Done: 3 skipped." in capsys.readouterr().out

    def test_force_reinstalls(
        self,
        chatmate_cli: Callable[..., None],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = tmp_path / "prompts"
        chatmate_cli("--destination", str(destination), "hire", "--yes")
        _ = (destination / f"Beta{SUFFIX}").write_text("edited")
        _ = capsys.readouterr()

        chatmate_cli("--destination", str(destination), "hire", "--yes", "--force")

        assert "Done: 3 reinstalled." in capsys.readouterr().out
        assert (destination / f"Beta{SUFFIX}").read_text() != "edited"

    def test_named_chatmates_only(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        destination = tmp_path / "prompts"

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "hire", "Beta"
        )

        assert exit_code == 0
        assert _installed(destination) == [f"Beta{SUFFIX}"]

    def test_unknown_name_exits_not_found(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = tmp_path / "prompts"

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "hire", "Beta", "Nobody"
        )

        assert exit_code == 3
        assert "Nobody" in capsys.readouterr().err
        assert not destination.exists() or _installed(destination) == []

    def test_missing_destination_exits_with_hint(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = chatmate_cli_with_exit_code("hire", "--yes")

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "install.destination" in err
        assert "Hint:" in err

    def test_destination_from_environment(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        destination = tmp_path / "from-env"
        monkeypatch.setenv("CHATMATE_INSTALL__DESTINATION", str(destination))

        exit_code = chatmate_cli_with_exit_code("hire", "Alpha")

        assert exit_code == 0
        assert _installed(destination) == [f"Alpha{SUFFIX}"]

    def test_declined_prompt_installs_nothing(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = tmp_path / "prompts"
        monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "hire"
        )

        assert exit_code == 0
        assert "Cancelled. Nothing was installed." in capsys.readouterr().out
        assert not destination.exists() or _installed(destination) == []

    def test_blank_names_are_rejected(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(tmp_path / "prompts"), "hire", "   "
        )

        assert exit_code == 2

    def test_missing_external_source_exits_io_error(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("CHATMATE_SOURCE__MODE", "external")
        monkeypatch.setenv("CHATMATE_SOURCE__DIRECTORY", str(tmp_path / "absent"))

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(tmp_path / "prompts"), "hire", "--yes"
        )

        assert exit_code == 4


class TestUninstall:
    @pytest.fixture
    def destination(
        self, chatmate_cli: Callable[..., None], tmp_path: Path
    ) -> Path:
        destination = tmp_path / "prompts"
        chatmate_cli("--destination", str(destination), "hire", "--yes")
        _ = (destination / f"Mine{SUFFIX}").write_text("my own chatmate")
        return destination

    def test_removes_named(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "uninstall", "Alpha"
        )

        assert exit_code == 0
        assert f"Alpha{SUFFIX}" not in _installed(destination)
        assert "Done: 1 removed." in capsys.readouterr().out

    def test_absent_name_is_not_an_error(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "uninstall", "Nobody"
        )

        assert exit_code == 0
        assert "(not installed)" in capsys.readouterr().out

    def test_all_removes_user_created_too(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "uninstall", "--all", "--yes"
        )

        assert exit_code == 0
        assert _installed(destination) == []

    def test_names_and_all_conflict(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "uninstall", "Alpha", "--all"
        )

        assert exit_code == 2
        assert f"Alpha{SUFFIX}" in _installed(destination)

    def test_requires_names_or_all(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "uninstall"
        )

        assert exit_code == 2
        assert "--all" in capsys.readouterr().err

    def test_path_traversal_name_is_rejected(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        destination: Path,
    ) -> None:
        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "uninstall", "../Alpha"
        )

        assert exit_code == 2
        assert f"Alpha{SUFFIX}" in _installed(destination)


class TestCleanup:
    def test_removes_only_orphans(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        chatmate_cli: Callable[..., None],
        tmp_path: Path,
    ) -> None:
        destination = tmp_path / "prompts"
        chatmate_cli("--destination", str(destination), "hire", "--yes")
        _ = (destination / f"Retired{SUFFIX}").write_text("no longer shipped")

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "cleanup", "--yes"
        )

        assert exit_code == 0
        assert _installed(destination) == [
            f"Alpha{SUFFIX}",
            f"Beta{SUFFIX}",
            f"Gamma{SUFFIX}",
        ]

    def test_nothing_to_do(
        self,
        chatmate_cli_with_exit_code: Callable[..., int],
        chatmate_cli: Callable[..., None],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        destination = tmp_path / "prompts"
        chatmate_cli("--destination", str(destination), "hire", "--yes")
        _ = capsys.readouterr()

        exit_code = chatmate_cli_with_exit_code(
            "--destination", str(destination), "cleanup", "--yes"
        )

        assert exit_code == 0
        assert "Nothing to do." in capsys.readouterr().out
