from pathlib import Path

from pytest_mock import MockerFixture
from rich.console import Console

from chatmate.enums import OperationOutcome
from chatmate.manager import (
    BatchResult,
    OutcomeRecord,
    RichConfirmer,
    StaticConfirmer,
    build_listing,
    installed_names,
    list_installed,
    partition,
)


class TestPartition:
    def test_splits_into_disjoint_sets(self) -> None:
        parts = partition(["A", "B"], ["B", "C"])

        assert parts.catalog_only == ("A",)
        assert parts.installed_only == ("C",)
        assert parts.both == ("B",)
        assert parts.available == ("A", "B")
        assert parts.installed == ("B", "C")

    def test_empty_inputs(self) -> None:
        parts = partition([], [])

        assert parts.available == ()
        assert parts.installed == ()


class TestBuildListing:
    def test_available_only(self) -> None:
        view = build_listing(
            partition(["A"], ["A", "B"]), show_available=True, show_installed=False
        )

        assert [e.name for e in view.available] == ["A"]
        assert view.installed == ()
        assert "installed" not in view.to_dict()


class TestListInstalled:
    def test_missing_destination_has_nothing(self, tmp_path: Path) -> None:
        assert list_installed(tmp_path / "missing") == ()

    def test_ignores_other_files_and_directories(self, tmp_path: Path) -> None:
        _ = (tmp_path / "B.chatmode.md").write_text("b")
        _ = (tmp_path / "A.chatmode.md").write_text("a")
        _ = (tmp_path / "notes.md").write_text("n")
        (tmp_path / "Dir.chatmode.md").mkdir()

        assert list_installed(tmp_path) == ("A.chatmode.md", "B.chatmode.md")
        assert installed_names(tmp_path) == ("A", "B")


class TestBatchResult:
    def test_counts_and_grouping(self) -> None:
        result = BatchResult(
            records=(
                OutcomeRecord("A", "A.chatmode.md", OperationOutcome.INSTALLED),
                OutcomeRecord("B", "B.chatmode.md", OperationOutcome.SKIPPED),
                OutcomeRecord("C", "C.chatmode.md", OperationOutcome.INSTALLED),
            )
        )

        assert len(result) == 3
        assert result.count(OperationOutcome.INSTALLED) == 2
        assert result.by_outcome() == {
            OperationOutcome.INSTALLED: ("A", "C"),
            OperationOutcome.SKIPPED: ("B",),
        }
        assert result.succeeded
        assert result.to_dict()["counts"] == {"installed": 2, "skipped": 1}

    def test_failed_record_marks_batch_failed(self) -> None:
        result = BatchResult(
            records=(
                OutcomeRecord(
                    "A",
                    "A.chatmode.md",
                    OperationOutcome.VALIDATION_FAILED,
                    error="bad",
                ),
            )
        )

        assert not result.succeeded
        assert result.to_dict()["records"] == [
            {
                "name": "A",
                "filename": "A.chatmode.md",
                "outcome": "validation_failed",
                "path": None,
                "already_absent": False,
                "error": "bad",
            }
        ]


class TestConfirmers:
    def test_static_confirmer_records_prompts(self) -> None:
        confirmer = StaticConfirmer(answer=True)

        assert confirmer.confirm("Proceed?")
        assert confirmer.prompts == ["Proceed?"]

    def test_rich_confirmer_reads_answer(
        self, mocker: MockerFixture, console: Console
    ) -> None:
        ask = mocker.patch("chatmate.manager._confirm.Confirm.ask", return_value=True)

        assert RichConfirmer(console).confirm("Install 3 chatmate(s)?")
        ask.assert_called_once_with("Install 3 chatmate(s)?", console=console, default=False)
