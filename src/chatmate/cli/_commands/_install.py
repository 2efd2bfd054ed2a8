# pyright: reportUnusedCallResult=false
# ruff: noqa: D415
"""Commands that write to or delete from the destination directory."""

from typing import Annotated

from cyclopts import Parameter

from chatmate.security import sanitize_input

from ._manager import build_manager, command_errors, print_summary
from ._shared import ExitCode, exit_with_error, exit_with_success, get_console


def _clean_names(names: tuple[str, ...]) -> list[str]:
    return [cleaned for name in names if (cleaned := sanitize_input(name))]


def hire(
    *names: Annotated[str, Parameter(help="Chatmate names to install")],
    force: Annotated[
        bool,
        Parameter(name=["--force", "-f"], help="Overwrite installed chatmates"),
    ] = False,
    yes: Annotated[
        bool,
        Parameter(name=["--yes", "-y"], help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Install chatmates into the destination

    With no names, every chatmate in the catalog is installed after a
    confirmation prompt. Chatmates already installed are skipped unless
    --force is given.

    Args:
        names: Display names to install, matched exactly.
        force: Overwrite chatmates that are already installed.
        yes: Do not ask for confirmation.
    """
    console = get_console()
    requested = _clean_names(names)
    if names and not requested:
        exit_with_error("Chatmate names must not be blank", ExitCode.VALIDATION_ERROR)

    with command_errors("hire"):
        manager = build_manager("hire", console=console)
        if requested:
            result = manager.install_specific(requested, force=force)
        else:
            result = manager.install_all(force=force, assume_yes=yes)

    if result.cancelled:
        exit_with_success("Cancelled. Nothing was installed.", console=console)

    print_summary(result, console=console)
    raise SystemExit(ExitCode.SUCCESS)


def uninstall(
    *names: Annotated[str, Parameter(help="Chatmate names to remove")],
    all_: Annotated[
        bool,
        Parameter(name=["--all", "-a"], help="Remove every installed chatmate"),
    ] = False,
    yes: Annotated[
        bool,
        Parameter(name=["--yes", "-y"], help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Remove chatmates from the destination

    Removing a chatmate that is not installed is not an error.

    Args:
        names: Display names to remove.
        all_: Remove every installed chatmate, including ones you wrote.
        yes: Do not ask for confirmation (with --all).
    """
    console = get_console()
    requested = _clean_names(names)

    if requested and all_:
        exit_with_error(
            "Pass chatmate names or --all, not both", ExitCode.VALIDATION_ERROR
        )
    if not requested and not all_:
        exit_with_error(
            "No chatmates named",
            ExitCode.VALIDATION_ERROR,
            hint="Pass one or more names, or --all to remove everything.",
        )

    with command_errors("uninstall"):
        manager = build_manager("uninstall", console=console)
        if all_:
            result = manager.uninstall_all(assume_yes=yes)
        else:
            result = manager.uninstall_specific(requested)

    if result.cancelled:
        exit_with_success("Cancelled. Nothing was removed.", console=console)

    print_summary(result, console=console)
    raise SystemExit(ExitCode.SUCCESS)


def cleanup(
    *,
    yes: Annotated[
        bool,
        Parameter(name=["--yes", "-y"], help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Remove installed chatmates that are not in the catalog

    Args:
        yes: Do not ask for confirmation.
    """
    console = get_console()

    with command_errors("cleanup"):
        result = build_manager("cleanup", console=console).cleanup_orphans(
            assume_yes=yes
        )

    if result.cancelled:
        exit_with_success("Cancelled. Nothing was removed.", console=console)

    print_summary(result, console=console)
    raise SystemExit(ExitCode.SUCCESS)
