"""Set differences between the catalog and the installed set."""

import os
from typing import TYPE_CHECKING

from chatmate.manager._types import ListingEntry, ListingView, Partition, StatusReport

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from chatmate.sources import SourceProvider


def partition(catalog_names: Iterable[str], installed: Iterable[str]) -> Partition:
    """Split names into catalog-only, installed-only, and both.

    Example:
        >>> partition(["A", "B"], ["B", "C"])
        Partition(catalog_only=('A',), installed_only=('C',), both=('B',))
    """
    available = set(catalog_names)
    present = set(installed)
    return Partition(
        catalog_only=tuple(sorted(available - present)),
        installed_only=tuple(sorted(present - available)),
        both=tuple(sorted(available & present)),
    )


def build_listing(
    parts: Partition,
    *,
    show_available: bool,
    show_installed: bool,
) -> ListingView:
    """Build a listing view, showing everything when neither flag is set."""
    if not show_available and not show_installed:
        show_available = show_installed = True

    both = set(parts.both)
    available = (
        tuple(
            ListingEntry(name=n, installed=n in both, in_catalog=True)
            for n in parts.available
        )
        if show_available
        else ()
    )
    installed = (
        tuple(
            ListingEntry(name=n, installed=True, in_catalog=n in both)
            for n in parts.installed
        )
        if show_installed
        else ()
    )

    return ListingView(
        show_available=show_available,
        show_installed=show_installed,
        available=available,
        installed=installed,
    )


def destination_state(destination: Path) -> tuple[bool, bool]:
    """Return (exists, writable) for a destination directory.

    A missing destination counts as writable if its nearest existing
    parent is, since install creates it.
    """
    if destination.is_dir():
        return True, os.access(destination, os.W_OK)

    for parent in destination.parents:
        if parent.exists():
            return False, parent.is_dir() and os.access(parent, os.W_OK)
    return False, False


def build_status(
    parts: Partition,
    *,
    destination: Path,
    source: SourceProvider,
) -> StatusReport:
    """Aggregate partition counts and destination accessibility."""
    exists, writable = destination_state(destination)
    return StatusReport(
        destination=destination,
        destination_exists=exists,
        destination_writable=writable,
        source_mode=source.mode,
        source_location=source.location,
        available=len(parts.catalog_only) + len(parts.both),
        installed=len(parts.installed_only) + len(parts.both),
        pending=len(parts.catalog_only),
        user_created=len(parts.installed_only),
    )
