"""Chatmate management.

The manager installs artifacts from a source into the destination
directory, removes them again, and reports on the difference between
what is available and what is installed.

Classes:
    ChatmateManager: Operation surface used by the CLI.
    Installer: Validated copy of single artifacts.
    Uninstaller: Idempotent removal of single artifacts.
    Confirmer: Protocol for yes/no confirmation.
    StaticConfirmer: Confirmer with a fixed answer.
    RichConfirmer: Interactive terminal confirmer.

Example:
    >>> from chatmate.manager import ChatmateManager, StaticConfirmer
    >>> manager = ChatmateManager(settings, source, confirmer=StaticConfirmer(True))
    >>> for record in manager.install_all().records:
    ...     print(record.name, record.outcome)
"""

from chatmate.manager._confirm import Confirmer, RichConfirmer, StaticConfirmer
from chatmate.manager._installed import installed_names, list_installed
from chatmate.manager._installer import Installer, OutcomeCallback
from chatmate.manager._manager import ChatmateManager
from chatmate.manager._reporter import build_listing, build_status, partition
from chatmate.manager._types import (
    BatchResult,
    InstallationReport,
    InstallPlan,
    ListingEntry,
    ListingView,
    OutcomeRecord,
    Partition,
    SearchHit,
    StatusReport,
)
from chatmate.manager._uninstaller import Uninstaller

__all__ = [
    "BatchResult",
    "ChatmateManager",
    "Confirmer",
    "InstallPlan",
    "InstallationReport",
    "Installer",
    "ListingEntry",
    "ListingView",
    "OutcomeCallback",
    "OutcomeRecord",
    "Partition",
    "RichConfirmer",
    "SearchHit",
    "StaticConfirmer",
    "StatusReport",
    "Uninstaller",
    "build_listing",
    "build_status",
    "installed_names",
    "list_installed",
    "partition",
]
