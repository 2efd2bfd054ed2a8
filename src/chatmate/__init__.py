"""chatmate: install and manage chat mode files for a host application."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("chatmate")
except PackageNotFoundError:
    __version__ = "0.0.0"
