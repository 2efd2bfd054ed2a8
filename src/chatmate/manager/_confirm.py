"""Confirmation before batch writes and deletes."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.prompt import Confirm

if TYPE_CHECKING:
    from rich.console import Console


@runtime_checkable
class Confirmer(Protocol):
    """Answers yes/no questions before destructive operations."""

    def confirm(self, prompt: str) -> bool:
        """Return True to proceed."""
        ...


@dataclass(slots=True)
class StaticConfirmer:
    """Confirmer that always gives the same answer.

    Prompts are recorded so tests can assert on them.

    Example:
        >>> confirmer = StaticConfirmer(answer=True)
        >>> confirmer.confirm("Proceed?")
        True
        >>> confirmer.prompts
        ['Proceed?']
    """

    answer: bool = False
    prompts: list[str] = field(default_factory=list)

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


class RichConfirmer:
    """Interactive confirmer reading y/n from the terminal."""

    __slots__: tuple[str, ...] = ("_console",)

    def __init__(self, console: Console | None = None) -> None:
        self._console: Console | None = console

    def confirm(self, prompt: str) -> bool:
        return Confirm.ask(prompt, console=self._console, default=False)
