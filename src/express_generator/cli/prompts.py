"""Interactive prompting used while generating.

The generator only needs two questions: a yes/no confirmation and a
single choice from a list. Anything implementing :class:`Prompter` can
stand in for the terminal, which is how the tests drive it.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt


class Prompter(Protocol):
    def confirm(self, message: str) -> bool: ...

    def select(self, question: str, choices: Sequence[str]) -> str: ...


class ConsolePrompter:
    """Prompter backed by Rich prompts on the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; only an answer of ``y`` counts as yes."""
        answer = Prompt.ask(
            escape(message.rstrip()),
            console=self.console,
            default="",
            show_default=False,
        )
        return answer.strip().lower() == "y"

    def select(self, question: str, choices: Sequence[str]) -> str:
        """Ask for one of ``choices``; the first one is the default."""
        return Prompt.ask(
            escape(question),
            console=self.console,
            choices=list(choices),
            default=choices[0],
        )
