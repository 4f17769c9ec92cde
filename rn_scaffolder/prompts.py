"""Interactive option collection.

Asks the four scaffolding questions in a fixed order (bottom navigation,
storage, navigation setup, state management) using Rich prompts.  Choice
prompts only accept values from a closed list, so every answer maps directly
onto a ``ScaffoldConfig`` field.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.prompt import Confirm, Prompt

from rn_scaffolder.config import ScaffoldConfig, StateManagementChoice, StorageChoice
from rn_scaffolder.utils import console as default_console


class InputUnavailableError(Exception):
    """Raised when a question must be asked but no interactive input exists."""

    def __init__(self, question: str, reason: str) -> None:
        self.question = question
        super().__init__(f"Cannot ask {question!r}: {reason}")


def _stdin_is_interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


class OptionCollector:
    """Collects a ``ScaffoldConfig`` from the operator.

    Answers supplied up front (e.g. from command-line flags) are never asked
    again.  With ``no_prompt=True`` the remaining questions take their
    ``ScaffoldConfig`` defaults instead of prompting.
    """

    def __init__(self, *, no_prompt: bool = False, console: Console | None = None) -> None:
        self.no_prompt = no_prompt
        self.console = console or default_console

    def collect(self, preset: dict[str, Any] | None = None) -> ScaffoldConfig:
        """Ask every unanswered question, in order, and build the config.

        Args:
            preset: Answers already known, keyed by ``ScaffoldConfig`` field
                name.  ``None`` values count as unanswered.

        Raises:
            InputUnavailableError: A prompt was required but stdin is not an
                interactive terminal, or input ended mid-prompt.
        """
        answers = {k: v for k, v in (preset or {}).items() if v is not None}

        for field, ask in self._questions():
            if field in answers or self.no_prompt:
                continue
            answers[field] = ask()

        return ScaffoldConfig(**answers)

    def _questions(self) -> list[tuple[str, Callable[[], Any]]]:
        return [
            ("bottom_navigation", self.ask_bottom_navigation),
            ("storage", self.ask_storage),
            ("navigation_setup", self.ask_navigation_setup),
            ("state_management", self.ask_state_management),
        ]

    # -- Individual questions ----------------------------------------------

    def ask_bottom_navigation(self) -> bool:
        return self._confirm("Do you want to set up Bottom Tab Navigation?")

    def ask_storage(self) -> StorageChoice:
        """Ask which storage helper to generate."""
        answer = self._choose(
            "Select a storage solution",
            [choice.value for choice in StorageChoice],
        )
        return StorageChoice(answer)

    def ask_navigation_setup(self) -> bool:
        return self._confirm("Do you want to set up a comprehensive navigation structure?")

    def ask_state_management(self) -> StateManagementChoice:
        """Ask which state-management example to generate."""
        answer = self._choose(
            "Select a state management solution",
            [choice.value for choice in StateManagementChoice],
        )
        return StateManagementChoice(answer)

    # -- Prompt primitives -------------------------------------------------

    def _confirm(self, question: str) -> bool:
        self._require_terminal(question)
        try:
            return Confirm.ask(question, default=False, console=self.console)
        except EOFError as exc:
            raise InputUnavailableError(question, "input ended") from exc

    def _choose(self, question: str, choices: list[str]) -> str:
        # The first entry is pre-selected, as in a list picker.
        self._require_terminal(question)
        try:
            return Prompt.ask(
                question,
                choices=choices,
                default=choices[0],
                console=self.console,
            )
        except EOFError as exc:
            raise InputUnavailableError(question, "input ended") from exc

    def _require_terminal(self, question: str) -> None:
        if not _stdin_is_interactive():
            raise InputUnavailableError(question, "stdin is not an interactive terminal")
