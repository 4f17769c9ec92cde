"""rn-scaffolder configuration.

Two Pydantic v2 models live here:

* ``ScaffoldConfig`` -- the four answers collected from the operator.  It is
  frozen: once collected, a run's configuration never changes.
* ``Settings`` -- how the run itself behaves (root path, prompting), with an
  environment-variable constructor for scripted use.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Choice enums
# ---------------------------------------------------------------------------


class StorageChoice(str, Enum):
    """Persistent key/value storage backend for the generated app."""

    ASYNC_STORAGE = "async-storage"
    MMKV = "mmkv"
    NONE = "none"

    @property
    def label(self) -> str:
        return _STORAGE_LABELS[self]


class StateManagementChoice(str, Enum):
    """State-management paradigm for the generated counter example."""

    REDUX_TOOLKIT = "redux-toolkit"
    ZUSTAND = "zustand"
    CONTEXT_API = "context-api"
    NONE = "none"

    @property
    def label(self) -> str:
        return _STATE_LABELS[self]


_STORAGE_LABELS: dict[StorageChoice, str] = {
    StorageChoice.ASYNC_STORAGE: "Async Storage",
    StorageChoice.MMKV: "React Native MMKV",
    StorageChoice.NONE: "None",
}

_STATE_LABELS: dict[StateManagementChoice, str] = {
    StateManagementChoice.REDUX_TOOLKIT: "Redux Toolkit",
    StateManagementChoice.ZUSTAND: "Zustand",
    StateManagementChoice.CONTEXT_API: "Context API",
    StateManagementChoice.NONE: "None",
}


# ---------------------------------------------------------------------------
# Scaffold answers
# ---------------------------------------------------------------------------


class ScaffoldConfig(BaseModel):
    """The operator's answers for a single scaffolding run.

    Field order is the order in which the questions are asked.
    """

    model_config = ConfigDict(frozen=True)

    bottom_navigation: bool = Field(
        default=False, description="Generate bottom tab navigation scaffolding"
    )
    storage: StorageChoice = Field(
        default=StorageChoice.NONE, description="Storage helper to generate"
    )
    navigation_setup: bool = Field(
        default=False, description="Generate root navigator and navigation ref helpers"
    )
    state_management: StateManagementChoice = Field(
        default=StateManagementChoice.NONE,
        description="State-management example to generate",
    )

    def summary(self) -> dict[str, str]:
        """Return a ``{question: answer}`` mapping for display."""
        return {
            "Bottom tab navigation": "Yes" if self.bottom_navigation else "No",
            "Storage": self.storage.label,
            "Navigation setup": "Yes" if self.navigation_setup else "No",
            "State management": self.state_management.label,
        }

    def template_context(self) -> dict[str, object]:
        """Build the Jinja2 context shared by every generated file."""
        return {
            "bottom_navigation": self.bottom_navigation,
            "storage": self.storage.value,
            "navigation_setup": self.navigation_setup,
            "state_management": self.state_management.value,
        }


# ---------------------------------------------------------------------------
# Run settings
# ---------------------------------------------------------------------------

_TRUTHY = {"1", "true", "yes", "on"}


def resolve_root(path: str | Path | None = None) -> Path:
    """Return the scaffolding root.

    With no explicit *path* this is the process's current working directory
    at call time; otherwise *path* made absolute.
    """
    if path is None:
        return Path.cwd()
    return Path(path).expanduser().absolute()


class Settings(BaseModel):
    """Settings for a scaffolding run.

    Instances are created once by the CLI entry point and handed to the
    collector and the scaffolder.
    """

    root_path: Path = Field(default_factory=Path.cwd)
    no_prompt: bool = Field(
        default=False,
        description="Never prompt; unanswered questions take their defaults",
    )

    @property
    def src_path(self) -> Path:
        """The generated ``src/`` directory."""
        return self.root_path / "src"

    @property
    def tsconfig_path(self) -> Path:
        """Path to the generated ``tsconfig.json``."""
        return self.root_path / "tsconfig.json"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            RN_SCAFFOLD_ROOT, RN_SCAFFOLD_NO_PROMPT.
        """
        root = os.environ.get("RN_SCAFFOLD_ROOT") or None
        no_prompt = os.environ.get("RN_SCAFFOLD_NO_PROMPT", "").strip().lower() in _TRUTHY
        return cls(root_path=resolve_root(root), no_prompt=no_prompt)
