"""Shared pytest fixtures for the rn-scaffolder test suite.

Provides reusable fixtures for:
- Temporary scaffolding roots
- Representative ``ScaffoldConfig`` answer sets
- A real ``TemplateRenderer`` over the packaged templates
- Helpers to snapshot a generated tree
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from rn_scaffolder.config import ScaffoldConfig, StateManagementChoice, StorageChoice
from rn_scaffolder.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_root(tmp_path: Path) -> Path:
    """Empty directory to scaffold into (auto-cleanup)."""
    root = tmp_path / "MyApp"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def all_off_config() -> ScaffoldConfig:
    """Every optional generator disabled."""
    return ScaffoldConfig()


@pytest.fixture
def full_config() -> ScaffoldConfig:
    """Every optional generator enabled."""
    return ScaffoldConfig(
        bottom_navigation=True,
        storage=StorageChoice.ASYNC_STORAGE,
        navigation_setup=True,
        state_management=StateManagementChoice.REDUX_TOOLKIT,
    )


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Terminal
# ---------------------------------------------------------------------------


@pytest.fixture
def interactive_stdin():
    """Pretend stdin is an interactive terminal."""
    with patch("rn_scaffolder.prompts._stdin_is_interactive", return_value=True):
        yield


@pytest.fixture
def non_interactive_stdin():
    """Pretend stdin is redirected (e.g. CI)."""
    with patch("rn_scaffolder.prompts._stdin_is_interactive", return_value=False):
        yield


# ---------------------------------------------------------------------------
# Tree snapshots
# ---------------------------------------------------------------------------


def snapshot_files(root: Path) -> dict[str, str]:
    """Return ``{relative posix path: content}`` for every file under *root*."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


def snapshot_dirs(root: Path) -> set[str]:
    """Return the relative posix path of every directory under *root*."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir()}


@pytest.fixture
def files_under():
    return snapshot_files


@pytest.fixture
def dirs_under():
    return snapshot_dirs
