"""Unit tests for the configuration models (rn_scaffolder.config).

Tests cover:
- StorageChoice / StateManagementChoice values and labels
- ScaffoldConfig defaults, immutability, coercion, summary, template context
- resolve_root
- Settings defaults, derived paths, from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rn_scaffolder.config import (
    ScaffoldConfig,
    Settings,
    StateManagementChoice,
    StorageChoice,
    resolve_root,
)


# ---------------------------------------------------------------------------
# Choice enums
# ---------------------------------------------------------------------------


class TestChoices:
    @pytest.mark.unit
    def test_storage_values(self):
        assert [c.value for c in StorageChoice] == ["async-storage", "mmkv", "none"]

    @pytest.mark.unit
    def test_state_values(self):
        assert [c.value for c in StateManagementChoice] == [
            "redux-toolkit",
            "zustand",
            "context-api",
            "none",
        ]

    @pytest.mark.unit
    def test_labels(self):
        assert StorageChoice.MMKV.label == "React Native MMKV"
        assert StorageChoice.ASYNC_STORAGE.label == "Async Storage"
        assert StateManagementChoice.CONTEXT_API.label == "Context API"
        assert StateManagementChoice.NONE.label == "None"


# ---------------------------------------------------------------------------
# ScaffoldConfig
# ---------------------------------------------------------------------------


class TestScaffoldConfig:
    @pytest.mark.unit
    def test_defaults_are_all_off(self):
        config = ScaffoldConfig()
        assert config.bottom_navigation is False
        assert config.storage is StorageChoice.NONE
        assert config.navigation_setup is False
        assert config.state_management is StateManagementChoice.NONE

    @pytest.mark.unit
    def test_string_values_coerced_to_enums(self):
        config = ScaffoldConfig(storage="mmkv", state_management="zustand")
        assert config.storage is StorageChoice.MMKV
        assert config.state_management is StateManagementChoice.ZUSTAND

    @pytest.mark.unit
    def test_unknown_choice_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(storage="sqlite")

    @pytest.mark.unit
    def test_frozen(self):
        config = ScaffoldConfig()
        with pytest.raises(ValidationError):
            config.navigation_setup = True

    @pytest.mark.unit
    def test_summary(self, full_config):
        assert full_config.summary() == {
            "Bottom tab navigation": "Yes",
            "Storage": "Async Storage",
            "Navigation setup": "Yes",
            "State management": "Redux Toolkit",
        }

    @pytest.mark.unit
    def test_template_context_uses_plain_values(self, full_config):
        ctx = full_config.template_context()
        assert ctx == {
            "bottom_navigation": True,
            "storage": "async-storage",
            "navigation_setup": True,
            "state_management": "redux-toolkit",
        }


# ---------------------------------------------------------------------------
# resolve_root
# ---------------------------------------------------------------------------


class TestResolveRoot:
    @pytest.mark.unit
    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_root() == Path.cwd()
        assert resolve_root(None) == Path.cwd()

    @pytest.mark.unit
    def test_relative_path_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        resolved = resolve_root("app")
        assert resolved.is_absolute()
        assert resolved == Path.cwd() / "app"

    @pytest.mark.unit
    def test_absolute_path_kept(self, tmp_path):
        assert resolve_root(tmp_path) == tmp_path


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    @pytest.mark.unit
    def test_root_defaults_to_cwd_at_construction(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert Settings().root_path == Path.cwd()

    @pytest.mark.unit
    def test_derived_paths(self, tmp_path):
        settings = Settings(root_path=tmp_path)
        assert settings.src_path == tmp_path / "src"
        assert settings.tsconfig_path == tmp_path / "tsconfig.json"

    @pytest.mark.unit
    def test_from_env_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings.root_path == Path.cwd()
        assert settings.no_prompt is False

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path):
        env = {"RN_SCAFFOLD_ROOT": str(tmp_path), "RN_SCAFFOLD_NO_PROMPT": "yes"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.root_path == tmp_path
        assert settings.no_prompt is True

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_from_env_falsy_no_prompt(self, value):
        with patch.dict(os.environ, {"RN_SCAFFOLD_NO_PROMPT": value}, clear=True):
            assert Settings.from_env().no_prompt is False
