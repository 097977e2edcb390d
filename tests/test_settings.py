#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for settings loading and ToolConfig resolution."""

import json
import sys
from pathlib import Path

import pytest

# Add src to path for imports
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from translation_tool.localization.config import ToolConfig
from translation_tool.utils.settings import (
    DEFAULT_SETTINGS,
    ENV_BACKUP_DIR,
    ENV_DOCUMENT,
    SETTINGS_FILENAME,
    apply_environment,
    load_settings,
)


class TestLoadSettings:
    """JSON settings file handling."""

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == DEFAULT_SETTINGS

    def test_file_values_override_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps({"document_path": "app_fr.ts", "unknown": "ignored"}),
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings["document_path"] == "app_fr.ts"
        assert settings["backup_dir"] == DEFAULT_SETTINGS["backup_dir"]
        assert "unknown" not in settings

    @pytest.mark.parametrize("raw", ["{broken", "[1, 2]", '"text"'])
    def test_invalid_file_returns_defaults(self, tmp_path, raw):
        path = tmp_path / "settings.json"
        path.write_text(raw, encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

    def test_non_string_values_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"backup_dir": 42}), encoding="utf-8")
        assert load_settings(path)["backup_dir"] == DEFAULT_SETTINGS["backup_dir"]

    def test_string_path_accepted(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"backup_dir": "snaps"}), encoding="utf-8")
        assert load_settings(str(path))["backup_dir"] == "snaps"

    def test_working_directory_file_is_used(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / SETTINGS_FILENAME).write_text(
            json.dumps({"backup_dir": "snapshots"}), encoding="utf-8"
        )
        assert load_settings()["backup_dir"] == "snapshots"


class TestApplyEnvironment:
    """Environment overrides."""

    def test_environment_overrides(self):
        settings = apply_environment(
            DEFAULT_SETTINGS, {ENV_DOCUMENT: "env.ts", ENV_BACKUP_DIR: "env_backups"}
        )
        assert settings["document_path"] == "env.ts"
        assert settings["backup_dir"] == "env_backups"

    def test_empty_values_ignored(self):
        settings = apply_environment(DEFAULT_SETTINGS, {ENV_DOCUMENT: ""})
        assert settings == DEFAULT_SETTINGS

    def test_input_not_mutated(self):
        original = dict(DEFAULT_SETTINGS)
        apply_environment(original, {ENV_DOCUMENT: "env.ts"})
        assert original == DEFAULT_SETTINGS


class TestToolConfig:
    """Precedence of defaults, file, environment and explicit arguments."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = ToolConfig.load(environ={})
        assert config.document_path == Path("lhc_web/translations/zh_CN/translation.ts")
        assert config.backup_dir == Path("translation_backups")
        assert config.backup_prefix == "translation_"
        assert config.extension == "ts"

    def test_precedence(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps({"document_path": "file.ts", "backup_dir": "file_backups"}),
            encoding="utf-8",
        )

        from_file = ToolConfig.load(settings_path=path, environ={})
        assert from_file.document_path == Path("file.ts")

        from_env = ToolConfig.load(settings_path=path, environ={ENV_DOCUMENT: "env.ts"})
        assert from_env.document_path == Path("env.ts")
        assert from_env.backup_dir == Path("file_backups")

        explicit = ToolConfig.load(
            settings_path=path,
            environ={ENV_DOCUMENT: "env.ts"},
            document_path="cli.ts",
            backup_dir=tmp_path / "cli_backups",
        )
        assert explicit.document_path == Path("cli.ts")
        assert explicit.backup_dir == tmp_path / "cli_backups"

    def test_explicit_missing_settings_file_raises(self, tmp_path):
        with pytest.raises(ValueError):
            ToolConfig.load(settings_path=tmp_path / "missing.json", environ={})

    def test_settings_path_as_string(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"document_path": "str.ts"}), encoding="utf-8")
        config = ToolConfig.load(settings_path=str(path), environ={})
        assert config.document_path == Path("str.ts")

    def test_missing_settings_path_as_string_raises(self, tmp_path):
        with pytest.raises(ValueError):
            ToolConfig.load(settings_path=str(tmp_path / "missing.json"), environ={})

    def test_string_paths_are_converted(self):
        config = ToolConfig("doc.ts", "backups")
        assert isinstance(config.document_path, Path)
        assert isinstance(config.backup_dir, Path)
