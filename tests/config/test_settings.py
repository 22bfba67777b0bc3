# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the driver settings module."""

from pathlib import Path

import pytest

from loxscan.config import (
    SETTINGS_FILE_NAME,
    Settings,
    SettingsError,
    find_settings,
    load_settings,
)

# ###############
# Helpers
# ###############


def _write_settings(tmp_path: Path, content: str) -> Path:
    """Write a settings file and return its path."""
    settings_file = tmp_path / SETTINGS_FILE_NAME
    settings_file.write_text(content, encoding="utf-8")
    return settings_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    settings = Settings()
    assert settings.prompt == "> "
    assert settings.color is True
    assert settings.show_lines is False


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(_write_settings(tmp_path, "")) == Settings()


def test_all_keys(tmp_path: Path) -> None:
    content = """\
prompt: "lox> "
color: false
show-lines: true
"""
    settings = load_settings(_write_settings(tmp_path, content))
    assert settings.prompt == "lox> "
    assert settings.color is False
    assert settings.show_lines is True


def test_find_settings_without_file_returns_defaults(tmp_path: Path) -> None:
    assert find_settings(tmp_path) == Settings()


def test_find_settings_reads_file(tmp_path: Path) -> None:
    _write_settings(tmp_path, "prompt: '$ '\n")
    assert find_settings(tmp_path).prompt == "$ "


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="not found"):
        load_settings(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Invalid YAML"):
        load_settings(_write_settings(tmp_path, "prompt: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="mapping"):
        load_settings(_write_settings(tmp_path, "- a\n- b\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Invalid settings file"):
        load_settings(_write_settings(tmp_path, "colour: true\n"))


def test_wrong_type_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError):
        load_settings(_write_settings(tmp_path, "show-lines: [1, 2]\n"))
