# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings model and YAML loader for the loxscan command-line driver."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".loxscan.yaml"


class SettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class Settings(BaseModel):
    """Presentation settings for the token printer and the interactive prompt.

    Attributes:
        prompt: Text printed before each line read in interactive mode.
        color: Whether diagnostics are colorized on the terminal.
        show_lines: Whether each printed token is prefixed with its line number.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    prompt: str = "> "
    color: bool = True
    show_lines: bool = Field(alias="show-lines", default=False)


def load_settings(path: Path) -> Settings:
    """Load and validate a settings file.

    An empty file is treated as a file that sets nothing.

    Args:
        path: Path to the settings YAML file.

    Returns:
        A validated Settings instance.

    Raises:
        SettingsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"{path}: settings must be a YAML mapping")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings file '{path}': {exc}") from exc


def find_settings(directory: Path) -> Settings:
    """Load the settings file from ``directory``, or return defaults if there is none."""
    path = directory / SETTINGS_FILE_NAME
    if not path.exists():
        return Settings()
    return load_settings(path)
