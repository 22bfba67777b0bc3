# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Driver settings loaded from the loxscan YAML configuration file."""

from loxscan.config.settings import (
    SETTINGS_FILE_NAME,
    Settings,
    SettingsError,
    find_settings,
    load_settings,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "Settings",
    "SettingsError",
    "find_settings",
    "load_settings",
]
