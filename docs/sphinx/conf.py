# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for loxscan documentation."""

project = "loxscan"
author = "loxscan Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]
autodoc_member_order = "bysource"

html_theme = "alabaster"
