# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the kindlex documentation."""

project = "kindlex"
author = "Kindlex Contributors"
release = "0.1.0"

extensions: list[str] = []

html_theme = "alabaster"
