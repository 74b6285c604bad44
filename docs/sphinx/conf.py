# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the dfalex API documentation."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "dfalex"
author = "dfalex Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

# Docstrings use Google-style "Args:" / "Returns:" sections.
napoleon_google_docstring = True
napoleon_numpy_docstring = False

autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
}

html_theme = "alabaster"
