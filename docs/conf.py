"""Sphinx configuration for the Contact Management API documentation."""

import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath(".."))

project = "Contact Management API"
current_year = datetime.now().year
copyright = f"{current_year}, Contact Management"
author = "Contact Management Team"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

autodoc_member_order = "bysource"
autodoc_default_options = {"members": True, "undoc-members": False}

exclude_patterns: list[str] = ["_build"]

html_theme = "alabaster"
