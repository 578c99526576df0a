"""Sphinx configuration for Phonebook API documentation."""

import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath(".."))

project = "Phonebook API"
current_year = datetime.now().year
copyright = f"{current_year}, Phonebook"
author = "Phonebook Team"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
]

exclude_patterns: list[str] = ["_build"]

html_theme = "alabaster"
