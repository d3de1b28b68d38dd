"""Sphinx configuration for encsniff documentation."""

import encsniff

project = "encsniff"
copyright = "2026, encsniff contributors"
author = "encsniff contributors"
release = encsniff.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

root_doc = "index"
exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"encsniff {release}"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "show-inheritance": True,
}
