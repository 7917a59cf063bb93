"""Kida templating for nightowl pages and components."""

from nightowl.templating.filters import BUILTIN_FILTERS
from nightowl.templating.integration import create_environment, render_template

__all__ = [
    "BUILTIN_FILTERS",
    "create_environment",
    "render_template",
]
