"""Markdown rendering for post bodies via patitas.

Basic usage::

    from nightowl.markdown import MarkdownRenderer

    md = MarkdownRenderer()
    html = md.render("# Hello")
"""

from nightowl.markdown.errors import MarkdownError, MarkdownNotInstalledError
from nightowl.markdown.renderer import MarkdownRenderer

__all__ = [
    "MarkdownError",
    "MarkdownNotInstalledError",
    "MarkdownRenderer",
]
