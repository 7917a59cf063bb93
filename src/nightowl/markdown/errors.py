"""Markdown layer error hierarchy."""

from nightowl.errors import NightowlError


class MarkdownError(NightowlError):
    """Base for all nightowl.markdown errors."""


class MarkdownNotInstalledError(MarkdownError):
    """Raised when patitas is not installed."""
