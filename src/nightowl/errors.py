"""Nightowl exception hierarchy.

Shared across the theme core, templating, and CLI so every module
raises and catches the same types.
"""


class NightowlError(Exception):
    """Base for all nightowl-specific errors."""


class ConfigurationError(NightowlError):
    """Raised when site configuration is invalid.

    Raised from ``SiteConfig.__post_init__`` so a bad config fails at
    construction time rather than halfway through rendering.
    """


class ThemeError(NightowlError):
    """Raised when the theme state is used out of order."""


class StorageUnavailableError(ThemeError):
    """Raised when a preference write is attempted without a store.

    Reading never raises: a missing store resolves to light mode.
    Writing only happens in an interactive context, so reaching this
    means a caller persisted during prerendering.
    """
