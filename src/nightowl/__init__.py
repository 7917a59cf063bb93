"""nightowl — a personal blog's theme preference core and page components.

Resolves and persists the reader's dark/light choice, and renders the
blog's layout, bio, social links, post listing, and theme toggle.

Basic usage::

    from nightowl import MemoryStore, bind

    state = bind(MemoryStore())
    state.mount()      # False unless something says dark
    state.toggle()     # True, and stored as "true"

Pages::

    from nightowl import Site, SiteConfig

    site = Site(SiteConfig(title="blog.example.dev", author="Ada"))
    html = site.index(posts)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "JsonFileStore",
    "MemoryStore",
    "NightowlError",
    "Post",
    "Site",
    "SiteConfig",
    "SocialLinks",
    "StorageUnavailableError",
    "ThemeError",
    "ThemeState",
    "bind",
    "persist",
    "resolve",
    "toggle",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nightowl`` free of kida and patitas until pages are
    actually rendered.
    """
    if name == "Site":
        from nightowl.pages import Site

        return Site

    if name in ("SiteConfig", "SocialLinks"):
        import nightowl.config

        return getattr(nightowl.config, name)

    if name == "Post":
        from nightowl.content import Post

        return Post

    if name in (
        "ConfigurationError",
        "NightowlError",
        "StorageUnavailableError",
        "ThemeError",
    ):
        import nightowl.errors

        return getattr(nightowl.errors, name)

    if name in (
        "JsonFileStore",
        "MemoryStore",
        "ThemeState",
        "bind",
        "persist",
        "resolve",
        "toggle",
    ):
        import nightowl.theme

        return getattr(nightowl.theme, name)

    msg = f"module 'nightowl' has no attribute {name!r}"
    raise AttributeError(msg)
