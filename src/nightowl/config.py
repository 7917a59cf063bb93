"""Site configuration.

SiteConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from nightowl.errors import ConfigurationError


class SocialLink(NamedTuple):
    label: str
    url: str


@dataclass(frozen=True, slots=True)
class SocialLinks:
    """Author profile links shown under posts. Unset links are skipped."""

    website: str = ""
    github: str = ""
    stack_overflow: str = ""
    twitter: str = ""

    def items(self) -> Iterator[SocialLink]:
        """Yield a ``SocialLink`` for every configured link, in display order."""
        for label, url in (
            ("Website", self.website),
            ("GitHub", self.github),
            ("Stack Overflow", self.stack_overflow),
            ("Twitter", self.twitter),
        ):
            if url:
                yield SocialLink(label, url)


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(
            title="blog.example.dev",
            author="Ada",
            site_url="https://blog.example.dev",
            social=SocialLinks(github="https://github.com/ada"),
        )
    """

    # Metadata
    title: str = "My Blog"
    author: str = ""
    description: str = ""
    site_url: str = ""
    social: SocialLinks = field(default_factory=SocialLinks)

    # Theme — storage key shared by the Python store and the browser script
    theme_key: str = "dark"

    # Footer
    feed_url: str = "/rss.xml"
    generator_name: str = "nightowl"
    generator_url: str = ""

    # Templates
    template_dir: str | Path | None = None  # Overrides for the packaged templates
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Markdown
    markdown_plugins: tuple[str, ...] = ()  # Empty = all patitas plugins
    highlight: bool = False

    # Post listing
    date_format: str = "%B %d, %Y"
    excerpt_length: int = 140

    def __post_init__(self) -> None:
        if not self.theme_key:
            msg = "SiteConfig.theme_key must not be empty"
            raise ConfigurationError(msg)
        if self.site_url and not self.site_url.startswith(("http://", "https://")):
            msg = f"SiteConfig.site_url must be absolute, got {self.site_url!r}"
            raise ConfigurationError(msg)
        if self.excerpt_length < 1:
            msg = f"SiteConfig.excerpt_length must be positive, got {self.excerpt_length}"
            raise ConfigurationError(msg)
