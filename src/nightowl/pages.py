"""Blog pages and components.

``Site`` binds a ``SiteConfig`` to a kida environment and a markdown
renderer, and turns supplied data into HTML.  It does not discover
content or write files; callers hand it ``Post`` objects and decide
where the markup goes.

Basic usage::

    site = Site(SiteConfig(title="blog.example.dev", author="Ada"))
    html = site.index(posts)
"""

from __future__ import annotations

import datetime
import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from kida import Environment
from kida.template import Markup

from nightowl.config import SiteConfig
from nightowl.content import Post, excerpt, neighbours, sort_posts
from nightowl.markdown import MarkdownRenderer
from nightowl.templating import create_environment, render_template


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """A post plus the summary line shown under its title."""

    post: Post
    summary: str


class Site:
    """Renders the blog's pages from a frozen config."""

    __slots__ = ("_env", "_markdown", "config")

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        env: Environment | None = None,
        markdown: MarkdownRenderer | None = None,
    ) -> None:
        self.config = config or SiteConfig()
        self._env = env
        self._markdown = markdown

    @property
    def env(self) -> Environment:
        if self._env is None:
            self._env = create_environment(self.config)
        return self._env

    @property
    def markdown(self) -> MarkdownRenderer:
        if self._markdown is None:
            self._markdown = MarkdownRenderer(
                plugins=self.config.markdown_plugins or None,
                highlight=self.config.highlight,
            )
        return self._markdown

    # -- Components --------------------------------------------------------

    def theme_script(self) -> str:
        """Head script that applies the stored or preferred theme before paint."""
        return self._render(
            "theme_script.html",
            theme_key_json=Markup(json.dumps(self.config.theme_key)),
        )

    def theme_toggle(self, *, is_dark: bool = False) -> str:
        """The toggle button and its click handler.

        Pages are generated without a browser, so *is_dark* is only the
        initial label; the script resolves the real preference on load.
        """
        return self._render(
            "theme_toggle.html",
            label="Light Mode" if is_dark else "Dark Mode",
            pressed="true" if is_dark else "false",
        )

    def bio(self, *, avatar_url: str | None = None) -> str:
        return self._render("bio.html", avatar_url=avatar_url)

    def social_links(self) -> str:
        return self._render("social_links.html", links=list(self.config.social.items()))

    def layout(
        self,
        content: str,
        *,
        title: str = "",
        year: int | None = None,
    ) -> str:
        """Wrap *content* (already-rendered HTML) in the page shell."""
        if year is None:
            year = datetime.datetime.now(datetime.UTC).year
        page_title = f"{title} | {self.config.title}" if title else self.config.title
        return self._render(
            "layout.html",
            page_title=page_title,
            theme_script=Markup(self.theme_script()),
            theme_toggle=Markup(self.theme_toggle()),
            content=Markup(content),
            year=year,
        )

    # -- Pages -------------------------------------------------------------

    def index(self, posts: Iterable[Post], *, avatar_url: str | None = None, **kwargs: Any) -> str:
        """All posts, newest first, under the author bio."""
        entries = [IndexEntry(post, self._summary(post)) for post in sort_posts(posts)]
        content = self._render(
            "index.html",
            bio=Markup(self.bio(avatar_url=avatar_url)),
            entries=entries,
        )
        return self.layout(content, **kwargs)

    def post(
        self,
        post: Post,
        posts: Iterable[Post],
        *,
        avatar_url: str | None = None,
        **kwargs: Any,
    ) -> str:
        """A single post with previous/next links.

        *posts* is the full collection *post* belongs to; it is sorted
        here so callers can pass it in any order.
        """
        links = neighbours(sort_posts(posts), post.slug)
        content = self._render(
            "post.html",
            post=post,
            body=Markup(self.markdown.render(post.body)),
            bio=Markup(self.bio(avatar_url=avatar_url)),
            social_links=Markup(self.social_links()),
            links=links,
        )
        kwargs.setdefault("title", post.display_title)
        return self.layout(content, **kwargs)

    def not_found(self, **kwargs: Any) -> str:
        kwargs.setdefault("title", "404: Not Found")
        return self.layout(self._render("not_found.html"), **kwargs)

    # -- Internals ---------------------------------------------------------

    def _summary(self, post: Post) -> str:
        if post.description:
            return post.description
        return excerpt(self.markdown.render(post.body), self.config.excerpt_length)

    def _render(self, name: str, **context: Any) -> str:
        return render_template(self.env, name, context)
