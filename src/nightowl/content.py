"""Posts and the bits of ordering logic the blog needs.

Slugs come from the markdown file's location under the content root,
posts are listed newest first, and each post links to its older
(``previous``) and newer (``next``) neighbour.
"""

from __future__ import annotations

import datetime
import html
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath, PurePath

_BLOCK_TAG_RE = re.compile(r"</?(?:p|h[1-6]|li|ul|ol|pre|blockquote|div|br|hr|tr|td|th)\b[^>]*>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Post:
    """One blog post as the templates see it."""

    slug: str
    title: str = ""
    date: datetime.date | None = None
    description: str = ""
    body: str = ""  # Markdown source

    @property
    def display_title(self) -> str:
        return self.title or self.slug


@dataclass(frozen=True, slots=True)
class PostLinks:
    """Neighbours of a post in newest-first order."""

    previous: Post | None = None  # older
    next: Post | None = None  # newer


def slug_from_path(path: str | PurePath, root: str | PurePath) -> str:
    """Derive a URL slug from a content file path.

    Example:
        slug_from_path("content/blog/hello/index.md", "content/blog")  → "/hello/"
        slug_from_path("content/blog/notes/first.md", "content/blog")  → "/notes/first/"

    Raises ``ValueError`` if *path* is not under *root*.
    """
    relative = PurePosixPath(PurePath(path).relative_to(PurePath(root)).as_posix())
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts.pop()
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    """Newest first. Undated posts sort last; ties keep input order."""
    return sorted(posts, key=lambda p: (p.date is not None, p.date or datetime.date.min), reverse=True)


def neighbours(posts: Sequence[Post], slug: str) -> PostLinks:
    """Return the older and newer neighbours of *slug*.

    *posts* must already be newest first (see ``sort_posts``).
    Raises ``KeyError`` for an unknown slug.
    """
    for index, post in enumerate(posts):
        if post.slug == slug:
            break
    else:
        raise KeyError(slug)
    previous = posts[index + 1] if index < len(posts) - 1 else None
    newer = posts[index - 1] if index > 0 else None
    return PostLinks(previous=previous, next=newer)


def excerpt(rendered: str, length: int = 140) -> str:
    """Plain-text summary of rendered HTML, cut on a word boundary."""
    text = _TAG_RE.sub("", _BLOCK_TAG_RE.sub(" ", rendered))
    text = _WS_RE.sub(" ", html.unescape(text)).strip()
    if len(text) <= length:
        return text
    cut = text[:length]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,.;:") + "…"
