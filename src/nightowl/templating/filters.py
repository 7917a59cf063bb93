"""Built-in nightowl template filters.

Registered automatically on every site environment. They complement
Kida's built-in filters with what blog pages need.
"""

import datetime
import html
from typing import Any

from kida.template import Markup


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <a href="{{ href }}"{{ rel | attr("rel") }}>{{ text }}</a>
        → <a href="/foo" rel="noopener">Foo</a>   (when rel is "noopener")
        → <a href="/foo">Foo</a>                  (when rel is None or "")

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def url(value: str, fallback: str = "#") -> str:
    """Safelist URL for href attributes. Uses Kida's url_is_safe.

    Returns the URL if the scheme is safe (http, https, relative), otherwise
    returns fallback. Social links come from config, so treat them as
    external data.

    Example:
        <a href="{{ social_url | url }}">GitHub</a>

    """
    from kida.utils.html import safe_url

    return safe_url(str(value), fallback=fallback)


def format_date(value: datetime.date | None, fmt: str = "%B %d, %Y") -> str:
    """Format a post date; empty string for undated posts.

    Example:
        {{ post.date | format_date }}  → "March 07, 2019"

    """
    if value is None:
        return ""
    return value.strftime(fmt)


# All built-in nightowl filters, registered automatically on every env.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "format_date": format_date,
    "url": url,
}
