"""Post bodies to HTML via patitas.

A ``Site`` builds one renderer from its config and reuses it for every
post body and index excerpt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nightowl.markdown.errors import MarkdownNotInstalledError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from patitas import Markdown

_INSTALL_HINT = (
    "nightowl.markdown requires 'patitas' for Markdown rendering. "
    "Install with: pip install patitas"
)


class MarkdownRenderer:
    """Callable markdown-to-HTML converter; empty source renders as ``""``."""

    __slots__ = ("_md",)

    def __init__(self, *, plugins: Sequence[str] | None = None, highlight: bool = False) -> None:
        try:
            from patitas import Markdown
        except ImportError:
            raise MarkdownNotInstalledError(_INSTALL_HINT) from None
        # patitas enables every plugin for ["all"]
        self._md: Markdown = Markdown(plugins=list(plugins or ["all"]), highlight=highlight)

    def render(self, source: str) -> str:
        return self._md(source) if source else ""

    __call__ = render
