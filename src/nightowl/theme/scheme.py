"""Color-scheme signal — "does the environment prefer dark?".

The signal is feature-detected at the boundary: ``detect_color_scheme``
returns ``None`` when nothing in the environment answers the question,
and the resolver treats ``None`` as light.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Explicit override, e.g. NIGHTOWL_COLOR_SCHEME=dark
SCHEME_ENV_VAR = "NIGHTOWL_COLOR_SCHEME"

# xterm/rxvt palette indexes that render as a dark background
_DARK_BACKGROUNDS = frozenset({0, 1, 2, 3, 4, 5, 6, 8})


@runtime_checkable
class ColorScheme(Protocol):
    """Read-only preference query."""

    def prefers_dark(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class FixedColorScheme:
    """A signal with a known answer."""

    dark: bool

    def prefers_dark(self) -> bool:
        return self.dark


def detect_color_scheme(environ: Mapping[str, str] | None = None) -> ColorScheme | None:
    """Return the environment's color-scheme signal, or ``None`` if unsupported.

    Checks ``NIGHTOWL_COLOR_SCHEME`` (``dark``/``light``) first, then the
    ``COLORFGBG`` terminal convention (``"15;0"`` = light text on a dark
    background).  Unrecognised values count as unsupported.
    """
    env = os.environ if environ is None else environ

    explicit = env.get(SCHEME_ENV_VAR, "").strip().lower()
    if explicit in ("dark", "light"):
        return FixedColorScheme(dark=explicit == "dark")

    colorfgbg = env.get("COLORFGBG", "")
    if colorfgbg:
        background = colorfgbg.rsplit(";", 1)[-1]
        if background.isdigit():
            return FixedColorScheme(dark=int(background) in _DARK_BACKGROUNDS)

    return None
