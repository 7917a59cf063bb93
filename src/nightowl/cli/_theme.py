"""``nightowl theme`` — resolve, toggle, or set the stored preference.

Mounts a bound ``ThemeState`` the same way the page script does, so a
first ``show`` records the resolved value just like a first page view.
"""

import argparse
import logging
import sys
from pathlib import Path

from nightowl.errors import NightowlError
from nightowl.theme import (
    THEME_KEY,
    ColorScheme,
    FixedColorScheme,
    JsonFileStore,
    bind,
    detect_color_scheme,
)

logger = logging.getLogger("nightowl.cli")

DEFAULT_STORE = Path("~/.config/nightowl/theme.json")


def _scheme_from_arg(value: str) -> ColorScheme | None:
    if value == "auto":
        return detect_color_scheme()
    return FixedColorScheme(dark=value == "dark")


def run_theme(args: argparse.Namespace) -> None:
    """Apply ``args.action`` to the preference store and print the result."""
    store_path = Path(args.store) if args.store else DEFAULT_STORE.expanduser()
    store = JsonFileStore(store_path)
    scheme = _scheme_from_arg(args.scheme)
    key = args.key or THEME_KEY
    logger.debug("Using %r (key=%r, scheme=%r)", store, key, scheme)

    try:
        state = bind(store, scheme, key=key)
        state.mount()
        if args.action == "toggle":
            state.toggle()
        elif args.action in ("dark", "light"):
            state.set(args.action == "dark")
    except (NightowlError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print("dark" if state.is_dark else "light")
