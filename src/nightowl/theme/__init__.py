"""Dark/light theme preference: resolution, persistence, and state.

Basic usage::

    from nightowl.theme import JsonFileStore, bind, detect_color_scheme

    state = bind(JsonFileStore("prefs.json"), detect_color_scheme())
    state.mount()
    state.toggle()
"""

from nightowl.theme.binding import ThemeState, bind, persist_on_change
from nightowl.theme.resolver import (
    THEME_KEY,
    decode_preference,
    encode_preference,
    persist,
    resolve,
    toggle,
)
from nightowl.theme.scheme import ColorScheme, FixedColorScheme, detect_color_scheme
from nightowl.theme.storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "THEME_KEY",
    "ColorScheme",
    "FixedColorScheme",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "ThemeState",
    "bind",
    "decode_preference",
    "detect_color_scheme",
    "encode_preference",
    "persist",
    "persist_on_change",
    "resolve",
    "toggle",
]
