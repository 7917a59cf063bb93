"""Theme state with change subscribers.

``ThemeState`` owns the one mutable boolean.  The UI layer mounts it
once when the session becomes interactive, re-renders from the
callbacks, and writes through ``persist_on_change``::

    state = bind(JsonFileStore("prefs.json"), detect_color_scheme())
    state.subscribe(lambda dark: print("dark" if dark else "light"))
    state.mount()    # resolves, notifies, persists the seed
    state.toggle()   # flips, notifies, persists
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from nightowl.errors import ThemeError
from nightowl.theme import resolver
from nightowl.theme.scheme import ColorScheme
from nightowl.theme.storage import KeyValueStore

logger = logging.getLogger("nightowl.theme")

type ThemeListener = Callable[[bool], None]


class ThemeState:
    """In-memory dark/light state seeded from the resolver."""

    __slots__ = ("_is_dark", "_key", "_listeners", "_scheme", "_store")

    def __init__(
        self,
        store: KeyValueStore | None,
        scheme: ColorScheme | None = None,
        *,
        key: str = resolver.THEME_KEY,
    ) -> None:
        self._store = store
        self._scheme = scheme
        self._key = key
        self._listeners: list[ThemeListener] = []
        self._is_dark: bool | None = None

    @property
    def mounted(self) -> bool:
        return self._is_dark is not None

    @property
    def is_dark(self) -> bool:
        if self._is_dark is None:
            msg = "ThemeState.is_dark read before mount()"
            raise ThemeError(msg)
        return self._is_dark

    @property
    def label(self) -> str:
        """Text for the toggle control: the mode a click switches to."""
        return "Light Mode" if self.is_dark else "Dark Mode"

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def mount(self) -> bool:
        """Resolve the initial value and announce it.

        Resolution happens once per state; later calls return the
        current value untouched.
        """
        if self._is_dark is not None:
            logger.debug("ThemeState already mounted; keeping %s", self._is_dark)
            return self._is_dark
        value = resolver.resolve(self._store, self._scheme, key=self._key)
        logger.debug("Mounted theme state: dark=%s", value)
        self._is_dark = value
        self._notify(value)
        return value

    def set(self, value: bool) -> None:
        """Set the preference; listeners only hear about actual changes."""
        value = bool(value)
        if value == self.is_dark:
            return
        self._is_dark = value
        self._notify(value)

    def toggle(self) -> bool:
        value = resolver.toggle(self.is_dark)
        self._is_dark = value
        self._notify(value)
        return value

    def _notify(self, value: bool) -> None:
        for listener in tuple(self._listeners):
            listener(value)


def persist_on_change(store: KeyValueStore, *, key: str = resolver.THEME_KEY) -> ThemeListener:
    """Build a listener that writes every new value to *store*."""

    def _write(value: bool) -> None:
        resolver.persist(store, value, key=key)

    return _write


def bind(
    store: KeyValueStore | None,
    scheme: ColorScheme | None = None,
    *,
    key: str = resolver.THEME_KEY,
) -> ThemeState:
    """Create a ``ThemeState`` that persists its value on every change.

    Without a store (prerendering) the state still works in memory but
    nothing is written.
    """
    state = ThemeState(store, scheme, key=key)
    if store is not None:
        state.subscribe(persist_on_change(store, key=key))
    return state
