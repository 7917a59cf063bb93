"""Theme preference resolution and persistence.

Precedence, highest first:

1. No persistent store at all (prerendering) -> light.
2. An explicit stored value under ``THEME_KEY``.
3. The environment's color-scheme signal, if it has one.
4. Light.

The stored value is a JSON boolean string (``"true"``/``"false"``).
"""

from __future__ import annotations

import json
import logging

from nightowl.errors import StorageUnavailableError
from nightowl.theme.scheme import ColorScheme
from nightowl.theme.storage import KeyValueStore

logger = logging.getLogger("nightowl.theme")

THEME_KEY = "dark"


def encode_preference(preference: bool) -> str:
    """Encode a preference the way it is stored: ``"true"`` or ``"false"``."""
    return json.dumps(bool(preference))


def decode_preference(raw: str | None) -> bool | None:
    """Decode a stored value.

    Returns ``None`` when the value is absent or is not a JSON boolean,
    so a damaged entry behaves like no entry.
    """
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        value = None
    if not isinstance(value, bool):
        logger.warning("Ignoring malformed theme preference %r", raw)
        return None
    return value


def resolve(
    store: KeyValueStore | None,
    scheme: ColorScheme | None = None,
    *,
    key: str = THEME_KEY,
) -> bool:
    """Return ``True`` for dark, ``False`` for light.

    Never raises for a missing store or signal; safe to call while
    prerendering with ``store=None``.
    """
    if store is None:
        return False

    stored = decode_preference(store.get(key))
    if stored is not None:
        return stored

    if scheme is None:
        return False
    return bool(scheme.prefers_dark())


def persist(store: KeyValueStore | None, preference: bool, *, key: str = THEME_KEY) -> None:
    """Write *preference* under *key*, replacing any previous value."""
    if store is None:
        msg = "Cannot persist a theme preference without a store"
        raise StorageUnavailableError(msg)
    store.set(key, encode_preference(preference))


def toggle(current: bool) -> bool:
    return not current
