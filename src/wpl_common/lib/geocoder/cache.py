"""Coordinate cache kept as a single option in the option store.

The whole cache is one JSON mapping ``address -> {latitude, longitude}``.
It is read in full and written back in full; there is no per-entry update.
"""

from typing import Any

from loguru import logger

from wpl_common.lib.geocoder.base import Coordinates
from wpl_common.lib.options.base import BaseOptionStore


def load_cache(store: BaseOptionStore, option_name: str) -> dict[str, Any]:
    """Read the raw coordinate cache.

    Args:
        store: Option store holding the cache.
        option_name: Option under which the cache is stored.

    Returns:
        A fresh dict; empty when nothing (or something other than a
        mapping) is stored.
    """
    stored = store.get(option_name)
    if stored is None:
        return {}
    if not isinstance(stored, dict):
        logger.warning(f"Option {option_name!r} does not hold a mapping; treating the coordinate cache as empty")
        return {}
    return dict(stored)


def cache_lookup(cache: dict[str, Any], address: str) -> Coordinates | None:
    """Look up an address in a loaded cache.

    Args:
        cache: Raw cache as returned by :func:`load_cache`.
        address: Exact address string (cache key).

    Returns:
        Coordinates if cached, None on a miss or an unreadable entry.
    """
    if address not in cache:
        return None
    try:
        return Coordinates.from_dict(cache[address])
    except ValueError:
        logger.warning("Ignoring unreadable cached coordinates for address (redacted)")
        return None


def cache_store(
    store: BaseOptionStore,
    option_name: str,
    cache: dict[str, Any],
    address: str,
    coordinates: Coordinates,
) -> None:
    """Merge one entry into a loaded cache and persist the whole mapping.

    Args:
        store: Option store holding the cache.
        option_name: Option under which the cache is stored.
        cache: Raw cache as previously loaded; updated in place.
        address: Exact address string (cache key).
        coordinates: Coordinates to cache.
    """
    cache[address] = coordinates.to_dict()
    store.set(option_name, cache)


def cached_coordinates(store: BaseOptionStore, option_name: str) -> dict[str, Coordinates]:
    """Return every readable cache entry as coordinates."""
    cache = load_cache(store, option_name)
    entries: dict[str, Coordinates] = {}
    for address in cache:
        coordinates = cache_lookup(cache, address)
        if coordinates is not None:
            entries[address] = coordinates
    return entries
