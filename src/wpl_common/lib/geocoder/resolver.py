"""Cache-aside address resolution.

Addresses are looked up in the coordinate cache first; only a miss reaches
the geocoding provider, and only a successful lookup is written back.

The cache is read and written without locking. Two concurrent misses for
the same address both call the provider and both write the full cache,
and whichever write lands last is what remains stored.
"""

from loguru import logger

from wpl_common.lib.geocoder.base import (
    BaseGeocoder,
    Coordinates,
    GeocodeFailure,
    GeocodeResult,
    GeocodingError,
)
from wpl_common.lib.geocoder.cache import cache_lookup, cache_store, cached_coordinates, load_cache
from wpl_common.lib.geocoder.google_maps import GoogleMapsGeocoder
from wpl_common.lib.options.base import BaseOptionStore

DEFAULT_OPTION_NAME = "wplook_map_coordinates"


class GeocodeResolver:
    """Resolve addresses to coordinates through a persisted cache.

    Args:
        store: Option store holding the coordinate cache.
        option_name: Option under which the cache is stored.
        geocoder: Provider consulted on cache misses (Google Maps by default).
    """

    def __init__(
        self,
        store: BaseOptionStore,
        option_name: str = DEFAULT_OPTION_NAME,
        geocoder: BaseGeocoder | None = None,
    ) -> None:
        self._store = store
        self._option_name = option_name
        self._geocoder = geocoder if geocoder is not None else GoogleMapsGeocoder()

    @property
    def option_name(self) -> str:
        return self._option_name

    def resolve(self, address: str, api_key: str) -> GeocodeResult:
        """Return coordinates for ``address``, geocoding it on a cache miss.

        Args:
            address: Address or place identifier; used verbatim as the cache key.
            api_key: Provider credential, forwarded unchecked.

        Returns:
            Coordinates on success, or a GeocodeFailure describing why the
            address could not be resolved. Failures never touch the cache.
        """
        cache = load_cache(self._store, self._option_name)

        cached = cache_lookup(cache, address)
        if cached is not None:
            logger.debug("Coordinate cache hit")
            return cached

        try:
            coordinates = self._geocoder.geocode(address, api_key)
        except GeocodingError as e:
            failure = e.to_failure()
            logger.warning(f"Geocoding failed ({failure.kind}) via {e.provider_name}")
            return failure

        cache_store(self._store, self._option_name, cache, address, coordinates)
        logger.info(f"Cached coordinates from {self._geocoder.provider_name} ({len(cache)} entries)")
        return coordinates

    def cached_addresses(self) -> dict[str, Coordinates]:
        """Return every readable cached entry."""
        return cached_coordinates(self._store, self._option_name)


def is_failure(result: GeocodeResult) -> bool:
    """Whether a resolution result is a failure."""
    return isinstance(result, GeocodeFailure)
