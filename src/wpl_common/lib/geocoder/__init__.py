"""Geocoder library: address geocoding with a persisted cache-aside layer.

Public API:
    - Coordinates: Latitude/longitude value
    - GeocodeFailure / GeocodeErrorKind: Failure result and its kind
    - GeocodingError / TransportError / ServiceError: Provider errors
    - BaseGeocoder: Abstract provider interface
    - GoogleMapsGeocoder: Google Maps provider
    - GeocodeResolver: Cache-aside resolver
    - load_cache / cache_lookup / cache_store / cached_coordinates: Cache helpers
"""

from wpl_common.lib.geocoder.base import (
    BaseGeocoder,
    Coordinates,
    GeocodeErrorKind,
    GeocodeFailure,
    GeocodeResult,
    GeocodingError,
    ServiceError,
    TransportError,
    generic_failure_message,
)
from wpl_common.lib.geocoder.cache import cache_lookup, cache_store, cached_coordinates, load_cache
from wpl_common.lib.geocoder.google_maps import GoogleMapsGeocoder
from wpl_common.lib.geocoder.resolver import DEFAULT_OPTION_NAME, GeocodeResolver, is_failure

__all__ = [
    "DEFAULT_OPTION_NAME",
    "BaseGeocoder",
    "Coordinates",
    "GeocodeErrorKind",
    "GeocodeFailure",
    "GeocodeResolver",
    "GeocodeResult",
    "GeocodingError",
    "GoogleMapsGeocoder",
    "ServiceError",
    "TransportError",
    "cache_lookup",
    "cache_store",
    "cached_coordinates",
    "generic_failure_message",
    "is_failure",
    "load_cache",
]
