"""Geocoding value types and errors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

GENERIC_FAILURE_MESSAGE = (
    'Something went wrong when getting the coordinates for "{address}" '
    "from the Google Maps Geocoding API. Please try again."
)


def generic_failure_message(address: str) -> str:
    """Return the message reported when no service message is available."""
    return GENERIC_FAILURE_MESSAGE.format(address=address)


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, float]:
        """Return the cache representation ``{"latitude": ..., "longitude": ...}``."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: Any) -> "Coordinates":
        """Build coordinates from their cache representation.

        Raises:
            ValueError: If ``data`` is not a mapping with numeric
                ``latitude`` and ``longitude`` in range.
        """
        if not isinstance(data, dict):
            msg = f"expected a mapping, got {type(data).__name__}"
            raise ValueError(msg)
        try:
            return cls(latitude=float(data["latitude"]), longitude=float(data["longitude"]))
        except (KeyError, TypeError) as e:
            msg = f"invalid coordinates: {data!r}"
            raise ValueError(msg) from e


class GeocodeErrorKind(StrEnum):
    """Why a geocode attempt failed."""

    TRANSPORT = "transport"
    SERVICE = "service"


@dataclass(frozen=True)
class GeocodeFailure:
    """Failure outcome of a resolution, returned instead of coordinates."""

    kind: GeocodeErrorKind
    message: str
    service_status: str | None = None


GeocodeResult = Coordinates | GeocodeFailure


class GeocodingError(Exception):
    """Raised by a geocoding provider when an address cannot be resolved.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
    """

    kind: GeocodeErrorKind = GeocodeErrorKind.TRANSPORT

    def __init__(self, provider_name: str, message: str) -> None:
        self.provider_name = provider_name
        self.message = message
        super().__init__(f"{provider_name}: {message}")

    def to_failure(self) -> GeocodeFailure:
        """Convert the error into a failure result."""
        return GeocodeFailure(kind=self.kind, message=self.message)


class TransportError(GeocodingError):
    """The request could not be completed or its response could not be parsed."""

    kind = GeocodeErrorKind.TRANSPORT


class ServiceError(GeocodingError):
    """The service answered with a non-success status.

    Args:
        provider_name: Name of the failing provider.
        message: Service-provided error message, or a generic one.
        service_status: Status string reported by the service.
    """

    kind = GeocodeErrorKind.SERVICE

    def __init__(self, provider_name: str, message: str, service_status: str | None = None) -> None:
        self.service_status = service_status
        super().__init__(provider_name, message)

    def to_failure(self) -> GeocodeFailure:
        return GeocodeFailure(kind=self.kind, message=self.message, service_status=self.service_status)


class BaseGeocoder(ABC):
    """Abstract geocoder interface. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @abstractmethod
    def geocode(self, address: str, api_key: str) -> Coordinates:
        """Geocode a single address.

        Args:
            address: Address string exactly as supplied by the caller.
            api_key: Provider credential.

        Returns:
            Coordinates of the best match.

        Raises:
            TransportError: On network or response-parsing failures.
            ServiceError: When the provider reports a non-success status.
        """
