"""Google Maps Geocoding API provider.

Uses the Google Maps Geocoding API
(https://developers.google.com/maps/documentation/geocoding/)
for address-to-coordinate resolution. The API key is supplied per call.
"""

from typing import Any

import httpx
from loguru import logger

from wpl_common.lib.geocoder.base import (
    BaseGeocoder,
    Coordinates,
    ServiceError,
    TransportError,
    generic_failure_message,
)

GOOGLE_API_URL = "https://maps.googleapis.com/maps/api/geocode/json"
SUCCESS_STATUS = "OK"


class GoogleMapsGeocoder(BaseGeocoder):
    """Google Maps geocoder provider.

    Args:
        client: Optional shared ``httpx.Client``. When omitted, each call
            opens a short-lived client with httpx's default timeout.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    @property
    def provider_name(self) -> str:
        return "google"

    def geocode(self, address: str, api_key: str) -> Coordinates:
        """Geocode an address using the Google Maps API.

        Args:
            address: Address string, sent as-is.
            api_key: API credential, sent as-is (not validated locally).

        Returns:
            Coordinates of the first result.

        Raises:
            TransportError: On network failures or an unparseable response.
            ServiceError: When the API reports a status other than ``OK``.
        """
        params = {"address": address, "key": api_key}

        try:
            if self._client is not None:
                response = self._client.get(GOOGLE_API_URL, params=params)
            else:
                with httpx.Client() as client:
                    response = client.get(GOOGLE_API_URL, params=params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.warning(f"Google Maps geocoder transport error: {type(e).__name__}")
            raise TransportError(self.provider_name, generic_failure_message(address)) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Google Maps geocoder returned a non-JSON body (HTTP {response.status_code})")
            raise TransportError(self.provider_name, generic_failure_message(address)) from e

        return self._parse_response(address, data)

    def _parse_response(self, address: str, data: Any) -> Coordinates:
        """Parse a Google Maps API response body into coordinates.

        Args:
            address: The address that was looked up (used in messages).
            data: Decoded JSON response body.

        Returns:
            Coordinates of the first result.

        Raises:
            TransportError: If the body is not the expected shape.
            ServiceError: If the API status is not ``OK``.
        """
        if not isinstance(data, dict):
            logger.warning("Google Maps geocoder response is not a JSON object")
            raise TransportError(self.provider_name, generic_failure_message(address))

        api_status = data.get("status")
        if api_status != SUCCESS_STATUS:
            msg = data.get("error_message") or generic_failure_message(address)
            logger.warning(f"Google Maps geocoder API status {api_status!r}")
            raise ServiceError(self.provider_name, msg, service_status=api_status)

        try:
            location = data["results"][0]["geometry"]["location"]
            return Coordinates(latitude=float(location["lat"]), longitude=float(location["lng"]))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Failed to parse Google Maps response: {e!r}")
            raise TransportError(self.provider_name, generic_failure_message(address)) from e
