"""Map container markup.

The rendered ``div`` carries everything the browser-side widget needs as
``data-*`` attributes; the page script reads them and draws the map.
"""

from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, field_validator

from wpl_common.core.templating import render
from wpl_common.lib.geocoder.base import Coordinates, GeocodeFailure
from wpl_common.lib.geocoder.resolver import GeocodeResolver

_TEMPLATE = "maps/google_map.html.j2"


class MapArgs(BaseModel):
    """Arguments accepted by :func:`render_map`.

    Values usually come from shortcode or widget attributes, so empty
    strings are accepted everywhere and mean "not set".
    """

    model_config = ConfigDict(extra="ignore")

    human_address: str | None = None
    maps_address: str | None = None
    marker: str | None = None
    marker_width: int | None = None
    marker_height: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    css_class: str | None = None
    height: int | None = None
    zoom: float | None = None
    saturation: float | None = None
    lightness: float | None = None
    hue: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def _format(value: float | int | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _resolve_coordinates(args: MapArgs, resolver: GeocodeResolver, api_key: str) -> Coordinates | None:
    """Pick the coordinate source: maps address, then human address, then explicit lat/lng."""
    address = args.maps_address or args.human_address
    if address:
        result = resolver.resolve(address, api_key)
        if isinstance(result, GeocodeFailure):
            logger.warning(f"Map not rendered: {result.message}")
            return None
        return result
    if args.latitude is not None and args.longitude is not None:
        try:
            return Coordinates(latitude=args.latitude, longitude=args.longitude)
        except ValueError as e:
            logger.warning(f"Map not rendered: {e}")
            return None
    return None


def render_map(args: MapArgs, resolver: GeocodeResolver, api_key: str) -> str | None:
    """Render the map container for the given arguments.

    Args:
        args: Map arguments.
        resolver: Resolver used when the map is placed by address.
        api_key: Geocoding API key forwarded to the resolver.

    Returns:
        The container markup, or None when no coordinates are available
        (no location given, or the address could not be geocoded).
    """
    coordinates = _resolve_coordinates(args, resolver, api_key)
    if coordinates is None:
        return None

    candidates: list[tuple[str, Any]] = [
        ("latitude", coordinates.latitude),
        ("longitude", coordinates.longitude),
        ("marker-image", args.marker),
        ("marker-width", args.marker_width),
        ("marker-height", args.marker_height),
        ("zoom", args.zoom),
        ("saturation", args.saturation),
        ("lightness", args.lightness),
        ("hue", args.hue),
    ]
    data_attributes = [(name, _format(value)) for name, value in candidates if value is not None]

    return render(
        _TEMPLATE,
        css_class=args.css_class,
        data_attributes=data_attributes,
        height=args.height if args.height else None,
    )
