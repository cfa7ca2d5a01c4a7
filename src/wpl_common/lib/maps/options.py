"""Mapping SDK options built from a map container's data attributes."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

DEFAULT_ZOOM = 15
MARKER_SIZE = 32
MISSING_COORDINATES_MESSAGE = "No coordinates provided for map. Map could not be generated."


@dataclass
class MapStyles:
    hue: str | None = None
    saturation: float | None = None
    lightness: float | None = None


@dataclass
class MapWidgetOptions:
    """Widget settings after merging container attributes into the defaults."""

    latitude: float | None = None
    longitude: float | None = None
    zoom: float = DEFAULT_ZOOM
    marker_image: str | None = None
    styles: MapStyles = field(default_factory=MapStyles)


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def parse_data_attributes(attributes: Mapping[str, Any]) -> MapWidgetOptions:
    """Merge ``data-*`` attributes into the widget defaults.

    Keys may be given with or without the ``data-`` prefix, in kebab or
    snake case (``data-marker-image``, ``marker_image``). Empty values leave
    the default in place; numbers are parsed leniently.
    """
    normalized: dict[str, Any] = {}
    for key, value in attributes.items():
        name = key.removeprefix("data-").replace("-", "_")
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        normalized[name] = value

    options = MapWidgetOptions(
        latitude=_to_float(normalized.get("latitude")),
        longitude=_to_float(normalized.get("longitude")),
        marker_image=normalized.get("marker_image"),
        styles=MapStyles(
            hue=normalized.get("hue"),
            saturation=_to_float(normalized.get("saturation")),
            lightness=_to_float(normalized.get("lightness")),
        ),
    )
    zoom = _to_float(normalized.get("zoom"))
    if zoom is not None:
        options.zoom = zoom
    return options


def build_map_options(attributes: Mapping[str, Any] | MapWidgetOptions) -> dict[str, Any] | None:
    """Build the option dictionary passed to the mapping SDK.

    Args:
        attributes: Container data attributes, or already merged options.

    Returns:
        Map and marker options, or None when the container lacks coordinates.
    """
    options = attributes if isinstance(attributes, MapWidgetOptions) else parse_data_attributes(attributes)

    if options.latitude is None or options.longitude is None:
        logger.error(MISSING_COORDINATES_MESSAGE)
        return None

    position = {"lat": options.latitude, "lng": options.longitude}
    marker: dict[str, Any] = {"position": dict(position)}
    if options.marker_image:
        marker["icon"] = {
            "url": options.marker_image,
            "scaledSize": {"width": MARKER_SIZE, "height": MARKER_SIZE},
        }

    return {
        "center": position,
        "zoom": options.zoom,
        "disableDefaultUI": True,
        "styles": [
            {
                "featureType": "all",
                "stylers": [
                    {"saturation": options.styles.saturation},
                    {"lightness": options.styles.lightness},
                    {"hue": options.styles.hue},
                ],
            },
        ],
        "marker": marker,
    }
