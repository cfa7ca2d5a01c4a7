"""Map widget: container markup and mapping SDK options.

Public API:
    - MapArgs: Arguments for rendering a map container
    - render_map: Render the container ``div`` with its data attributes
    - MapWidgetOptions / MapStyles: Merged widget settings
    - parse_data_attributes: Merge container attributes into defaults
    - build_map_options: Build the mapping SDK option dictionary
"""

from wpl_common.lib.maps.markup import MapArgs, render_map
from wpl_common.lib.maps.options import (
    DEFAULT_ZOOM,
    MapStyles,
    MapWidgetOptions,
    build_map_options,
    parse_data_attributes,
)

__all__ = [
    "DEFAULT_ZOOM",
    "MapArgs",
    "MapStyles",
    "MapWidgetOptions",
    "build_map_options",
    "parse_data_attributes",
    "render_map",
]
