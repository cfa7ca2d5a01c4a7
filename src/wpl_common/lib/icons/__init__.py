"""Icon picker: icon sets, picker markup, and picker state.

Public API:
    - get_iconset / get_available_iconsets: Bundled icon sets
    - render_icon_picker: Picker grid markup
    - IconPickerField / render_icon_picker_field: Option field markup
    - register_option_type: Add the picker to an option-type list
    - IconPickerState / overlay_opacity: Picker UI state
"""

from wpl_common.lib.icons.iconset import DEFAULT_ICONSET, get_available_iconsets, get_iconset
from wpl_common.lib.icons.markup import (
    OPTION_TYPE,
    OPTION_TYPE_LABEL,
    IconPickerField,
    register_option_type,
    render_icon_picker,
    render_icon_picker_field,
)
from wpl_common.lib.icons.state import OVERLAY_FADE_DISTANCE, IconPickerState, overlay_opacity

__all__ = [
    "DEFAULT_ICONSET",
    "OPTION_TYPE",
    "OPTION_TYPE_LABEL",
    "OVERLAY_FADE_DISTANCE",
    "IconPickerField",
    "IconPickerState",
    "get_available_iconsets",
    "get_iconset",
    "overlay_opacity",
    "register_option_type",
    "render_icon_picker",
    "render_icon_picker_field",
]
