"""Icon picker markup and option-type registration."""

from pydantic import BaseModel

from wpl_common.core.templating import render
from wpl_common.lib.icons.iconset import DEFAULT_ICONSET, get_iconset

OPTION_TYPE = "wplook_icon_picker"
OPTION_TYPE_LABEL = "Icon Picker"


class IconPickerField(BaseModel):
    """Arguments passed by the theme-options framework for one field."""

    field_name: str
    field_id: str
    field_value: str = ""
    field_class: str = ""
    field_desc: str = ""


def render_icon_picker(iconset: str = DEFAULT_ICONSET, selected: str | None = None) -> str:
    """Render the scrollable icon grid.

    Args:
        iconset: Name of the icon set to show.
        selected: Icon class to highlight on load.

    Returns:
        The picker markup.
    """
    return render("icons/picker.html.j2", icons=get_iconset(iconset), selected=selected)


def render_icon_picker_field(field: IconPickerField, iconset: str = DEFAULT_ICONSET) -> str:
    """Render the option field: description, text input, and the picker grid."""
    return render(
        "icons/field.html.j2",
        field=field,
        picker=render_icon_picker(iconset, selected=field.field_value or None),
    )


def register_option_type(types: dict[str, str]) -> dict[str, str]:
    """Return ``types`` with the icon picker option type added."""
    return {**types, OPTION_TYPE: OPTION_TYPE_LABEL}
