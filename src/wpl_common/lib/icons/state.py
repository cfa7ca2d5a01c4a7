"""Selection state of one icon picker."""

from dataclasses import dataclass, field

# Distance from the end of the list over which the "show more" overlay fades out
OVERLAY_FADE_DISTANCE = 300


def overlay_opacity(scroll_height: float, scroll_top: float, inner_height: float) -> float:
    """Opacity of the "show more" overlay for the current scroll position.

    The overlay is fully opaque until the remaining scroll distance drops to
    ``OVERLAY_FADE_DISTANCE`` pixels, then fades linearly to zero.
    """
    remaining = max(scroll_height - (scroll_top + inner_height), 0)
    if remaining <= OVERLAY_FADE_DISTANCE:
        return remaining / OVERLAY_FADE_DISTANCE
    return 1.0


@dataclass
class IconPickerState:
    """Input value, highlighted item, and expansion of one picker."""

    value: str = ""
    selected: str | None = None
    expanded: bool = False
    _value_before_edit: str | None = field(default=None, repr=False)

    @classmethod
    def from_value(cls, value: str, iconset: list[str]) -> "IconPickerState":
        """Initial state for a field: the stored value is highlighted if it is in the set."""
        return cls(value=value, selected=value if value in iconset else None)

    def select(self, code: str) -> None:
        """Clicking an item copies its code into the input and highlights only it."""
        self.value = code
        self.selected = code

    def begin_edit(self) -> None:
        """Remember the input value before a keystroke."""
        self._value_before_edit = self.value

    def end_edit(self, value: str) -> None:
        """Apply a keystroke; a changed value clears the highlight."""
        previous = self._value_before_edit
        self.value = value
        self._value_before_edit = None
        if value != previous:
            self.selected = None

    @property
    def overlay_visible(self) -> bool:
        """The "show more" overlay is shown until the list is expanded."""
        return not self.expanded

    def show_all(self) -> None:
        """Expand the list to full height and hide the overlay."""
        self.expanded = True
