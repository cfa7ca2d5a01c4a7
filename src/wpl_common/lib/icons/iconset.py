"""Icon sets bundled with the picker."""

from functools import lru_cache
from importlib import resources

DEFAULT_ICONSET = "font-awesome"

# Icon set name → packaged file listing one CSS class per line
_ICONSETS: dict[str, str] = {
    "font-awesome": "font-awesome.txt",  # Font Awesome 4.6.3
}


def get_available_iconsets() -> list[str]:
    """Return the names of all bundled icon sets."""
    return sorted(_ICONSETS.keys())


@lru_cache(maxsize=None)
def _load(filename: str) -> tuple[str, ...]:
    text = resources.files("wpl_common.lib.icons").joinpath("iconsets", filename).read_text(encoding="utf-8")
    return tuple(line.strip() for line in text.splitlines() if line.strip())


def get_iconset(name: str = DEFAULT_ICONSET) -> list[str]:
    """Return the CSS class names of an icon set, in display order.

    Raises:
        ValueError: If the icon set is not bundled.
    """
    filename = _ICONSETS.get(name)
    if filename is None:
        msg = f"Unknown iconset: {name!r}. Available: {get_available_iconsets()}"
        raise ValueError(msg)
    return list(_load(filename))
