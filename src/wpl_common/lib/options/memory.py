"""Process-local option store."""

import copy
from typing import Any

from wpl_common.lib.options.base import BaseOptionStore


class MemoryOptionStore(BaseOptionStore):
    """Dict-backed option store.

    Values are deep-copied on the way in and out, so callers never hold a
    reference into the store's own state (as with a serializing backend).
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        if key not in self._values:
            return None
        return copy.deepcopy(self._values[key])

    def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)
