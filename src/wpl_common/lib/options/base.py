"""Abstract option store interface."""

from abc import ABC, abstractmethod
from typing import Any


class BaseOptionStore(ABC):
    """String-keyed settings store holding JSON-serializable values."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value for ``key``, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
