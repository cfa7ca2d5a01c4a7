"""Option store: string-keyed persisted settings.

Public API:
    - BaseOptionStore: Abstract get/set interface
    - MemoryOptionStore: Process-local implementation
    - DatabaseOptionStore: SQLAlchemy ``options`` table implementation
"""

from wpl_common.lib.options.base import BaseOptionStore
from wpl_common.lib.options.database import DatabaseOptionStore
from wpl_common.lib.options.memory import MemoryOptionStore

__all__ = [
    "BaseOptionStore",
    "DatabaseOptionStore",
    "MemoryOptionStore",
]
