"""ORM model registry."""

from wpl_common.models.base import Base
from wpl_common.models.option import Option

__all__ = [
    "Base",
    "Option",
]
