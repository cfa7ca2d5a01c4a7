"""Option model: a named, JSON-valued application setting."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from wpl_common.models.base import Base


class Option(Base):
    """A single named option, the unit of persistence for the option store."""

    __tablename__ = "options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    option_name: Mapped[str] = mapped_column(String(191), nullable=False, unique=True, index=True)
    option_value: Mapped[Any] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
