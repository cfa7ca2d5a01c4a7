"""SQLAlchemy-backed option store."""

from typing import Any

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from wpl_common.lib.options.base import BaseOptionStore
from wpl_common.models.option import Option


class DatabaseOptionStore(BaseOptionStore):
    """Option store persisting each option as one row of the ``options`` table.

    Every call opens its own session and commits before returning. Nothing
    spans a get followed by a set, so concurrent writers to the same key
    simply overwrite each other.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> Any | None:
        with self._session_factory() as session:
            return session.execute(
                select(Option.option_value).where(Option.option_name == key)
            ).scalar_one_or_none()

    def set(self, key: str, value: Any) -> None:
        with self._session_factory() as session:
            entry = session.execute(select(Option).where(Option.option_name == key)).scalar_one_or_none()
            if entry is None:
                session.add(Option(option_name=key, option_value=value))
            else:
                entry.option_value = value
            session.commit()
        logger.debug(f"Option {key!r} written")
