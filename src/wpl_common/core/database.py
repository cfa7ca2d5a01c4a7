"""Database engine and session management for the option store.

Provides engine creation, session factory, and lifecycle helpers
using SQLAlchemy 2.x.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Return the current engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _engine is None:
        msg = "Database engine not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Return the current session factory.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _session_factory is None:
        msg = "Session factory not initialized. Call init_engine() first."
        raise RuntimeError(msg)
    return _session_factory


def init_engine(database_url: str, **kwargs: object) -> Engine:
    """Create and store the engine and session factory.

    Args:
        database_url: SQLAlchemy connection string.
        **kwargs: Additional arguments passed to create_engine.

    Returns:
        The created engine.
    """
    global _engine, _session_factory  # noqa: PLW0603
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        if not isinstance(connect_args, dict):
            msg = "connect_args must be a dict"
            raise TypeError(msg)
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
        # In-memory databases live only as long as their single connection
        if ":memory:" in database_url:
            kwargs.setdefault("poolclass", StaticPool)
    _engine = create_engine(database_url, **kwargs)
    _session_factory = sessionmaker(_engine, expire_on_commit=False)
    return _engine


def create_tables() -> None:
    """Create all tables registered on the ORM metadata."""
    from wpl_common.models import Base

    Base.metadata.create_all(get_engine())


def dispose_engine() -> None:
    """Dispose of the engine and release connections."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
