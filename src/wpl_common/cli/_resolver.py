"""Shared construction of the cache-aside resolver for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from wpl_common.core.config import Settings
from wpl_common.core.database import create_tables, dispose_engine, get_session_factory, init_engine
from wpl_common.lib.geocoder import GeocodeResolver
from wpl_common.lib.options import DatabaseOptionStore


@contextmanager
def open_resolver(settings: Settings) -> Iterator[GeocodeResolver]:
    """Yield a resolver backed by the configured database option store."""
    init_engine(settings.database_url)
    try:
        create_tables()
        store = DatabaseOptionStore(get_session_factory())
        yield GeocodeResolver(store, option_name=settings.map_coordinates_option)
    finally:
        dispose_engine()
