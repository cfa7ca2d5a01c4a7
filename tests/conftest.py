"""Shared test fixtures for settings, option stores, and a fake geocoder."""

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from wpl_common.core.config import Settings
from wpl_common.lib.geocoder.base import BaseGeocoder, Coordinates, GeocodingError
from wpl_common.lib.options import MemoryOptionStore
from wpl_common.models import Base


class FakeGeocoder(BaseGeocoder):
    """Geocoder returning a fixed outcome and recording every call."""

    def __init__(self, result: Coordinates | None = None, error: GeocodingError | None = None) -> None:
        self._result = result if result is not None else Coordinates(latitude=40.7128, longitude=-74.006)
        self._error = error
        self.calls: list[tuple[str, str]] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    def geocode(self, address: str, api_key: str) -> Coordinates:
        self.calls.append((address, api_key))
        if self._error is not None:
            raise self._error
        return self._result


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,
        database_url="sqlite:///:memory:",
        google_maps_api_key="test-key",
    )


@pytest.fixture
def memory_store() -> MemoryOptionStore:
    """An empty in-memory option store."""
    return MemoryOptionStore()


@pytest.fixture
def fake_geocoder() -> FakeGeocoder:
    """A geocoder that always succeeds with New York's coordinates."""
    return FakeGeocoder()


@pytest.fixture
def session_factory() -> Iterator[sessionmaker[Session]]:
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def geocoder_factory() -> type[FakeGeocoder]:
    """The fake geocoder class, for tests that need a custom outcome."""
    return FakeGeocoder
