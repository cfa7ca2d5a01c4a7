"""Fixtures for CLI integration tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point the CLI at a throwaway SQLite option store."""
    db_path = tmp_path / "options.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "env-key")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.delenv("MAP_COORDINATES_OPTION", raising=False)
    yield db_path
    logger.remove()
