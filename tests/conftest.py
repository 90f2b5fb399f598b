"""
pytest configuration and fixtures.
"""

import asyncio
from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.main import create_app


class FakeLauncher:
    """Records browser launches instead of running a shell command."""

    def __init__(self):
        self.opened: List[str] = []
        self.scheduled: List[Tuple[str, float]] = []

    async def open(self, url: str) -> bool:
        self.opened.append(url)
        return True

    def open_later(self, url: str, delay: float):
        self.scheduled.append((url, delay))
        return asyncio.sleep(0)


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def app(launcher):
    return create_app(launcher=launcher)


@pytest.fixture
def client(app) -> TestClient:
    """Client without lifespan: no startup logging, no browser launch."""
    return TestClient(app)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove service env vars and reset cached settings."""
    for var in ("PORT", "HOST", "LOG_LEVEL", "OPEN_BROWSER", "BROWSER_DELAY", "NAME"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
