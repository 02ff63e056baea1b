"""Pytest fixtures for all tests."""

import io

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config, LoggingConfig, RoomConfig
from game.room import Room
from internal.logging import LogLevel, StructuredLogger
from ui.app import create_app


@pytest.fixture
def room():
    """Create a bounded 10x5 room."""
    return Room(10, 5)


@pytest.fixture
def free_room():
    """Create an unbounded 10x5 room."""
    return Room(10, 5, clamp_to_bounds=False)


@pytest.fixture
def out():
    """Capture console output."""
    return io.StringIO()


@pytest.fixture
def log_path(tmp_path):
    """Route the process-wide logger to a temp file at DEBUG, then restore the default."""
    path = tmp_path / "logs" / "rogueroom.log"
    StructuredLogger.configure(LogLevel.DEBUG, str(path))
    yield path
    StructuredLogger.configure()


@pytest.fixture
def client_factory(tmp_path):
    """Build an async test client around a fresh app, logging into tmp_path."""
    def make(config=None):
        config = config or Config()
        config.logging = LoggingConfig(file=str(tmp_path / "server.log"))
        app = create_app(config)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    yield make
    StructuredLogger.configure()


@pytest.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac


@pytest.fixture
async def free_client(client_factory):
    async with client_factory(Config(room=RoomConfig(clamp_to_bounds=False))) as ac:
        yield ac
