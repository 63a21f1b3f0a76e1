"""
notecache — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the whole suite.
How:   Each test gets its own temporary cache directory and a fresh app
       built by the factory, so no state leaks between tests.

Fixture Hierarchy (all function-scoped):
    ├── cache_dir:   Empty temporary directory holding note files
    ├── note_store:  NoteStore rooted at cache_dir
    ├── app:         FastAPI app from create_app() pointed at cache_dir
    └── test_client: HTTPX AsyncClient routed straight into the app
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notecache.config import ServerOptions, Settings
from notecache.main import create_app
from notecache.services.note_store import NoteStore

os.environ["NOTECACHE_LOG_LEVEL"] = "WARNING"


@pytest.fixture
def cache_dir(tmp_path):
    """A fresh, empty cache directory per test."""
    directory = tmp_path / "cache"
    directory.mkdir()
    return directory


@pytest.fixture
def note_store(cache_dir):
    return NoteStore(cache_dir)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(cache_dir, settings):
    options = ServerOptions(host="127.0.0.1", port=8080, cache_dir=cache_dir)
    return create_app(options, settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app without a network socket.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
