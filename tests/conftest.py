"""Shared pytest fixtures for all test modules.

Provides common fixtures for:
- A fresh SQLite database per test
- The application wired to that database with a known admin key
- An httpx client talking to the app in-process
- A factory for clients around apps built from overridden settings
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from commander.core.config import get_settings
from commander.infrastructure.database.session import dispose_engine, init_db
from tests.helpers import ADMIN_KEY


@pytest.fixture
def temp_db(tmp_path) -> str:
    """Path to a throwaway SQLite database file."""
    return str(tmp_path / "commander-test.db")


@pytest.fixture
def settings_env(temp_db, monkeypatch) -> dict[str, str]:
    """Point settings at the temp database and a known admin key."""
    env = {
        "DATABASE__URL": f"sqlite+aiosqlite:///{temp_db}",
        "SECURITY__ADMIN_KEY": ADMIN_KEY,
        "ENVIRONMENT": "test",
    }
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    get_settings.cache_clear()
    yield env
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def app(settings_env):
    """Application bound to the temp database, schema created."""
    from commander.main import create_app

    await dispose_engine()
    application = create_app()
    await init_db()
    yield application
    await dispose_engine()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest_asyncio.fixture
async def client_for(settings_env):
    """Build clients around apps created from settings with overridden sections.

    ``await client_for(security={"admin_key_header": "x-other"})`` copies the
    environment settings, replaces the named section fields and passes the
    result to ``create_app``.
    """
    from commander.main import create_app

    clients: list[AsyncClient] = []

    async def factory(**sections) -> AsyncClient:
        base = get_settings()
        updates = {
            name: getattr(base, name).model_copy(update=values) for name, values in sections.items()
        }
        application = create_app(base.model_copy(update=updates))
        await init_db()
        http = AsyncClient(transport=ASGITransport(app=application), base_url="http://test")
        clients.append(http)
        return http

    await dispose_engine()
    yield factory
    for http in clients:
        await http.aclose()
    await dispose_engine()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"x-admin-key": ADMIN_KEY}
