"""Shared test fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.mp_common.database import get_db_session


@pytest.fixture
def fake_db() -> AsyncMock:
    """Stand-in AsyncSession handed to routes through get_db_session."""
    return AsyncMock()


@pytest.fixture
async def client(fake_db: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints without a database."""

    async def _db_override() -> AsyncGenerator[AsyncMock, None]:
        yield fake_db

    app.dependency_overrides[get_db_session] = _db_override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
