"""Integration-test fixtures (requires a migrated PostgreSQL).

Pre-condition: alembic upgrade head

All integration tests share a single event loop so that the module-level
SQLAlchemy async engine pool (created at import time) remains valid across
the entire test session. When the database is unreachable the whole
directory is skipped.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.main import app
from src.mp_common.database import engine


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Session-scoped async HTTP client against the real database."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, SQLAlchemyError) as exc:
        pytest.skip(f"database unavailable: {exc}")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
