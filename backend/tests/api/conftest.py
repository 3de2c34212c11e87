"""API test fixtures — in-memory SQLite store behind a real gateway, plus a recording fake.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the users table
    - Apps are built with create_app(gateway=...): the lifespan never builds its own pool
    - recording_gateway logs every execute() call so tests can assert "no store call"

Design Decisions:
    - SQLite in-memory: fast, no external dependency; RETURNING needs SQLite >= 3.35
    - raise_app_exceptions=False: the catch-all handler's 500 is asserted, not re-raised
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from users_api.api.routes.users import INSERT_USER
from users_api.core.errors import DatabaseError
from users_api.db.base import Base
from users_api.infrastructure.database import DatabaseGateway, QueryResult
from users_api.main import create_app
import users_api.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def gateway(test_engine):
    return DatabaseGateway(test_engine)


def _client_for(gateway) -> AsyncClient:
    app = create_app(gateway=gateway)
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def client(gateway):
    """HTTP client against an app backed by the in-memory store."""
    async with _client_for(gateway) as c:
        yield c


@pytest.fixture
async def seed_user(gateway):
    """Insert one user (id 1) and return its row."""
    result = await gateway.execute(INSERT_USER, ["Test", "test@example.com"])
    assert result.ok
    return result.first


class RecordingGateway:
    """Gateway stand-in: records calls, answers with a fixed outcome."""

    def __init__(self, result: QueryResult | None = None, raises: Exception | None = None):
        self.calls: list[tuple[str, list]] = []
        self._result = result or QueryResult()
        self._raises = raises

    async def execute(self, sql_text, params=()):
        self.calls.append((sql_text, list(params)))
        if self._raises is not None:
            raise self._raises
        return self._result


@pytest.fixture
def recording_gateway():
    return RecordingGateway()


@pytest.fixture
async def recording_client(recording_gateway):
    async with _client_for(recording_gateway) as c:
        yield c


@pytest.fixture
def failing_gateway():
    """Every store call fails as if the connection dropped."""
    return RecordingGateway(
        result=QueryResult(error=DatabaseError("execute", ConnectionResetError("DB error"))),
    )


@pytest.fixture
async def failing_client(failing_gateway):
    async with _client_for(failing_gateway) as c:
        yield c


@pytest.fixture
async def crashing_client():
    """Every store call raises instead of returning an error result."""
    async with _client_for(RecordingGateway(raises=RuntimeError("DB error"))) as c:
        yield c
