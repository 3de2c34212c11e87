"""App Surface — liveness probe, error envelopes outside the users routes, lifespan.

Invariants:
    - GET /ping → 200 text/plain "pong" with no store call
    - Unknown routes and malformed bodies still answer {"error": ...}
    - A gateway built by the lifespan exists only between startup and shutdown
"""

from httpx import ASGITransport, AsyncClient

from users_api.config import Settings
from users_api.infrastructure.database import DatabaseGateway
from users_api.main import create_app


async def test_ping_returns_pong(recording_client, recording_gateway):
    res = await recording_client.get("/ping")

    assert res.status_code == 200
    assert res.text == "pong"
    assert res.headers["content-type"].startswith("text/plain")
    assert recording_gateway.calls == []


async def test_unknown_route_uses_error_envelope(recording_client):
    res = await recording_client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


async def test_wrong_method_uses_error_envelope(recording_client):
    res = await recording_client.patch("/api/users/1", json={})
    assert res.status_code == 405
    assert "error" in res.json()


async def test_malformed_json_returns_400(recording_client, recording_gateway):
    res = await recording_client.post(
        "/api/users",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request data"}
    assert recording_gateway.calls == []


async def test_lifespan_builds_and_disposes_gateway(tmp_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'users.db'}",
        log_format="text",
    )
    app = create_app(settings=settings)
    assert app.state.gateway is None

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.gateway, DatabaseGateway)

    assert app.state.gateway is None


async def test_lifespan_keeps_injected_gateway(recording_gateway):
    app = create_app(settings=Settings(log_format="text"), gateway=recording_gateway)

    async with app.router.lifespan_context(app):
        assert app.state.gateway is recording_gateway

    assert app.state.gateway is recording_gateway


async def test_missing_gateway_returns_500():
    app = create_app(settings=Settings(log_format="text"))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/users")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
