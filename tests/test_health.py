"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200, status ok and the configured backend."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "backend": "memory"}


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """A safe client X-Request-ID is returned unchanged."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-42_a"})
    assert response.headers["X-Request-ID"] == "req-42_a"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """A request id with unsafe characters is replaced by a generated one."""
    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id\twith spaces"}
    )
    echoed = response.headers["X-Request-ID"]
    assert echoed
    assert echoed != "bad id\twith spaces"


async def test_unknown_route_is_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
