import pytest
from httpx import ASGITransport, AsyncClient

from companion.container import build_container
from companion.main import create_app


@pytest.mark.asyncio
async def test_ping_and_request_id(api_client):
	response = await api_client.get("/api/ping", headers={"X-Request-Id": "req-123"})

	assert response.status_code == 200
	assert response.json() == {"message": "pong"}
	assert response.headers["X-Request-Id"] == "req-123"


@pytest.mark.asyncio
async def test_request_id_is_generated_when_absent(api_client):
	response = await api_client.get("/api/ping")

	assert response.headers["X-Request-Id"]


@pytest.mark.asyncio
async def test_request_id_survives_disabled_observability(test_settings, clock):
	settings = test_settings.model_copy(update={"obs_enabled": False})
	app = create_app(settings, container=build_container(settings, clock=clock))

	async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
		ok = await client.get("/api/ping", headers={"X-Request-Id": "req-quiet"})
		missing = await client.get("/api/conversations/ghost", headers={"X-Request-Id": "req-quiet-404"})

	assert ok.headers["X-Request-Id"] == "req-quiet"
	assert missing.status_code == 404
	assert missing.json()["requestId"] == "req-quiet-404"
	assert missing.headers["X-Request-Id"] == "req-quiet-404"


@pytest.mark.asyncio
async def test_error_body_carries_request_id(api_client):
	response = await api_client.get("/api/conversations/ghost", headers={"X-Request-Id": "req-404"})

	assert response.status_code == 404
	assert response.json()["requestId"] == "req-404"


@pytest.mark.asyncio
async def test_unexpected_failure_returns_internal_error(container, test_settings, monkeypatch):
	async def broken_compute_matches(target_id):
		raise RuntimeError("directory unavailable")

	monkeypatch.setattr(container.matching, "compute_matches", broken_compute_matches)
	app = create_app(test_settings, container=container)
	# Starlette re-raises after the 500 handler has answered
	transport = ASGITransport(app=app, raise_app_exceptions=False)

	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		response = await client.get("/api/matches/alice", headers={"X-Request-Id": "req-500"})

	assert response.status_code == 500
	body = response.json()
	assert body["success"] is False
	assert body["reason"] == "internal_error"
	assert body["message"] == "Internal server error"
	assert body["requestId"] == "req-500"


@pytest.mark.asyncio
async def test_health_and_metrics(api_client):
	await api_client.post("/api/users", json={"name": "Alice", "age": 30, "interests": ["music"]})

	health = await api_client.get("/health/live")
	assert health.json()["status"] == "ok"
	assert health.json()["profiles"] == 1

	metrics = await api_client.get("/metrics")
	assert metrics.status_code == 200
	assert "companion_profiles_created_total" in metrics.text
