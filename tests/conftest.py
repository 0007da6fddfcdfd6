"""Pytest configuration and fixtures for policyvault.

Environment is fixed before any app import: memory backend, a test secret,
rate limiting off. HTTP tests build a fresh app per test with the scenario
records in its in-memory store.
"""

import os

os.environ["DATABASE_BACKEND"] = "memory"
os.environ["SECRET_KEY"] = "test-secret-key-for-policyvault"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"
os.environ.pop("MEMORY_SEED_PATH", None)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.infrastructure.persistence.repositories import InMemoryRecordStore  # noqa: E402
from app.infrastructure.security.jwt import create_access_token  # noqa: E402
from app.main import create_app  # noqa: E402
from tests.factories import (  # noqa: E402
    USER_ID,
    scenario_claims,
    scenario_documents,
    scenario_policies,
)

get_settings.cache_clear()


@pytest.fixture
def memory_store() -> InMemoryRecordStore:
    """Scenario records for two users."""
    return InMemoryRecordStore(
        scenario_policies(), scenario_claims(), scenario_documents()
    )


@pytest.fixture
def app(memory_store: InMemoryRecordStore):
    """FastAPI app wired to the memory store (lifespan is not run by ASGITransport)."""
    application = create_app()
    application.state.memory_store = memory_store
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer token for user-1."""
    return {"Authorization": f"Bearer {create_access_token(USER_ID)}"}
