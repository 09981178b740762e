"""
Pytest fixtures for testing.

MongoDB is replaced with an in-memory mongomock database injected through
FastAPI's dependency overrides, so no server is needed.
"""
import uuid
from typing import Any, AsyncGenerator, Callable, Dict

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from job_portal.core.security import TOKEN_COOKIE_NAME, create_access_token
from job_portal.database import get_mongo_db
from job_portal.main import app as fastapi_app


@pytest.fixture
def mongo_db():
    """Fresh in-memory database per test."""
    client = AsyncMongoMockClient()
    return client[f"jobPortalDB_test_{uuid.uuid4().hex}"]


@pytest_asyncio.fixture
async def async_client(mongo_db) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the mock database injected."""
    fastapi_app.dependency_overrides[get_mongo_db] = lambda: mongo_db
    transport = ASGITransport(app=fastapi_app)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def login(async_client: AsyncClient) -> Callable[[str], None]:
    """Attach a valid session cookie for the given email to the client."""
    def _login(email: str) -> None:
        async_client.cookies.set(TOKEN_COOKIE_NAME, create_access_token({"email": email}))
    return _login


@pytest.fixture
def sample_job() -> Dict[str, Any]:
    return {
        "title": "Senior Backend Engineer",
        "jobType": "Remote",
        "hr_email": "hr@acme.io",
        "applicationDeadline": "2999-12-31",
        "company": "Acme",
        "company_logo": "https://acme.io/logo.png",
        "salaryRange": {"min": 100, "max": 150, "currency": "usd"},
        "requirements": ["Python", "MongoDB"],
    }
