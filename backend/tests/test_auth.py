"""
Tests for session cookies and the auth gate.

This test suite validates:
1. /jwt issues a signed, httpOnly cookie usable on gated routes
2. Cookie attributes follow the environment (production vs development)
3. /logout clears the cookie
4. Missing, tampered and expired tokens all yield the same 401 body
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient
from jose import jwt

from job_portal.config import settings
from job_portal.core.security import TOKEN_COOKIE_NAME, create_access_token, decode_access_token


@pytest.mark.asyncio
async def test_issue_token_sets_http_only_cookie(async_client: AsyncClient):
    response = await async_client.post("/jwt", json={"email": "a@mail.io"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{TOKEN_COOKIE_NAME}=")
    assert "httponly" in set_cookie.lower()
    assert "samesite=strict" in set_cookie.lower()
    assert "; secure" not in set_cookie.lower()

    claims = decode_access_token(response.cookies[TOKEN_COOKIE_NAME])
    assert claims["email"] == "a@mail.io"


@pytest.mark.asyncio
async def test_issued_token_expires_in_one_hour(async_client: AsyncClient):
    response = await async_client.post("/jwt", json={"email": "a@mail.io"})

    claims = jwt.get_unverified_claims(response.cookies[TOKEN_COOKIE_NAME])
    assert "exp" in claims
    token = create_access_token({"email": "a@mail.io"})
    reference = jwt.get_unverified_claims(token)
    # both tokens use the default lifetime
    assert abs(claims["exp"] - reference["exp"]) <= 5
    assert settings.JWT_EXPIRE_MINUTES == 60


@pytest.mark.asyncio
async def test_production_cookie_is_secure_and_cross_site(async_client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "NODE_ENV", "production")

    response = await async_client.post("/jwt", json={"email": "a@mail.io"})

    set_cookie = response.headers["set-cookie"].lower()
    assert "; secure" in set_cookie
    assert "samesite=none" in set_cookie


@pytest.mark.asyncio
async def test_logout_clears_cookie(async_client: AsyncClient):
    response = await async_client.post("/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{TOKEN_COOKIE_NAME}=")
    assert "Max-Age=0" in set_cookie
    assert "httponly" in set_cookie.lower()


@pytest.mark.asyncio
async def test_issued_cookie_opens_gated_route(async_client: AsyncClient):
    response = await async_client.post("/jwt", json={"email": "hr@acme.io"})
    async_client.cookies.set(TOKEN_COOKIE_NAME, response.cookies[TOKEN_COOKIE_NAME])

    response = await async_client.get("/user-jobs/hr@acme.io")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_expired_token_is_unauthorized(async_client: AsyncClient):
    token = create_access_token({"email": "hr@acme.io"}, expires_delta=timedelta(minutes=-5))
    async_client.cookies.set(TOKEN_COOKIE_NAME, token)

    response = await async_client.get("/user-jobs/hr@acme.io")

    assert response.status_code == 401
    assert response.json()["message"] == "Unauthorized access"


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_unauthorized(async_client: AsyncClient):
    token = jwt.encode({"email": "hr@acme.io"}, "not-the-secret", algorithm="HS256")
    async_client.cookies.set(TOKEN_COOKIE_NAME, token)

    response = await async_client.get("/user-applications/hr@acme.io")

    assert response.status_code == 401
    assert response.json()["message"] == "Unauthorized access"


@pytest.mark.asyncio
async def test_garbage_token_is_unauthorized(async_client: AsyncClient):
    async_client.cookies.set(TOKEN_COOKIE_NAME, "not-a-jwt")

    response = await async_client.get("/user-jobs/hr@acme.io")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_without_email_is_forbidden(async_client: AsyncClient):
    async_client.cookies.set(TOKEN_COOKIE_NAME, create_access_token({"name": "anon"}))

    response = await async_client.get("/user-jobs/hr@acme.io")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_token_with_free_form_registered_claims_is_accepted(async_client: AsyncClient):
    response = await async_client.post("/jwt", json={"email": "hr@acme.io", "sub": 7, "aud": "web"})
    async_client.cookies.set(TOKEN_COOKIE_NAME, response.cookies[TOKEN_COOKIE_NAME])

    response = await async_client.get("/user-jobs/hr@acme.io")

    assert response.status_code == 200
