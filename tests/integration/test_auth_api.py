"""
Integration tests for authentication and email scoping.
"""

import pytest


@pytest.mark.asyncio
async def test_root_banner(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.text == "Focus hub is Running"


@pytest.mark.asyncio
async def test_health(client):
    data = (await client.get("/health")).json()

    assert data["status"] == "healthy"
    assert data["environment"] == "local"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/classes", "/tasks", "/notes", "/budgets", "/expenses", "/users"])
async def test_missing_token_is_401(client, path):
    response = await client.get(path)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_header_is_401(client):
    response = await client.get("/classes", headers={"Authorization": "Token abc"})

    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/classes", "/tasks", "/notes", "/budgets", "/expenses"])
async def test_email_mismatch_is_403(client, auth_headers, path):
    response = await client.get(f"{path}?email=bob@example.com", headers=auth_headers)

    assert response.status_code == 403
    assert response.json()["detail"] == "Forbidden Access"


@pytest.mark.asyncio
async def test_matching_email_allowed(client, auth_headers, test_user_email):
    response = await client.get(f"/classes?email={test_user_email.upper()}", headers=auth_headers)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_forbidden_checked_before_selectors(client, auth_headers):
    response = await client.get("/classes?email=bob@example.com&mode=bogus", headers=auth_headers)

    assert response.status_code == 403
