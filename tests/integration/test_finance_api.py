"""
Integration tests for budgets and expenses.
"""

import pytest


@pytest.mark.asyncio
async def test_budget_upsert_and_get(client, auth_headers):
    first = await client.put("/budget", json={"month": "2024-01", "amount": 500}, headers=auth_headers)
    second = await client.put("/budget", json={"month": "2024-01", "amount": 650}, headers=auth_headers)

    assert first.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["createdAt"] == first.json()["createdAt"]

    fetched = (await client.get("/budget?month=2024-01", headers=auth_headers)).json()
    assert fetched["amount"] == 650

    listed = (await client.get("/budgets", headers=auth_headers)).json()
    assert len(listed) == 1


@pytest.mark.asyncio
async def test_budget_missing_month_returns_null(client, auth_headers):
    response = await client.get("/budget?month=2030-12", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"month": "2024-13", "amount": 5}, {"month": "2024-01", "amount": 0}])
async def test_budget_validation(client, auth_headers, body):
    response = await client.put("/budget", json=body, headers=auth_headers)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_budget_query_requires_valid_month(client, auth_headers):
    assert (await client.get("/budget", headers=auth_headers)).status_code == 400
    assert (await client.get("/budget?month=Jan", headers=auth_headers)).status_code == 400


@pytest.mark.asyncio
async def test_expenses_by_budget(client, auth_headers, test_user_email):
    budget = (
        await client.put("/budget", json={"month": "2024-01", "amount": 500}, headers=auth_headers)
    ).json()

    created = await client.post(
        "/expense",
        json={"title": "Books", "amount": 42.5, "category": "Study", "budgetId": budget["id"]},
        headers=auth_headers,
    )
    await client.post("/expense", json={"title": "Tea", "amount": 1}, headers=auth_headers)

    assert created.status_code == 201
    assert created.json()["userEmail"] == test_user_email

    in_budget = (await client.get(f"/expenses?budgetId={budget['id']}", headers=auth_headers)).json()
    everything = (await client.get("/expenses", headers=auth_headers)).json()

    assert [e["title"] for e in in_budget] == ["Books"]
    assert len(everything) == 2


@pytest.mark.asyncio
async def test_negative_expense_rejected(client, auth_headers):
    response = await client.post("/expense", json={"title": "Refund", "amount": -3}, headers=auth_headers)

    assert response.status_code == 400
