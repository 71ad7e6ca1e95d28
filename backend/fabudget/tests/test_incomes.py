"""
Tests for income endpoints and the budget totals they maintain.
"""
from fabudget.tests.helpers import fetch_budget


def test_create_income_updates_budget(client, budget, income_payload):
    """Test income creation."""
    response = client.post("/api/incomes", json=income_payload)
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["amount"] == 1000
    assert data["budgetId"] == budget["id"]
    assert data["receivedDate"] is None

    totals = fetch_budget(client, budget["id"])
    assert totals["totalIncome"] == 1000
    assert totals["balanceProjected"] == 1000
    assert totals["balanceActual"] == 1000


def test_create_pending_income_leaves_actual_balance(client, budget, income_payload):
    income_payload.update(received=False, amount=250)
    client.post("/api/incomes", json=income_payload)

    totals = fetch_budget(client, budget["id"])
    assert totals["totalIncome"] == 250
    assert totals["balanceActual"] == 0


def test_create_income_accepts_snake_case(client, budget):
    response = client.post(
        "/api/incomes",
        json={
            "type": "gift",
            "amount": 50,
            "source": "Aunt",
            "expected_date": "2025-03-10",
            "week_of_arrival": 2,
            "budget": budget["id"],
        }
    )
    assert response.status_code == 201
    assert response.json()["data"]["weekOfArrival"] == 2


def test_create_income_unknown_budget(client, income_payload):
    income_payload["budgetId"] = 999
    response = client.post("/api/incomes", json=income_payload)
    assert response.status_code == 404
    assert client.get("/api/incomes").json()["count"] == 0


def test_create_income_validation(client, income_payload):
    income_payload.update(weekOfArrival=6, amount=-5)
    response = client.post("/api/incomes", json=income_payload)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "weekOfArrival" in body["message"]
    assert "amount" in body["message"]


def test_update_income_unreceived(client, budget, income_payload):
    income = client.post("/api/incomes", json=income_payload).json()["data"]

    response = client.put(f"/api/incomes/{income['id']}", json={"received": False})

    assert response.status_code == 200
    totals = fetch_budget(client, budget["id"])
    assert totals["totalIncome"] == 1000
    assert totals["balanceActual"] == 0


def test_update_income_amount_while_received(client, budget, income_payload):
    income = client.post("/api/incomes", json=income_payload).json()["data"]

    client.put(f"/api/incomes/{income['id']}", json={"amount": 1200})

    totals = fetch_budget(client, budget["id"])
    assert totals["totalIncome"] == 1200
    assert totals["balanceProjected"] == 1200
    assert totals["balanceActual"] == 1200


def test_update_income_without_amount_changes_is_noop(client, budget, income_payload):
    income = client.post("/api/incomes", json=income_payload).json()["data"]
    before = fetch_budget(client, budget["id"])

    client.put(f"/api/incomes/{income['id']}", json={"notes": "on time", "amount": 1000})

    after = fetch_budget(client, budget["id"])
    assert after["totalIncome"] == before["totalIncome"]
    assert after["balanceActual"] == before["balanceActual"]
    assert after["__v"] == before["__v"]


def test_delete_income_reverses_contribution(client, budget, income_payload):
    income = client.post("/api/incomes", json=income_payload).json()["data"]

    response = client.delete(f"/api/incomes/{income['id']}")

    assert response.json() == {"success": True, "data": {}}
    totals = fetch_budget(client, budget["id"])
    assert totals["totalIncome"] == 0
    assert totals["balanceActual"] == 0
    assert totals["incomes"] == []


def test_income_not_found(client):
    assert client.get("/api/incomes/1").status_code == 404
    assert client.put("/api/incomes/1", json={"amount": 5}).status_code == 404
    response = client.delete("/api/incomes/1")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Income not found"}


def test_list_incomes_by_budget(client, budget, user, income_payload):
    other = client.post(
        "/api/budgets",
        json={"month": 4, "year": 2025, "title": "April", "userId": user["id"]}
    ).json()["data"]
    client.post("/api/incomes", json=income_payload)
    client.post("/api/incomes", json={**income_payload, "budgetId": other["id"]})

    listed = client.get("/api/incomes", params={"budgetId": budget["id"]}).json()
    assert listed["success"] is True
    assert listed["count"] == 1


def test_create_income_rejects_fractional_cents(client, budget, income_payload):
    income_payload["amount"] = "0.005"
    response = client.post("/api/incomes", json=income_payload)
    assert response.status_code == 400
    assert "amount" in response.json()["message"]
    assert client.get("/api/incomes").json()["count"] == 0


def test_create_income_rejects_oversized_amount(client, budget, income_payload):
    income_payload["amount"] = 1e30
    response = client.post("/api/incomes", json=income_payload)
    assert response.status_code == 400
    assert fetch_budget(client, budget["id"])["totalIncome"] == 0


def test_update_income_rejects_fractional_cents(client, budget, income_payload):
    income = client.post("/api/incomes", json=income_payload).json()["data"]

    response = client.put(f"/api/incomes/{income['id']}", json={"amount": "10.001"})

    assert response.status_code == 400
    assert fetch_budget(client, budget["id"])["totalIncome"] == 1000
