"""
Small helpers shared by API tests.
"""


def fetch_budget(client, budget_id):
    response = client.get(f"/api/budgets/{budget_id}")
    assert response.status_code == 200
    return response.json()["data"]
