"""Integration tests for API endpoints"""

from unittest.mock import AsyncMock, patch
from fastapi.testclient import TestClient
from moneymate_gateway.domain.exceptions import AdvisorAPIError


def add_transaction(client: TestClient, user_id: str, type_: str, amount: float, category: str) -> dict:
    response = client.post(
        "/v1/transactions",
        json={"user_id": user_id, "type": type_, "amount": amount, "category": category, "description": "test"},
    )
    assert response.status_code == 201
    return response.json()


def save_profile(client: TestClient, user_id: str) -> None:
    response = client.put(
        "/v1/profile",
        json={
            "user_id": user_id,
            "age": 31,
            "salary": 60000,
            "marital_status": "single",
            "financial_goals": ["Emergency fund"],
        },
    )
    assert response.status_code == 200


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.get("/v1/insights?user_id=metrics_user")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "moneymate_insights_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"


def test_transaction_crud_is_scoped_to_user(client: TestClient):
    """Test users only see and delete their own transactions"""
    created = add_transaction(client, "alice", "expense", 42.5, "Food & Dining")
    add_transaction(client, "bob", "income", 1000, "Salary")

    alice = client.get("/v1/transactions?user_id=alice").json()
    assert [t["id"] for t in alice["transactions"]] == [created["id"]]
    assert alice["transactions"][0]["amount"] == 42.5

    # Bob cannot delete Alice's row
    response = client.delete(f"/v1/transactions/{created['id']}?user_id=bob")
    assert response.status_code == 404

    response = client.delete(f"/v1/transactions/{created['id']}?user_id=alice")
    assert response.status_code == 204
    assert client.get("/v1/transactions?user_id=alice").json()["transactions"] == []


def test_create_transaction_rejects_negative_amount(client: TestClient):
    response = client.post(
        "/v1/transactions",
        json={"user_id": "alice", "type": "expense", "amount": -5, "category": "Other"},
    )
    assert response.status_code == 422


def test_delete_with_malformed_id(client: TestClient):
    response = client.delete("/v1/debts/not-a-uuid?user_id=alice")
    assert response.status_code == 400


def test_debt_crud(client: TestClient):
    response = client.post(
        "/v1/debts",
        json={
            "user_id": "carol",
            "amount": 1000,
            "interest_rate": 18.99,
            "minimum_payment": 50,
            "description": "Credit card",
        },
    )
    assert response.status_code == 201
    debt_id = response.json()["id"]

    debts = client.get("/v1/debts?user_id=carol").json()["debts"]
    assert len(debts) == 1
    assert debts[0]["interest_rate"] == 18.99

    assert client.delete(f"/v1/debts/{debt_id}?user_id=carol").status_code == 204
    assert client.get("/v1/debts?user_id=carol").json()["debts"] == []


def test_insights_endpoint(client: TestClient):
    """Test aggregated figures and recommendations over stored data"""
    add_transaction(client, "dave", "income", 5000, "Salary")
    add_transaction(client, "dave", "expense", 1200, "Food & Dining")
    add_transaction(client, "dave", "expense", 800, "Shopping")
    client.post(
        "/v1/debts",
        json={
            "user_id": "dave",
            "amount": 10000,
            "interest_rate": 5,
            "minimum_payment": 500,
            "description": "Car loan",
        },
    )

    response = client.get("/v1/insights?user_id=dave")

    assert response.status_code == 200
    data = response.json()
    assert data["snapshot"]["total_income"] == 5000
    assert data["snapshot"]["total_expenses"] == 2000
    assert data["snapshot"]["balance"] == 3000
    assert data["snapshot"]["savings_rate"] == 0.6
    assert data["snapshot"]["expense_breakdown"] == {"Food & Dining": 1200, "Shopping": 800}
    assert data["snapshot"]["dominant_category"] == "Food & Dining"
    assert data["debt_metrics"]["affordable"] is True
    assert data["debt_metrics"]["payoff_months_estimate"] == 4
    assert [r["title"] for r in data["recommendations"]] == [
        "Optimize Your Biggest Expense",
        "Accelerate Debt Payoff",
    ]
    assert data["savings_message"] == "You're a savings superstar!"
    assert data["trend"] == "increasing"
    assert data["categories"][0]["category"] == "Food & Dining"
    assert data["categories"][0]["advice"] == "Consider meal prepping to cut dining costs!"


def test_insights_for_new_user(client: TestClient):
    """Test a user with no data gets zeros and at least one recommendation"""
    data = client.get("/v1/insights?user_id=nobody").json()

    assert data["snapshot"]["total_income"] == 0
    assert data["snapshot"]["savings_rate"] == 0
    assert data["snapshot"]["expense_breakdown"] == {}
    assert data["debt_metrics"]["payoff_months_estimate"] is None
    assert len(data["recommendations"]) >= 1
    assert data["trend"] == "decreasing"


def test_onboarding_creates_starter_records(client: TestClient):
    response = client.post(
        "/v1/onboarding",
        json={"user_id": "erin", "income": 4000, "expenses": 2500, "debt": 2000},
    )

    assert response.status_code == 201
    data = response.json()
    assert [t["category"] for t in data["transactions"]] == ["Salary", "Bills"]
    assert data["debts"][0]["minimum_payment"] == 40
    assert data["debts"][0]["interest_rate"] == 18.99

    insights = client.get("/v1/insights?user_id=erin").json()
    assert insights["debt_metrics"]["total_debt"] == 2000


def test_onboarding_rejects_oversized_figures(client: TestClient):
    """Test figures beyond NUMERIC(10, 2) answer 422 and store nothing"""
    response = client.post(
        "/v1/onboarding",
        json={"user_id": "oscar", "income": "123456789012345.678", "debt": "123456789012345"},
    )
    assert response.status_code == 422

    response = client.post("/v1/onboarding", json={"user_id": "oscar", "expenses": "10.005"})
    assert response.status_code == 422

    assert client.get("/v1/transactions?user_id=oscar").json()["transactions"] == []
    assert client.get("/v1/debts?user_id=oscar").json()["debts"] == []


def test_settings_defaults_and_update(client: TestClient):
    defaults = client.get("/v1/settings?user_id=frank").json()
    assert defaults["currency"] == "USD"
    assert defaults["timezone"] == "UTC"
    assert defaults["theme"] == "system"

    response = client.put(
        "/v1/settings",
        json={
            "user_id": "frank",
            "display_name": "Frank",
            "currency": "EUR",
            "locale": "de",
            "timezone": "Europe/Berlin",
            "theme": "dark",
        },
    )
    assert response.status_code == 200

    stored = client.get("/v1/settings?user_id=frank").json()
    assert stored["display_name"] == "Frank"
    assert stored["currency"] == "EUR"
    assert stored["locale"] == "de"
    assert stored["timezone"] == "Europe/Berlin"


def test_settings_rejects_unknown_values(client: TestClient):
    response = client.put("/v1/settings", json={"user_id": "frank", "currency": "XYZ"})
    assert response.status_code == 422

    response = client.put("/v1/settings", json={"user_id": "frank", "timezone": "Mars/Olympus"})
    assert response.status_code == 422


def test_profile_round_trip(client: TestClient):
    assert client.get("/v1/profile?user_id=gina").status_code == 404

    save_profile(client, "gina")
    data = client.get("/v1/profile?user_id=gina").json()

    assert data["age"] == 31
    assert data["marital_status"] == "single"
    assert data["financial_goals"] == ["Emergency fund"]


@patch("moneymate_gateway.infrastructure.clients.advisor.AdvisorClient.generate_advice")
def test_profile_with_only_goals_counts_as_filled(mock_advice: AsyncMock, client: TestClient):
    """Test a profile holding just financial goals is readable and unlocks advice"""
    mock_advice.return_value = "Start with the emergency fund."
    response = client.put("/v1/profile", json={"user_id": "paula", "financial_goals": ["Buy a home"]})
    assert response.status_code == 200

    response = client.get("/v1/profile?user_id=paula")
    assert response.status_code == 200
    assert response.json()["financial_goals"] == ["Buy a home"]
    assert response.json()["age"] is None

    response = client.post("/v1/advice", json={"user_id": "paula"})
    assert response.status_code == 200
    assert "Buy a home" in mock_advice.call_args.args[0]


@patch("moneymate_gateway.infrastructure.clients.advisor.AdvisorClient.generate_advice")
def test_advice_endpoint_stores_reply(mock_advice: AsyncMock, client: TestClient):
    """Test POST /v1/advice saves the LLM reply verbatim"""
    mock_advice.return_value = "1. Build an emergency fund."
    save_profile(client, "hank")
    add_transaction(client, "hank", "income", 3000, "Salary")
    add_transaction(client, "hank", "expense", 900, "Housing")

    response = client.post("/v1/advice", json={"user_id": "hank"})

    assert response.status_code == 200
    assert response.json()["recommendations"] == "1. Build an emergency fund."
    prompt = mock_advice.call_args.args[0]
    assert "- Housing: $900.00" in prompt

    history = client.get("/v1/advice/history?user_id=hank").json()
    assert [a["recommendations"] for a in history["advice"]] == ["1. Build an emergency fund."]


def test_advice_requires_profile(client: TestClient):
    response = client.post("/v1/advice", json={"user_id": "ivy"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Profile not found. Please complete your profile first."


@patch("moneymate_gateway.infrastructure.clients.advisor.AdvisorClient.generate_advice")
def test_advice_upstream_failure(mock_advice: AsyncMock, client: TestClient):
    """Test advisor failure maps to 503 and nothing is stored"""
    mock_advice.side_effect = AdvisorAPIError("Advisor API error: 500")
    save_profile(client, "jack")

    response = client.post("/v1/advice", json={"user_id": "jack"})

    assert response.status_code == 503
    assert client.get("/v1/advice/history?user_id=jack").json()["advice"] == []
