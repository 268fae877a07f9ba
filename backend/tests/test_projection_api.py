from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def projection_payload() -> dict:
    return {
        "initialAmount": 1000,
        "monthlyContribution": 100,
        "interestRate": 12,
        "timeframeYears": 1,
        "compoundingFrequency": "monthly",
    }


def test_projection_endpoint_returns_breakdown(client: FlaskClient):
    resp = client.post("/api/investments/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["compoundingFrequency"] == "monthly"
    assert body["totalPeriods"] == 12
    assert isclose(body["finalAmount"], 2395.08, abs_tol=0.01)
    assert isclose(body["principalComponent"] + body["contributionComponent"], body["finalAmount"])


def test_projection_without_frequency_uses_monthly(client: FlaskClient):
    payload = projection_payload()
    del payload["compoundingFrequency"]

    resp = client.post("/api/investments/projection", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["periodsPerYear"] == 12


def test_zero_rate_projection_is_a_number(client: FlaskClient):
    payload = {
        "initialAmount": 500,
        "monthlyContribution": 50,
        "interestRate": 0,
        "timeframeYears": 2,
        "compoundingFrequency": "annually",
    }

    resp = client.post("/api/investments/projection", json=payload)

    assert resp.status_code == 200
    assert isclose(resp.get_json()["finalAmount"], 1700.0)


def test_unknown_frequency_returns_400(client: FlaskClient):
    payload = projection_payload()
    payload["compoundingFrequency"] = "weekly"

    resp = client.post("/api/investments/projection", json=payload)

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_out_of_range_values_return_400(client: FlaskClient):
    payload = projection_payload()
    payload["timeframeYears"] = 0
    payload["initialAmount"] = -10

    resp = client.post("/api/investments/projection", json=payload)

    assert resp.status_code == 400
    errors = resp.get_json()["error"]
    assert any("timeframeYears" in message for message in errors)
    assert any("initialAmount" in message for message in errors)


def test_missing_fields_return_400(client: FlaskClient):
    resp = client.post("/api/investments/projection", json={"initialAmount": 1000})

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/investments/projection",
        data="{not json",
        content_type="application/json",
    )

    assert resp.status_code == 400


def test_simulate_endpoint_returns_monthly_breakdown(client: FlaskClient):
    resp = client.post(
        "/api/investments/simulate",
        json={"initialAmount": 1000, "monthlyContribution": 100, "interestRate": 12, "months": 6},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["monthlyBreakdown"]) == 6
    assert body["totalInvested"] == 1600


def test_goal_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/investments/goal",
        json={"goalAmount": 1000, "initialAmount": 100, "monthlyContribution": 100, "interestRate": 0},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["reached"] is True
    assert body["monthsToReach"] == 9


def test_summary_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/investments/summary",
        json={"initialAmount": 5000, "monthlyContribution": 500, "annualReturnRate": 8.5, "timePeriodMonths": 120},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["totalContributions"] == 65000
    assert body["timePeriodYears"] == 10


def test_savings_rate_endpoint(client: FlaskClient):
    resp = client.post("/api/savings-rate", json={"totalIncome": 4000, "totalExpenses": 3000})

    assert resp.status_code == 200
    assert resp.get_json() == {"defined": True, "savingsRate": 25.0}


def test_savings_rate_endpoint_without_income(client: FlaskClient):
    resp = client.post("/api/savings-rate", json={"totalIncome": 0, "totalExpenses": 0})

    assert resp.status_code == 200
    assert resp.get_json() == {"defined": False, "savingsRate": None}


def test_savings_rate_rejects_negative_totals(client: FlaskClient):
    resp = client.post("/api/savings-rate", json={"totalIncome": -1, "totalExpenses": 0})

    assert resp.status_code == 400


def test_overview_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/overview",
        json={
            "incomes": [{"categoryId": "salary", "categoryName": "Salary", "amount": 4000}],
            "expenses": [
                {"categoryId": "rent", "categoryName": "Rent", "amount": 1500},
                {"categoryId": "food", "categoryName": "Food", "amount": 500},
            ],
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["balance"]["balance"] == 2000
    assert body["balance"]["savingsRate"] == 50.0
    assert [row["categoryId"] for row in body["expensesByCategory"]] == ["rent", "food"]
    assert body["incomeByCategory"][0]["percentage"] == 100.0


def test_simulation_overflow_returns_400_not_infinity(client: FlaskClient):
    resp = client.post(
        "/api/investments/simulate",
        json={"initialAmount": 1e300, "interestRate": 100, "months": 1200},
    )

    assert resp.status_code == 400
    assert b"Infinity" not in resp.data
    assert resp.get_json()["error"]


def test_summary_overflow_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/investments/summary",
        json={"initialAmount": 1e300, "annualReturnRate": 100, "timePeriodMonths": 1200},
    )

    assert resp.status_code == 400


def test_simulation_limits_return_400(client: FlaskClient):
    too_long = client.post(
        "/api/investments/simulate",
        json={"initialAmount": 1000, "interestRate": 5, "months": 100_000_000},
    )
    too_steep = client.post(
        "/api/investments/simulate",
        json={"initialAmount": 1000, "interestRate": 1e300, "months": 3},
    )

    assert too_long.status_code == 400
    assert any("months" in message for message in too_long.get_json()["error"])
    assert too_steep.status_code == 400
    assert any("interestRate" in message for message in too_steep.get_json()["error"])
