from __future__ import annotations

import logging

import pytest
from flask.testing import FlaskClient

from fincalc.app import create_app
from fincalc.app.api.routes import CALCULATIONS
from fincalc.core.catalog import CALCULATORS

SAMPLE_PAYLOADS = {
    "sip": {"monthly_investment": 25000, "expected_return": 12, "years": 10},
    "step-up-sip": {"monthly_investment": 10000, "expected_return": 12, "years": 10, "annual_step_up": 10},
    "lumpsum": {"total_investment": 100000, "expected_return": 10, "years": 3},
    "emi": {"loan_amount": 5000000, "interest_rate": 8.5, "tenure_years": 20},
    "step-up-emi": {"loan_amount": 5000000, "interest_rate": 8.5, "tenure_years": 20, "annual_step_up": 5},
    "swp": {"total_investment": 1000000, "monthly_withdrawal": 5000, "expected_return": 12, "years": 10},
    "step-up-swp": {
        "total_investment": 1000000,
        "monthly_withdrawal": 5000,
        "expected_return": 8,
        "years": 10,
        "annual_step_up": 10,
    },
    "income-tax": {"gross_income": 1200000, "deduction_80d": 25000, "other_deductions": 50000},
}


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong"}


def test_catalog_lists_every_served_calculator(client: FlaskClient):
    response = client.get("/api/calculators")

    assert response.status_code == 200
    slugs = [entry["slug"] for entry in response.get_json()]
    assert slugs == [calculator.slug for calculator in CALCULATORS]
    assert set(slugs) == set(CALCULATIONS)
    assert all(entry["title"] and entry["description"] for entry in response.get_json())


@pytest.mark.parametrize("slug", sorted(SAMPLE_PAYLOADS))
def test_each_calculator_returns_result_and_summary(client: FlaskClient, slug: str):
    response = client.post(f"/api/calc/{slug}", json=SAMPLE_PAYLOADS[slug])

    assert response.status_code == 200
    body = response.get_json()
    assert set(body) == {"result", "summary"}
    summary = body["summary"]
    assert summary["headline"].startswith("₹ ")
    assert summary["left_label"] and summary["right_label"]


def test_emi_endpoint_values(client: FlaskClient):
    response = client.post("/api/calc/emi", json=SAMPLE_PAYLOADS["emi"])

    result = response.get_json()["result"]
    assert abs(result["emi"] - 43391) <= 1
    assert len(result["yearly_breakdown"]) == 20
    assert result["yearly_breakdown"][-1]["outstanding_balance"] == 0


def test_income_tax_endpoint_values(client: FlaskClient):
    response = client.post("/api/calc/income-tax", json=SAMPLE_PAYLOADS["income-tax"])

    body = response.get_json()
    assert body["result"]["total_tax"] == 54600
    assert body["summary"]["caption"].endswith("% Tax Rate")
    assert body["summary"]["headline"] == "₹ 54,600"


def test_depleted_swp_carries_a_note(client: FlaskClient):
    payload = {"total_investment": 100000, "monthly_withdrawal": 10000, "expected_return": 0, "years": 5}
    response = client.post("/api/calc/swp", json=payload)

    body = response.get_json()
    assert body["result"]["depletion_month"] == 10
    assert body["summary"]["notes"] == ["Fund depleted after 0 years 10 months"]


@pytest.mark.parametrize(
    "payload",
    [
        {"monthly_investment": -5, "expected_return": 12, "years": 10},
        {"monthly_investment": 5000, "expected_return": 12, "years": 10, "unexpected": True},
        {"monthly_investment": 5000, "expected_return": 12},
        {"monthly_investment": "lots", "expected_return": 12, "years": 10},
        [1, 2, 3],
    ],
)
def test_invalid_payload_returns_422(client: FlaskClient, payload):
    response = client.post("/api/calc/sip", json=payload)

    assert response.status_code == 422
    assert "detail" in response.get_json()


def test_malformed_body_returns_400(client: FlaskClient):
    response = client.post("/api/calc/sip", data="{not json", content_type="application/json")

    assert response.status_code == 400
    assert "detail" in response.get_json()


def test_unknown_calculator_returns_404(client: FlaskClient):
    response = client.post("/api/calc/ppf", json={})

    assert response.status_code == 404


def test_solver_limits_come_from_config():
    app = create_app({"TESTING": True, "STEP_UP_EMI_MAX_ITERATIONS": 1})

    with app.test_client() as client:
        response = client.post("/api/calc/step-up-emi", json=SAMPLE_PAYLOADS["step-up-emi"])

    body = response.get_json()
    assert response.status_code == 200
    assert body["result"]["converged"] is False
    assert body["result"]["iterations"] == 1
    assert len(body["summary"]["notes"]) == 1


def test_cors_headers_for_known_origin(client: FlaskClient):
    response = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


@pytest.mark.parametrize("slug", ["emi", "step-up-emi", "sip"])
def test_vanishingly_small_rate_is_served(client: FlaskClient, slug: str):
    payload = dict(SAMPLE_PAYLOADS[slug])
    payload["interest_rate" if "emi" in slug else "expected_return"] = 1e-15

    response = client.post(f"/api/calc/{slug}", json=payload)

    assert response.status_code == 200


def test_log_level_is_case_insensitive():
    create_app({"TESTING": True, "LOG_LEVEL": "debug"})

    assert logging.getLogger("fincalc").level == logging.DEBUG

    create_app({"TESTING": True, "LOG_LEVEL": "INFO"})
    assert logging.getLogger("fincalc").level == logging.INFO
