from __future__ import annotations

from flask.testing import FlaskClient


def test_deposit_routes_require_a_session(client: FlaskClient, deposit_payload):
    assert client.get("/api/deposits").status_code == 401
    assert client.post("/api/deposits", json=deposit_payload()).status_code == 401
    assert client.get("/api/views/dashboard").status_code == 401


def test_create_and_list_deposits(auth_client: FlaskClient, deposit_payload):
    resp = auth_client.post("/api/deposits", json=deposit_payload(startDate="2026-01-31"))

    assert resp.status_code == 201
    created = resp.get_json()
    assert created["maturityDate"] == "2027-01-31"
    assert created["status"] in {"ACTIVE", "MATURED"}

    listing = auth_client.get("/api/deposits").get_json()
    assert [d["id"] for d in listing] == [created["id"]]


def test_matured_deposit_reports_matured(auth_client: FlaskClient, deposit_payload):
    resp = auth_client.post("/api/deposits", json=deposit_payload(startDate="2015-01-01"))

    assert resp.get_json()["status"] == "MATURED"


def test_invalid_deposit_returns_422(auth_client: FlaskClient, deposit_payload):
    resp = auth_client.post("/api/deposits", json=deposit_payload(principal=-5, durationMonths=0))

    assert resp.status_code == 422
    fields = {tuple(error["loc"]) for error in resp.get_json()["detail"]}
    assert ("principal",) in fields
    assert ("durationMonths",) in fields


def test_update_and_delete_deposit(auth_client: FlaskClient, deposit_payload):
    deposit_id = auth_client.post("/api/deposits", json=deposit_payload()).get_json()["id"]

    updated = auth_client.put(
        f"/api/deposits/{deposit_id}",
        json=deposit_payload(bankName="Axis Bank", principal=250000),
    )
    assert updated.status_code == 200
    assert updated.get_json()["bankName"] == "Axis Bank"
    assert updated.get_json()["principal"] == 250000

    assert auth_client.delete(f"/api/deposits/{deposit_id}").status_code == 204
    assert auth_client.get(f"/api/deposits/{deposit_id}").status_code == 404
    assert auth_client.delete(f"/api/deposits/{deposit_id}").status_code == 404


def test_other_users_cannot_see_deposit(app, auth_client: FlaskClient, deposit_payload):
    deposit_id = auth_client.post("/api/deposits", json=deposit_payload()).get_json()["id"]

    other = app.test_client()
    other.post(
        "/api/auth/register",
        json={"name": "Other", "email": "other@example.com", "password": "other-password"},
    )
    assert other.get(f"/api/deposits/{deposit_id}").status_code == 404
    assert other.get(f"/api/deposits/{deposit_id}/calculation").status_code == 404
    assert other.get("/api/deposits").get_json() == []


def test_deposit_calculation_endpoint(auth_client: FlaskClient, deposit_payload):
    deposit_id = auth_client.post("/api/deposits", json=deposit_payload()).get_json()["id"]

    resp = auth_client.get(f"/api/deposits/{deposit_id}/calculation")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["calculation"]["maturityValue"] == 106167.78
    assert len(body["calculation"]["growthData"]) == 13
    assert [row["type"] for row in body["comparisons"]] == ["FD", "Savings", "RD"]
    assert body["comparisons"][0]["interestRate"] == 6.0


def test_views_endpoint(auth_client: FlaskClient, deposit_payload):
    auth_client.post("/api/deposits", json=deposit_payload())

    dashboard = auth_client.get("/api/views/dashboard")
    assert dashboard.status_code == 200
    assert dashboard.get_json()["summary"]["depositCount"] == 1

    investments = auth_client.get("/api/views/investments").get_json()
    assert len(investments["deposits"]) == 1

    assert auth_client.get("/api/views/settings").status_code == 404
