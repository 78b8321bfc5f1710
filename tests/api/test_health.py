"""
Tests for the health check endpoint.
"""

import json

from synthetic_bank.main import error_response


def test_health_check_returns_200(client):
    """
    Verify the health endpoint responds with HTTP 200.

    This is the most basic test: can the application
    receive a request and respond? If this fails, nothing
    else will work.
    """
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    response = client.get("/health")
    data = response.json()
    assert data["success"] is True
    assert data["service"] == "synthetic-bank-api"


def test_health_check_reports_provider_and_counts(client, account):
    """
    The health endpoint reports which content provider is active
    and how much data the ledger holds.
    """
    data = client.get("/health").json()
    assert data["aiProvider"] == "Fallback Templates"
    assert data["ledger"] == "healthy"
    assert data["data"] == {"accounts": 1, "transactions": 0}


def test_unknown_route_returns_envelope(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route not found"}


def test_error_envelope_omits_empty_details():
    response = error_response(400, "Bad input")
    assert json.loads(response.body) == {"success": False, "error": "Bad input"}

    response = error_response(500, "Failed to generate data", details="boom")
    assert response.status_code == 500
    assert json.loads(response.body) == {
        "success": False,
        "error": "Failed to generate data",
        "details": "boom",
    }
