"""
Tests for the liveness and readiness probes.
"""


def test_health_ok(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"


def test_health_ignores_database_state(broken_client):
    response = broken_client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"


def test_readiness_ok_when_database_reachable(client):
    response = client.get("/readiness")

    assert response.status_code == 200
    assert response.text == "OK"


def test_readiness_503_when_database_unreachable(broken_client):
    response = broken_client.get("/readiness")

    assert response.status_code == 503
    assert response.text == "Database is not available"


def test_health_is_get_only(client):
    assert client.post("/health").status_code == 405
