from fastapi.testclient import TestClient

from rapport.main import app

client = TestClient(app)


def test_health_check_returns_ok_status_and_version() -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["data"]["status"] == "ok"
    assert "version" in payload["data"]
    assert payload["data"]["version"]


def test_health_check_does_not_require_a_session() -> None:
    response = client.get("/api/v1/health", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 200


def test_unknown_route_uses_error_envelope() -> None:
    response = client.get("/api/v1/nowhere")

    assert response.status_code == 404
    assert response.json() == {"error": {"code": "RESOURCE_NOT_FOUND", "message": "Not Found"}}


def test_unmapped_http_status_falls_back_to_numeric_code() -> None:
    response = client.post("/api/v1/health")

    assert response.status_code == 405
    assert response.json()["error"]["code"] == "HTTP_405"
