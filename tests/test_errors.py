"""Error handling: unknown routes, storage failures and the catch-all handler."""

from fastapi.testclient import TestClient


def test_unknown_route(client):
    resp = client.get("/courses")
    assert resp.status_code == 404
    error = resp.json()["error"]
    assert error["code"] == "ROUTE_NOT_FOUND"
    assert error["message"] == "The requested endpoint GET /courses does not exist"


def test_unmatched_method_is_route_not_found(client):
    resp = client.patch("/students/1", json={})
    assert resp.status_code == 404
    error = resp.json()["error"]
    assert error["code"] == "ROUTE_NOT_FOUND"
    assert error["message"] == "The requested endpoint PATCH /students/1 does not exist"


def test_storage_error_is_generic(client, sample_student):
    client.app.state.db.drop_tables()

    resp = client.get("/students")
    assert resp.status_code == 500
    error = resp.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert error["message"] == "Failed to retrieve students"
    assert error["details"] is None

    resp = client.post("/students", json=sample_student)
    assert resp.status_code == 500
    assert resp.json()["error"]["message"] == "Failed to add student"

    assert client.get("/health").status_code == 500


def test_unhandled_error_is_generic(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/boom")

    assert resp.status_code == 500
    error = resp.json()["error"]
    assert error["code"] == "INTERNAL_SERVER_ERROR"
    assert error["message"] == "An unexpected error occurred"
    assert "secret" not in resp.text
