"""API tests for the /students endpoints and /health."""

import pytest

FIELDS = ["name", "email", "age", "gender"]


def _create(client, payload):
    resp = client.post("/students", json=payload)
    assert resp.status_code == 201
    return resp.json()


# --- POST /students ---

def test_create_student(client, sample_student):
    resp = client.post("/students", json=sample_student)
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == 1
    assert data["name"] == "Ana"
    assert data["email"] == "a@x.com"
    assert data["age"] == 21
    assert data["gender"] == "Female"
    assert data["created_at"]


def test_create_assigns_new_ids(client, sample_student):
    first = _create(client, sample_student)
    second = _create(client, sample_student)
    assert second["id"] != first["id"]


def test_duplicate_email_allowed(client, sample_student):
    _create(client, sample_student)
    resp = client.post("/students", json=sample_student)
    assert resp.status_code == 201


@pytest.mark.parametrize("missing", FIELDS)
def test_create_missing_field_rejected(client, sample_student, missing):
    payload = {k: v for k, v in sample_student.items() if k != missing}
    resp = client.post("/students", json=payload)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert missing in body["error"]["details"]
    assert client.get("/students").json() == []


@pytest.mark.parametrize("field", ["name", "email", "gender"])
def test_create_empty_field_rejected(client, sample_student, field):
    resp = client.post("/students", json={**sample_student, field: ""})
    assert resp.status_code == 400


@pytest.mark.parametrize("age", ["0", 121, "abc", None])
def test_create_bad_age_rejected(client, sample_student, age):
    resp = client.post("/students", json={**sample_student, "age": age})
    assert resp.status_code == 400
    assert client.get("/students").json() == []


def test_create_age_bounds_accepted(client, sample_student):
    assert _create(client, {**sample_student, "age": 1})["age"] == 1
    assert _create(client, {**sample_student, "age": "120"})["age"] == 120


# --- GET /students ---

def test_list_empty(client):
    resp = client.get("/students")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_newest_first(client, sample_student):
    ids = [_create(client, {**sample_student, "name": f"S{i}"})["id"] for i in range(3)]
    listed = [s["id"] for s in client.get("/students").json()]
    assert listed == sorted(ids, reverse=True)


# --- GET /students/{id} ---

def test_get_student(client, sample_student):
    created = _create(client, sample_student)
    resp = client.get(f"/students/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_student_not_found(client):
    resp = client.get("/students/999")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"
    assert resp.json()["error"]["message"] == "Student with ID 999 not found"


def test_get_student_non_integer_id(client):
    resp = client.get("/students/abc")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Student with ID abc not found"


def test_delete_student_non_integer_id(client):
    resp = client.delete("/students/abc")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


# --- PUT /students/{id} ---

def test_update_student(client, sample_student):
    created = _create(client, sample_student)
    update = {"name": "Ana B", "email": "a@x.com", "age": "22", "gender": "Female"}
    resp = client.put(f"/students/{created['id']}", json=update)
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Ana B"
    assert data["age"] == 22
    assert data["id"] == created["id"]
    assert data["created_at"] == created["created_at"]
    assert client.get(f"/students/{created['id']}").json() == data


def test_update_not_found(client, sample_student):
    resp = client.put("/students/999", json=sample_student)
    assert resp.status_code == 404


def test_update_missing_field_rejected(client, sample_student):
    created = _create(client, sample_student)
    resp = client.put(f"/students/{created['id']}", json={"name": "Only name"})
    assert resp.status_code == 400
    assert client.get(f"/students/{created['id']}").json()["name"] == "Ana"


# --- DELETE /students/{id} ---

def test_delete_student(client, sample_student):
    created = _create(client, sample_student)
    resp = client.delete(f"/students/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created
    assert client.get(f"/students/{created['id']}").status_code == 404


def test_delete_not_found(client):
    resp = client.delete("/students/999")
    assert resp.status_code == 404


def test_deleted_id_not_reused(client, sample_student):
    first = _create(client, sample_student)
    client.delete(f"/students/{first['id']}")
    second = _create(client, sample_student)
    assert second["id"] > first["id"]


# --- Full lifecycle ---

def test_crud_scenario(client):
    resp = client.post("/students", json={"name": "Ana", "email": "a@x.com", "age": "21", "gender": "Female"})
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] == 1
    assert created["age"] == 21

    listed = client.get("/students").json()
    assert [s["id"] for s in listed] == [1]

    resp = client.put("/students/1", json={"name": "Ana B", "email": "a@x.com", "age": "22", "gender": "Female"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["age"] == 22
    assert updated["name"] == "Ana B"

    resp = client.delete("/students/1")
    assert resp.status_code == 200
    assert resp.json() == updated

    assert client.get("/students/1").status_code == 404


# --- /health and / ---

def test_health(client, sample_student):
    _create(client, sample_student)
    _create(client, sample_student)
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["student_count"] == 2
    assert data["timestamp"]


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["docs"] == "/docs"


def test_validation_message_is_neutral(client, sample_student):
    resp = client.post("/students", json={**sample_student, "age": 121})
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["message"] == "Invalid request data"
    assert list(error["details"]) == ["age"]
