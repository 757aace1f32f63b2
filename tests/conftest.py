import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def app(tmp_path):
    """A fresh application backed by its own SQLite file."""
    return create_app(database_url=f"sqlite:///{tmp_path / 'students.db'}")


@pytest.fixture
def client(app):
    """Test client; entering it runs the lifespan, which opens the database."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_student():
    """A valid student payload, age sent as a string like an HTML form does."""
    return {"name": "Ana", "email": "a@x.com", "age": "21", "gender": "Female"}
