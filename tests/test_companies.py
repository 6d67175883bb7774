import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def test_create_company():
    client = TestClient(app)
    resp = client.post("/api/companies", json={"name": "Acme", "isTarget": True})
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "Acme"
    assert data["isTarget"] is True


def test_is_target_defaults_to_false():
    client = TestClient(app)
    resp = client.post("/api/companies", json={"name": "Globex"})
    assert resp.status_code == 201
    assert resp.json()["isTarget"] is False


def test_list_companies_sorted_by_name():
    client = TestClient(app)
    client.post("/api/companies", json={"name": "Initech"})
    client.post("/api/companies", json={"name": "Acme"})
    resp = client.get("/api/companies")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Acme", "Initech"]


def test_duplicate_company_name_conflicts():
    client = TestClient(app)
    assert client.post("/api/companies", json={"name": "Acme"}).status_code == 201
    resp = client.post("/api/companies", json={"name": "Acme"})
    assert resp.status_code == 409
    assert len(client.get("/api/companies").json()) == 1


def test_company_requires_name():
    client = TestClient(app)
    assert client.post("/api/companies", json={"isTarget": True}).status_code == 400
