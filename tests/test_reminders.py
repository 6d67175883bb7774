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


def create_contact(client: TestClient) -> int:
    resp = client.post(
        "/api/contacts",
        json={"name": "Jane Doe", "company": "Acme", "role": "Engineer", "lastContactDate": "2024-01-15"},
    )
    assert resp.status_code == 201
    return resp.json()["id"]


def create_reminder(client: TestClient, contact_id: int, description: str, due_date: str = "2024-02-01"):
    return client.post(
        "/api/reminders",
        json={"contactId": contact_id, "description": description, "dueDate": due_date},
    )


def test_create_reminder_for_contact():
    client = TestClient(app)
    contact_id = create_contact(client)
    resp = create_reminder(client, contact_id, "Call back")
    assert resp.status_code == 201
    data = resp.json()
    assert data["description"] == "Call back"
    assert data["contactId"] == contact_id
    assert data["completed"] is False
    assert data["completedAt"] is None


def test_list_reminders_ordered_by_due_date():
    client = TestClient(app)
    contact_id = create_contact(client)
    create_reminder(client, contact_id, "Later", "2024-03-01")
    create_reminder(client, contact_id, "Sooner", "2024-02-01")

    resp = client.get("/api/reminders")
    assert resp.status_code == 200
    assert [r["description"] for r in resp.json()] == ["Sooner", "Later"]

    per_contact = client.get(f"/api/contacts/{contact_id}/reminders").json()
    assert [r["description"] for r in per_contact] == ["Sooner", "Later"]


def test_reminder_for_missing_contact_is_rejected():
    client = TestClient(app)
    resp = create_reminder(client, 999, "Should fail")
    assert resp.status_code == 400


def test_reminder_requires_due_date():
    client = TestClient(app)
    contact_id = create_contact(client)
    resp = client.post("/api/reminders", json={"contactId": contact_id, "description": "No date"})
    assert resp.status_code == 400


def test_update_reminder_description_and_due_date():
    client = TestClient(app)
    contact_id = create_contact(client)
    reminder = create_reminder(client, contact_id, "Original").json()

    resp = client.patch(
        f"/api/reminders/{reminder['id']}",
        json={"description": "Updated", "dueDate": "2024-05-01T12:00:00Z"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["description"] == "Updated"
    assert data["dueDate"].startswith("2024-05-01T12:00:00")
    assert data["completed"] is False


def test_complete_and_reopen_reminder():
    client = TestClient(app)
    contact_id = create_contact(client)
    reminder = create_reminder(client, contact_id, "Send resume").json()

    done = client.patch(f"/api/reminders/{reminder['id']}", json={"completed": True}).json()
    assert done["completed"] is True
    assert done["completedAt"] is not None

    reopened = client.patch(f"/api/reminders/{reminder['id']}", json={"completed": False}).json()
    assert reopened["completed"] is False
    assert reopened["completedAt"] is None


def test_filter_reminders_by_completion():
    client = TestClient(app)
    contact_id = create_contact(client)
    first = create_reminder(client, contact_id, "Done").json()
    create_reminder(client, contact_id, "Open")
    client.patch(f"/api/reminders/{first['id']}", json={"completed": True})

    open_items = client.get("/api/reminders", params={"completed": "false"}).json()
    assert [r["description"] for r in open_items] == ["Open"]
    done_items = client.get("/api/reminders", params={"completed": "true"}).json()
    assert [r["description"] for r in done_items] == ["Done"]


def test_update_missing_reminder_returns_404():
    client = TestClient(app)
    assert client.patch("/api/reminders/999", json={"completed": True}).status_code == 404


def test_delete_reminder():
    client = TestClient(app)
    contact_id = create_contact(client)
    reminder = create_reminder(client, contact_id, "Remove me").json()

    resp = client.delete(f"/api/reminders/{reminder['id']}")
    assert resp.status_code == 204
    assert client.get(f"/api/reminders/{reminder['id']}").status_code == 404
    assert client.delete(f"/api/reminders/{reminder['id']}").status_code == 404
