import asyncio
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app.main import app
from backend.app.services import ai_summaries, document_ingestion

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC = "application/msword"

TEXT = "Company: Acme\nRole: Engineering Manager\nEmail: jane@acme.com\nWe discussed the team."


@pytest.fixture(autouse=True)
def stub_pipeline(monkeypatch):
    def fake_extract(content):
        if content == b"broken":
            raise document_ingestion.TextExtractionError("Could not extract text from document")
        return TEXT

    def fail(*args, **kwargs):
        raise ai_summaries.AISummaryError("service down")

    monkeypatch.setattr(document_ingestion, "extract_text", fake_extract)
    monkeypatch.setattr(ai_summaries, "_complete", fail)


def test_process_document_returns_draft_with_fallbacks():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process",
        files={"document": ("20240115 - Jane Doe.docx", b"docx bytes", DOCX)},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["text"] == TEXT
    contact = data["extractedContact"]
    assert contact["name"] == "Jane Doe"
    assert contact["meetingDate"] == "2024-01-15"
    assert contact["company"] == "Acme"
    assert contact["role"] == "Engineering Manager"
    assert contact["email"] == "jane@acme.com"
    assert contact["title"] == ai_summaries.TITLE_FALLBACK
    assert contact["summary"] == ai_summaries.SUMMARY_FALLBACK


def test_legacy_word_mime_type_passes_type_check():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process",
        files={"document": ("20240115 - Jane Doe.doc", b"doc bytes", DOC)},
    )
    assert resp.status_code == 200


def test_unsupported_file_type_is_rejected():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process",
        files={"document": ("20240115 - Jane Doe.txt", b"plain text", "text/plain")},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "unsupported_document"


def test_empty_file_is_rejected():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process",
        files={"document": ("20240115 - Jane Doe.docx", b"", DOCX)},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "empty_document"


def test_filename_without_date_is_rejected():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process",
        files={"document": ("notes.docx", b"docx bytes", DOCX)},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "invalid_filename"
    assert "YYYYMMDD" in body["message"]


def test_missing_upload_field_is_a_validation_error():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process",
        files={"file": ("20240115 - Jane Doe.docx", b"docx bytes", DOCX)},
    )
    assert resp.status_code == 400
    assert "errors" in resp.json()


def test_batch_isolates_failures():
    client = TestClient(app)
    resp = client.post(
        "/api/documents/process-batch",
        files=[
            ("documents", ("20240115 - Jane Doe.docx", b"docx bytes", DOCX)),
            ("documents", ("notes.docx", b"docx bytes", DOCX)),
            ("documents", ("20240220 - John Smith.docx", b"broken", DOCX)),
            ("documents", ("20240301 - Ada Lovelace.docx", b"docx bytes", DOCX)),
        ],
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["succeeded"] == 2
    assert data["failed"] == 2
    outcomes = [(r["filename"], r["success"]) for r in data["results"]]
    assert outcomes == [
        ("20240115 - Jane Doe.docx", True),
        ("notes.docx", False),
        ("20240220 - John Smith.docx", False),
        ("20240301 - Ada Lovelace.docx", True),
    ]
    assert data["results"][3]["result"]["extractedContact"]["name"] == "Ada Lovelace"
    assert "YYYYMMDD" in data["results"][1]["error"]


def test_health_answers_while_upload_waits_on_model(monkeypatch):
    def slow_complete(*args, **kwargs):
        time.sleep(0.5)
        return "Generated"

    monkeypatch.setattr(ai_summaries, "_complete", slow_complete)

    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            upload = asyncio.create_task(
                client.post(
                    "/api/documents/process",
                    files={"document": ("20240115 - Jane Doe.docx", b"docx bytes", DOCX)},
                )
            )
            await asyncio.sleep(0.1)
            started = time.perf_counter()
            health = await client.get("/health")
            elapsed = time.perf_counter() - started
            return health, elapsed, await upload

    health, elapsed, upload = asyncio.run(run())
    assert health.status_code == 200
    assert elapsed < 0.4
    assert upload.status_code == 200
    assert upload.json()["extractedContact"]["title"] == "Generated"
