"""Schemas for the document ingestion endpoints."""

from datetime import date
from typing import Optional

from backend.app.schemas.common import CamelModel


class ExtractedContact(CamelModel):
    name: str
    company: str
    role: str
    email: Optional[str] = None
    meeting_date: date
    title: str
    summary: Optional[str] = None


class DocumentProcessResponse(CamelModel):
    text: str
    extracted_contact: ExtractedContact


class BatchItemResult(CamelModel):
    filename: Optional[str] = None
    success: bool
    result: Optional[DocumentProcessResponse] = None
    error: Optional[str] = None


class BatchProcessResponse(CamelModel):
    succeeded: int
    failed: int
    results: list[BatchItemResult]
