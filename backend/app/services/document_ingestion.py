"""Document ingestion: uploaded meeting document to a draft contact and note.

Steps, in order:
- reject unsupported MIME types and empty uploads
- parse the meeting date and person name from a ``YYYYMMDD - Name.docx`` filename
- extract plain text with mammoth; it reads OOXML only, so legacy .doc uploads pass
  the type check and are then rejected as extraction failures
- scan ``label: value`` lines for company, role and email
- ask the language model for a summary and a title (fallback strings on failure)

Extraction is best effort and meant for human review; nothing is persisted here.
"""

import io
import logging
import os
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

import mammoth
from pydantic import EmailStr, TypeAdapter, ValidationError

from backend.app.services import ai_summaries

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

DEFAULT_COMPANY = "Unknown Company"
DEFAULT_ROLE = "Unknown Role"

FILENAME_FORMAT = "YYYYMMDD - Name.docx (e.g. 20240115 - Jane Doe.docx)"

_DASHES = re.compile(r"[‐‑‒–—―−﹘﹣－]")
_WHITESPACE = re.compile(r"\s+")
_FILENAME_PATTERN = re.compile(r"^(\d{8})\s*-\s*(.+)$")

FIELD_LABELS = {
    "company": ("company", "organization"),
    "role": ("role", "title", "position"),
    "email": ("email",),
}

_email_adapter = TypeAdapter(EmailStr)


class DocumentProcessingError(Exception):
    """Base error for rejected uploads; carries the HTTP status to report."""

    status_code = 400
    error = "document_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedDocumentError(DocumentProcessingError):
    error = "unsupported_document"


class EmptyDocumentError(DocumentProcessingError):
    error = "empty_document"


class FilenameFormatError(DocumentProcessingError):
    error = "invalid_filename"


class TextExtractionError(DocumentProcessingError):
    error = "extraction_failed"


@dataclass
class ScannedFields:
    company: str = DEFAULT_COMPANY
    role: str = DEFAULT_ROLE
    email: Optional[str] = None


@dataclass
class ProcessedDocument:
    text: str
    name: str
    meeting_date: date
    company: str
    role: str
    email: Optional[str]
    title: str
    summary: Optional[str]

    def to_payload(self) -> dict:
        return {
            "text": self.text,
            "extracted_contact": {
                "name": self.name,
                "company": self.company,
                "role": self.role,
                "email": self.email,
                "meeting_date": self.meeting_date,
                "title": self.title,
                "summary": self.summary,
            },
        }


def normalize_filename(filename: str) -> str:
    normalized = _DASHES.sub("-", filename)
    return _WHITESPACE.sub(" ", normalized).strip()


def parse_filename(filename: Optional[str]) -> tuple[date, str]:
    """Return (meeting date, title-cased name) from ``YYYYMMDD - Name.docx``."""
    if not filename:
        raise FilenameFormatError(f"Missing filename. Expected format: {FILENAME_FORMAT}")

    stem, _ = os.path.splitext(normalize_filename(os.path.basename(filename)))
    match = _FILENAME_PATTERN.match(stem.strip())
    if not match:
        raise FilenameFormatError(f"Invalid filename '{filename}'. Expected format: {FILENAME_FORMAT}")

    raw_date, raw_name = match.groups()
    try:
        meeting_date = datetime.strptime(raw_date, "%Y%m%d").date()
    except ValueError:
        raise FilenameFormatError(f"Invalid date '{raw_date}' in filename. Expected format: {FILENAME_FORMAT}")

    name = raw_name.strip().title()
    if not name:
        raise FilenameFormatError(f"Missing name in filename. Expected format: {FILENAME_FORMAT}")
    return meeting_date, name


def extract_text(content: bytes) -> str:
    try:
        result = mammoth.extract_raw_text(io.BytesIO(content))
    except Exception as exc:
        logger.exception("Text extraction failed")
        raise TextExtractionError(f"Could not extract text from document: {exc}") from exc
    text = (result.value or "").strip()
    if not text:
        raise TextExtractionError("No text could be extracted from the document")
    return text


def _label_value(line: str, labels: tuple[str, ...]) -> Optional[str]:
    lowered = line.strip().lower()
    for label in labels:
        if lowered.startswith(label) and lowered[len(label):].lstrip().startswith(":"):
            value = line.split(":", 1)[1].strip()
            return value or None
    return None


def scan_fields(text: str) -> ScannedFields:
    """First ``label:`` match per field wins; missing fields keep their placeholders."""
    found: dict[str, str] = {}
    for line in text.splitlines():
        for field, labels in FIELD_LABELS.items():
            if field in found:
                continue
            value = _label_value(line, labels)
            if value:
                found[field] = value

    email = found.get("email")
    if email is not None:
        try:
            email = _email_adapter.validate_python(email)
        except ValidationError:
            logger.info("Ignoring malformed email found in document: %s", email)
            email = None

    return ScannedFields(
        company=found.get("company", DEFAULT_COMPANY),
        role=found.get("role", DEFAULT_ROLE),
        email=email,
    )


def process_document(filename: Optional[str], content_type: Optional[str], content: bytes) -> ProcessedDocument:
    if content_type not in ALLOWED_MIME_TYPES:
        raise UnsupportedDocumentError(
            f"Unsupported file type '{content_type}'. Upload a Word document (.doc or .docx)"
        )
    if not content:
        raise EmptyDocumentError("Uploaded file is empty")

    meeting_date, name = parse_filename(filename)
    text = extract_text(content)
    fields = scan_fields(text)

    summary = ai_summaries.summarize_conversation(text)
    title = ai_summaries.generate_title(text)

    logger.info("Processed document %s for %s (%d chars)", filename, name, len(text))
    return ProcessedDocument(
        text=text,
        name=name,
        meeting_date=meeting_date,
        company=fields.company,
        role=fields.role,
        email=fields.email,
        title=title,
        summary=summary,
    )
