"""Note schemas for contact meeting notes."""

from typing import Optional

from pydantic import field_validator

from backend.app.schemas.common import CamelModel, NonEmptyStr, OptionalText, UTCDateTime, reject_null
from backend.app.schemas.contact import OptionalUrl


class NoteBase(CamelModel):
    content: NonEmptyStr
    meeting_date: UTCDateTime
    document_url: OptionalUrl = None
    title: OptionalText = None
    summary: OptionalText = None


class NoteCreate(NoteBase):
    """Schema for creating a note."""

    contact_id: int


class NoteUpdate(CamelModel):
    """Schema for updating a note."""

    content: Optional[NonEmptyStr] = None
    meeting_date: Optional[UTCDateTime] = None
    document_url: OptionalUrl = None
    title: OptionalText = None
    summary: OptionalText = None

    @field_validator("content", "meeting_date", mode="before")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class NoteRead(NoteBase):
    """Schema for reading a note."""

    id: int
    contact_id: int


class RegenerationReport(CamelModel):
    updated: int
    failed: int
