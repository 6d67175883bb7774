"""Contact schemas for create, update and read operations."""

from typing import Annotated, Literal, Optional

from pydantic import BeforeValidator, EmailStr, Field, field_validator

from backend.app.schemas.common import (
    CamelModel,
    NonEmptyStr,
    OptionalText,
    UrlStr,
    UTCDateTime,
    blank_to_none,
    reject_null,
)

ContactTier = Literal["GOLD", "SILVER", "STANDARD"]

OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(blank_to_none)]
OptionalUrl = Annotated[Optional[UrlStr], BeforeValidator(blank_to_none)]


class ContactBase(CamelModel):
    name: NonEmptyStr
    company: NonEmptyStr
    role: NonEmptyStr
    linkedin_url: OptionalUrl = None
    email: OptionalEmail = None
    phone: OptionalText = None
    last_contact_date: UTCDateTime
    next_contact_date: Optional[UTCDateTime] = None
    notes: OptionalText = None


class ContactCreate(ContactBase):
    """Schema for contact creation requests."""


class ContactUpdate(CamelModel):
    """Schema for contact updates with partial fields."""

    name: Optional[NonEmptyStr] = None
    company: Optional[NonEmptyStr] = None
    role: Optional[NonEmptyStr] = None
    linkedin_url: OptionalUrl = None
    email: OptionalEmail = None
    phone: OptionalText = None
    last_contact_date: Optional[UTCDateTime] = None
    next_contact_date: Optional[UTCDateTime] = None
    notes: OptionalText = None

    @field_validator("name", "company", "role", "last_contact_date", mode="before")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)


class ContactRead(ContactBase):
    """Schema for contact responses."""

    id: int
    # Not stored; recomputed from the current preferences on every read
    tier: Optional[ContactTier] = None


class ContactMergeRequest(CamelModel):
    primary_id: int
    duplicate_ids: list[int] = Field(min_length=1)
