"""Reminder schemas for contact follow-up tasks."""

from typing import Optional

from pydantic import field_validator

from backend.app.schemas.common import CamelModel, NonEmptyStr, UTCDateTime, reject_null


class ReminderBase(CamelModel):
    contact_id: int
    description: NonEmptyStr
    due_date: UTCDateTime
    completed: bool = False


class ReminderCreate(ReminderBase):
    """Schema for creating a reminder."""


class ReminderUpdate(CamelModel):
    """Schema for updating a reminder."""

    contact_id: Optional[int] = None
    description: Optional[NonEmptyStr] = None
    due_date: Optional[UTCDateTime] = None
    completed: Optional[bool] = None

    @field_validator("contact_id", "description", "due_date", "completed", mode="before")
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class ReminderRead(ReminderBase):
    """Schema for reading a reminder."""

    id: int
    created_at: UTCDateTime
    completed_at: Optional[UTCDateTime] = None
