"""User preferences schemas."""

from typing import Optional

from pydantic import field_validator

from backend.app.schemas.common import CamelModel, UTCDateTime, reject_null


class UserPreferencesBase(CamelModel):
    target_companies: list[str] = []
    target_roles: list[str] = []
    email_notifications: bool = True


class UserPreferencesUpdate(CamelModel):
    target_companies: Optional[list[str]] = None
    target_roles: Optional[list[str]] = None
    email_notifications: Optional[bool] = None

    @field_validator("target_companies", "target_roles", "email_notifications", mode="before")
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class UserPreferencesRead(UserPreferencesBase):
    id: int
    created_at: UTCDateTime
    updated_at: UTCDateTime
