"""Shared schema base and field types.

Payloads use camelCase on the wire (``linkedinUrl``, ``meetingDate``); snake_case
names are accepted as well so server-side callers can build schemas directly.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    HttpUrl,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from backend.app.core.time import as_utc


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def _parse_iso(value):
    if isinstance(value, str):
        # Accepts "2024-01-15", "2024-01-15T10:00:00" and a trailing "Z"
        return datetime.fromisoformat(value.strip())
    return value


UTCDateTime = Annotated[datetime, BeforeValidator(_parse_iso), AfterValidator(as_utc)]

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL")
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def reject_null(value):
    if value is None:
        raise ValueError("Field may be omitted but not null")
    return value


OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
