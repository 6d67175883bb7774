"""Company schemas."""

from backend.app.schemas.common import CamelModel, NonEmptyStr


class CompanyCreate(CamelModel):
    name: NonEmptyStr
    is_target: bool = False


class CompanyRead(CompanyCreate):
    id: int
