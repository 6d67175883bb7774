"""Company model; contacts refer to companies by name only."""

from sqlalchemy import Boolean, Column, Integer, String

from backend.app.db.base_class import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
    is_target = Column(Boolean, nullable=False, default=False)
