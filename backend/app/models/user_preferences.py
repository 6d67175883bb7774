"""User preferences model: a single row holding the target lists."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class UserPreferences(Base):
    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, index=True)
    target_companies = Column(JSON, nullable=False, default=list)
    target_roles = Column(JSON, nullable=False, default=list)
    email_notifications = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
