"""Contact model for the networking CRM."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    company = Column(String, nullable=False)
    role = Column(String, nullable=False)
    linkedin_url = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    last_contact_date = Column(DateTime(timezone=True), nullable=False)
    next_contact_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)

    meeting_notes = relationship("Note", back_populates="contact", cascade="all, delete-orphan")
    reminders = relationship("Reminder", back_populates="contact", cascade="all, delete-orphan")
