"""Meeting note model for contacts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base


class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    contact_id = Column(Integer, ForeignKey("contacts.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    meeting_date = Column(DateTime(timezone=True), nullable=False)
    document_url = Column(String, nullable=True)
    title = Column(String, nullable=True)
    summary = Column(String, nullable=True)

    contact = relationship("Contact", back_populates="meeting_notes")
