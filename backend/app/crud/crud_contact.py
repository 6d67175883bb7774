"""CRUD operations for contacts, including duplicate search and merge."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from backend.app.models.contact import Contact
from backend.app.models.note import Note
from backend.app.models.reminder import Reminder
from backend.app.schemas.contact import ContactCreate, ContactUpdate

logger = logging.getLogger(__name__)


class ContactNotFoundError(Exception):
    def __init__(self, contact_ids: List[int]):
        super().__init__(f"Contact not found: {', '.join(str(i) for i in contact_ids)}")
        self.contact_ids = contact_ids


class CRUDContact:
    def create(self, db: Session, *, obj_in: ContactCreate) -> Contact:
        obj = Contact(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, contact_id: int) -> Optional[Contact]:
        return db.query(Contact).filter(Contact.id == contact_id).first()

    def get_multi(self, db: Session) -> List[Contact]:
        return db.query(Contact).order_by(Contact.id.asc()).all()

    def search_by_name(self, db: Session, *, name: str) -> List[Contact]:
        # Loose case-insensitive substring match, results are for human review
        term = name.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{term}%"
        return (
            db.query(Contact)
            .filter(Contact.name.ilike(pattern, escape="\\"))
            .order_by(Contact.id.asc())
            .all()
        )

    def update(self, db: Session, *, db_obj: Contact, obj_in: ContactUpdate) -> Contact:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, db_obj: Contact) -> Contact:
        # Notes and reminders go with the contact through the relationship cascade
        db.delete(db_obj)
        db.commit()
        return db_obj

    def merge(self, db: Session, *, primary_id: int, duplicate_ids: List[int]) -> Contact:
        """Move notes and reminders of the duplicates onto the primary, then delete them.

        Runs as one transaction: any failure rolls back every reassignment and deletion.
        """
        duplicate_ids = sorted(set(duplicate_ids))
        if primary_id in duplicate_ids:
            raise ValueError("Primary contact cannot be listed as a duplicate")

        primary = self.get(db, contact_id=primary_id)
        if primary is None:
            raise ContactNotFoundError([primary_id])
        found = {cid for (cid,) in db.query(Contact.id).filter(Contact.id.in_(duplicate_ids)).all()}
        missing = [cid for cid in duplicate_ids if cid not in found]
        if missing:
            raise ContactNotFoundError(missing)

        try:
            db.query(Note).filter(Note.contact_id.in_(duplicate_ids)).update(
                {Note.contact_id: primary_id}, synchronize_session=False
            )
            db.query(Reminder).filter(Reminder.contact_id.in_(duplicate_ids)).update(
                {Reminder.contact_id: primary_id}, synchronize_session=False
            )
            db.query(Contact).filter(Contact.id.in_(duplicate_ids)).delete(synchronize_session=False)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.expire_all()
        logger.info("Merged contacts %s into %s", duplicate_ids, primary_id)
        return self.get(db, contact_id=primary_id)


contact_crud = CRUDContact()
