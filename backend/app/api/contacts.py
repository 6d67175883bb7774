"""Contact management endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from backend.app.crud.crud_contact import ContactNotFoundError, contact_crud
from backend.app.db.session import get_db
from backend.app.models.contact import Contact
from backend.app.models.note import Note
from backend.app.models.reminder import Reminder
from backend.app.schemas.contact import ContactCreate, ContactMergeRequest, ContactRead, ContactUpdate
from backend.app.schemas.note import NoteRead
from backend.app.schemas.reminder import ReminderRead
from backend.app.services.preferences import get_or_create_preferences
from backend.app.services.tiering import contact_tier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


def _get_contact(db: Session, contact_id: int) -> Contact:
    contact = contact_crud.get(db, contact_id=contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


def _with_tiers(db: Session, contacts: list[Contact]) -> list[ContactRead]:
    prefs = get_or_create_preferences(db)
    results = []
    for contact in contacts:
        read = ContactRead.model_validate(contact)
        read.tier = contact_tier(contact, prefs)
        results.append(read)
    return results


@router.get("", response_model=list[ContactRead])
async def list_contacts(db: Session = Depends(get_db)):
    return _with_tiers(db, contact_crud.get_multi(db))


@router.post("", response_model=ContactRead, status_code=201)
async def create_contact(contact_in: ContactCreate, db: Session = Depends(get_db)):
    contact = contact_crud.create(db, obj_in=contact_in)
    logger.info("Created contact %s", contact.id)
    return _with_tiers(db, [contact])[0]


@router.get("/search", response_model=list[ContactRead])
async def search_contacts(name: str = "", db: Session = Depends(get_db)):
    if not name.strip():
        return []
    return _with_tiers(db, contact_crud.search_by_name(db, name=name))


@router.get("/duplicates/{name}", response_model=list[ContactRead])
async def find_duplicates(name: str, db: Session = Depends(get_db)):
    return _with_tiers(db, contact_crud.search_by_name(db, name=name))


@router.post("/merge", response_model=ContactRead)
async def merge_contacts(merge_in: ContactMergeRequest, db: Session = Depends(get_db)):
    try:
        primary = contact_crud.merge(db, primary_id=merge_in.primary_id, duplicate_ids=merge_in.duplicate_ids)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except ContactNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return _with_tiers(db, [primary])[0]


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(contact_id: int, db: Session = Depends(get_db)):
    return _with_tiers(db, [_get_contact(db, contact_id)])[0]


@router.patch("/{contact_id}", response_model=ContactRead)
async def update_contact(contact_id: int, contact_in: ContactUpdate, db: Session = Depends(get_db)):
    contact = _get_contact(db, contact_id)
    contact = contact_crud.update(db, db_obj=contact, obj_in=contact_in)
    return _with_tiers(db, [contact])[0]


@router.delete("/{contact_id}", status_code=204)
async def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    contact = _get_contact(db, contact_id)
    contact_crud.delete(db, db_obj=contact)
    logger.info("Deleted contact %s with its notes and reminders", contact_id)
    return Response(status_code=204)


@router.get("/{contact_id}/notes", response_model=list[NoteRead])
async def list_contact_notes(contact_id: int, db: Session = Depends(get_db)):
    _get_contact(db, contact_id)
    return (
        db.query(Note)
        .filter(Note.contact_id == contact_id)
        .order_by(Note.meeting_date.desc(), Note.id.desc())
        .all()
    )


@router.get("/{contact_id}/reminders", response_model=list[ReminderRead])
async def list_contact_reminders(contact_id: int, db: Session = Depends(get_db)):
    _get_contact(db, contact_id)
    return (
        db.query(Reminder)
        .filter(Reminder.contact_id == contact_id)
        .order_by(Reminder.due_date.asc(), Reminder.id.asc())
        .all()
    )
