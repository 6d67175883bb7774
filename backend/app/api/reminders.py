"""Reminder endpoints for follow-up tasks on contacts."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from backend.app.core.time import utc_now
from backend.app.db.session import get_db
from backend.app.models.contact import Contact
from backend.app.models.reminder import Reminder
from backend.app.schemas.reminder import ReminderCreate, ReminderRead, ReminderUpdate

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


def _ensure_contact(db: Session, contact_id: int) -> None:
    if not db.query(Contact).filter(Contact.id == contact_id).first():
        raise HTTPException(status_code=400, detail=f"Contact {contact_id} does not exist")


def _get_reminder(db: Session, reminder_id: int) -> Reminder:
    reminder = db.query(Reminder).filter(Reminder.id == reminder_id).first()
    if not reminder:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return reminder


def _set_completed(reminder: Reminder, completed: bool) -> None:
    if completed == reminder.completed:
        return
    reminder.completed = completed
    reminder.completed_at = utc_now() if completed else None


@router.get("", response_model=list[ReminderRead])
async def list_reminders(completed: Optional[bool] = None, db: Session = Depends(get_db)):
    query = db.query(Reminder)
    if completed is not None:
        query = query.filter(Reminder.completed == completed)
    return query.order_by(Reminder.due_date.asc(), Reminder.id.asc()).all()


@router.post("", response_model=ReminderRead, status_code=201)
async def create_reminder(reminder_in: ReminderCreate, db: Session = Depends(get_db)):
    _ensure_contact(db, reminder_in.contact_id)
    reminder = Reminder(
        contact_id=reminder_in.contact_id,
        description=reminder_in.description,
        due_date=reminder_in.due_date,
        completed=False,
    )
    _set_completed(reminder, reminder_in.completed)
    db.add(reminder)
    db.commit()
    db.refresh(reminder)
    return reminder


@router.get("/{reminder_id}", response_model=ReminderRead)
async def get_reminder(reminder_id: int, db: Session = Depends(get_db)):
    return _get_reminder(db, reminder_id)


@router.patch("/{reminder_id}", response_model=ReminderRead)
async def update_reminder(reminder_id: int, reminder_in: ReminderUpdate, db: Session = Depends(get_db)):
    reminder = _get_reminder(db, reminder_id)
    update_data = reminder_in.model_dump(exclude_unset=True)
    if "contact_id" in update_data:
        _ensure_contact(db, update_data["contact_id"])
    completed = update_data.pop("completed", None)
    for field, value in update_data.items():
        setattr(reminder, field, value)
    if completed is not None:
        _set_completed(reminder, completed)
    db.commit()
    db.refresh(reminder)
    return reminder


@router.delete("/{reminder_id}", status_code=204)
async def delete_reminder(reminder_id: int, db: Session = Depends(get_db)):
    reminder = _get_reminder(db, reminder_id)
    db.delete(reminder)
    db.commit()
    return Response(status_code=204)
