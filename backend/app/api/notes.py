"""Meeting note endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.models.contact import Contact
from backend.app.models.note import Note
from backend.app.schemas.note import NoteCreate, NoteRead, NoteUpdate, RegenerationReport
from backend.app.services.note_regeneration import regenerate_note_summaries

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.post("", response_model=NoteRead, status_code=201)
async def create_note(note_in: NoteCreate, db: Session = Depends(get_db)):
    if not db.query(Contact).filter(Contact.id == note_in.contact_id).first():
        raise HTTPException(status_code=400, detail=f"Contact {note_in.contact_id} does not exist")
    note = Note(**note_in.model_dump())
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


@router.post("/regenerate-summaries", response_model=RegenerationReport)
def regenerate_summaries(db: Session = Depends(get_db)):
    return regenerate_note_summaries(db)


@router.patch("/{note_id}", response_model=NoteRead)
async def update_note(note_id: int, note_in: NoteUpdate, db: Session = Depends(get_db)):
    note = db.query(Note).filter(Note.id == note_id).first()
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")
    for field, value in note_in.model_dump(exclude_unset=True).items():
        setattr(note, field, value)
    db.commit()
    db.refresh(note)
    return note
