"""User preferences endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.schemas.user_preferences import UserPreferencesRead, UserPreferencesUpdate
from backend.app.services.preferences import get_or_create_preferences

router = APIRouter(prefix="/api/preferences", tags=["preferences"])


@router.get("", response_model=UserPreferencesRead)
async def get_preferences(db: Session = Depends(get_db)):
    return get_or_create_preferences(db)


@router.patch("", response_model=UserPreferencesRead)
async def update_preferences(update: UserPreferencesUpdate, db: Session = Depends(get_db)):
    prefs = get_or_create_preferences(db)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(prefs, field, value)
    db.commit()
    db.refresh(prefs)
    return prefs
