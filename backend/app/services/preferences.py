"""Access to the singleton user preferences row."""

from sqlalchemy.orm import Session

from backend.app.models.user_preferences import UserPreferences


def get_or_create_preferences(db: Session) -> UserPreferences:
    prefs = db.query(UserPreferences).order_by(UserPreferences.id.asc()).first()
    if prefs:
        return prefs
    prefs = UserPreferences(target_companies=[], target_roles=[], email_notifications=True)
    db.add(prefs)
    db.commit()
    db.refresh(prefs)
    return prefs
