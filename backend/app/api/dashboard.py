"""Dashboard overview endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.models.contact import Contact
from backend.app.models.reminder import Reminder
from backend.app.schemas.dashboard import DashboardOverview
from backend.app.schemas.reminder import ReminderRead

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

UPCOMING_LIMIT = 5


@router.get("", response_model=DashboardOverview)
async def get_dashboard_overview(db: Session = Depends(get_db)):
    open_query = db.query(Reminder).filter(Reminder.completed.is_(False))
    upcoming = open_query.order_by(Reminder.due_date.asc(), Reminder.id.asc()).limit(UPCOMING_LIMIT).all()
    return DashboardOverview(
        total_contacts=db.query(Contact).count(),
        open_reminders=open_query.count(),
        upcoming_reminders=[ReminderRead.model_validate(r) for r in upcoming],
    )
