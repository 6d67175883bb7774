"""Dashboard schemas for the overview page."""

from backend.app.schemas.common import CamelModel
from backend.app.schemas.reminder import ReminderRead


class DashboardOverview(CamelModel):
    total_contacts: int
    open_reminders: int
    upcoming_reminders: list[ReminderRead]
