from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from backend.app.models.contact import Contact  # noqa: F401
from backend.app.models.note import Note  # noqa: F401
from backend.app.models.company import Company  # noqa: F401
from backend.app.models.reminder import Reminder  # noqa: F401
from backend.app.models.user_preferences import UserPreferences  # noqa: F401
