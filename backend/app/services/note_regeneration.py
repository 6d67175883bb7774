"""Maintenance job regenerating titles and summaries for every stored note."""

import logging
import time

from sqlalchemy.orm import Session

from backend.app.core.settings import get_settings
from backend.app.models.note import Note
from backend.app.services import ai_summaries

logger = logging.getLogger(__name__)


def _regenerate(note: Note) -> None:
    note.summary = ai_summaries.request_summary(note.content)
    note.title = ai_summaries.request_title(note.content)


def regenerate_note_summaries(db: Session, sleep=time.sleep) -> dict:
    """Re-run title and summary generation note by note.

    Calls are sequential. A rate-limit response pauses for the configured number of
    seconds and retries that note once; any other failure skips the note.
    """
    pause = get_settings().rate_limit_pause_seconds
    updated = 0
    failed = 0

    notes = db.query(Note).order_by(Note.id.asc()).all()
    for note in notes:
        try:
            try:
                _regenerate(note)
            except ai_summaries.AIRateLimitError:
                logger.warning("Rate limited on note %s, pausing %.0fs", note.id, pause)
                sleep(pause)
                _regenerate(note)
        except ai_summaries.AISummaryError as exc:
            logger.error("Could not regenerate note %s: %s", note.id, exc)
            db.rollback()
            failed += 1
            continue
        db.commit()
        updated += 1

    logger.info("Regenerated %d notes, %d failed", updated, failed)
    return {"updated": updated, "failed": failed}
