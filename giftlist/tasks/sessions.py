"""Celery tasks for session housekeeping."""

import logging

from sqlalchemy.orm import Session

from giftlist.celery_app import app as celery_app
from giftlist.database import SessionLocal
from giftlist.services.sessions import SessionTable

logger = logging.getLogger(__name__)


@celery_app.task
def sweep_expired_sessions() -> dict:
    """Delete sessions past their expiry.

    This task runs periodically via celery-beat.

    Returns:
        dict with the number of removed sessions
    """
    db: Session = SessionLocal()
    try:
        removed = SessionTable(db).sweep_expired()
        logger.info(f"Session sweep removed {removed} sessions")
        return {"removed": removed}
    finally:
        db.close()
