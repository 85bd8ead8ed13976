"""Background worker that records reminders for upcoming events."""

import logging
from datetime import timedelta

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.exc import SQLAlchemyError

from volunteer_api.application.use_cases.notifications import send_upcoming_event_reminders
from volunteer_api.config import get_settings
from volunteer_api.infrastructure.database import SessionLocal, initialize_database

logger = logging.getLogger("volunteer_api.worker")


def run_reminder_sweep() -> int:
    """Open a session, record pending reminders and return how many were sent."""

    settings = get_settings()
    session = SessionLocal()
    try:
        sent = send_upcoming_event_reminders(
            session, window=timedelta(hours=settings.reminder_window_hours)
        )
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Reminder sweep failed")
        return 0
    finally:
        session.close()

    if sent:
        logger.info("Recorded %s upcoming event reminders", sent)
    return sent


def build_scheduler() -> BlockingScheduler:
    settings = get_settings()
    scheduler = BlockingScheduler(timezone="UTC")
    scheduler.add_job(
        run_reminder_sweep,
        IntervalTrigger(minutes=settings.reminder_interval_minutes),
        id="upcoming_event_reminders",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    return scheduler


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    initialize_database()
    scheduler = build_scheduler()
    logger.info("Reminder worker started")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Reminder worker stopped")


if __name__ == "__main__":
    main()
