"""
Celery tasks for bookings app.
"""
import logging
from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(name='bookings.purge_past_bookings')
def purge_past_bookings():
    """
    Delete bookings whose day has passed.

    Runs daily from Celery beat so past bookings are cleared even when no
    administrator opens the booking list.

    Returns:
        Number of bookings deleted
    """
    from apps.bookings.services.retention import retention_sweeper

    deleted = retention_sweeper.sweep()
    logger.info(f"Scheduled sweep removed {deleted} past bookings")
    return deleted
