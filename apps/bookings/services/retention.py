"""
Removal of bookings whose event day has passed.
"""
import logging
from typing import Optional

from apps.bookings.models import Booking
from apps.core.utils.constants import EVENT_PAST_BOOKINGS_DELETED
from apps.core.utils.dates import normalize_day, today_day
from apps.notifications.services.broadcast_service import BroadcastService, broadcaster

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """Deletes bookings dated strictly before today in the venue's calendar."""

    def __init__(self, broadcast_service: BroadcastService = None):
        self.broadcast_service = broadcast_service or broadcaster

    def sweep(self, today: Optional[str] = None) -> int:
        """
        Delete past bookings.

        Args:
            today: Reference day; defaults to the current local day

        Returns:
            Number of bookings deleted
        """
        cutoff = normalize_day(today) if today else today_day()
        deleted, _ = Booking.objects.filter(date__lt=cutoff).delete()

        if deleted:
            logger.info(f"{deleted} past bookings removed (before {cutoff})")
            self.broadcast_service.publish(EVENT_PAST_BOOKINGS_DELETED, {'count': deleted})

        return deleted


retention_sweeper = RetentionSweeper()
