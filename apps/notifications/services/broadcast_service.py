"""
Live booking updates pushed to connected WebSocket listeners.
"""
import logging
from typing import Any, Dict, Optional

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

from apps.core.utils.constants import BROADCAST_GROUP_BOOKINGS

logger = logging.getLogger(__name__)


class BroadcastService:
    """
    Fire-and-forget publisher for booking events.

    Events go to a channel-layer group; every ``BookingEventsConsumer``
    subscribed to that group relays them to its browser. Delivery problems
    are logged and swallowed.
    """

    def __init__(self, group: str = BROADCAST_GROUP_BOOKINGS, channel_layer=None):
        self.group = group
        self._channel_layer = channel_layer

    @property
    def channel_layer(self):
        return self._channel_layer or get_channel_layer()

    def publish(self, event: str, data: Optional[Dict[str, Any]] = None) -> bool:
        """
        Publish an event to all listeners.

        Args:
            event: Event name, e.g. ``bookingCreated``
            data: JSON-serializable payload

        Returns:
            bool: True if the event was handed to the channel layer
        """
        try:
            layer = self.channel_layer
            if layer is None:
                logger.warning(f"No channel layer configured, dropping {event} event")
                return False

            async_to_sync(layer.group_send)(
                self.group,
                {
                    'type': 'booking.event',
                    'event': event,
                    'data': data or {},
                }
            )
            logger.debug(f"Broadcast {event} to {self.group}")
            return True

        except Exception as e:
            logger.error(f"Failed to broadcast {event}: {e}", exc_info=True)
            return False


# Singleton instance
broadcaster = BroadcastService()
