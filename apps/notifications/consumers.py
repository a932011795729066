"""
WebSocket consumer for live booking updates.
"""
import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from apps.core.utils.constants import BROADCAST_GROUP_BOOKINGS

logger = logging.getLogger(__name__)


class BookingEventsConsumer(AsyncJsonWebsocketConsumer):
    """
    Relays booking events to the browser.

    Connection URL: /ws/bookings/

    Server sends: {"event": "bookingCreated|bookingApproved|bookingRejected|paymentUpdate|pastBookingsDeleted",
                   "data": {...}}
    """
    group_name = BROADCAST_GROUP_BOOKINGS

    async def connect(self):
        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()
        logger.info(f"Booking events WebSocket connected: {self.channel_name}")

    async def disconnect(self, code):
        await self.channel_layer.group_discard(self.group_name, self.channel_name)
        logger.info(f"Booking events WebSocket disconnected: {self.channel_name} ({code})")

    async def receive_json(self, content, **kwargs):
        # Listen-only channel
        pass

    async def booking_event(self, message):
        """Handler for ``booking.event`` group messages."""
        await self.send_json({
            'event': message['event'],
            'data': message.get('data', {}),
        })
