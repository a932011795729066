"""
WebSocket URL routing for live booking updates.
"""
from django.urls import re_path

from .consumers import BookingEventsConsumer

websocket_urlpatterns = [
    re_path(r'ws/bookings/$', BookingEventsConsumer.as_asgi()),
]
