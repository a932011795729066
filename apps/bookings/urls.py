"""
Booking URL Configuration
"""
from django.urls import path
from rest_framework.routers import SimpleRouter

from . import views

router = SimpleRouter(trailing_slash=False)
router.register(r'admin/bookings', views.AdminBookingViewSet, basename='admin-booking')

urlpatterns = [
    path('bookings', views.PublicBookingView.as_view(), name='booking-list'),
] + router.urls
