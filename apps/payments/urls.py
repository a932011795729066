"""
Payment app URLs for webhooks.
"""
from django.urls import path
from . import webhook_views

urlpatterns = [
    path('webhook', webhook_views.razorpay_webhook, name='razorpay-webhook'),
]
