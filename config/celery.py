"""
Celery application configuration for the venue booking backend.
"""
import os
from celery import Celery
from celery.schedules import crontab

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

app = Celery('venue_booking')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django app configs.
app.autodiscover_tasks()

# Celery Beat Schedule for periodic tasks
app.conf.beat_schedule = {
    # Purge bookings whose event date has passed.
    # The admin booking list also purges on every fetch; this covers quiet periods.
    'purge-past-bookings-daily': {
        'task': 'bookings.purge_past_bookings',
        'schedule': crontab(hour=0, minute=5),
    },
}
