"""
Payment app admin interface.
"""
from django.contrib import admin
from .models import WebhookLog


@admin.register(WebhookLog)
class WebhookLogAdmin(admin.ModelAdmin):
    """Admin interface for webhook logs (read-only)."""
    list_display = ['event_type', 'event_id', 'processed', 'processing_time', 'created_at']
    list_filter = ['processed', 'event_type', 'created_at']
    search_fields = ['event_id', 'event_type', 'error_message']
    readonly_fields = [
        'event_type', 'event_id', 'payload', 'processed',
        'error_message', 'processing_time', 'created_at', 'updated_at'
    ]
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False
