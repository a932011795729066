"""
Payment models.

This module contains:
- WebhookLog: Logs verified payment-provider webhook deliveries for audit
"""
from django.db import models
from apps.core.models import BaseModel


class WebhookLog(BaseModel):
    """
    Logs every verified Razorpay webhook delivery.

    Used for debugging, audit trail, and detecting processing failures.
    Each webhook event is logged with its full payload and processing status.
    """
    # Event details
    event_type = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Event type (e.g., 'payment.captured')"
    )
    event_id = models.CharField(
        max_length=255,
        unique=True,
        null=True,
        blank=True,
        help_text="X-Razorpay-Event-Id header, when sent"
    )

    # Event payload
    payload = models.JSONField(
        help_text="Full webhook payload (for debugging)"
    )

    # Processing status
    processed = models.BooleanField(
        default=False,
        db_index=True,
        help_text="Whether webhook was successfully processed"
    )
    error_message = models.TextField(
        blank=True,
        help_text="Error message if processing failed"
    )
    processing_time = models.FloatField(
        null=True,
        blank=True,
        help_text="Processing time in seconds"
    )

    class Meta:
        db_table = 'webhook_logs'
        verbose_name = 'Webhook Log'
        verbose_name_plural = 'Webhook Logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['created_at'], name='webhook_log_created_idx'),
        ]

    def __str__(self):
        status = "ok" if self.processed else "failed"
        return f"{status} - {self.event_type} - {self.created_at}"
