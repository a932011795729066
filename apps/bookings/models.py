"""
Booking model
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import BaseModel
from apps.core.utils.constants import (
    BOOKING_STATUSES,
    BOOKING_STATUS_PENDING,
    PAYMENT_STATUSES,
    PAYMENT_STATUS_UNPAID,
)


class Booking(BaseModel):
    """
    A request to hire the venue for one calendar day.

    ``date`` holds the canonical day and is unique: the venue takes at most
    one booking per day.
    """
    # Contact details
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=255)
    phone = models.CharField(max_length=50)

    # Event details
    package = models.CharField(max_length=255)
    guests = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    date = models.DateField()
    time = models.CharField(max_length=50)
    special_requests = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=BOOKING_STATUSES,
        default=BOOKING_STATUS_PENDING,
        db_index=True
    )

    # Payment tracking
    is_paid = models.BooleanField(default=False)
    payment_status = models.CharField(
        max_length=20,
        choices=PAYMENT_STATUSES,
        default=PAYMENT_STATUS_UNPAID
    )
    payment_id = models.CharField(max_length=255, blank=True, help_text="Provider payment ID")
    order_id = models.CharField(max_length=255, blank=True, help_text="Provider payment link ID")
    amount = models.PositiveIntegerField(default=0, help_text="Amount in the smallest currency unit")

    # Transition timestamps
    approved_at = models.DateTimeField(null=True, blank=True)
    rejected_at = models.DateTimeField(null=True, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'bookings'
        verbose_name = 'Booking'
        verbose_name_plural = 'Bookings'
        ordering = ['date']
        constraints = [
            models.UniqueConstraint(fields=['date'], name='unique_booking_date'),
            models.UniqueConstraint(fields=['email', 'date', 'time'], name='unique_booking_email_date_time'),
        ]
        indexes = [
            models.Index(fields=['is_paid'], name='bookings_is_paid_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.date} ({self.status})"
