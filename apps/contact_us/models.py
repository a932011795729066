"""
Contact Us model for the venue's public contact details.
"""
from django.db import models
from apps.core.models import BaseModel


def default_social_media():
    return {'facebook': '', 'instagram': ''}


class Contact(BaseModel):
    """
    Phone, address and social links shown on the venue site.
    Normally a single record, kept as a list so admins can stage a replacement.
    """
    phone = models.CharField(
        max_length=20,
        help_text='Phone number for enquiries'
    )
    location = models.CharField(
        max_length=500,
        help_text='Venue address'
    )
    social_media = models.JSONField(
        default=default_social_media,
        blank=True,
        help_text='Profile links: {"facebook": "...", "instagram": "..."}'
    )

    class Meta:
        db_table = 'contacts'
        verbose_name = 'Contact'
        verbose_name_plural = 'Contacts'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.phone} - {self.location}"
