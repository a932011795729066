"""
Gallery models
"""
from django.conf import settings
from django.db import models

from apps.core.models import BaseModel


class GalleryImage(BaseModel):
    """
    Image shown in the venue gallery.
    The file itself lives in the media bucket under ``public_id``.
    """
    url = models.URLField(max_length=500)
    title = models.CharField(max_length=255, blank=True, default='')
    public_id = models.CharField(
        max_length=255,
        help_text='Blob name in the media bucket, used for deletion'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='gallery_images'
    )

    class Meta:
        db_table = 'gallery_images'
        verbose_name = 'Gallery Image'
        verbose_name_plural = 'Gallery Images'
        ordering = ['-created_at']

    def __str__(self):
        return self.title or self.public_id
