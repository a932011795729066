"""
Package model
"""
from django.conf import settings
from django.db import models

from apps.core.models import BaseModel
from apps.core.utils.constants import PRICING_TYPES


def default_menu():
    return {'welcomeSweets': [], 'starters': [], 'mainCourse': []}


class Package(BaseModel):
    """
    Service package offered by the venue
    """
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100)
    description = models.TextField(blank=True)

    # Pricing
    pricing_type = models.CharField(max_length=20, choices=PRICING_TYPES)
    fixed_price = models.PositiveIntegerField(null=True, blank=True)
    per_person_pricing = models.JSONField(
        default=list,
        blank=True,
        help_text='Price tiers: [{"peopleCount": 150, "price": 180000}, ...]'
    )

    # Contents
    included = models.JSONField(default=list, blank=True)
    excluded = models.JSONField(default=list, blank=True)
    menu = models.JSONField(
        default=default_menu,
        blank=True,
        help_text='Menu sections: welcomeSweets, starters, mainCourse'
    )
    terms = models.JSONField(default=list, blank=True)

    # Media
    images = models.JSONField(default=list, blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='packages'
    )

    class Meta:
        db_table = 'packages'
        verbose_name = 'Package'
        verbose_name_plural = 'Packages'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['category'], name='packages_category_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.category})"
