"""
Admin configuration for contact us app.
"""
from django.contrib import admin
from .models import Contact


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    """Admin interface for the venue contact record."""

    list_display = ['id', 'phone', 'location', 'created_at']
    search_fields = ['phone', 'location']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']
