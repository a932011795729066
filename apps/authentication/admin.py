"""
Authentication admin configuration
"""
from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin configuration for User model
    """
    list_display = ['email', 'is_active', 'is_staff', 'is_superuser', 'created_at']
    list_filter = ['is_active', 'is_staff', 'created_at']
    search_fields = ['email']
    ordering = ['-created_at']

    fieldsets = (
        ('Account', {
            'fields': ('id', 'email')
        }),
        ('Status', {
            'fields': ('is_active', 'is_staff', 'is_superuser')
        }),
        ('Timestamps', {
            'fields': ('last_login', 'created_at')
        }),
    )

    readonly_fields = ['id', 'last_login', 'created_at']
