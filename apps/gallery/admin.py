from django.contrib import admin
from .models import GalleryImage


@admin.register(GalleryImage)
class GalleryImageAdmin(admin.ModelAdmin):
    list_display = ['title', 'public_id', 'created_by', 'created_at']
    search_fields = ['title', 'public_id']
    readonly_fields = ['url', 'public_id', 'created_at']
