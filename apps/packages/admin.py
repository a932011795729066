from django.contrib import admin
from .models import Package


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'pricing_type', 'fixed_price', 'created_at']
    search_fields = ['name', 'category']
    list_filter = ['category', 'pricing_type']
