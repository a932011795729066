from django.contrib import admin
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['name', 'date', 'time', 'package', 'status', 'is_paid', 'payment_status']
    search_fields = ['name', 'email', 'phone']
    list_filter = ['status', 'is_paid', 'payment_status', 'date']
    readonly_fields = ['approved_at', 'rejected_at', 'paid_at', 'created_at', 'updated_at']
