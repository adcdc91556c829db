# ==================== BOOKINGS/ADMIN.PY ====================
from django.contrib import admin
from .models import Booking

@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'renter', 'spot', 'status', 'start_date', 'end_date', 'total_price', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['renter__username', 'spot__address', 'spot__neighborhood']
    readonly_fields = ['created_at']
