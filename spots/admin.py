# ==================== SPOTS/ADMIN.PY ====================
from django.contrib import admin
from .models import Spot

@admin.register(Spot)
class SpotAdmin(admin.ModelAdmin):
    list_display = ['address', 'neighborhood', 'owner', 'price_per_day', 'is_available', 'created_at']
    list_filter = ['neighborhood', 'is_available', 'created_at']
    search_fields = ['address', 'neighborhood', 'owner__username', 'owner__name']
    readonly_fields = ['created_at', 'updated_at']
    fieldsets = (
        ('Basic Info', {'fields': ('owner', 'address', 'neighborhood', 'description')}),
        ('Pricing & Availability', {'fields': ('price_per_day', 'is_available')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )
