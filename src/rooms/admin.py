from django.contrib import admin

from src.bookings.models import Booking
from .models import Room


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    fields = ('guest_name', 'guest_email', 'check_in', 'check_out', 'status')
    readonly_fields = fields
    can_delete = False
    show_change_link = True

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ('id', 'room_number', 'property', 'type', 'bathroom_type', 'semester', 'available')
    list_filter = ('type', 'bathroom_type', 'available', 'semester', 'property__zone')
    search_fields = ('room_number', 'property__name_es', 'property__name_en', 'property__slug')
    readonly_fields = ('available', 'created_at', 'updated_at')
    list_select_related = ('property',)
    inlines = [BookingInline]
