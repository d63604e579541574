from django import forms
from django.contrib import admin, messages
from django.shortcuts import get_object_or_404, redirect
from django.urls import path, reverse
from django.utils.safestring import mark_safe

from src.shared.enums import BookingStatus
from src.shared.exceptions import ServiceError
from . import services
from .availability import (
    BLOCKING_STATUSES,
    TERMINAL_STATUSES,
    blocking_ranges,
    can_transition,
    check_overlap,
    recompute_room_availability,
)
from .models import Booking

EDITABLE_FIELDS = ('guest_name', 'guest_email', 'guest_phone', 'check_in', 'check_out', 'status', 'notes')


class BookingAdminForm(forms.ModelForm):
    class Meta:
        model = Booking
        fields = ('room',) + EDITABLE_FIELDS

    def clean(self):
        cleaned = super().clean()
        existing = self.instance.pk is not None
        status = cleaned.get('status') or (self.instance.status if existing else BookingStatus.UPCOMING)
        if existing and not can_transition(self.instance.status, status):
            message = f"Cannot change a booking from {self.instance.status} to {status}."
            if 'status' in self.fields:
                self.add_error('status', message)
                return cleaned
            raise forms.ValidationError(message)
        if not existing and status not in BLOCKING_STATUSES:
            self.add_error('status', "A new booking must be upcoming or active.")
            return cleaned

        room = cleaned.get('room') or (self.instance.room if existing else None)
        check_in, check_out = cleaned.get('check_in'), cleaned.get('check_out')
        if not (room and check_in and check_out):
            return cleaned
        if check_out <= check_in:
            raise forms.ValidationError("Check-out date must be after check-in date.")
        if status in BLOCKING_STATUSES:
            ranges = blocking_ranges(room.pk, exclude_booking_id=self.instance.pk)
            if check_overlap(ranges, (check_in, check_out)):
                raise forms.ValidationError("The room is already booked for these dates.")
        return cleaned


def _acting_owner(room):
    return _ActingOwner(room.property.owner_id)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    form = BookingAdminForm
    list_display = (
        'id', 'room', 'guest_name', 'guest_email', 'check_in', 'check_out', 'status', 'created_at', 'admin_actions',
    )
    list_filter = ('status', 'check_in', 'check_out', 'room__property')
    search_fields = ('guest_name', 'guest_email', 'room__room_number', 'room__property__name_es')
    actions = ('cancel_selected', 'recompute_selected_rooms')
    readonly_fields = ('student', 'created_at', 'updated_at')
    list_select_related = ('room', 'room__property')
    date_hierarchy = 'check_in'
    ordering = ('-check_in',)

    def get_readonly_fields(self, request, obj=None):
        fields = super().get_readonly_fields(request, obj)
        if obj is not None:
            # status changes go through the cancel action; moving rooms is not supported
            return ('room', 'status') + tuple(fields)
        return fields

    def save_model(self, request, obj, form, change):
        data = form.cleaned_data
        if not change:
            booking = services.create_booking(data['room'].pk, _acting_owner(data['room']), data)
            obj.pk = booking.pk
            obj.student_id = booking.student_id
            obj._state.adding = False
            return
        current = Booking.objects.select_related('room__property').get(pk=obj.pk)
        changes = {name: data[name] for name in form.changed_data if name in EDITABLE_FIELDS}
        services.update_booking(current, _acting_owner(current.room), changes)

    def delete_model(self, request, obj):
        services.delete_booking(obj, _acting_owner(obj.room))

    def delete_queryset(self, request, queryset):
        for booking in queryset.select_related('room__property'):
            services.delete_booking(booking, _acting_owner(booking.room))

    def cancel_selected(self, request, queryset):
        changed = 0
        for b in queryset.select_related('room__property'):
            if self._cancel_booking(request, b):
                changed += 1
        self.message_user(request, f'Bookings cancelled: {changed}', level=messages.SUCCESS)
    cancel_selected.short_description = 'Cancel selected bookings'

    def recompute_selected_rooms(self, request, queryset):
        room_ids = set(queryset.values_list('room_id', flat=True))
        for room_id in room_ids:
            recompute_room_availability(room_id)
        self.message_user(request, f'Rooms recomputed: {len(room_ids)}', level=messages.SUCCESS)
    recompute_selected_rooms.short_description = 'Recompute room availability'

    def _cancel_booking(self, request, booking: Booking) -> bool:
        if booking.status in TERMINAL_STATUSES:
            return False
        try:
            services.update_booking(booking, _acting_owner(booking.room), {'status': BookingStatus.CANCELLED})
        except ServiceError as e:
            self.message_user(request, f'Booking #{booking.pk}: {e.detail}', level=messages.WARNING)
            return False
        return True

    def admin_actions(self, obj):
        if obj.status in TERMINAL_STATUSES:
            return '-'
        cancel_url = reverse('admin:bookings_booking_cancel', args=[obj.pk])
        return mark_safe(f'<a class="button" style="background:#ef4444;color:#fff" href="{cancel_url}">Cancel</a>')
    admin_actions.short_description = "Actions"

    def get_urls(self):
        urls = super().get_urls()
        custom = [
            path(
                '<path:object_id>/cancel/',
                self.admin_site.admin_view(self.cancel_booking_view),
                name='bookings_booking_cancel',
            ),
        ]
        return custom + urls

    def cancel_booking_view(self, request, object_id: str):
        booking = get_object_or_404(Booking.objects.select_related('room__property'), pk=object_id)
        if self._cancel_booking(request, booking):
            self.message_user(request, f'Booking #{booking.pk} cancelled.', messages.SUCCESS)
        return redirect(reverse('admin:bookings_booking_change', args=[booking.pk]))


class _ActingOwner:
    """Staff act on behalf of the property owner for admin writes."""

    def __init__(self, user_id):
        self.id = user_id
