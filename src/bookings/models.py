from django.db import models
from django.conf import settings
from src.rooms.models import Room
from src.shared.enums import BookingStatus

class Booking(models.Model):
    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name='bookings')
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='bookings',
    )
    guest_name = models.CharField(max_length=150)
    guest_email = models.EmailField()
    guest_phone = models.CharField(max_length=50, blank=True, null=True)
    check_in = models.DateField()
    check_out = models.DateField()
    status = models.CharField(max_length=16, choices=BookingStatus.choices, default=BookingStatus.UPCOMING)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bookings'
        ordering = ['check_in']
        indexes = [
            models.Index(fields=['status'], name='bookings_status_idx'),
            models.Index(fields=['room', 'check_in', 'check_out'], name='bookings_room_dates_idx'),
        ]

    def __str__(self):
        return f"#{self.room.room_number} {self.guest_name} ({self.check_in}→{self.check_out}) [{self.status}]"

    @property
    def is_blocking(self) -> bool:
        from .availability import BLOCKING_STATUSES
        return self.status in BLOCKING_STATUSES
