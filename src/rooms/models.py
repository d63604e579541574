from django.db import models
from src.properties.models import Property
from src.shared.enums import RoomType, BathroomType


class Room(models.Model):
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name='rooms')
    room_number = models.CharField(max_length=20)
    type = models.CharField(max_length=16, choices=RoomType.choices)
    bathroom_type = models.CharField(max_length=16, choices=BathroomType.choices)
    description_es = models.TextField(blank=True, default='')
    description_en = models.TextField(blank=True, default='')
    images = models.JSONField(default=list, blank=True)
    amenities = models.JSONField(default=list, blank=True)
    # Derived from bookings; see src.bookings.availability.recompute_room_availability.
    available = models.BooleanField(default=True)
    semester = models.CharField(max_length=40, blank=True, null=True)
    available_from = models.DateField(blank=True, null=True)
    available_to = models.DateField(blank=True, null=True)
    has_private_kitchen = models.BooleanField(default=False)
    is_entire_place = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rooms'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['property', 'room_number'], name='unique_room_number_per_property'),
        ]
        indexes = [
            models.Index(fields=['semester'], name='rooms_semester_idx'),
            models.Index(fields=['available'], name='rooms_available_idx'),
        ]

    def __str__(self):
        return f"#{self.room_number} - {self.property.name_es}"
