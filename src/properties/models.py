from django.db import models
from django.conf import settings
from src.shared.enums import Zone, University
from src.shared.i18n import localized


class Property(models.Model):
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='properties'
    )
    name_es = models.CharField(max_length=200)
    name_en = models.CharField(max_length=200, blank=True, default='')
    slug = models.SlugField(max_length=120, unique=True)
    location_es = models.CharField(max_length=200, blank=True, default='')
    location_en = models.CharField(max_length=200, blank=True, default='')
    address = models.CharField(max_length=255, blank=True, default='')
    latitude = models.DecimalField(max_digits=9, decimal_places=6, blank=True, null=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, blank=True, null=True)
    zone = models.CharField(max_length=20, choices=Zone.choices)
    university = models.CharField(max_length=20, choices=University.choices, blank=True, default='')
    description_es = models.TextField(blank=True, default='')
    description_en = models.TextField(blank=True, default='')
    images = models.JSONField(default=list, blank=True)
    bathroom_types = models.JSONField(default=list, blank=True)
    common_areas = models.JSONField(default=list, blank=True)
    available = models.BooleanField(default=True)
    available_from = models.DateField(blank=True, null=True)
    google_place_id = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'properties'
        verbose_name_plural = 'properties'
        indexes = [
            models.Index(fields=['zone'], name='properties_zone_idx'),
            models.Index(fields=['university'], name='properties_university_idx'),
            models.Index(fields=['available'], name='properties_available_idx'),
            models.Index(fields=['created_at'], name='properties_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name_es} - {self.get_zone_display()}"

    @property
    def name(self):
        return localized(self, 'name')

    @property
    def room_types(self):
        return sorted({room.type for room in self.rooms.all()})
