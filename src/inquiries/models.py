from django.db import models
from django.conf import settings
from src.properties.models import Property
from src.rooms.models import Room
from src.shared.enums import InquiryStatus, InquiryType

PROGRESS_STATUSES = frozenset({
    InquiryStatus.CONTACTED,
    InquiryStatus.DOCUMENTS,
    InquiryStatus.REVIEWING,
    InquiryStatus.APPROVED,
    InquiryStatus.PAYMENT,
    InquiryStatus.CONFIRMED,
})


class Inquiry(models.Model):
    name = models.CharField(max_length=150)
    email = models.EmailField()
    phone = models.CharField(max_length=50, blank=True, null=True)
    message = models.TextField()
    type = models.CharField(max_length=20, choices=InquiryType.choices, default=InquiryType.CONTACT)
    property = models.ForeignKey(
        Property, on_delete=models.SET_NULL, null=True, blank=True, related_name='inquiries'
    )
    room = models.ForeignKey(Room, on_delete=models.SET_NULL, null=True, blank=True, related_name='inquiries')
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='inquiries',
    )
    university = models.CharField(max_length=120, blank=True, null=True)
    country = models.CharField(max_length=80, blank=True, null=True)
    semester = models.CharField(max_length=40, blank=True, null=True)
    move_in_date = models.DateField(blank=True, null=True)
    move_out_date = models.DateField(blank=True, null=True)
    status = models.CharField(max_length=16, choices=InquiryStatus.choices, default=InquiryStatus.NEW)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    responded_at = models.DateTimeField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'inquiries'
        verbose_name_plural = 'inquiries'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='inquiries_status_idx'),
            models.Index(fields=['type'], name='inquiries_type_idx'),
            models.Index(fields=['email'], name='inquiries_email_idx'),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}> [{self.type}/{self.status}]"
