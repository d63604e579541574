from django.contrib import admin
from django.utils import timezone

from .models import PROGRESS_STATUSES, Inquiry


@admin.register(Inquiry)
class InquiryAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'type', 'property', 'status', 'created_at', 'responded_at')
    list_filter = ('type', 'status', 'university', 'created_at')
    search_fields = ('name', 'email', 'message', 'property__name_es')
    readonly_fields = ('created_at', 'updated_at', 'responded_at')
    list_select_related = ('property', 'room')
    date_hierarchy = 'created_at'

    def save_model(self, request, obj, form, change):
        if change and 'status' in form.changed_data and obj.status in PROGRESS_STATUSES:
            obj.responded_at = timezone.now()
        super().save_model(request, obj, form, change)
