from django.contrib import admin

from src.rooms.models import Room
from .models import Property


class RoomInline(admin.TabularInline):
    model = Room
    extra = 0
    fields = ('room_number', 'type', 'bathroom_type', 'semester', 'available')
    readonly_fields = ('available',)
    show_change_link = True


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ('id', 'name_es', 'slug', 'zone', 'university', 'owner', 'available', 'created_at')
    list_filter = ('zone', 'university', 'available')
    search_fields = ('name_es', 'name_en', 'slug', 'address', 'owner__email')
    prepopulated_fields = {'slug': ('name_es',)}
    list_select_related = ('owner',)
    date_hierarchy = 'created_at'
    inlines = [RoomInline]
