from django.utils.translation import gettext as _
from rest_framework import serializers

from src.bookings.availability import BLOCKING_STATUSES
from src.bookings.serializers import BookingSummarySerializer
from src.properties.models import Property
from src.shared.i18n import localized
from .models import Room

ROOM_FIELDS = (
    "id",
    "property_id",
    "room_number",
    "type",
    "bathroom_type",
    "description_es",
    "description_en",
    "description",
    "images",
    "amenities",
    "available",
    "semester",
    "available_from",
    "available_to",
    "has_private_kitchen",
    "is_entire_place",
    "created_at",
    "updated_at",
)


class RoomPropertySerializer(serializers.ModelSerializer):
    class Meta:
        model = Property
        fields = ("id", "name_es", "name_en", "slug")
        read_only_fields = fields


class RoomSerializer(serializers.ModelSerializer):
    property_id = serializers.IntegerField(read_only=True)
    description = serializers.SerializerMethodField()

    class Meta:
        model = Room
        fields = ROOM_FIELDS
        read_only_fields = fields

    def get_description(self, obj):
        return localized(obj, "description")


class RoomListSerializer(RoomSerializer):
    property = RoomPropertySerializer(read_only=True)

    class Meta(RoomSerializer.Meta):
        fields = ROOM_FIELDS + ("property",)
        read_only_fields = fields


class RoomDetailSerializer(RoomListSerializer):
    """Adds the room's blocking bookings when ``include_bookings`` is set in the context."""

    bookings = serializers.SerializerMethodField()

    class Meta(RoomListSerializer.Meta):
        fields = RoomListSerializer.Meta.fields + ("bookings",)
        read_only_fields = fields

    def get_bookings(self, obj):
        if not self.context.get("include_bookings"):
            return []
        qs = obj.bookings.filter(status__in=BLOCKING_STATUSES).order_by("check_in")
        return BookingSummarySerializer(qs, many=True).data


class RoomWriteSerializer(serializers.ModelSerializer):
    """``available`` is derived from bookings and is not writable."""

    property = serializers.PrimaryKeyRelatedField(queryset=Property.objects.all())

    class Meta:
        model = Room
        fields = (
            "property",
            "room_number",
            "type",
            "bathroom_type",
            "description_es",
            "description_en",
            "images",
            "amenities",
            "semester",
            "available_from",
            "available_to",
            "has_private_kitchen",
            "is_entire_place",
        )
        validators = []

    def validate(self, attrs):
        prop = attrs.get("property", getattr(self.instance, "property", None))
        number = attrs.get("room_number", getattr(self.instance, "room_number", None))
        if prop is not None and number:
            qs = Room.objects.filter(property=prop, room_number=number)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError(
                    {"room_number": [_("A room with this number already exists in this property.")]}
                )
        start = attrs.get("available_from", getattr(self.instance, "available_from", None))
        end = attrs.get("available_to", getattr(self.instance, "available_to", None))
        if start and end and end < start:
            raise serializers.ValidationError({"available_to": [_("Must not be before available_from.")]})
        return attrs
