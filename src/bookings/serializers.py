from rest_framework import serializers

from src.shared.enums import BookingStatus
from .models import Booking


class BookingPropertySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name_es = serializers.CharField()
    name_en = serializers.CharField()
    slug = serializers.CharField()


class BookingRoomSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    room_number = serializers.CharField()
    type = serializers.CharField()
    bathroom_type = serializers.CharField()
    property = BookingPropertySerializer()


class BookingReadSerializer(serializers.ModelSerializer):
    room = BookingRoomSerializer(read_only=True)
    room_id = serializers.IntegerField(read_only=True)
    student_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Booking
        fields = (
            "id",
            "room_id",
            "room",
            "student_id",
            "guest_name",
            "guest_email",
            "guest_phone",
            "check_in",
            "check_out",
            "status",
            "notes",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class BookingSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Booking
        fields = ("id", "guest_name", "check_in", "check_out", "status")
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """Input for a new booking. Overlap and ownership are checked by the service."""

    room = serializers.IntegerField()
    guest_name = serializers.CharField(max_length=150)
    guest_email = serializers.EmailField()
    guest_phone = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    status = serializers.ChoiceField(choices=BookingStatus.choices, required=False)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class BookingUpdateSerializer(serializers.Serializer):
    guest_name = serializers.CharField(max_length=150, required=False)
    guest_email = serializers.EmailField(required=False)
    guest_phone = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    check_in = serializers.DateField(required=False)
    check_out = serializers.DateField(required=False)
    status = serializers.ChoiceField(choices=BookingStatus.choices, required=False)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
