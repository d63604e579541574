from django.utils.translation import gettext as _
from rest_framework import serializers

from src.accounts.models import get_profile
from src.accounts.serializers import StudentSummarySerializer
from src.properties.models import Property
from src.rooms.models import Room
from src.shared.enums import InquiryStatus, InquiryType
from .models import Inquiry


class InquiryPropertySerializer(serializers.ModelSerializer):
    class Meta:
        model = Property
        fields = ('id', 'name_es', 'name_en', 'slug')
        read_only_fields = fields


class InquiryRoomSerializer(serializers.ModelSerializer):
    property_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Room
        fields = ('id', 'room_number', 'property_id')
        read_only_fields = fields


class InquirySerializer(serializers.ModelSerializer):
    property = InquiryPropertySerializer(read_only=True)
    room = InquiryRoomSerializer(read_only=True)
    student = serializers.SerializerMethodField()

    class Meta:
        model = Inquiry
        fields = (
            'id',
            'name',
            'email',
            'phone',
            'message',
            'type',
            'property',
            'room',
            'student',
            'university',
            'country',
            'semester',
            'move_in_date',
            'move_out_date',
            'status',
            'notes',
            'created_at',
            'responded_at',
            'updated_at',
        )
        read_only_fields = fields

    def get_student(self, obj):
        profile = get_profile(obj.student) if obj.student_id else None
        return StudentSummarySerializer(profile).data if profile else None


class InquiryCreateSerializer(serializers.ModelSerializer):
    property = serializers.PrimaryKeyRelatedField(queryset=Property.objects.all(), required=False, allow_null=True)
    property_slug = serializers.SlugField(write_only=True, required=False, allow_blank=True)
    room = serializers.PrimaryKeyRelatedField(queryset=Room.objects.all(), required=False, allow_null=True)
    type = serializers.ChoiceField(choices=InquiryType.choices, default=InquiryType.CONTACT)

    class Meta:
        model = Inquiry
        fields = (
            'name',
            'email',
            'phone',
            'message',
            'type',
            'property',
            'property_slug',
            'room',
            'university',
            'country',
            'semester',
            'move_in_date',
            'move_out_date',
        )
        extra_kwargs = {
            'phone': {'required': False, 'allow_blank': True, 'allow_null': True},
            'university': {'required': False, 'allow_blank': True, 'allow_null': True},
            'country': {'required': False, 'allow_blank': True, 'allow_null': True},
            'semester': {'required': False, 'allow_blank': True, 'allow_null': True},
        }

    def validate(self, attrs):
        slug = attrs.pop('property_slug', '')
        if slug and not attrs.get('property'):
            attrs['property'] = Property.objects.filter(slug=slug).first()
        room = attrs.get('room')
        if room is not None:
            prop = attrs.get('property')
            if prop is None:
                attrs['property'] = room.property
            elif room.property_id != prop.pk:
                raise serializers.ValidationError({'room': [_("The room does not belong to this property.")]})
        move_in, move_out = attrs.get('move_in_date'), attrs.get('move_out_date')
        if move_in and move_out and move_out < move_in:
            raise serializers.ValidationError({'move_out_date': [_("Must not be before the move-in date.")]})
        for field in ('phone', 'university', 'country', 'semester'):
            if attrs.get(field) == '':
                attrs[field] = None
        return attrs


class InquiryUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=InquiryStatus.choices, required=False)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
