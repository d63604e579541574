from django.utils.text import slugify
from django.utils.translation import gettext as _
from rest_framework import serializers

from src.rooms.serializers import RoomSerializer
from src.shared.enums import BathroomType
from src.shared.i18n import localized
from .models import Property

PROPERTY_FIELDS = (
    'id',
    'owner_id',
    'name_es',
    'name_en',
    'name',
    'slug',
    'location_es',
    'location_en',
    'address',
    'latitude',
    'longitude',
    'zone',
    'university',
    'description_es',
    'description_en',
    'images',
    'bathroom_types',
    'common_areas',
    'available',
    'available_from',
    'google_place_id',
    'room_types',
    'total_rooms',
    'rooms',
    'created_at',
    'updated_at',
)


class PropertySerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(read_only=True)
    name = serializers.SerializerMethodField()
    rooms = RoomSerializer(many=True, read_only=True)
    room_types = serializers.ListField(child=serializers.CharField(), read_only=True)
    total_rooms = serializers.SerializerMethodField()

    class Meta:
        model = Property
        fields = PROPERTY_FIELDS
        read_only_fields = fields

    def get_name(self, obj):
        return localized(obj, 'name')

    def get_total_rooms(self, obj):
        return len(obj.rooms.all())


def unique_slug(base: str, exclude_pk=None) -> str:
    base = slugify(base)[:110] or 'property'
    candidate = base
    idx = 1
    qs = Property.objects.all()
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    while qs.filter(slug=candidate).exists():
        idx += 1
        candidate = f"{base}-{idx}"
    return candidate


class PropertyWriteSerializer(serializers.ModelSerializer):
    slug = serializers.SlugField(max_length=120, required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.CharField(), required=False)
    bathroom_types = serializers.ListField(
        child=serializers.ChoiceField(choices=BathroomType.choices), required=False
    )
    common_areas = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Property
        fields = (
            'name_es',
            'name_en',
            'slug',
            'location_es',
            'location_en',
            'address',
            'latitude',
            'longitude',
            'zone',
            'university',
            'description_es',
            'description_en',
            'images',
            'bathroom_types',
            'common_areas',
            'available',
            'available_from',
            'google_place_id',
        )

    def validate_slug(self, value):
        if not value:
            return value
        qs = Property.objects.filter(slug=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError(_("A property with this slug already exists."))
        return value

    def validate(self, attrs):
        if not attrs.get('slug') and (self.instance is None or 'slug' in attrs):
            name = attrs.get('name_es') or getattr(self.instance, 'name_es', '')
            attrs['slug'] = unique_slug(name, exclude_pk=getattr(self.instance, 'pk', None))
        if attrs.get('google_place_id') == '':
            attrs['google_place_id'] = None
        return attrs
