import django_filters as filters
from .models import Room


class RoomFilter(filters.FilterSet):
    property = filters.NumberFilter(field_name='property_id')
    propertyId = filters.NumberFilter(field_name='property_id')
    semester = filters.CharFilter(field_name='semester', lookup_expr='iexact')
    type = filters.CharFilter(field_name='type', lookup_expr='iexact')
    bathroom_type = filters.CharFilter(field_name='bathroom_type', lookup_expr='iexact')
    available = filters.BooleanFilter()

    class Meta:
        model = Room
        fields = []
