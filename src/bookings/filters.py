import django_filters as filters
from .models import Booking


class CharInFilter(filters.BaseInFilter, filters.CharFilter):
    pass


class BookingFilter(filters.FilterSet):
    status = CharInFilter(field_name='status', lookup_expr='in')
    room = filters.NumberFilter(field_name='room_id')
    roomId = filters.NumberFilter(field_name='room_id')
    check_in_from = filters.DateFilter(field_name='check_in', lookup_expr='gte')
    check_in_to = filters.DateFilter(field_name='check_in', lookup_expr='lte')

    class Meta:
        model = Booking
        fields = []
