import django_filters as filters
from .models import Property


class PropertyFilter(filters.FilterSet):
    zone = filters.CharFilter(field_name='zone', lookup_expr='iexact')
    university = filters.CharFilter(field_name='university', lookup_expr='iexact')
    available = filters.BooleanFilter()
    room_type = filters.CharFilter(field_name='rooms__type', lookup_expr='iexact', distinct=True)
    mine = filters.BooleanFilter(method='filter_mine')

    class Meta:
        model = Property
        fields = []

    def filter_mine(self, queryset, name, value):
        user = getattr(self.request, 'user', None)
        if not value or not user or not user.is_authenticated:
            return queryset
        return queryset.filter(owner=user)
