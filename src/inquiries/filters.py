import django_filters as filters
from .models import Inquiry


class InquiryFilter(filters.FilterSet):
    status = filters.CharFilter(field_name='status', lookup_expr='iexact')
    type = filters.CharFilter(field_name='type', lookup_expr='iexact')
    property = filters.NumberFilter(field_name='property_id')

    class Meta:
        model = Inquiry
        fields = []
