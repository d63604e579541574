import logging

from django.db.models import Q
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework import filters as drf_filters
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from src.accounts.permissions import CanMutateOwnedResource, IsOwnerRole, IsStudentRole
from src.accounts.policies import require_caller
from src.shared.payloads import normalize_payload
from . import services
from .filters import BookingFilter
from .models import Booking
from .serializers import BookingCreateSerializer, BookingReadSerializer, BookingUpdateSerializer

logger = logging.getLogger(__name__)

BOOKING_RENAMES = {"room_id": "room"}


class BookingViewSet(viewsets.ModelViewSet):
    """Owner dashboard bookings. Writes go through ``services`` so overlap and
    availability rules are applied in one place."""

    queryset = Booking.objects.select_related("room__property").order_by("check_in", "id")
    serializer_class = BookingReadSerializer
    permission_classes = [IsAuthenticated, IsOwnerRole, CanMutateOwnedResource]
    filter_backends = (DjangoFilterBackend, drf_filters.OrderingFilter)
    filterset_class = BookingFilter
    ordering_fields = ["check_in", "check_out", "created_at", "id"]
    guard_reads = True

    def get_permissions(self):
        if self.action == "mine":
            return [IsAuthenticated(), IsStudentRole()]
        return super().get_permissions()

    def get_queryset(self):
        qs = super().get_queryset()
        if self.action == "list":
            user = self.request.user
            qs = qs.filter(Q(room__property__owner=user) | Q(room__property__owner__isnull=True))
        return qs

    def create(self, request, *args, **kwargs):
        serializer = BookingCreateSerializer(data=normalize_payload(request.data, BOOKING_RENAMES))
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = services.create_booking(data["room"], require_caller(request), data)
        return Response(BookingReadSerializer(booking).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        booking = self.get_object()
        serializer = BookingUpdateSerializer(data=normalize_payload(request.data, BOOKING_RENAMES))
        serializer.is_valid(raise_exception=True)
        booking = services.update_booking(booking, require_caller(request), serializer.validated_data)
        return Response(BookingReadSerializer(booking).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        booking = self.get_object()
        services.delete_booking(booking, require_caller(request))
        return Response({"success": True})

    @action(detail=False, methods=["get"])
    def mine(self, request):
        user = request.user
        match = Q(student=user)
        if user.email:
            match |= Q(guest_email__iexact=user.email)
        qs = Booking.objects.filter(match).select_related("room__property").order_by("-check_in")
        return Response(BookingReadSerializer(qs, many=True).data)
