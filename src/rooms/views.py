import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework import filters as drf_filters
from rest_framework.response import Response

from src.accounts.permissions import CanMutateOwnedResource, IsOwnerRoleOrReadOnly
from src.accounts.policies import can_mutate_property
from src.shared.exceptions import ForbiddenError
from src.shared.payloads import normalize_payload
from .filters import RoomFilter
from .models import Room
from .serializers import RoomDetailSerializer, RoomListSerializer, RoomWriteSerializer

logger = logging.getLogger(__name__)

ROOM_RENAMES = {"property_id": "property"}


class RoomViewSet(viewsets.ModelViewSet):
    queryset = Room.objects.select_related("property").all()
    serializer_class = RoomListSerializer
    permission_classes = [IsOwnerRoleOrReadOnly, CanMutateOwnedResource]
    filter_backends = (DjangoFilterBackend, drf_filters.OrderingFilter)
    filterset_class = RoomFilter
    ordering_fields = ["room_number", "created_at", "available_from", "id"]

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        ctx["include_bookings"] = bool(self.request and self.request.user.is_authenticated)
        return ctx

    def get_serializer_class(self):
        if self.action == "retrieve":
            return RoomDetailSerializer
        return RoomListSerializer

    def _check_target_property(self, serializer):
        prop = serializer.validated_data.get("property")
        if prop is not None and not can_mutate_property(prop, self.request.user.id):
            raise ForbiddenError()

    def create(self, request, *args, **kwargs):
        serializer = RoomWriteSerializer(data=normalize_payload(request.data, ROOM_RENAMES))
        serializer.is_valid(raise_exception=True)
        self._check_target_property(serializer)
        room = serializer.save()
        logger.info("Room %s created in property %s by %s", room.pk, room.property_id, request.user.id)
        return Response(RoomListSerializer(room, context=self.get_serializer_context()).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        room = self.get_object()
        serializer = RoomWriteSerializer(room, data=normalize_payload(request.data, ROOM_RENAMES), partial=True)
        serializer.is_valid(raise_exception=True)
        self._check_target_property(serializer)
        room = serializer.save()
        return Response(RoomListSerializer(room, context=self.get_serializer_context()).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        room = self.get_object()
        logger.info("Room %s deleted from property %s by %s", room.pk, room.property_id, request.user.id)
        room.delete()
        return Response({"success": True})
