import logging

from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework import filters as drf_filters
from rest_framework.decorators import action
from rest_framework.response import Response

from src.accounts.permissions import CanMutateOwnedResource, IsOwnerRoleOrReadOnly
from src.shared.payloads import normalize_payload
from .filters import PropertyFilter
from .models import Property
from .serializers import PropertySerializer, PropertyWriteSerializer

logger = logging.getLogger(__name__)


class PropertyViewSet(viewsets.ModelViewSet):
    queryset = Property.objects.prefetch_related("rooms").order_by("-created_at", "-id")
    serializer_class = PropertySerializer
    permission_classes = [IsOwnerRoleOrReadOnly, CanMutateOwnedResource]
    filter_backends = (DjangoFilterBackend, drf_filters.SearchFilter, drf_filters.OrderingFilter)
    filterset_class = PropertyFilter
    search_fields = ["name_es", "name_en", "location_es", "location_en", "address"]
    ordering_fields = ["created_at", "name_es", "id"]

    def create(self, request, *args, **kwargs):
        serializer = PropertyWriteSerializer(data=normalize_payload(request.data))
        serializer.is_valid(raise_exception=True)
        prop = serializer.save(owner=request.user)
        logger.info("Property %s (%s) created by %s", prop.pk, prop.slug, request.user.id)
        return Response(PropertySerializer(prop).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        prop = self.get_object()
        serializer = PropertyWriteSerializer(prop, data=normalize_payload(request.data), partial=True)
        serializer.is_valid(raise_exception=True)
        prop = serializer.save()
        return Response(PropertySerializer(prop).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        prop = self.get_object()
        logger.info("Property %s deleted by %s", prop.pk, request.user.id)
        prop.delete()
        return Response({"success": True})

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-\w]+)")
    def by_slug(self, request, slug=None):
        prop = get_object_or_404(self.get_queryset(), slug=slug)
        return Response(PropertySerializer(prop).data)
