import logging

from django.db.models import Q
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework import filters as drf_filters
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from src.accounts.models import get_profile
from src.accounts.permissions import IsOwnerRole, IsStudentRole
from src.shared.payloads import normalize_payload
from .filters import InquiryFilter
from .models import PROGRESS_STATUSES, Inquiry
from .notifications import notify_new_inquiry
from .serializers import InquiryCreateSerializer, InquirySerializer, InquiryUpdateSerializer

logger = logging.getLogger(__name__)

INQUIRY_RENAMES = {"property_id": "property", "room_id": "room"}


class InquiryViewSet(viewsets.ModelViewSet):
    """Public contact/application form plus the owner's inquiry inbox."""

    queryset = Inquiry.objects.select_related("property", "room", "student__profile").order_by("-created_at", "-id")
    serializer_class = InquirySerializer
    permission_classes = [IsAuthenticated, IsOwnerRole]
    filter_backends = (DjangoFilterBackend, drf_filters.OrderingFilter)
    filterset_class = InquiryFilter
    ordering_fields = ["created_at", "status", "id"]

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        if self.action == "mine":
            return [IsAuthenticated(), IsStudentRole()]
        return super().get_permissions()

    def get_queryset(self):
        qs = super().get_queryset()
        user = self.request.user
        if self.action == "mine" or not user.is_authenticated:
            return qs
        return qs.filter(
            Q(property__isnull=True) | Q(property__owner=user) | Q(property__owner__isnull=True)
        )

    def create(self, request, *args, **kwargs):
        serializer = InquiryCreateSerializer(data=normalize_payload(request.data, INQUIRY_RENAMES))
        serializer.is_valid(raise_exception=True)
        extra = {}
        profile = get_profile(request.user)
        if profile is not None and profile.is_student:
            extra["student"] = request.user
        inquiry = serializer.save(**extra)
        logger.info("Inquiry %s (%s) received for property %s", inquiry.pk, inquiry.type, inquiry.property_id)
        notify_new_inquiry(inquiry, request._request)
        return Response(InquirySerializer(inquiry).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        inquiry = self.get_object()
        serializer = InquiryUpdateSerializer(data=normalize_payload(request.data))
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        if "status" in data:
            inquiry.status = data["status"]
            if inquiry.status in PROGRESS_STATUSES:
                inquiry.responded_at = timezone.now()
        if "notes" in data:
            inquiry.notes = data["notes"]
        inquiry.save()
        return Response(InquirySerializer(inquiry).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        inquiry = self.get_object()
        inquiry.delete()
        return Response({"success": True})

    @action(detail=False, methods=["get"])
    def mine(self, request):
        user = request.user
        match = Q(student=user)
        if user.email:
            match |= Q(email__iexact=user.email)
        qs = self.get_queryset().filter(match)
        return Response(InquirySerializer(qs, many=True).data)
