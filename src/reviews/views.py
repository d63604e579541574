from django.shortcuts import get_object_or_404
from django.utils.translation import gettext as _
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from src.properties.models import Property
from src.shared.exceptions import ValidationError
from src.shared.i18n import active_language
from .client import fetch_place_reviews
from .serializers import PlaceReviewsSerializer


class PropertyReviewsView(APIView):
    """Google reviews for a property. ``place_id`` (or ``placeId``) overrides
    the place stored on the property."""

    permission_classes = [AllowAny]

    def get(self, request, pk: int):
        place_id = request.query_params.get("place_id") or request.query_params.get("placeId")
        if not place_id:
            prop = get_object_or_404(Property, pk=pk)
            place_id = prop.google_place_id
        if not place_id:
            raise ValidationError(_("Place ID is required"), fields={"place_id": [_("Place ID is required")]})
        data = fetch_place_reviews(place_id, language=active_language())
        return Response(PlaceReviewsSerializer(data).data)
