"""Google Places Details client used to show a property's public reviews."""
import logging

import requests
from django.conf import settings
from django.utils.translation import gettext as _

from src.shared.exceptions import NotFoundError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

PLACE_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"
REVIEW_FIELDS = "reviews,rating,user_ratings_total"


def fetch_place_reviews(place_id: str, language: str | None = None) -> dict:
    """Return ``{"reviews", "rating", "total_reviews"}`` for a Google place.

    Raises ``UpstreamError`` when the key is missing or the call fails,
    ``ValidationError`` when Google answers with a non-OK status and
    ``NotFoundError`` when it answers OK without a result.
    """
    api_key = getattr(settings, "GOOGLE_PLACES_API_KEY", "")
    if not api_key:
        raise UpstreamError(_("Google Places API key not configured"))

    params = {"place_id": place_id, "fields": REVIEW_FIELDS, "key": api_key}
    if language:
        params["language"] = language
    try:
        r = requests.get(PLACE_DETAILS_URL, params=params, timeout=getattr(settings, "GOOGLE_PLACES_TIMEOUT", 10))
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError):
        logger.exception("Google Places request failed for place %s", place_id)
        raise UpstreamError(_("Failed to fetch reviews"))

    status = data.get("status")
    if status != "OK":
        logger.warning("Google Places API error for %s: %s %s", place_id, status, data.get("error_message", ""))
        raise ValidationError(
            data.get("error_message") or f"Google Places API error: {status}",
            fields={"status": [status]},
        )

    result = data.get("result")
    if not result:
        raise NotFoundError(_("No data returned from Google Places API"))
    return {
        "reviews": result.get("reviews") or [],
        "rating": result.get("rating") or 0,
        "total_reviews": result.get("user_ratings_total") or 0,
    }
