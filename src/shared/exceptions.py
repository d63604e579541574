"""Error taxonomy shared by every API handler.

Handlers raise these; ``api_exception_handler`` renders all of them (and the
errors DRF and Django raise on their own) as ``{"error": ..., "code": ...}``.
"""
import logging

from django.db import DatabaseError
from django.utils.translation import gettext_lazy as _
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(exceptions.APIException):
    pass


class UnauthenticatedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = _("Unauthorized")
    default_code = "unauthenticated"


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = _("You do not have permission to modify this resource.")
    default_code = "forbidden"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _("Not found.")
    default_code = "not_found"


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _("Invalid request.")
    default_code = "invalid"

    def __init__(self, detail=None, code=None, fields=None):
        super().__init__(detail, code)
        self.fields = fields or {}


class ConflictError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _("The room is already booked for these dates.")
    default_code = "conflict"


class UpstreamError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = _("The data service is unavailable.")
    default_code = "upstream_error"


_STATUS_CODES = {
    400: "invalid",
    401: "unauthenticated",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    415: "unsupported_media_type",
}


def _first_message(data):
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
    if isinstance(data, (list, tuple)) and data:
        return _first_message(data[0])
    return str(data) if data else str(ValidationError.default_detail)


def api_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("Store failure in %s", view.__class__.__name__ if view else "unknown view")
        exc = UpstreamError()
    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, ServiceError):
        body = {"error": str(exc.detail), "code": exc.default_code}
        if getattr(exc, "fields", None):
            body["fields"] = exc.fields
    elif isinstance(exc, exceptions.ValidationError):
        body = {"error": _first_message(response.data), "code": "invalid", "fields": response.data}
    else:
        data = response.data
        detail = data.get("detail", data) if isinstance(data, dict) else data
        body = {"error": str(detail), "code": _STATUS_CODES.get(response.status_code, "error")}
    response.data = body
    return response
