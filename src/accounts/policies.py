"""Who may mutate a Property, Room or Booking.

Properties imported from the legacy site have no owner yet; until one is
assigned they stay editable by any authenticated owner.
"""
from collections.abc import Mapping

from src.shared.exceptions import UnauthenticatedError


def _get(obj, name):
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def can_mutate_property(prop, caller_id) -> bool:
    if prop is None:
        return False
    owner_id = _get(prop, "owner_id")
    if owner_id is None:
        return True
    return caller_id is not None and str(owner_id) == str(caller_id)


def can_mutate_room(room, caller_id) -> bool:
    return can_mutate_property(_get(room, "property"), caller_id)


def can_mutate_booking(booking, caller_id) -> bool:
    return can_mutate_room(_get(booking, "room"), caller_id)


def policy_for(obj):
    from src.bookings.models import Booking
    from src.properties.models import Property
    from src.rooms.models import Room

    if isinstance(obj, Property):
        return can_mutate_property
    if isinstance(obj, Room):
        return can_mutate_room
    if isinstance(obj, Booking):
        return can_mutate_booking
    return None


def require_caller(request):
    user = getattr(request, "user", None)
    if not user or not user.is_authenticated:
        raise UnauthenticatedError()
    return user
