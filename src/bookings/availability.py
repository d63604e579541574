"""Room availability rules.

A booking blocks its room while it is ``upcoming`` or ``active``. Two blocking
bookings of the same room may not share a day: intervals are closed, so a
check-in on another booking's check-out day is a conflict unless
``BOOKING_ALLOW_SAME_DAY_TURNOVER`` is enabled.

``Room.available`` is derived state. It is recomputed after every booking
write that can change it and is never taken from request payloads.
"""
import logging

from django.conf import settings
from django.db import DatabaseError

from src.rooms.models import Room
from src.shared.enums import BookingStatus
from .models import Booking

logger = logging.getLogger(__name__)

BLOCKING_STATUSES = frozenset({BookingStatus.UPCOMING, BookingStatus.ACTIVE})
TERMINAL_STATUSES = frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED})

ALLOWED_TRANSITIONS = {
    BookingStatus.UPCOMING: frozenset({BookingStatus.ACTIVE, BookingStatus.CANCELLED}),
    BookingStatus.ACTIVE: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}


def same_day_turnover_allowed() -> bool:
    return bool(getattr(settings, "BOOKING_ALLOW_SAME_DAY_TURNOVER", False))


def ranges_overlap(a, b, allow_same_day_turnover=False) -> bool:
    a_start, a_end = a
    b_start, b_end = b
    if allow_same_day_turnover:
        return b_start < a_end and b_end > a_start
    return b_start <= a_end and b_end >= a_start


def check_overlap(existing_ranges, candidate, allow_same_day_turnover=None) -> bool:
    """True when ``candidate`` shares a day with any of ``existing_ranges``."""
    if allow_same_day_turnover is None:
        allow_same_day_turnover = same_day_turnover_allowed()
    return any(ranges_overlap(existing, candidate, allow_same_day_turnover) for existing in existing_ranges)


def can_transition(current, new) -> bool:
    if current == new:
        return True
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


def blocking_ranges(room_id, exclude_booking_id=None):
    qs = Booking.objects.filter(room_id=room_id, status__in=BLOCKING_STATUSES)
    if exclude_booking_id is not None:
        qs = qs.exclude(pk=exclude_booking_id)
    return list(qs.values_list("check_in", "check_out"))


def recompute_room_availability(room_id) -> bool:
    """Persist ``available = no blocking bookings`` on the room and return it.

    The write is best effort: the booking change that triggered it is already
    committed, so a failure here is logged and left for the next booking write
    on the same room to correct.
    """
    available = not Booking.objects.filter(room_id=room_id, status__in=BLOCKING_STATUSES).exists()
    try:
        Room.objects.filter(pk=room_id).update(available=available)
    except DatabaseError:
        logger.exception("Could not persist availability=%s for room %s", available, room_id)
        return available
    logger.info("Room %s availability recomputed: %s", room_id, available)
    return available
