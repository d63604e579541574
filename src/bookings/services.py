"""Booking writes.

Each write checks the caller against the ownership guard before touching the
store. The overlap check and the insert/update run in one transaction that
holds a row lock on the room, so concurrent bookings of the same room are
serialized. Availability is recomputed once the transaction has committed.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils.translation import gettext as _

from src.accounts.policies import can_mutate_booking, can_mutate_room
from src.rooms.models import Room
from src.shared.enums import BookingStatus, ProfileRole
from src.shared.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from .availability import (
    BLOCKING_STATUSES,
    blocking_ranges,
    can_transition,
    check_overlap,
    recompute_room_availability,
)
from .models import Booking

logger = logging.getLogger(__name__)

User = get_user_model()

GUEST_FIELDS = ("guest_name", "guest_email")
OPTIONAL_FIELDS = ("guest_phone", "notes")


def _caller_id(caller):
    return getattr(caller, "id", None)


def _validate_dates(check_in, check_out):
    if check_out <= check_in:
        raise ValidationError(
            _("Check-out date must be after check-in date."),
            fields={"check_out": [_("Check-out date must be after check-in date.")]},
        )


def _student_for(email):
    return (
        User.objects.filter(email__iexact=email, profile__role=ProfileRole.STUDENT)
        .order_by("id")
        .first()
    )


def _lock_room(room_id):
    return Room.objects.select_for_update().get(pk=room_id)


def create_booking(room_id, caller, data) -> Booking:
    room = Room.objects.select_related("property").filter(pk=room_id).first()
    if room is None:
        raise NotFoundError(_("Room not found."))
    if not can_mutate_room(room, _caller_id(caller)):
        raise ForbiddenError(_("You are not allowed to create bookings for this room."))

    status = data.get("status") or BookingStatus.UPCOMING
    if status not in BLOCKING_STATUSES:
        raise ValidationError(
            _("A new booking must be upcoming or active."),
            fields={"status": [_("A new booking must be upcoming or active.")]},
        )
    check_in, check_out = data["check_in"], data["check_out"]
    _validate_dates(check_in, check_out)

    with transaction.atomic():
        _lock_room(room.pk)
        if check_overlap(blocking_ranges(room.pk), (check_in, check_out)):
            logger.info("Rejected booking for room %s: %s..%s overlaps", room.pk, check_in, check_out)
            raise ConflictError()
        booking = Booking.objects.create(
            room=room,
            student=_student_for(data["guest_email"]),
            guest_name=data["guest_name"],
            guest_email=data["guest_email"],
            guest_phone=data.get("guest_phone") or None,
            check_in=check_in,
            check_out=check_out,
            status=status,
            notes=data.get("notes") or None,
        )
    logger.info("Booking %s created for room %s by %s", booking.pk, room.pk, _caller_id(caller))
    recompute_room_availability(room.pk)
    return booking


def update_booking(booking, caller, data) -> Booking:
    if not can_mutate_booking(booking, _caller_id(caller)):
        raise ForbiddenError()

    previous_status = booking.status
    status = data.get("status") or previous_status
    if not can_transition(previous_status, status):
        raise ValidationError(
            _("Cannot change a booking from %(old)s to %(new)s.") % {"old": previous_status, "new": status},
            fields={"status": [_("Invalid status transition.")]},
        )
    check_in = data.get("check_in") or booking.check_in
    check_out = data.get("check_out") or booking.check_out
    dates_changed = (check_in, check_out) != (booking.check_in, booking.check_out)
    if dates_changed:
        _validate_dates(check_in, check_out)

    with transaction.atomic():
        _lock_room(booking.room_id)
        if status in BLOCKING_STATUSES and dates_changed:
            ranges = blocking_ranges(booking.room_id, exclude_booking_id=booking.pk)
            if check_overlap(ranges, (check_in, check_out)):
                raise ConflictError()
        for field in GUEST_FIELDS:
            if field in data:
                setattr(booking, field, data[field])
        for field in OPTIONAL_FIELDS:
            if field in data:
                setattr(booking, field, data[field] or None)
        booking.check_in = check_in
        booking.check_out = check_out
        booking.status = status
        booking.save()

    if status != previous_status:
        logger.info("Booking %s moved %s -> %s", booking.pk, previous_status, status)
    if status != previous_status or (dates_changed and status in BLOCKING_STATUSES):
        recompute_room_availability(booking.room_id)
    return booking


def delete_booking(booking, caller) -> None:
    if not can_mutate_booking(booking, _caller_id(caller)):
        raise ForbiddenError()
    room_id = booking.room_id
    was_blocking = booking.status in BLOCKING_STATUSES
    booking_id = booking.pk
    booking.delete()
    logger.info("Booking %s deleted from room %s", booking_id, room_id)
    if was_blocking:
        recompute_room_availability(room_id)
