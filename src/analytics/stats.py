"""Occupancy figures for the owner dashboard."""
from datetime import date, timedelta

from django.db.models import Q
from django.utils import timezone

from src.bookings.availability import BLOCKING_STATUSES, ranges_overlap
from src.bookings.models import Booking
from src.inquiries.models import Inquiry
from src.properties.models import Property
from src.rooms.models import Room
from src.shared.enums import BookingStatus, InquiryStatus

UPCOMING_WINDOW_DAYS = 7
MONTHS_OF_HISTORY = 6


def _owned(user, prefix=""):
    return Q(**{f"{prefix}owner": user}) | Q(**{f"{prefix}owner__isnull": True})


def _month_start(day: date, months_back: int) -> date:
    month_index = day.year * 12 + day.month - 1 - months_back
    return date(month_index // 12, month_index % 12 + 1, 1)


def _month_end(start: date) -> date:
    return _month_start(start, -1) - timedelta(days=1)


def monthly_occupancy(room_count, bookings, today, months=MONTHS_OF_HISTORY):
    """Share of rooms with at least one non-cancelled booking touching each month."""
    rows = []
    for back in range(months - 1, -1, -1):
        start = _month_start(today, back)
        end = _month_end(start)
        rooms = {b.room_id for b in bookings if ranges_overlap((start, end), (b.check_in, b.check_out))}
        rate = round(len(rooms) * 100 / room_count) if room_count else 0
        rows.append({"month": start.strftime("%Y-%m"), "rate": rate})
    return rows


def dashboard_stats(user, today=None) -> dict:
    today = today or timezone.localdate()
    horizon = today + timedelta(days=UPCOMING_WINDOW_DAYS)

    properties = Property.objects.filter(_owned(user))
    rooms = Room.objects.filter(_owned(user, "property__"))
    bookings = list(
        Booking.objects.filter(_owned(user, "room__property__"))
        .exclude(status=BookingStatus.CANCELLED)
        .only("id", "room_id", "check_in", "check_out", "status")
    )

    total_rooms = rooms.count()
    occupied = len({b.room_id for b in bookings if b.status in BLOCKING_STATUSES})
    inquiries = Inquiry.objects.filter(
        Q(property__isnull=True) | _owned(user, "property__"), status=InquiryStatus.NEW
    )

    return {
        "total_properties": properties.count(),
        "total_rooms": total_rooms,
        "occupied_rooms": occupied,
        "available_rooms": max(total_rooms - occupied, 0),
        "occupancy_rate": round(occupied * 100 / total_rooms) if total_rooms else 0,
        "upcoming_check_ins": sum(
            1 for b in bookings if b.status in BLOCKING_STATUSES and today <= b.check_in <= horizon
        ),
        "upcoming_check_outs": sum(
            1 for b in bookings if b.status == BookingStatus.ACTIVE and today <= b.check_out <= horizon
        ),
        "new_inquiries": inquiries.count(),
        "monthly_occupancy": monthly_occupancy(total_rooms, bookings, today),
    }
