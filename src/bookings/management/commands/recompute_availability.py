import logging

from django.core.management.base import BaseCommand
from django.utils import timezone

from src.bookings.availability import can_transition, recompute_room_availability
from src.bookings.models import Booking
from src.rooms.models import Room
from src.shared.enums import BookingStatus

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Recompute Room.available from bookings; optionally advance booking statuses by date."

    def add_arguments(self, parser):
        parser.add_argument('--room', type=int, action='append', dest='rooms', help='Only this room id (repeatable).')
        parser.add_argument(
            '--advance',
            action='store_true',
            help='Move upcoming bookings that started to active and finished active bookings to completed.',
        )

    def handle(self, *args, **options):
        rooms = Room.objects.order_by('id')
        if options['rooms']:
            rooms = rooms.filter(pk__in=options['rooms'])
        room_ids = list(rooms.values_list('id', flat=True))

        if options['advance']:
            advanced = self._advance_statuses(room_ids)
            self.stdout.write(f"Bookings advanced: {advanced}")

        unavailable = 0
        for room_id in room_ids:
            if not recompute_room_availability(room_id):
                unavailable += 1
        self.stdout.write(self.style.SUCCESS(
            f"Rooms recomputed: {len(room_ids)} (unavailable: {unavailable})"
        ))

    def _advance_statuses(self, room_ids):
        today = timezone.localdate()
        advanced = 0
        qs = Booking.objects.filter(
            room_id__in=room_ids,
            status__in=(BookingStatus.UPCOMING, BookingStatus.ACTIVE),
        )
        for b in qs:
            new_status = b.status
            if b.check_out < today:
                new_status = BookingStatus.COMPLETED
            elif b.check_in <= today:
                new_status = BookingStatus.ACTIVE
            if new_status == b.status:
                continue
            if b.status == BookingStatus.UPCOMING and new_status == BookingStatus.COMPLETED:
                b.status = BookingStatus.ACTIVE
            if not can_transition(b.status, new_status):
                continue
            b.status = new_status
            b.save(update_fields=['status', 'updated_at'])
            logger.info("Booking %s advanced to %s", b.pk, new_status)
            advanced += 1
        return advanced
