from datetime import date

from django.contrib.auth import get_user_model

from src.accounts.models import Profile
from src.bookings.models import Booking
from src.properties.models import Property
from src.rooms.models import Room
from src.shared.enums import BathroomType, BookingStatus, ProfileRole, RoomType, Zone

User = get_user_model()


def make_user(email, role=ProfileRole.OWNER, password="secret123", name=""):
    user = User.objects.create_user(username=email.split("@")[0], email=email, password=password)
    Profile.objects.create(user=user, role=role, email=email, name=name or email.split("@")[0])
    return user


def make_property(owner=None, slug="casa-azul", **extra):
    fields = {
        "name_es": "Casa Azul",
        "name_en": "Blue House",
        "zone": Zone.CENTRO,
        "location_es": "Centro Histórico",
        "location_en": "Historic Center",
    }
    fields.update(extra)
    return Property.objects.create(owner=owner, slug=slug, **fields)


def make_room(prop, room_number="101", **extra):
    fields = {"type": RoomType.PRIVATE, "bathroom_type": BathroomType.PRIVATE}
    fields.update(extra)
    return Room.objects.create(property=prop, room_number=room_number, **fields)


def make_booking(room, check_in, check_out, status=BookingStatus.UPCOMING, **extra):
    fields = {"guest_name": "Ana López", "guest_email": "ana@example.com"}
    fields.update(extra)
    if isinstance(check_in, str):
        check_in = date.fromisoformat(check_in)
    if isinstance(check_out, str):
        check_out = date.fromisoformat(check_out)
    return Booking.objects.create(room=room, check_in=check_in, check_out=check_out, status=status, **fields)
