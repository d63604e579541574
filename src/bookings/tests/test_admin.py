from datetime import date

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import RequestFactory, TestCase

from src.bookings.admin import BookingAdmin, BookingAdminForm
from src.bookings.models import Booking
from src.rooms.models import Room
from src.shared.enums import BookingStatus, ProfileRole
from src.shared.tests.helpers import make_booking, make_property, make_room, make_user

User = get_user_model()


def _form_data(room, check_in, check_out, status=BookingStatus.UPCOMING):
    return {
        "room": room.pk,
        "guest_name": "Ana López",
        "guest_email": "ana@example.com",
        "guest_phone": "",
        "check_in": check_in,
        "check_out": check_out,
        "status": status,
        "notes": "",
    }


class BookingAdminFormTests(TestCase):
    def setUp(self):
        self.room = make_room(make_property(owner=make_user("owner@example.com")))

    def test_terminal_booking_cannot_be_reopened(self):
        for terminal in (BookingStatus.COMPLETED, BookingStatus.CANCELLED):
            booking = make_booking(self.room, "2025-01-01", "2025-01-05", status=terminal)
            form = BookingAdminForm(
                instance=booking, data=_form_data(self.room, "2025-01-01", "2025-01-05", BookingStatus.UPCOMING)
            )
            self.assertFalse(form.is_valid())
            self.assertIn("status", form.errors)

    def test_allowed_transition_is_valid(self):
        booking = make_booking(self.room, "2025-01-01", "2025-01-05")
        form = BookingAdminForm(
            instance=booking, data=_form_data(self.room, "2025-01-01", "2025-01-05", BookingStatus.ACTIVE)
        )
        self.assertTrue(form.is_valid(), form.errors)

    def test_new_booking_must_block(self):
        form = BookingAdminForm(data=_form_data(self.room, "2025-01-01", "2025-01-05", BookingStatus.COMPLETED))
        self.assertFalse(form.is_valid())
        self.assertIn("status", form.errors)

    def test_overlap_is_rejected(self):
        make_booking(self.room, "2025-01-01", "2025-01-05")
        form = BookingAdminForm(data=_form_data(self.room, "2025-01-05", "2025-01-08"))
        self.assertFalse(form.is_valid())


class BookingAdminSaveTests(TestCase):
    def setUp(self):
        self.model_admin = BookingAdmin(Booking, admin.site)
        self.request = RequestFactory().post("/admin/bookings/booking/")
        self.request.user = User.objects.create_superuser(
            username="admin", email="admin@example.com", password="secret123"
        )
        self.room = make_room(make_property(owner=make_user("owner@example.com")))

    def _room(self):
        return Room.objects.get(pk=self.room.pk)

    def test_status_and_room_are_read_only_on_change(self):
        booking = make_booking(self.room, "2025-01-01", "2025-01-05")
        self.assertIn("status", self.model_admin.get_readonly_fields(self.request, booking))
        self.assertIn("room", self.model_admin.get_readonly_fields(self.request, booking))
        self.assertNotIn("status", self.model_admin.get_readonly_fields(self.request))

    def test_add_goes_through_booking_rules(self):
        student = make_user("ana@example.com", role=ProfileRole.STUDENT)
        form = BookingAdminForm(data=_form_data(self.room, "2025-01-01", "2025-01-05"))
        self.assertTrue(form.is_valid(), form.errors)
        obj = self.model_admin.save_form(self.request, form, change=False)

        self.model_admin.save_model(self.request, obj, form, change=False)

        booking = Booking.objects.get()
        self.assertEqual(obj.pk, booking.pk)
        self.assertEqual(booking.student_id, student.pk)
        self.assertFalse(self._room().available)

    def test_change_updates_dates_and_availability(self):
        booking = make_booking(self.room, "2025-01-01", "2025-01-05")
        form_class = self.model_admin.get_form(self.request, booking, change=True)
        self.assertNotIn("status", form_class.base_fields)
        data = _form_data(self.room, "2025-02-01", "2025-02-05")
        form = form_class(instance=booking, data=data)
        self.assertTrue(form.is_valid(), form.errors)
        obj = self.model_admin.save_form(self.request, form, change=True)

        self.model_admin.save_model(self.request, obj, form, change=True)

        booking.refresh_from_db()
        self.assertEqual((booking.check_in, booking.check_out), (date(2025, 2, 1), date(2025, 2, 5)))
        self.assertEqual(booking.status, BookingStatus.UPCOMING)
        self.assertFalse(self._room().available)

    def test_delete_recomputes_availability(self):
        booking = make_booking(self.room, "2025-01-01", "2025-01-05")
        Room.objects.filter(pk=self.room.pk).update(available=False)

        self.model_admin.delete_model(self.request, booking)

        self.assertFalse(Booking.objects.exists())
        self.assertTrue(self._room().available)
