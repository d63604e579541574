from rest_framework import status
from rest_framework.test import APITestCase

from src.bookings.models import Booking
from src.rooms.models import Room
from src.shared.enums import BookingStatus, ProfileRole
from src.shared.tests.helpers import make_booking, make_property, make_room, make_user

BOOKINGS_URL = "/api/bookings/"


class BookingAPITests(APITestCase):
    def setUp(self):
        self.owner = make_user("owner@example.com")
        self.other_owner = make_user("other@example.com")
        self.property = make_property(owner=self.owner)
        self.room = make_room(self.property)
        self.client.force_authenticate(self.owner)

    def _payload(self, check_in, check_out, **extra):
        payload = {
            "roomId": self.room.pk,
            "guestName": "Ana López",
            "guestEmail": "ana@example.com",
            "checkIn": check_in,
            "checkOut": check_out,
        }
        payload.update(extra)
        return payload

    def _room(self):
        return Room.objects.get(pk=self.room.pk)

    def test_create_conflict_delete_scenario(self):
        created = self.client.post(BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05"), format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)
        self.assertEqual(created.data["status"], BookingStatus.UPCOMING)
        self.assertFalse(self._room().available)

        conflict = self.client.post(BOOKINGS_URL, self._payload("2025-03-03", "2025-03-06"), format="json")
        self.assertEqual(conflict.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(conflict.data["code"], "conflict")
        self.assertEqual(Booking.objects.count(), 1)
        self.assertFalse(self._room().available)

        deleted = self.client.delete(f"{BOOKINGS_URL}{created.data['id']}/")
        self.assertEqual(deleted.status_code, status.HTTP_200_OK)
        self.assertEqual(deleted.data, {"success": True})
        self.assertTrue(self._room().available)

    def test_boundary_day_is_a_conflict(self):
        make_booking(self.room, "2025-03-01", "2025-03-05")
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-05", "2025-03-08"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "conflict")

    def test_cancelled_booking_does_not_block_new_one(self):
        make_booking(self.room, "2025-03-01", "2025-03-05", status=BookingStatus.CANCELLED)
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-02", "2025-03-04"), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_snake_case_payload_is_accepted(self):
        payload = {
            "room": self.room.pk,
            "guest_name": "Luis",
            "guest_email": "luis@example.com",
            "check_in": "2025-04-01",
            "check_out": "2025-04-10",
        }
        response = self.client.post(BOOKINGS_URL, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["room"]["id"], self.room.pk)

    def test_missing_fields_are_rejected(self):
        response = self.client.post(BOOKINGS_URL, {"roomId": self.room.pk}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "invalid")
        self.assertIn("guest_name", response.data["fields"])

    def test_check_out_must_follow_check_in(self):
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-05", "2025-03-05"), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Booking.objects.count(), 0)

    def test_new_booking_cannot_start_terminal(self):
        response = self.client.post(
            BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05", status="completed"), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_room_is_not_found(self):
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05", roomId=999999), format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_anonymous_caller_is_unauthenticated(self):
        self.client.force_authenticate(None)
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05"), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["code"], "unauthenticated")

    def test_student_cannot_use_owner_endpoints(self):
        self.client.force_authenticate(make_user("student@example.com", role=ProfileRole.STUDENT))
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05"), format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_other_owner_is_forbidden(self):
        booking = make_booking(self.room, "2025-03-01", "2025-03-05")
        self.client.force_authenticate(self.other_owner)

        created = self.client.post(BOOKINGS_URL, self._payload("2025-05-01", "2025-05-05"), format="json")
        self.assertEqual(created.status_code, status.HTTP_403_FORBIDDEN)

        updated = self.client.patch(f"{BOOKINGS_URL}{booking.pk}/", {"status": "cancelled"}, format="json")
        self.assertEqual(updated.status_code, status.HTTP_403_FORBIDDEN)
        booking.refresh_from_db()
        self.assertEqual(booking.status, BookingStatus.UPCOMING)

    def test_unclaimed_property_rooms_are_bookable_by_any_owner(self):
        room = make_room(make_property(owner=None, slug="legacy"), room_number="1")
        self.client.force_authenticate(self.other_owner)
        response = self.client.post(
            BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05", roomId=room.pk), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_status_change_recomputes_availability(self):
        booking = make_booking(self.room, "2025-03-01", "2025-03-05")
        Room.objects.filter(pk=self.room.pk).update(available=False)

        response = self.client.patch(f"{BOOKINGS_URL}{booking.pk}/", {"status": "cancelled"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], BookingStatus.CANCELLED)
        self.assertTrue(self._room().available)

    def test_invalid_transition_is_rejected(self):
        booking = make_booking(self.room, "2025-03-01", "2025-03-05", status=BookingStatus.COMPLETED)
        response = self.client.put(f"{BOOKINGS_URL}{booking.pk}/", {"status": "active"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "invalid")
        booking.refresh_from_db()
        self.assertEqual(booking.status, BookingStatus.COMPLETED)

    def test_moving_dates_onto_another_booking_conflicts(self):
        make_booking(self.room, "2025-03-01", "2025-03-05")
        other = make_booking(self.room, "2025-04-01", "2025-04-05")
        response = self.client.patch(
            f"{BOOKINGS_URL}{other.pk}/", {"checkIn": "2025-03-04", "checkOut": "2025-03-10"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "conflict")

    def test_list_filters_by_status_list_and_scope(self):
        make_booking(self.room, "2025-03-01", "2025-03-05")
        make_booking(self.room, "2025-04-01", "2025-04-05", status=BookingStatus.ACTIVE)
        make_booking(self.room, "2025-05-01", "2025-05-05", status=BookingStatus.CANCELLED)
        foreign_room = make_room(make_property(owner=self.other_owner, slug="ajena"))
        make_booking(foreign_room, "2025-03-01", "2025-03-05")

        response = self.client.get(BOOKINGS_URL, {"status": "upcoming,active"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([b["status"] for b in response.data], ["upcoming", "active"])

        everything = self.client.get(BOOKINGS_URL)
        self.assertEqual(len(everything.data), 3)

    def test_student_sees_own_bookings(self):
        student = make_user("ana@example.com", role=ProfileRole.STUDENT)
        make_booking(self.room, "2025-03-01", "2025-03-05")
        make_booking(self.room, "2025-06-01", "2025-06-05", guest_email="someone@example.com")
        self.client.force_authenticate(student)

        response = self.client.get(f"{BOOKINGS_URL}mine/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["guest_email"], "ana@example.com")

    def test_booking_links_matching_student_account(self):
        student = make_user("ana@example.com", role=ProfileRole.STUDENT)
        response = self.client.post(BOOKINGS_URL, self._payload("2025-03-01", "2025-03-05"), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["student_id"], student.pk)
