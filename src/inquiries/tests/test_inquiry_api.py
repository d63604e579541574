from django.core import mail
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from src.inquiries.models import Inquiry
from src.shared.enums import InquiryStatus, InquiryType, ProfileRole
from src.shared.tests.helpers import make_property, make_room, make_user

INQUIRIES_URL = "/api/inquiries/"


@override_settings(EMAIL_BACKEND="django.core.mail.backends.locmem.EmailBackend", CONTACT_EMAIL="hola@example.com")
class InquiryAPITests(APITestCase):
    def setUp(self):
        self.owner = make_user("owner@example.com")
        self.property = make_property(owner=self.owner)

    def _payload(self, **extra):
        payload = {
            "name": "Ana López",
            "email": "ana@example.com",
            "message": "Me interesa una habitación para el próximo semestre.",
        }
        payload.update(extra)
        return payload

    def test_public_contact_inquiry(self):
        response = self.client.post(INQUIRIES_URL, self._payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["type"], InquiryType.CONTACT)
        self.assertEqual(response.data["status"], InquiryStatus.NEW)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["hola@example.com"])

    def test_required_fields(self):
        response = self.client.post(INQUIRIES_URL, {"name": "Ana"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(response.data["fields"]), {"email", "message"})

    def test_property_slug_is_resolved_and_owner_notified(self):
        response = self.client.post(
            INQUIRIES_URL,
            self._payload(type="application", propertySlug="casa-azul", moveInDate="2026-01-10"),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["property"]["id"], self.property.pk)
        self.assertEqual(mail.outbox[0].to, ["owner@example.com"])
        self.assertEqual(mail.outbox[0].reply_to, ["ana@example.com"])

    def test_room_implies_property(self):
        room = make_room(self.property)
        response = self.client.post(INQUIRIES_URL, self._payload(roomId=room.pk), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["property"]["id"], self.property.pk)
        self.assertEqual(response.data["room"]["room_number"], room.room_number)

    def test_signed_in_student_is_attached(self):
        student = make_user("ana@example.com", role=ProfileRole.STUDENT, name="Ana")
        self.client.force_authenticate(student)
        response = self.client.post(INQUIRIES_URL, self._payload(type="application"), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["student"]["id"], student.pk)

    def test_owner_lists_and_filters(self):
        Inquiry.objects.create(name="A", email="a@example.com", message="hola", property=self.property)
        Inquiry.objects.create(
            name="B", email="b@example.com", message="hola", status=InquiryStatus.ARCHIVED, property=self.property
        )
        foreign = make_property(owner=make_user("other@example.com"), slug="ajena")
        Inquiry.objects.create(name="C", email="c@example.com", message="hola", property=foreign)
        self.client.force_authenticate(self.owner)

        response = self.client.get(INQUIRIES_URL)
        self.assertEqual({i["name"] for i in response.data}, {"A", "B"})

        new_only = self.client.get(INQUIRIES_URL, {"status": "new"})
        self.assertEqual([i["name"] for i in new_only.data], ["A"])

    def test_listing_requires_owner(self):
        self.assertEqual(self.client.get(INQUIRIES_URL).status_code, status.HTTP_401_UNAUTHORIZED)
        self.client.force_authenticate(make_user("student@example.com", role=ProfileRole.STUDENT))
        self.assertEqual(self.client.get(INQUIRIES_URL).status_code, status.HTTP_403_FORBIDDEN)

    def test_progress_status_sets_responded_at(self):
        inquiry = Inquiry.objects.create(name="A", email="a@example.com", message="hola", property=self.property)
        self.client.force_authenticate(self.owner)

        response = self.client.put(f"{INQUIRIES_URL}{inquiry.pk}/", {"status": "contacted"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIsNotNone(response.data["responded_at"])

    def test_notes_only_update_leaves_responded_at_alone(self):
        inquiry = Inquiry.objects.create(name="A", email="a@example.com", message="hola", property=self.property)
        self.client.force_authenticate(self.owner)

        response = self.client.patch(f"{INQUIRIES_URL}{inquiry.pk}/", {"notes": "Llamar el lunes"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["notes"], "Llamar el lunes")
        self.assertIsNone(response.data["responded_at"])

        rejected = self.client.patch(f"{INQUIRIES_URL}{inquiry.pk}/", {"status": "rejected"}, format="json")
        self.assertIsNone(rejected.data["responded_at"])

    def test_delete(self):
        inquiry = Inquiry.objects.create(name="A", email="a@example.com", message="hola", property=self.property)
        self.client.force_authenticate(self.owner)
        response = self.client.delete(f"{INQUIRIES_URL}{inquiry.pk}/")
        self.assertEqual(response.data, {"success": True})
        self.assertFalse(Inquiry.objects.exists())

    def test_student_sees_own_applications(self):
        student = make_user("ana@example.com", role=ProfileRole.STUDENT)
        Inquiry.objects.create(name="Ana", email="ana@example.com", message="hola", type=InquiryType.APPLICATION)
        Inquiry.objects.create(name="Otro", email="otro@example.com", message="hola")
        self.client.force_authenticate(student)

        response = self.client.get(f"{INQUIRIES_URL}mine/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([i["name"] for i in response.data], ["Ana"])

    def test_room_must_belong_to_property(self):
        other = make_property(owner=make_user("other@example.com"), slug="ajena")
        room = make_room(other)
        response = self.client.post(
            INQUIRIES_URL, self._payload(propertyId=self.property.pk, roomId=room.pk), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("room", response.data["fields"])
        self.assertFalse(Inquiry.objects.exists())
        self.assertEqual(len(mail.outbox), 0)

    def test_notification_carries_site_contact(self):
        self.client.post(INQUIRIES_URL, self._payload(propertySlug="casa-azul"), format="json")
        html, mimetype = mail.outbox[0].alternatives[0]
        self.assertEqual(mimetype, "text/html")
        self.assertIn("hola@example.com", html)
