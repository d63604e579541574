from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIRequestFactory

from src.accounts.policies import (
    can_mutate_booking,
    can_mutate_property,
    can_mutate_room,
    policy_for,
    require_caller,
)
from src.shared.exceptions import UnauthenticatedError
from src.shared.tests.helpers import make_booking, make_property, make_room, make_user


class GuardRuleTests(SimpleTestCase):
    def test_owner_may_mutate(self):
        self.assertTrue(can_mutate_property({"owner_id": "u1"}, "u1"))

    def test_stranger_may_not_mutate(self):
        self.assertFalse(can_mutate_property({"owner_id": "u1"}, "u2"))

    def test_unclaimed_property_is_open(self):
        self.assertTrue(can_mutate_property({"owner_id": None}, "u2"))

    def test_rule_carries_through_room_and_booking(self):
        prop = SimpleNamespace(owner_id=7)
        room = SimpleNamespace(property=prop)
        booking = SimpleNamespace(room=room)
        self.assertTrue(can_mutate_room(room, 7))
        self.assertFalse(can_mutate_room(room, 8))
        self.assertTrue(can_mutate_booking(booking, 7))
        self.assertFalse(can_mutate_booking(booking, 8))

    def test_ids_compare_by_value(self):
        self.assertTrue(can_mutate_property({"owner_id": 5}, "5"))

    def test_missing_property_is_denied(self):
        self.assertFalse(can_mutate_room({"property": None}, 1))

    def test_anonymous_caller_is_rejected(self):
        request = APIRequestFactory().get("/")
        request.user = SimpleNamespace(is_authenticated=False)
        with self.assertRaises(UnauthenticatedError):
            require_caller(request)


class PolicyLookupTests(TestCase):
    def test_policy_matches_model(self):
        owner = make_user("owner@example.com")
        prop = make_property(owner=owner)
        room = make_room(prop)
        booking = make_booking(room, "2025-03-01", "2025-03-05")
        self.assertIs(policy_for(prop), can_mutate_property)
        self.assertIs(policy_for(room), can_mutate_room)
        self.assertIs(policy_for(booking), can_mutate_booking)
        self.assertIsNone(policy_for(owner))
        self.assertTrue(policy_for(booking)(booking, owner.pk))
