"""
Unit tests for decide_access: pure logic, no lookup or rendering.
"""
import unittest
from unittest.mock import patch

from preview_gate.paywall.access import decide_access
from preview_gate.paywall.models import (
    AccessLevel,
    MembershipContext,
    MemberStatus,
    PaywallAudience,
    Visibility,
)

ABSENT = MembershipContext()
ANONYMOUS = MembershipContext(status=MemberStatus.ANONYMOUS)
FREE = MembershipContext(status=MemberStatus.FREE)
PAID = MembershipContext(status=MemberStatus.PAID)

GATES = [
    (Visibility.MEMBERS, frozenset()),
    (Visibility.PAID, frozenset()),
    (Visibility.TIERS, frozenset({"default-product"})),
    (Visibility.TIERS, frozenset()),
]


@patch("preview_gate.paywall.access.get_free_tier_slug", return_value="free")
class TestDecideAccess(unittest.TestCase):
    """Guardrails and per-status rules."""

    def test_public_always_full(self, *_):
        for membership in (ABSENT, ANONYMOUS, FREE, PAID):
            decision = decide_access(Visibility.PUBLIC, (), membership)
            self.assertEqual(decision.level, AccessLevel.FULL, membership.status)

    def test_absent_status_always_full(self, *_):
        """No member_status on a preview link -> no paywall, whatever the gate."""
        for visibility, tiers in GATES:
            decision = decide_access(visibility, tiers, ABSENT)
            self.assertTrue(decision.is_full, visibility)
            self.assertIsNone(decision.audience)

    def test_anonymous_partial_on_every_gate(self, *_):
        for visibility, tiers in GATES:
            decision = decide_access(visibility, tiers, ANONYMOUS)
            self.assertTrue(decision.is_partial, visibility)

    def test_anonymous_partial_names_audience(self, *_):
        self.assertEqual(
            decide_access(Visibility.MEMBERS, (), ANONYMOUS).audience,
            PaywallAudience.MEMBERS,
        )
        self.assertEqual(
            decide_access(Visibility.PAID, (), ANONYMOUS).audience,
            PaywallAudience.PAID,
        )
        decision = decide_access(Visibility.TIERS, ["gold", "bronze"], ANONYMOUS)
        self.assertEqual(decision.audience, PaywallAudience.TIERS)
        self.assertEqual(decision.tiers, ("bronze", "gold"))

    def test_free_member_full_on_members_only(self, *_):
        self.assertTrue(decide_access(Visibility.MEMBERS, (), FREE).is_full)

    def test_free_member_partial_on_paid(self, *_):
        self.assertTrue(decide_access(Visibility.PAID, (), FREE).is_partial)

    def test_free_member_full_when_tiers_include_free_tier(self, *_):
        self.assertTrue(decide_access(Visibility.TIERS, {"free", "gold"}, FREE).is_full)
        self.assertTrue(decide_access(Visibility.TIERS, {"gold"}, FREE).is_partial)

    def test_free_tier_slug_comes_from_config(self, mock_free_tier):
        mock_free_tier.return_value = "starter"
        self.assertTrue(decide_access(Visibility.TIERS, {"starter"}, FREE).is_full)
        self.assertTrue(decide_access(Visibility.TIERS, {"free"}, FREE).is_partial)

    def test_paid_member_full_on_any_named_tier(self, *_):
        self.assertTrue(decide_access(Visibility.MEMBERS, (), PAID).is_full)
        self.assertTrue(decide_access(Visibility.PAID, (), PAID).is_full)
        self.assertTrue(decide_access(Visibility.TIERS, {"default-product"}, PAID).is_full)
        self.assertTrue(decide_access(Visibility.TIERS, {"gold", "silver"}, PAID).is_full)

    def test_paid_member_partial_on_empty_tier_gate(self, *_):
        decision = decide_access(Visibility.TIERS, (), PAID)
        self.assertTrue(decision.is_partial)
        self.assertEqual(decision.tiers, ())

    def test_never_denies_previews(self, *_):
        visibilities = [(Visibility.PUBLIC, frozenset())] + GATES
        for visibility, tiers in visibilities:
            for membership in (ABSENT, ANONYMOUS, FREE, PAID):
                decision = decide_access(visibility, tiers, membership)
                self.assertNotEqual(decision.level, AccessLevel.DENY, (visibility, membership.status))

    def test_repeated_decisions_are_identical(self, *_):
        first = decide_access(Visibility.TIERS, {"gold"}, ANONYMOUS)
        for _ in range(3):
            self.assertEqual(decide_access(Visibility.TIERS, {"gold"}, ANONYMOUS), first)


class TestMembershipContext(unittest.TestCase):
    def test_missing_parameter_is_absent(self):
        self.assertIs(MembershipContext.from_query(None).status, MemberStatus.ABSENT)

    def test_explicit_statuses(self):
        self.assertIs(MembershipContext.from_query("anonymous").status, MemberStatus.ANONYMOUS)
        self.assertIs(MembershipContext.from_query("free").status, MemberStatus.FREE)
        self.assertIs(MembershipContext.from_query("paid").status, MemberStatus.PAID)

    def test_empty_parameter_is_absent(self):
        self.assertIs(MembershipContext.from_query("").status, MemberStatus.ABSENT)

    def test_absent_cannot_be_asserted(self):
        with self.assertRaises(ValueError):
            MembershipContext.from_query("absent")

    def test_unknown_status_rejected(self):
        with self.assertRaises(ValueError):
            MembershipContext.from_query("comped")
