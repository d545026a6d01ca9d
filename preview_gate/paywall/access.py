"""
Decision only: decide_access(visibility, tiers, membership) -> AccessDecision.
Pure function, no I/O. Guardrails: public post -> full, no member_status -> full.

DENY is never returned here: UUID previews are never refused on visibility
grounds, only on a missing post.
"""
from __future__ import annotations

from collections.abc import Iterable

from preview_gate.paywall.config import get_free_tier_slug
from preview_gate.paywall.models import (
    AccessDecision,
    AccessLevel,
    MembershipContext,
    MemberStatus,
    PaywallAudience,
    Visibility,
)

_FULL = AccessDecision(level=AccessLevel.FULL)


def decide_access(
    visibility: Visibility,
    tiers: Iterable[str],
    membership: MembershipContext,
) -> AccessDecision:
    """
    Decide how much of a post the caller sees, rules in priority order:

    - public post -> full
    - no member_status asserted (ABSENT) -> full; the UUID is the preview token
    - anonymous -> partial on any gated post
    - free -> full for members-only posts or tier gates naming the free tier
    - paid -> full whenever the gate names at least one tier; "paid" satisfies any tier
    """
    tier_set = frozenset(tiers)

    # Guardrail: public content is never cut
    if visibility is Visibility.PUBLIC:
        return _FULL

    # Guardrail: preview links bypass the paywall unless a status is asserted
    if membership.status is MemberStatus.ABSENT:
        return _FULL

    if membership.status is MemberStatus.ANONYMOUS:
        return _partial(visibility, tier_set)

    if membership.status is MemberStatus.FREE:
        if visibility is Visibility.MEMBERS:
            return _FULL
        if visibility is Visibility.TIERS and get_free_tier_slug() in tier_set:
            return _FULL
        return _partial(visibility, tier_set)

    # MemberStatus.PAID
    if visibility in (Visibility.MEMBERS, Visibility.PAID):
        return _FULL
    if tier_set:
        return _FULL
    # A tier gate with no tiers cannot be satisfied by anyone
    return _partial(visibility, tier_set)


def _partial(visibility: Visibility, tier_set: frozenset[str]) -> AccessDecision:
    if visibility is Visibility.MEMBERS:
        return AccessDecision(level=AccessLevel.PARTIAL, audience=PaywallAudience.MEMBERS)
    if visibility is Visibility.PAID:
        return AccessDecision(level=AccessLevel.PARTIAL, audience=PaywallAudience.PAID)
    return AccessDecision(
        level=AccessLevel.PARTIAL,
        audience=PaywallAudience.TIERS,
        tiers=tuple(sorted(tier_set)),
    )
