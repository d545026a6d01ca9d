"""
Paywall for post previews (internal library).
Decision (access) and content cut (content) are separate; contract via MembershipContext.
"""
from preview_gate.paywall.access import decide_access
from preview_gate.paywall.audit import record_access_decision
from preview_gate.paywall.content import split_content, visible_html
from preview_gate.paywall.models import (
    AccessDecision,
    AccessLevel,
    ContentSegments,
    MembershipContext,
    MemberStatus,
    PaywallAudience,
    Visibility,
)

__all__ = [
    "AccessDecision",
    "AccessLevel",
    "ContentSegments",
    "MembershipContext",
    "MemberStatus",
    "PaywallAudience",
    "Visibility",
    "decide_access",
    "record_access_decision",
    "split_content",
    "visible_html",
]
