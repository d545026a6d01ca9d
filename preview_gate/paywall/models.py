"""
Paywall DTOs: MembershipContext (input of decide_access), AccessDecision (output).
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Visibility(str, Enum):
    PUBLIC = "public"
    MEMBERS = "members"
    PAID = "paid"  # every paid tier
    TIERS = "tiers"  # explicit tier set


class MemberStatus(str, Enum):
    """
    Caller membership as asserted on the request.

    ABSENT means no assertion was made at all and is not the same as
    ANONYMOUS: previews without a member_status are rendered in full.
    """

    ABSENT = "absent"
    ANONYMOUS = "anonymous"
    FREE = "free"
    PAID = "paid"


class AccessLevel(str, Enum):
    FULL = "full"
    PARTIAL = "partial"
    DENY = "deny"


class PaywallAudience(str, Enum):
    """Who the paywall block addresses; drives its wording."""

    MEMBERS = "members"
    PAID = "paid"
    TIERS = "tiers"


# ----- Input of decide_access -----


class MembershipContext(BaseModel):
    """Caller membership. Provenance is a query parameter today; the shape stays when it is authenticated."""

    status: MemberStatus = MemberStatus.ABSENT

    model_config = {"frozen": True}

    @classmethod
    def from_query(cls, member_status: str | None) -> "MembershipContext":
        """None or empty (no signal) -> ABSENT; explicit values map one to one."""
        if not member_status:
            return cls(status=MemberStatus.ABSENT)
        status = MemberStatus(member_status)
        if status is MemberStatus.ABSENT:
            raise ValueError("absent is implied by a missing member_status, it cannot be asserted")
        return cls(status=status)


# ----- Access decision (pure logic, no I/O) -----


class AccessDecision(BaseModel):
    """Result of decide_access: how much of the post the caller may see."""

    level: AccessLevel
    audience: PaywallAudience | None = Field(
        None,
        description="Set for PARTIAL: which membership the paywall block asks for",
    )
    tiers: tuple[str, ...] = Field(
        (),
        description="Tier slugs named by a TIERS gate, sorted; empty otherwise",
    )

    model_config = {"frozen": True}

    @property
    def is_full(self) -> bool:
        return self.level is AccessLevel.FULL

    @property
    def is_partial(self) -> bool:
        return self.level is AccessLevel.PARTIAL


# ----- Content split at the paywall cut -----


class ContentSegments(BaseModel):
    """Post html split at the paywall cut."""

    before: str = ""
    after: str = ""

    model_config = {"frozen": True}
