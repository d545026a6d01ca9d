"""
Audit of preview access decisions: one structured log line per decision plus a counter.
"""
from __future__ import annotations

import logging

from preview_gate.paywall.models import AccessDecision, MembershipContext
from preview_gate.utils.metrics import preview_access_decisions_total

logger = logging.getLogger(__name__)


def record_access_decision(
    post_uuid: str,
    post_status: str,
    visibility: str,
    membership: MembershipContext,
    decision: AccessDecision,
) -> None:
    preview_access_decisions_total.labels(level=decision.level.value).inc()
    logger.info(
        "preview_access_decision",
        extra={
            "post_uuid": post_uuid,
            "post_status": post_status,
            "visibility": visibility,
            "member_status": membership.status.value,
            "access": decision.level.value,
        },
    )
