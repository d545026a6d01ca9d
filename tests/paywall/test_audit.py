"""Tests for record_access_decision: structured log line + counter."""
import logging

from prometheus_client import REGISTRY

from preview_gate.paywall.audit import record_access_decision
from preview_gate.paywall.models import AccessDecision, AccessLevel, MembershipContext, MemberStatus


def _full_decisions() -> float:
    return REGISTRY.get_sample_value("preview_access_decisions_total", {"level": "full"}) or 0.0


def test_record_access_decision_logs_and_counts(caplog):
    decision = AccessDecision(level=AccessLevel.FULL)
    before = _full_decisions()

    with caplog.at_level(logging.INFO, logger="preview_gate.paywall.audit"):
        record_access_decision(
            "d52c42ae-2755-455c-80ec-70b2ec55c905",
            "draft",
            "paid",
            MembershipContext(status=MemberStatus.PAID),
            decision,
        )

    assert _full_decisions() == before + 1
    record = next(r for r in caplog.records if r.getMessage() == "preview_access_decision")
    assert record.post_uuid == "d52c42ae-2755-455c-80ec-70b2ec55c905"
    assert record.member_status == "paid"
    assert record.access == "full"
