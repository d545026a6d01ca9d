"""
Preview resolution: lookup -> decide_access -> plan. Stateless; one awaited lookup per call.
"""
from __future__ import annotations

import logging
from uuid import UUID

from preview_gate.paywall import MembershipContext, decide_access, record_access_decision
from preview_gate.preview.lookup import PostLookup
from preview_gate.preview.models import PostRecord, RedirectPlan, ResponsePlan
from preview_gate.preview.planner import ResponsePlanner
from preview_gate.utils.metrics import preview_requests_total

logger = logging.getLogger(__name__)


def parse_post_uuid(raw: str) -> UUID | None:
    """Malformed identifiers are treated like unknown ones."""
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        return None


class PreviewService:
    def __init__(self, lookup: PostLookup, planner: ResponsePlanner) -> None:
        self.lookup = lookup
        self.planner = planner

    async def resolve(self, raw_uuid: str, membership: MembershipContext) -> ResponsePlan:
        post = await self._find(raw_uuid)
        if post is None:
            return self._not_found(raw_uuid)

        decision = decide_access(post.visibility, post.tiers, membership)
        record_access_decision(
            str(post.uuid),
            post.status.value,
            post.visibility.value,
            membership,
            decision,
        )
        plan = self.planner.plan(post, decision)
        self._record(post, plan)
        return plan

    async def resolve_edit(self, raw_uuid: str) -> ResponsePlan:
        post = await self._find(raw_uuid)
        if post is None:
            return self._not_found(raw_uuid)
        plan = self.planner.plan_edit(post)
        self._record(post, plan)
        return plan

    async def _find(self, raw_uuid: str) -> PostRecord | None:
        post_uuid = parse_post_uuid(raw_uuid)
        if post_uuid is None:
            return None
        return await self.lookup.find_by_uuid(post_uuid)

    def _not_found(self, raw_uuid: str) -> ResponsePlan:
        preview_requests_total.labels(outcome="not_found").inc()
        logger.info("preview_not_found", extra={"post_uuid": raw_uuid})
        return self.planner.plan_not_found()

    def _record(self, post: PostRecord, plan: ResponsePlan) -> None:
        if isinstance(plan, RedirectPlan):
            outcome = f"redirect_{plan.kind.value}"
            location = plan.location
        else:
            outcome = "render" if plan.status_code == 200 else "not_found"
            location = None
        preview_requests_total.labels(outcome=outcome).inc()
        logger.info(
            "preview_resolved",
            extra={
                "post_uuid": str(post.uuid),
                "post_status": post.status.value,
                "outcome": outcome,
                "location": location,
            },
        )
