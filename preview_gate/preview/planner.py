"""
Planning only: ResponsePlanner.plan(post, decision) -> RenderPlan | RedirectPlan | NotFoundPlan.
Deterministic, no I/O beyond the renderer; HTTP headers are attached later by the route.
"""
from __future__ import annotations

from preview_gate.core.config import settings
from preview_gate.paywall.models import AccessDecision, AccessLevel
from preview_gate.preview.models import (
    NotFoundPlan,
    PostRecord,
    PostStatus,
    RedirectKind,
    RedirectPlan,
    RenderPlan,
    ResponsePlan,
)
from preview_gate.preview.renderer import Renderer


class ResponsePlanner:
    def __init__(
        self,
        renderer: Renderer,
        *,
        admin_url: str | None = None,
        email_archive_prefix: str | None = None,
    ) -> None:
        self.renderer = renderer
        self.admin_url = admin_url or settings.admin_url
        self.email_archive_prefix = email_archive_prefix or settings.email_archive_prefix

    def plan(self, post: PostRecord, decision: AccessDecision) -> ResponsePlan:
        """
        published -> 301 to the slug url
        sent + email_only -> 301 to the email archive
        sent (web too) -> as published
        draft / scheduled (email-only or not) -> render with the decision's cut
        """
        if post.status is PostStatus.PUBLISHED:
            return RedirectPlan(location=post.public_url, kind=RedirectKind.PERMANENT)

        if post.status is PostStatus.SENT:
            # public_url is None for email-only sends; a sent post always has an archive page
            location = post.public_url or self.email_archive_url(post)
            return RedirectPlan(location=location, kind=RedirectKind.PERMANENT)

        # Slug-based access would turn DENY into a 404; previews never produce it.
        if decision.level is AccessLevel.DENY:
            return NotFoundPlan(reason="denied")

        return RenderPlan(html=self.renderer.render(post, decision))

    def plan_edit(self, post: PostRecord) -> RedirectPlan:
        """Editor hop for /p/{uuid}/edit/, any status."""
        return RedirectPlan(location=self.editor_url(post), kind=RedirectKind.EDITOR)

    def plan_not_found(self) -> NotFoundPlan:
        return NotFoundPlan()

    def editor_url(self, post: PostRecord) -> str:
        return f"{self.admin_url}#/editor/{post.type.value}/{post.id}"

    def email_archive_url(self, post: PostRecord) -> str:
        return f"{self.email_archive_prefix}{post.uuid}/"
