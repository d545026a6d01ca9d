"""
Preview page rendering with Jinja2 (starlette Jinja2Templates).
render(post, decision) -> html; only the visible part of the content reaches the template.
"""
from __future__ import annotations

from pathlib import Path

from starlette.templating import Jinja2Templates

from preview_gate.paywall.content import split_content, visible_html
from preview_gate.paywall.models import AccessDecision, PaywallAudience
from preview_gate.preview.models import PostRecord

TEMPLATES_DIR = Path(__file__).parent / "templates"


def paywall_message(decision: AccessDecision) -> str | None:
    """Heading of the paywall block; None when nothing is cut."""
    if not decision.is_partial:
        return None
    if decision.audience is PaywallAudience.MEMBERS:
        return "This post is for subscribers only"
    if decision.audience is PaywallAudience.PAID:
        return "This post is for paying subscribers only"
    if not decision.tiers:
        return "This post is for subscribers on selected tiers only"
    noun = "tier" if len(decision.tiers) == 1 else "tiers"
    return f"This post is for subscribers on the {', '.join(decision.tiers)} {noun} only"


class Renderer:
    def __init__(self, templates: Jinja2Templates | None = None) -> None:
        self.templates = templates or Jinja2Templates(directory=str(TEMPLATES_DIR))

    def render(self, post: PostRecord, decision: AccessDecision) -> str:
        segments = split_content(post.html)
        template = self.templates.get_template("post.html")
        return template.render(
            post=post,
            title=post.meta_title or post.title,
            description=post.meta_description or post.custom_excerpt,
            content=visible_html(segments, decision),
            paywall_message=paywall_message(decision),
            audience=decision.audience.value if decision.audience else "",
        )
