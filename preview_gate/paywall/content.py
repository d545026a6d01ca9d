"""
Content split: split_content(html) -> ContentSegments, cut at the members-only marker.
Without a marker the whole body sits behind the paywall.
"""
from __future__ import annotations

from preview_gate.paywall.config import get_members_only_marker
from preview_gate.paywall.models import AccessDecision, ContentSegments


def split_content(html: str | None, marker: str | None = None) -> ContentSegments:
    """Split at the first marker; the marker itself belongs to neither side."""
    marker = marker or get_members_only_marker()
    html = html or ""
    before, found, after = html.partition(marker)
    if not found:
        return ContentSegments(before="", after=html)
    return ContentSegments(before=before, after=after)


def visible_html(segments: ContentSegments, decision: AccessDecision) -> str:
    """Html the caller may see; never includes the after-cut segment unless access is full."""
    if decision.is_full:
        return segments.before + segments.after
    return segments.before
