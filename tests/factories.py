"""Shared builders for preview tests."""
from uuid import UUID

from preview_gate.preview import PostRecord

GATED_HTML = "<p>Before paywall</p><!--members-only--><p>After paywall</p>"

DRAFT_UUID = "d52c42ae-2755-455c-80ec-70b2ec55c903"
DRAFT_PAGE_UUID = "d52c42ae-2755-455c-80ec-70b2ec55c904"
PAID_DRAFT_UUID = "d52c42ae-2755-455c-80ec-70b2ec55c905"
TIER_DRAFT_UUID = "d52c42ae-2755-455c-80ec-70b2ec55c906"
MEMBERS_DRAFT_UUID = "d52c42ae-2755-455c-80ec-70b2ec55c907"
FREE_TIER_DRAFT_UUID = "d52c42ae-2755-455c-80ec-70b2ec55c908"
PUBLISHED_UUID = "2ac6b4f6-e1f3-406c-9247-c94a0496d39d"
SCHEDULED_EMAIL_UUID = "8f3c1a52-6b0e-4f7e-9d57-0b1e9b1f2a11"
SENT_EMAIL_UUID = "5b7d2e90-33a4-4c1c-8e0e-5a6a4f9c7d22"
UNKNOWN_UUID = "aac6b4f6-e1f3-406c-9247-c94a0496d39f"


def make_post(**kwargs) -> PostRecord:
    data = {
        "id": "618ba1ffbe2896088840a6d0",
        "uuid": UUID("00000000-0000-4000-8000-000000000000"),
        "title": "Untitled",
        "slug": "untitled",
    }
    data.update(kwargs)
    return PostRecord(**data)
