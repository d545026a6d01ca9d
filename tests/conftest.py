from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Generator
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from preview_gate.api.routes.preview import get_post_lookup
from preview_gate.main import app
from preview_gate.paywall import Visibility
from preview_gate.preview import InMemoryPostLookup, PostRecord, PostStatus, PostType
from tests.factories import (
    DRAFT_PAGE_UUID,
    DRAFT_UUID,
    FREE_TIER_DRAFT_UUID,
    GATED_HTML,
    MEMBERS_DRAFT_UUID,
    PAID_DRAFT_UUID,
    PUBLISHED_UUID,
    SCHEDULED_EMAIL_UUID,
    SENT_EMAIL_UUID,
    TIER_DRAFT_UUID,
    make_post,
)


@pytest.fixture()
def posts() -> list[PostRecord]:
    return [
        make_post(
            id="618ba1ffbe2896088840a6df",
            uuid=UUID(DRAFT_UUID),
            title="Not finished yet",
            slug="unfinished",
            status=PostStatus.DRAFT,
            meta_description="meta description for draft post",
            html="<p>We didn't finish our ghost post</p>",
        ),
        make_post(
            id="618ba1ffbe2896088840a6e0",
            uuid=UUID(DRAFT_PAGE_UUID),
            type=PostType.PAGE,
            title="Not finished page",
            slug="unfinished-page",
            status=PostStatus.DRAFT,
            html="<p>Draft page</p>",
        ),
        make_post(
            id="618ba1ffbe2896088840a6e1",
            uuid=UUID(PAID_DRAFT_UUID),
            title="Paid draft",
            slug="paid-draft",
            status=PostStatus.DRAFT,
            visibility=Visibility.PAID,
            html=GATED_HTML,
        ),
        make_post(
            id="618ba1ffbe2896088840a6e2",
            uuid=UUID(TIER_DRAFT_UUID),
            title="Tier draft",
            slug="tier-draft",
            status=PostStatus.DRAFT,
            visibility=Visibility.TIERS,
            tiers=frozenset({"default-product"}),
            html=GATED_HTML,
        ),
        make_post(
            id="618ba1ffbe2896088840a6e6",
            uuid=UUID(MEMBERS_DRAFT_UUID),
            title="Members draft",
            slug="members-draft",
            status=PostStatus.DRAFT,
            visibility=Visibility.MEMBERS,
            html=GATED_HTML,
        ),
        make_post(
            id="618ba1ffbe2896088840a6e7",
            uuid=UUID(FREE_TIER_DRAFT_UUID),
            title="Free tier draft",
            slug="free-tier-draft",
            status=PostStatus.DRAFT,
            visibility=Visibility.TIERS,
            tiers=frozenset({"free", "default-product"}),
            html=GATED_HTML,
        ),
        make_post(
            id="618ba1ffbe2896088840a6e3",
            uuid=UUID(PUBLISHED_UUID),
            title="Short and sweet",
            slug="short-and-sweet",
            status=PostStatus.PUBLISHED,
            html="<p>Published</p>",
        ),
        make_post(
            id="618ba1ffbe2896088840a6e4",
            uuid=UUID(SCHEDULED_EMAIL_UUID),
            title="test newsletter",
            slug="test-newsletter",
            status=PostStatus.SCHEDULED,
            email_only=True,
            published_at=datetime.now(timezone.utc) + timedelta(days=1),
            html="<p>Going out tomorrow</p>",
        ),
        make_post(
            id="618ba1ffbe2896088840a6e5",
            uuid=UUID(SENT_EMAIL_UUID),
            title="test newsletter",
            slug="test-newsletter-2",
            status=PostStatus.SENT,
            email_only=True,
            html="<p>Already in inboxes</p>",
        ),
    ]


@pytest.fixture()
def lookup(posts: list[PostRecord]) -> InMemoryPostLookup:
    return InMemoryPostLookup(posts)


@pytest.fixture()
def client(lookup: InMemoryPostLookup) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_post_lookup] = lambda: lookup
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
