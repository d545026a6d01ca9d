"""
DTO preview: PostRecord (what the lookup returns) and the response plans
(RenderPlan, RedirectPlan, NotFoundPlan) produced by the planner.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Union
from uuid import UUID

from pydantic import BaseModel, Field

from preview_gate.paywall.models import Visibility


class PostStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"
    SENT = "sent"


class PostType(str, Enum):
    POST = "post"
    PAGE = "page"


class PostRecord(BaseModel):
    """Read-only view of a post as the preview routes need it."""

    id: str
    uuid: UUID
    type: PostType = PostType.POST
    title: str
    slug: str
    status: PostStatus = PostStatus.DRAFT
    visibility: Visibility = Visibility.PUBLIC
    tiers: frozenset[str] = frozenset()
    email_only: bool = False
    html: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    custom_excerpt: str | None = None
    published_at: datetime | None = None

    model_config = {"frozen": True, "from_attributes": True}

    @property
    def is_web_visible(self) -> bool:
        """Published posts, and sent posts that were not email-only, have a slug page."""
        if self.status is PostStatus.PUBLISHED:
            return True
        return self.status is PostStatus.SENT and not self.email_only

    @property
    def public_url(self) -> str | None:
        if not self.is_web_visible:
            return None
        return f"/{self.slug}/"


# ----- Response plans -----


class RedirectKind(str, Enum):
    """
    Redirect intent. Status code and cache policy hang off the intent so a
    permanent forward and an editor hop can never share cache headers.
    """

    PERMANENT = "permanent"  # live post / email archive forward
    EDITOR = "editor"  # admin editor hop

    @property
    def status_code(self) -> int:
        return 301 if self is RedirectKind.PERMANENT else 302


class CacheRule(str, Enum):
    YEAR = "year"
    NO_CACHE = "no_cache"
    PRIVATE = "private"


class RenderPlan(BaseModel):
    html: str
    status_code: int = 200
    cache: CacheRule = CacheRule.PRIVATE

    model_config = {"frozen": True}


class RedirectPlan(BaseModel):
    location: str
    kind: RedirectKind

    model_config = {"frozen": True}

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def cache(self) -> CacheRule:
        return CacheRule.YEAR if self.kind is RedirectKind.PERMANENT else CacheRule.NO_CACHE


class NotFoundPlan(BaseModel):
    status_code: int = 404
    cache: CacheRule = CacheRule.PRIVATE
    reason: str = Field("unknown_uuid", description="unknown_uuid | denied")

    model_config = {"frozen": True}


ResponsePlan = Union[RenderPlan, RedirectPlan, NotFoundPlan]
