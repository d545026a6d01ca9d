"""
UUID preview routes: /p/{uuid}/ renders or forwards a post, /p/{uuid}/edit/ hops to the admin editor.
Header hygiene for everything under /p/ is applied by the middleware in main.py.
"""
from functools import lru_cache
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from preview_gate.db.session import SessionLocal
from preview_gate.paywall import MembershipContext
from preview_gate.preview import (
    PostLookup,
    PreviewService,
    Renderer,
    ResponsePlanner,
    SqlPostLookup,
    to_response,
)


router = APIRouter(prefix="/p", tags=["preview"])

PREVIEW_PREFIX = "/p/"


@lru_cache
def get_renderer() -> Renderer:
    return Renderer()


def get_post_lookup() -> PostLookup:
    return SqlPostLookup(SessionLocal)


def get_preview_service(
    lookup: PostLookup = Depends(get_post_lookup),
    renderer: Renderer = Depends(get_renderer),
) -> PreviewService:
    return PreviewService(lookup, ResponsePlanner(renderer))


def get_membership(
    member_status: Literal["", "anonymous", "free", "paid"] | None = Query(None),
) -> MembershipContext:
    """Caller-asserted membership; swap this dependency for an authenticated claim.

    An empty ?member_status= carries no signal and counts as absent.
    """
    return MembershipContext.from_query(member_status or None)


@router.get("/{post_uuid}/edit/")
async def edit_post(
    post_uuid: str,
    service: PreviewService = Depends(get_preview_service),
) -> Response:
    plan = await service.resolve_edit(post_uuid)
    return to_response(plan)


@router.get("/{post_uuid}/")
async def preview_post(
    post_uuid: str,
    membership: MembershipContext = Depends(get_membership),
    service: PreviewService = Depends(get_preview_service),
) -> Response:
    plan = await service.resolve(post_uuid, membership)
    return to_response(plan)
