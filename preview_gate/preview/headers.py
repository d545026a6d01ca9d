"""
HTTP shape of preview plans: to_response(plan) and the frontend header hygiene
applied to every preview response.
"""
from __future__ import annotations

from email.utils import formatdate

from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from preview_gate.core.config import settings
from preview_gate.preview.models import (
    CacheRule,
    NotFoundPlan,
    RedirectKind,
    RedirectPlan,
    RenderPlan,
    ResponsePlan,
)

# Admin-session and cache-busting signals that must never reach anonymous crawlers
STRIPPED_HEADERS = ("x-cache-invalidate", "x-csrf-token", "set-cookie")


def cache_control(rule: CacheRule) -> str:
    if rule is CacheRule.YEAR:
        return settings.cache_control_year
    if rule is CacheRule.NO_CACHE:
        return settings.cache_control_no_cache
    return settings.cache_control_private


def to_response(plan: ResponsePlan) -> Response:
    if isinstance(plan, RenderPlan):
        return HTMLResponse(
            content=plan.html,
            status_code=plan.status_code,
            headers={"Cache-Control": cache_control(plan.cache)},
        )
    if isinstance(plan, RedirectPlan):
        verb = "Moved Permanently" if plan.kind is RedirectKind.PERMANENT else "Found"
        return PlainTextResponse(
            content=f"{verb}. Redirecting to {plan.location}",
            status_code=plan.status_code,
            headers={"Location": plan.location, "Cache-Control": cache_control(plan.cache)},
        )
    if isinstance(plan, NotFoundPlan):
        return PlainTextResponse(
            content="Not Found",
            status_code=plan.status_code,
            headers={"Cache-Control": cache_control(plan.cache)},
        )
    raise TypeError(f"Unknown response plan: {type(plan).__name__}")


def apply_frontend_headers(response: Response) -> Response:
    """Strip session/csrf/cache-invalidation headers and guarantee a Date header."""
    for name in STRIPPED_HEADERS:
        if name in response.headers:
            del response.headers[name]
    if "date" not in response.headers:
        response.headers["date"] = formatdate(usegmt=True)
    return response
