"""
UUID preview routes core: lookup, planning, rendering and response headers.
"""
from preview_gate.preview.headers import apply_frontend_headers, to_response
from preview_gate.preview.lookup import InMemoryPostLookup, LookupFailure, PostLookup, SqlPostLookup
from preview_gate.preview.models import (
    NotFoundPlan,
    PostRecord,
    PostStatus,
    PostType,
    RedirectKind,
    RedirectPlan,
    RenderPlan,
)
from preview_gate.preview.planner import ResponsePlanner
from preview_gate.preview.renderer import Renderer
from preview_gate.preview.service import PreviewService

__all__ = [
    "InMemoryPostLookup",
    "LookupFailure",
    "NotFoundPlan",
    "PostLookup",
    "PostRecord",
    "PostStatus",
    "PostType",
    "PreviewService",
    "RedirectKind",
    "RedirectPlan",
    "RenderPlan",
    "Renderer",
    "ResponsePlanner",
    "SqlPostLookup",
    "apply_frontend_headers",
    "to_response",
]
