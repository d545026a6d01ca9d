"""
Paywall config: typed wrapper over preview_gate.core.config for tier and content-split settings.
"""
from __future__ import annotations

from preview_gate.core.config import settings


def get_free_tier_slug() -> str:
    return getattr(settings, "free_tier_slug", "free")


def get_members_only_marker() -> str:
    return getattr(settings, "members_only_marker", "<!--members-only-->")
