"""
Post lookup by uuid. The preview routes only depend on PostLookup;
SqlPostLookup backs it with the posts table, InMemoryPostLookup with a dict.
"""
from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Callable
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from preview_gate.models.post import Post
from preview_gate.preview.models import PostRecord
from preview_gate.utils.metrics import post_lookup_duration_seconds, post_lookup_failures_total

logger = logging.getLogger(__name__)


class LookupFailure(Exception):
    """Raised when the backing store cannot answer; not retried at this layer."""
    def __init__(self, message: str, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.detail = detail or {}


class PostLookup(ABC):
    @abstractmethod
    async def find_by_uuid(self, post_uuid: UUID) -> PostRecord | None:
        """Return the post for any status, or None when the uuid is unknown."""
        raise NotImplementedError


class InMemoryPostLookup(PostLookup):
    def __init__(self, posts: Iterable[PostRecord] = ()) -> None:
        self._posts: dict[UUID, PostRecord] = {p.uuid: p for p in posts}

    def add(self, post: PostRecord) -> PostRecord:
        self._posts[post.uuid] = post
        return post

    async def find_by_uuid(self, post_uuid: UUID) -> PostRecord | None:
        return self._posts.get(post_uuid)


class SqlPostLookup(PostLookup):
    """Runs the synchronous session in the threadpool; one query per call."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.session_factory = session_factory

    async def find_by_uuid(self, post_uuid: UUID) -> PostRecord | None:
        started = time.perf_counter()
        try:
            return await run_in_threadpool(self._find, str(post_uuid))
        finally:
            post_lookup_duration_seconds.observe(time.perf_counter() - started)

    def _find(self, post_uuid: str) -> PostRecord | None:
        db = self.session_factory()
        try:
            row = db.query(Post).filter(Post.uuid == post_uuid).one_or_none()
            if row is None:
                return None
            return PostRecord.model_validate(row)
        except SQLAlchemyError as e:
            post_lookup_failures_total.inc()
            logger.error(
                "post_lookup_failed",
                extra={"post_uuid": post_uuid, "error": type(e).__name__},
            )
            raise LookupFailure("post lookup failed", detail={"post_uuid": post_uuid}) from e
        finally:
            db.close()
