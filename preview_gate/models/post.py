from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text

from preview_gate.db.base import Base


def _object_id() -> str:
    return uuid4().hex[:24]


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(24), primary_key=True, default=_object_id)
    uuid = Column(String(36), nullable=False, unique=True, index=True, default=lambda: str(uuid4()))
    type = Column(String, nullable=False, default="post")  # post | page
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, unique=True, index=True)
    status = Column(String, nullable=False, default="draft")  # draft | scheduled | published | sent
    visibility = Column(String, nullable=False, default="public")  # public | members | paid | tiers
    tiers = Column(JSON, nullable=False, default=list)  # tier slugs, used when visibility == "tiers"
    email_only = Column(Boolean, nullable=False, default=False)
    html = Column(Text, nullable=True)
    meta_title = Column(String, nullable=True)
    meta_description = Column(String, nullable=True)
    custom_excerpt = Column(String, nullable=True)
    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
