#!/usr/bin/env python3
"""
Create the posts table, insert demo posts for every preview branch and print their preview links.
Run from the project root: python -m scripts.seed_preview_posts
or: PYTHONPATH=. python scripts/seed_preview_posts.py
"""
import os
import sys
from datetime import datetime, timedelta, timezone

# project root on PYTHONPATH
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from preview_gate.db.base import Base
from preview_gate.db.session import SessionLocal, engine
from preview_gate.models.post import Post

GATED_HTML = "<p>Before paywall</p><!--members-only--><p>After paywall</p>"

DEMO_POSTS = [
    {
        "uuid": "d52c42ae-2755-455c-80ec-70b2ec55c903",
        "title": "Not finished yet",
        "slug": "unfinished",
        "status": "draft",
        "meta_description": "meta description for draft post",
        "html": "<p>We didn't finish our ghost post</p>",
    },
    {
        "uuid": "d52c42ae-2755-455c-80ec-70b2ec55c904",
        "type": "page",
        "title": "Not finished page",
        "slug": "unfinished-page",
        "status": "draft",
        "html": "<p>Draft page</p>",
    },
    {
        "uuid": "d52c42ae-2755-455c-80ec-70b2ec55c905",
        "title": "Paid draft",
        "slug": "paid-draft",
        "status": "draft",
        "visibility": "paid",
        "html": GATED_HTML,
    },
    {
        "uuid": "d52c42ae-2755-455c-80ec-70b2ec55c906",
        "title": "Tier draft",
        "slug": "tier-draft",
        "status": "draft",
        "visibility": "tiers",
        "tiers": ["default-product"],
        "html": GATED_HTML,
    },
    {
        "uuid": "2ac6b4f6-e1f3-406c-9247-c94a0496d39d",
        "title": "Short and sweet",
        "slug": "short-and-sweet",
        "status": "published",
        "html": "<p>Published</p>",
    },
    {
        "title": "test newsletter (scheduled)",
        "slug": "scheduled-newsletter",
        "status": "scheduled",
        "email_only": True,
        "published_at": datetime.now(timezone.utc) + timedelta(days=1),
        "html": "<p>Going out tomorrow</p>",
    },
    {
        "title": "test newsletter (sent)",
        "slug": "sent-newsletter",
        "status": "sent",
        "email_only": True,
        "html": "<p>Already in inboxes</p>",
    },
]


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for data in DEMO_POSTS:
            existing = db.query(Post).filter(Post.slug == data["slug"]).one_or_none()
            post = existing or Post(**data)
            if existing is None:
                db.add(post)
        db.commit()
        print("Preview links:\n")
        for post in db.query(Post).order_by(Post.slug.asc()).all():
            print(f"  [{post.status}/{post.visibility}] {post.title}\n    /p/{post.uuid}/\n")
    finally:
        db.close()


if __name__ == "__main__":
    main()
