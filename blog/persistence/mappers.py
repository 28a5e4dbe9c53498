"""Mappers for converting between raw records and domain models.

Records are plain dicts using the wire field names (``readTime``,
``coverImage``, ``postSlug``) so that seed data and JSON files share them.
"""

from datetime import date, datetime
from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Article, Author, Comment, SocialLinks
from blog.domain.value import ArticleId, Category, CommentId, Slug


def record_to_author(record: Dict[str, Any]) -> Author:
    """Convert an author record to Author domain model.

    Args:
        record: Author record as dict

    Returns:
        Author domain model
    """
    return Author(
        name=record["name"],
        avatar=record.get("avatar", ""),
        role=record.get("role", ""),
        bio=record.get("bio", ""),
        social=SocialLinks(**record.get("social", {})),
    )


def record_to_article(record: Dict[str, Any], author: Author) -> Article:
    """Convert an article record to Article domain model.

    A record may carry its own ``author``; otherwise the shared one is used.
    A missing ``featured`` flag means not featured.

    Args:
        record: Article record as dict
        author: Shared author reference

    Returns:
        Article domain model
    """
    raw_date = record["date"]
    return Article(
        id=ArticleId(int(record["id"])),
        slug=Slug(record["slug"]),
        title=record["title"],
        excerpt=record.get("excerpt", ""),
        content=record.get("content", ""),
        date=date.fromisoformat(raw_date) if isinstance(raw_date, str) else raw_date,
        read_time=record.get("readTime", ""),
        category=Category(record["category"]),
        cover_image=record.get("coverImage", ""),
        views=record.get("views", 0),
        likes=record.get("likes", 0),
        tags=list(record.get("tags", [])),
        author=record_to_author(record["author"]) if "author" in record else author,
        featured=bool(record.get("featured", False)),
    )


def record_to_comment(record: Dict[str, Any]) -> Comment:
    """Convert a comment record to Comment domain model.

    Args:
        record: Comment record as dict

    Returns:
        Comment domain model
    """
    raw_date = record["date"]
    if isinstance(raw_date, str):
        raw_date = datetime.fromisoformat(raw_date.replace("Z", "+00:00"))
    return Comment(
        id=CommentId(UUID(record["id"]) if isinstance(record["id"], str) else record["id"]),
        post_slug=Slug(record["postSlug"]),
        author=record["author"],
        email=record.get("email", ""),
        content=record["content"],
        date=raw_date,
        avatar=record.get("avatar", ""),
    )
