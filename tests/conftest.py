"""Test configuration and fixtures."""

import datetime
import os

from blog.domain.model import Article, Author, SocialLinks
from blog.domain.value import ArticleId, Category, Slug

# Keep tests off the Logfire cloud regardless of local .env
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")
os.environ.setdefault("ENVIRONMENT", "test")


def make_author() -> Author:
    """Author shared by test articles."""
    return Author(
        name="Test Author",
        avatar="",
        role="Developer",
        bio="",
        social=SocialLinks(github="", linkedin="", twitter=""),
    )


def make_article(
    article_id: int,
    slug: str,
    title: str = "",
    excerpt: str = "",
    category: Category = Category.FRONTEND,
    tags: list[str] | None = None,
    views: int = 0,
    featured: bool = False,
) -> Article:
    """Helper to build a test article with sensible defaults.

    Args:
        article_id: Numeric article id
        slug: Article slug (must be a valid slug)
        title: Title, defaults to the slug
        excerpt: Short summary
        category: Article category
        tags: Tag list
        views: View count
        featured: Featured flag

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(article_id),
        slug=Slug(slug),
        title=title or slug,
        excerpt=excerpt,
        content="<p>content</p>",
        date=datetime.date(2025, 1, 1),
        category=category,
        views=views,
        tags=tags or [],
        author=make_author(),
        featured=featured,
    )
