"""Article query engine.

Pure functions over an ordered sequence of articles. Every function returns
a new list and preserves the input order unless it says otherwise. The
collection is small (tens of articles), so each call rescans it.
"""

import math
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from blog.domain.model.article import Article
from blog.domain.value import ALL_CATEGORIES, Category

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One window of a sequence plus its pagination metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    page: int
    limit: int
    total: int
    total_pages: int


def find_by_slug(articles: Sequence[Article], slug: str) -> Optional[Article]:
    """Return the first article with the given slug, or None."""
    return next((a for a in articles if a.slug.root == slug), None)


def matches_query(article: Article, query: str) -> bool:
    """Case-insensitive substring match on title, excerpt or any single tag."""
    q = query.lower()
    return (
        q in article.title.lower()
        or q in article.excerpt.lower()
        or any(q in tag.lower() for tag in article.tags)
    )


def search(articles: Sequence[Article], query: str) -> list[Article]:
    """Filter articles by keyword.

    An empty query matches nothing. Callers that want "everything when there
    is no query" must skip this call.
    """
    if not query:
        return []
    return [a for a in articles if matches_query(a, query)]


def filter_by_category(
    articles: Sequence[Article], category: Category | str | None
) -> list[Article]:
    """Keep articles of one category.

    ``None`` and the "Todos" sentinel return the input unchanged.
    """
    if category is None or category == ALL_CATEGORIES:
        return list(articles)
    return [a for a in articles if a.category == category]


def related(
    articles: Sequence[Article], slug: str, limit: int = 3
) -> list[Article]:
    """Articles sharing the category or at least one tag with ``slug``.

    The reference article is never included. Order is catalog order, with
    no preference for stronger overlap. Unknown slugs relate to nothing.
    """
    current = find_by_slug(articles, slug)
    if current is None:
        return []

    current_tags = set(current.tags)
    candidates = [
        a
        for a in articles
        if a.slug != current.slug
        and (a.category == current.category or not current_tags.isdisjoint(a.tags))
    ]
    return candidates[:limit]


def trending(articles: Sequence[Article], limit: int = 5) -> list[Article]:
    """Most viewed articles first; ties keep catalog order."""
    # sorted() is stable, so equal view counts keep their relative order
    return sorted(articles, key=lambda a: a.views, reverse=True)[:limit]


def featured(articles: Sequence[Article]) -> list[Article]:
    """All articles flagged as featured."""
    return [a for a in articles if a.featured]


def paginate(items: Sequence[T], page: int, size: int) -> Page[T]:
    """Slice ``items`` into 1-based pages of ``size``.

    Pages past the end are empty but report the same totals.

    Raises:
        ValueError: If page or size is not positive
    """
    if size < 1:
        raise ValueError(f"Page size must be positive, got {size}")
    if page < 1:
        raise ValueError(f"Page number must be positive, got {page}")

    total = len(items)
    start = (page - 1) * size
    return Page(
        items=list(items[start : start + size]),
        page=page,
        limit=size,
        total=total,
        total_pages=math.ceil(total / size),
    )


def list_categories(articles: Sequence[Article]) -> list[str]:
    """The "Todos" sentinel followed by each category in first-seen order."""
    seen = dict.fromkeys(a.category.value for a in articles)
    return [ALL_CATEGORIES, *seen]


def list_tags(articles: Sequence[Article]) -> list[str]:
    """Distinct tags across the catalog, sorted."""
    return sorted({tag for a in articles for tag in a.tags})
