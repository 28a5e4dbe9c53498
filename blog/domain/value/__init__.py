"""Domain value objects for the blog."""

from blog.domain.value.identifiers import ArticleId, CommentId
from blog.domain.value.types import ALL_CATEGORIES, Category, Slug

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    # Types
    "ALL_CATEGORIES",
    "Category",
    "Slug",
]
