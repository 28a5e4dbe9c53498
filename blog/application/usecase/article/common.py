"""Article response items shared by the article use cases."""

import datetime

from blog.application.usecase.base import CamelModel
from blog.domain.model import Article


class AuthorItem(CamelModel):
    """Author in response."""

    name: str
    avatar: str
    role: str
    bio: str
    social: dict[str, str]


class ArticleSummary(CamelModel):
    """Article without its content, for listings."""

    id: int
    slug: str
    title: str
    excerpt: str
    date: datetime.date
    read_time: str
    category: str
    cover_image: str
    views: int
    likes: int
    tags: list[str]
    author: AuthorItem
    featured: bool


class ArticleDetail(ArticleSummary):
    """Full article including content."""

    content: str


class Pagination(CamelModel):
    """Pagination metadata."""

    page: int
    limit: int
    total: int
    total_pages: int


def _fields(article: Article) -> dict:
    return dict(
        id=article.id,
        slug=str(article.slug),
        title=article.title,
        excerpt=article.excerpt,
        date=article.date,
        read_time=article.read_time,
        category=article.category.value,
        cover_image=article.cover_image,
        views=article.views,
        likes=article.likes,
        tags=list(article.tags),
        author=AuthorItem(
            name=article.author.name,
            avatar=article.author.avatar,
            role=article.author.role,
            bio=article.author.bio,
            social=article.author.social.model_dump(),
        ),
        featured=article.featured,
    )


def to_summary(article: Article) -> ArticleSummary:
    """Convert an article to a listing item (content stripped)."""
    return ArticleSummary(**_fields(article))


def to_detail(article: Article) -> ArticleDetail:
    """Convert an article to a full response item."""
    return ArticleDetail(**_fields(article), content=article.content)
