"""In-memory article repository."""

from collections.abc import Iterable
from typing import Optional

from blog.domain.model.article import Article
from blog.domain.repository.article import ArticleRepository
from blog.domain.value import Slug


class InMemoryArticleRepository(ArticleRepository):
    """Article catalog held in memory, in load order.

    Slug uniqueness is checked when the catalog is built
    (``blog.persistence.loader.build_catalog``).
    """

    def __init__(self, articles: Iterable[Article] = ()) -> None:
        self._articles: tuple[Article, ...] = tuple(articles)

    async def find_all(self) -> list[Article]:
        """Return every article in catalog order."""
        return list(self._articles)

    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._articles:
            if article.slug == slug:
                return article
        return None
