"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.article import Article
from blog.domain.value import Slug


class ArticleRepository(ABC):
    """Read-only repository for the article catalog.

    The catalog is fixed for the lifetime of the process, so there are no
    write operations.
    """

    @abstractmethod
    async def find_all(self) -> list[Article]:
        """Return every article in catalog order.

        Returns:
            All articles, in the order they were loaded
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Article]:
        """Find an article by slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass
