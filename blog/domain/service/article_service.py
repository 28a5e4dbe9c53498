"""Article domain service."""

import logfire

from blog.domain.model.article import Article
from blog.domain.repository import ArticleRepository
from blog.domain.value import ALL_CATEGORIES, Slug

from . import article_query
from .base import Service


class ArticleService(Service):
    """Domain service for read operations over the article catalog."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def get_by_slug(self, slug: str) -> Article | None:
        """Get an article by slug.

        Args:
            slug: Article slug

        Returns:
            Article if found, None otherwise
        """
        with logfire.span("article_service.get_by_slug", slug=slug):
            try:
                article = await self.article_repository.find_by_slug(Slug(slug))
            except ValueError:
                # Not a well-formed slug, so no article can have it
                article = None

            if article:
                logfire.info(
                    "Article found by slug", slug=slug, article_id=article.id
                )
            else:
                logfire.warn("Article not found by slug", slug=slug)

            return article

    async def filter_articles(
        self, query: str | None = None, category: str | None = None
    ) -> list[Article]:
        """Apply the listing filters to the full catalog.

        An empty or missing query means "no keyword filter" here, unlike
        ``article_query.search`` where an empty query matches nothing.

        Args:
            query: Search text (optional)
            category: Category name or "Todos" (optional)

        Returns:
            Matching articles in catalog order
        """
        with logfire.span(
            "article_service.filter_articles", query=query, category=category
        ):
            result = await self.article_repository.find_all()

            if query:
                result = article_query.search(result, query)

            if category and category != ALL_CATEGORIES:
                result = article_query.filter_by_category(result, category)

            logfire.info(
                "Articles filtered",
                query=query,
                category=category,
                count=len(result),
            )
            return result

    async def get_related(self, slug: str, limit: int = 3) -> list[Article]:
        """Get articles related to the one identified by ``slug``.

        Args:
            slug: Reference article slug
            limit: Maximum number of articles to return

        Returns:
            Related articles, possibly empty
        """
        with logfire.span("article_service.get_related", slug=slug, limit=limit):
            articles = await self.article_repository.find_all()
            result = article_query.related(articles, slug, limit)
            logfire.info("Related articles selected", slug=slug, count=len(result))
            return result

    async def get_trending(self, limit: int = 5) -> list[Article]:
        """Get the most viewed articles across the whole catalog."""
        with logfire.span("article_service.get_trending", limit=limit):
            articles = await self.article_repository.find_all()
            return article_query.trending(articles, limit)

    async def get_featured(self) -> list[Article]:
        """Get every featured article across the whole catalog."""
        with logfire.span("article_service.get_featured"):
            articles = await self.article_repository.find_all()
            return article_query.featured(articles)

    async def get_categories(self) -> list[str]:
        """Get the category filter options, starting with "Todos"."""
        articles = await self.article_repository.find_all()
        return article_query.list_categories(articles)

    async def get_tags(self) -> list[str]:
        """Get all distinct tags, sorted."""
        articles = await self.article_repository.find_all()
        return article_query.list_tags(articles)
