"""List articles use case."""

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import ArticleService
from blog.domain.service.article_query import paginate

from .common import ArticleSummary, Pagination, to_summary


class ListArticlesRequest(BaseModel):
    """List articles request."""

    q: str | None = None  # Search text
    category: str | None = None  # Category name, "Todos" for no filter
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)  # Upper bound checked against settings


class ListArticlesResponse(CamelModel):
    """List articles response."""

    posts: list[ArticleSummary]
    pagination: Pagination


class ListArticlesUseCase(BaseUseCase):
    """Use case for searching, filtering and paginating articles.

    Filters always run over the whole catalog; pagination windows the
    filtered result.
    """

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize list articles use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of article summaries with pagination metadata
        """
        with logfire.span(
            "list_articles.execute",
            q=request.q,
            category=request.category,
            page=request.page,
            limit=request.limit,
        ):
            articles = await self.article_service.filter_articles(
                query=request.q, category=request.category
            )
            page = paginate(articles, request.page, request.limit)

            logfire.info(
                "Articles listed", count=len(page.items), total=page.total
            )

            return ListArticlesResponse(
                posts=[to_summary(a) for a in page.items],
                pagination=Pagination(
                    page=page.page,
                    limit=page.limit,
                    total=page.total,
                    total_pages=page.total_pages,
                ),
            )
