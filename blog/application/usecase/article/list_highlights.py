"""Trending and featured article use cases.

Both always look at the whole catalog, whatever the reader is searching.
"""

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import ArticleService

from .common import ArticleSummary, to_summary


class ListTrendingRequest(BaseModel):
    """List trending articles request."""

    limit: int = Field(default=5, ge=1)


class ListArticlesResult(CamelModel):
    """Plain list of article summaries."""

    posts: list[ArticleSummary]


class ListTrendingUseCase(BaseUseCase):
    """Use case for listing the most viewed articles."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: ListTrendingRequest) -> ListArticlesResult:
        with logfire.span("list_trending.execute", limit=request.limit):
            articles = await self.article_service.get_trending(request.limit)
            return ListArticlesResult(posts=[to_summary(a) for a in articles])


class ListFeaturedUseCase(BaseUseCase):
    """Use case for listing featured articles."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: None = None) -> ListArticlesResult:
        with logfire.span("list_featured.execute"):
            articles = await self.article_service.get_featured()
            return ListArticlesResult(posts=[to_summary(a) for a in articles])
