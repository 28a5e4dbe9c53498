"""Get article use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import ArticleService

from .common import ArticleDetail, ArticleSummary, to_detail, to_summary


class GetArticleRequest(BaseModel):
    """Get article request."""

    slug: str
    related_limit: int = Field(default=3, ge=0)


class GetArticleResponse(CamelModel):
    """Get article response."""

    post: ArticleDetail
    related_posts: list[ArticleSummary]


class GetArticleUseCase(BaseUseCase):
    """Use case for retrieving one article with its related articles."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> Optional[GetArticleResponse]:
        """Execute get article flow.

        Args:
            request: Article slug

        Returns:
            Article details and related articles if found, None otherwise
        """
        with logfire.span("get_article.execute", slug=request.slug):
            article = await self.article_service.get_by_slug(request.slug)
            if not article:
                return None

            related = await self.article_service.get_related(
                request.slug, request.related_limit
            )

            return GetArticleResponse(
                post=to_detail(article),
                related_posts=[to_summary(a) for a in related],
            )
