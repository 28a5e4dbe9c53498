"""List categories and tags use cases."""

import logfire

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.domain.service import ArticleService


class ListCategoriesResponse(CamelModel):
    """Category filter options, "Todos" first."""

    categories: list[str]


class ListTagsResponse(CamelModel):
    """All distinct tags, sorted."""

    tags: list[str]


class ListCategoriesUseCase(BaseUseCase):
    """Use case for listing the category filter options."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: None = None) -> ListCategoriesResponse:
        categories = await self.article_service.get_categories()
        logfire.info("Categories listed", count=len(categories))
        return ListCategoriesResponse(categories=categories)


class ListTagsUseCase(BaseUseCase):
    """Use case for listing all tags."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: None = None) -> ListTagsResponse:
        tags = await self.article_service.get_tags()
        logfire.info("Tags listed", count=len(tags))
        return ListTagsResponse(tags=tags)
