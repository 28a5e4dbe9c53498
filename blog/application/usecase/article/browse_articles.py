"""Blog listing page use case.

Composes one view of the blog listing page: the filtered and paginated
article grid plus the trending and featured widgets, which ignore the
reader's search and category.
"""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.config import ListingSettings
from blog.domain.service import ArticleService
from blog.domain.service.article_query import paginate
from blog.domain.value import ALL_CATEGORIES

from .common import ArticleSummary, Pagination, to_summary


class ListingState(BaseModel):
    """What the reader has selected on the listing page.

    Changing the query or the category always goes back to page 1; a page
    number from the previous result set means nothing for the new one.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    category: str = ALL_CATEGORIES
    page: int = Field(default=1, ge=1)

    def with_query(self, query: str) -> "ListingState":
        return self.model_copy(update={"query": query, "page": 1})

    def with_category(self, category: str) -> "ListingState":
        return self.model_copy(update={"category": category, "page": 1})

    def with_page(self, page: int) -> "ListingState":
        return self.model_copy(update={"page": max(1, page)})

    @property
    def is_unfiltered(self) -> bool:
        return not self.query and self.category == ALL_CATEGORIES


class BrowseArticlesResponse(CamelModel):
    """Everything the listing page renders for one state."""

    query: str
    category: str
    posts: list[ArticleSummary]
    pagination: Pagination
    featured_post: ArticleSummary | None
    trending: list[ArticleSummary]
    categories: list[str]


class BrowseArticlesUseCase(BaseUseCase):
    """Use case for rendering the blog listing page."""

    def __init__(
        self, article_service: ArticleService, listing_settings: ListingSettings
    ) -> None:
        """Initialize browse articles use case.

        Args:
            article_service: Article domain service
            listing_settings: Page size and widget sizes
        """
        self.article_service = article_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListingState) -> BrowseArticlesResponse:
        """Execute listing page flow.

        The featured article is shown only on the first page of the
        unfiltered listing.

        Args:
            request: Current listing state

        Returns:
            Listing page view
        """
        with logfire.span(
            "browse_articles.execute",
            query=request.query,
            category=request.category,
            page=request.page,
        ):
            filtered = await self.article_service.filter_articles(
                query=request.query, category=request.category
            )
            page = paginate(filtered, request.page, self.listing_settings.posts_per_page)

            trending = await self.article_service.get_trending(
                self.listing_settings.trending_limit
            )

            featured_post = None
            if request.is_unfiltered and request.page == 1:
                featured = await self.article_service.get_featured()
                featured_post = to_summary(featured[0]) if featured else None

            categories = await self.article_service.get_categories()

            return BrowseArticlesResponse(
                query=request.query,
                category=request.category,
                posts=[to_summary(a) for a in page.items],
                pagination=Pagination(
                    page=page.page,
                    limit=page.limit,
                    total=page.total,
                    total_pages=page.total_pages,
                ),
                featured_post=featured_post,
                trending=[to_summary(a) for a in trending],
                categories=categories,
            )
