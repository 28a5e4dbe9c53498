"""Article use cases."""

from .browse_articles import BrowseArticlesResponse, BrowseArticlesUseCase, ListingState
from .common import ArticleDetail, ArticleSummary, Pagination
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .list_articles import ListArticlesRequest, ListArticlesResponse, ListArticlesUseCase
from .list_highlights import (
    ListArticlesResult,
    ListFeaturedUseCase,
    ListTrendingRequest,
    ListTrendingUseCase,
)
from .list_taxonomy import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)

__all__ = [
    "ArticleDetail",
    "ArticleSummary",
    "BrowseArticlesResponse",
    "BrowseArticlesUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesResult",
    "ListArticlesUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "ListFeaturedUseCase",
    "ListTagsResponse",
    "ListTagsUseCase",
    "ListTrendingRequest",
    "ListTrendingUseCase",
    "ListingState",
    "Pagination",
]
