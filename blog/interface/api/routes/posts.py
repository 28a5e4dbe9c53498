"""Article routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from blog.application.usecase.article import (
    BrowseArticlesResponse,
    BrowseArticlesUseCase,
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesResult,
    ListArticlesUseCase,
    ListFeaturedUseCase,
    ListingState,
    ListTrendingRequest,
    ListTrendingUseCase,
)
from blog.config import ListingSettings
from blog.domain.value import ALL_CATEGORIES

router = APIRouter(tags=["posts"], route_class=DishkaRoute)


def _check_limit(limit: int, listing_settings: ListingSettings) -> None:
    if limit < 1 or limit > listing_settings.max_limit:
        logfire.warn("Rejected page size", limit=limit)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"limit deve estar entre 1 e {listing_settings.max_limit}",
        )


@router.get(
    "/posts",
    response_model=ListArticlesResponse,
    response_model_by_alias=True,
)
async def list_posts(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    listing_settings: FromDishka[ListingSettings],
    q: str | None = Query(default=None),
    category: str | None = Query(default=None),
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
) -> ListArticlesResponse:
    """Search, filter and paginate articles.

    An empty ``q`` does not filter. A non-positive page is treated as page 1.

    Raises:
        HTTPException: If limit is outside the accepted range
    """
    if limit is None:
        limit = listing_settings.default_limit
    _check_limit(limit, listing_settings)

    request = ListArticlesRequest(q=q, category=category, page=max(1, page), limit=limit)
    return await list_articles_use_case.execute(request)


@router.get(
    "/posts/trending",
    response_model=ListArticlesResult,
    response_model_by_alias=True,
)
async def list_trending(
    list_trending_use_case: FromDishka[ListTrendingUseCase],
    listing_settings: FromDishka[ListingSettings],
    limit: int | None = Query(default=None),
) -> ListArticlesResult:
    """Most viewed articles."""
    if limit is None:
        limit = listing_settings.trending_limit
    _check_limit(limit, listing_settings)
    return await list_trending_use_case.execute(ListTrendingRequest(limit=limit))


@router.get(
    "/posts/featured",
    response_model=ListArticlesResult,
    response_model_by_alias=True,
)
async def list_featured(
    list_featured_use_case: FromDishka[ListFeaturedUseCase],
) -> ListArticlesResult:
    """Articles flagged as featured, in catalog order."""
    return await list_featured_use_case.execute()


@router.get(
    "/posts/{slug}",
    response_model=GetArticleResponse,
    response_model_by_alias=True,
)
async def get_post(
    slug: str,
    get_article_use_case: FromDishka[GetArticleUseCase],
    listing_settings: FromDishka[ListingSettings],
) -> GetArticleResponse:
    """Get one article with its related articles.

    Raises:
        HTTPException: If no article has this slug
    """
    result = await get_article_use_case.execute(
        GetArticleRequest(slug=slug, related_limit=listing_settings.related_limit)
    )
    if not result:
        logfire.warn("Article not found", slug=slug)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artigo nao encontrado",
        )
    return result


@router.get(
    "/blog",
    response_model=BrowseArticlesResponse,
    response_model_by_alias=True,
)
async def browse_posts(
    browse_articles_use_case: FromDishka[BrowseArticlesUseCase],
    q: str = Query(default=""),
    category: str = Query(default=ALL_CATEGORIES),
    page: int = Query(default=1),
) -> BrowseArticlesResponse:
    """The blog listing page: article grid, trending, featured and categories."""
    state = ListingState().with_query(q).with_category(category).with_page(page)
    return await browse_articles_use_case.execute(state)
