"""Category and tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.usecase.article import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(tags=["taxonomy"], route_class=DishkaRoute)


@router.get("/categories", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """Categories in use, with "Todos" first."""
    return await list_categories_use_case.execute()


@router.get("/tags", response_model=ListTagsResponse)
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
) -> ListTagsResponse:
    """Every tag in the catalog, sorted."""
    return await list_tags_use_case.execute()
