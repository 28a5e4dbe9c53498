"""Site metadata routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.config import SiteSettings

router = APIRouter(tags=["site"], route_class=DishkaRoute)


@router.get("/site", response_model=SiteSettings)
async def get_site(site: FromDishka[SiteSettings]) -> SiteSettings:
    """Public site metadata: name, author, locale and canonical URL."""
    return site
