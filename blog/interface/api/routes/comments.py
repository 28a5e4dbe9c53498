"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from blog.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    post_slug: str | None = None
    author: str | None = None
    email: str | None = None
    content: str | None = None


@router.get("", response_model=GetCommentsResponse, response_model_by_alias=True)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post_slug: str | None = Query(default=None, alias="postSlug"),
) -> GetCommentsResponse:
    """Comments of one article, newest first.

    Raises:
        HTTPException: If postSlug is missing
    """
    if not post_slug:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="postSlug obrigatorio",
        )

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_slug=post_slug)
        )
    except ValueError as e:
        # Malformed slug cannot match any article
        logfire.warn("Comments requested for invalid slug", slug=post_slug, error=str(e))
        return GetCommentsResponse(comments=[])


@router.post(
    "",
    response_model=CreateCommentResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Add a comment to an article.

    Raises:
        HTTPException: If validation fails or the article does not exist
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_slug=request.post_slug,
                author=request.author,
                email=request.email,
                content=request.content,
            )
        )
    except ValidationError as e:
        logfire.warn("Comment rejected", reasons=e.reasons)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reasons,
        )
    except NotFoundError as e:
        logfire.warn("Comment on unknown article", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artigo nao encontrado",
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erro ao criar comentario",
        )
