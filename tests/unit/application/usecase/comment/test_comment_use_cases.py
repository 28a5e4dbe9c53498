"""Unit tests for comment use cases."""

import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from blog.domain.error import NotFoundError, ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SLUG = "react-hooks-guia-definitivo"


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_creates_comment_visible_in_listing(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        get = await unit_env.get(GetCommentsUseCase)

        # Act
        created = await create.execute(
            CreateCommentRequest(post_slug=SLUG, author="Ana", content="Otimo guia!")
        )
        listed = await get.execute(GetCommentsRequest(post_slug=SLUG))

        # Assert
        assert created.comment.post_slug == SLUG
        assert [c.id for c in listed.comments] == [created.comment.id]
        assert "postSlug" in created.model_dump(by_alias=True)["comment"]

    @pytest.mark.asyncio
    async def test_missing_fields(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await create.execute(CreateCommentRequest(post_slug=SLUG, author="Ana"))

        assert exc_info.value.reasons == ["Campos obrigatorios: nome e comentario."]

    @pytest.mark.asyncio
    async def test_unknown_article(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await create.execute(
                CreateCommentRequest(
                    post_slug="nao-existe", author="Ana", content="Otimo guia!"
                )
            )
