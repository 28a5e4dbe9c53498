"""Unit tests for CommentService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from blog.domain.error import ValidationError
from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.service import CommentService
from blog.domain.service.comment_service import validate_comment
from blog.domain.value import CommentId, Slug
from tests.harness import create_env_fixture

# Unit test fixture - fresh, empty comment store per test
unit_env = create_env_fixture()

SLUG = "docker-para-desenvolvedores"


class TestValidateComment:
    """Tests for comment validation rules."""

    @pytest.mark.parametrize(
        "post_slug,author,content",
        [(None, "Ana", "Bom artigo"), (SLUG, "", "Bom artigo"), (SLUG, "Ana", None)],
    )
    def test_missing_fields(self, post_slug, author, content):
        assert validate_comment(post_slug, author, content) == [
            "Campos obrigatorios: nome e comentario."
        ]

    def test_short_author(self):
        assert validate_comment(SLUG, " A ", "Bom artigo") == [
            "Nome deve ter pelo menos 2 caracteres."
        ]

    def test_short_content_after_trim(self):
        assert validate_comment(SLUG, "Ana", "  ok  ") == ["Comentario muito curto."]

    def test_valid(self):
        assert validate_comment(SLUG, "Ana", "Top!") == []


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_stores_trimmed_fields(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        # Act
        comment = await service.create_comment(
            post_slug=SLUG,
            author="  Ana Costa ",
            content="  Muito bom!  ",
            email=" ana@example.com ",
        )

        # Assert
        assert comment.author == "Ana Costa"
        assert comment.content == "Muito bom!"
        assert comment.email == "ana@example.com"
        assert comment.post_slug == Slug(SLUG)
        assert comment.date.tzinfo is not None

        stored = await repo.find_by_post(Slug(SLUG))
        assert [c.id for c in stored] == [comment.id]

    @pytest.mark.asyncio
    async def test_email_is_optional(self, unit_env):
        service = await unit_env.get(CommentService)

        comment = await service.create_comment(
            post_slug=SLUG, author="Ana", content="Muito bom!"
        )

        assert comment.email == ""

    @pytest.mark.asyncio
    async def test_invalid_comment_raises_and_is_not_stored(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_comment(post_slug=SLUG, author="A", content="ok")

        assert exc_info.value.reasons == [
            "Nome deve ter pelo menos 2 caracteres.",
            "Comentario muito curto.",
        ]
        assert await repo.find_by_post(Slug(SLUG)) == []


class TestGetComments:
    """Tests for get_comments_for_post."""

    @pytest.mark.asyncio
    async def test_newest_first_and_only_for_post(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        now = datetime.now(timezone.utc)

        def comment(slug: str, minutes_ago: int) -> Comment:
            return Comment(
                id=CommentId(uuid4()),
                post_slug=Slug(slug),
                author="Leitor",
                content=f"Comentario de {minutes_ago} minutos",
                date=now - timedelta(minutes=minutes_ago),
            )

        older = await repo.save(comment(SLUG, 30))
        newer = await repo.save(comment(SLUG, 5))
        await repo.save(comment("postgresql-vs-mongodb", 1))

        # Act
        result = await service.get_comments_for_post(SLUG)

        # Assert
        assert [c.id for c in result] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_no_comments(self, unit_env):
        service = await unit_env.get(CommentService)
        assert await service.get_comments_for_post(SLUG) == []
